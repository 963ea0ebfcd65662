# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Unpadded base64 encoding and decoding.

The encoder concatenates the bits of the input bytes, most significant bit first,
appends zero bits until the length is a multiple of six, and maps each 6-bit group to an alphabet character.
The decoder reverses this, discarding the zero fill bits at the tail.
Nothing in this module knows about the '=' pad character; see `b64core.padding`.
'''

from typing import Optional, Union

from .alphabet import b64_alphabet, b64_alphabet_inverse, b64_alphabet_inverse_zero, pad_char
from .exceptions import InvalidCharacter, InvalidLength, InvalidPadding


BytesLike = Union[bytes, bytearray, memoryview]


def encoded_len(length:int) -> int:
  'The number of symbols that `encode` produces for `length` bytes: ceil(8 * length / 6).'
  if length < 0: raise ValueError(length)
  return (length * 8 + 5) // 6


def decoded_len(length:int) -> int:
  '''
  The number of bytes that `decode` produces for `length` symbols: floor((6 * length - 5) / 8) + 1.
  The result is only meaningful for lengths that satisfy `is_valid_encoded_len`.
  '''
  if length < 0: raise ValueError(length)
  if length == 0: return 0
  return (6 * length - 5) // 8 + 1


def is_valid_encoded_len(length:int) -> bool:
  'A single symbol left over after a multiple of four holds only six bits, which is not enough for a byte.'
  return length >= 0 and length % 4 != 1


def fill_bit_count(length:int) -> int:
  'The number of zero bits that `encode` appends to the final symbol of an output of `length` symbols.'
  return (6 * length) % 8


def as_symbol_bytes(symbols:Union[str, BytesLike]) -> bytes:
  'Convert decoder input to bytes. A `str` must be pure ASCII.'
  if isinstance(symbols, str):
    try: return symbols.encode('ascii')
    except UnicodeEncodeError as e:
      raise InvalidCharacter(pos=e.start, char=ord(symbols[e.start])) from e
  return bytes(symbols)


def encode(data:BytesLike) -> bytes:
  'Encode `data` as base64 symbols, without padding.'
  a = b64_alphabet # Local alias for brevity.
  data = bytes(data)
  res = bytearray()
  full_len = len(data) - len(data) % 3
  for i in range(0, full_len, 3): # Each three bytes become four symbols.
    n = int.from_bytes(data[i:i+3], byteorder='big')
    res.append(a[n >> 18])
    res.append(a[(n >> 12) & 0x3f])
    res.append(a[(n >> 6) & 0x3f])
    res.append(a[n & 0x3f])
  tail = data[full_len:]
  if tail:
    bit_len = len(tail) * 8
    fill = -bit_len % 6
    n = int.from_bytes(tail, byteorder='big') << fill
    for shift in range(bit_len + fill - 6, -1, -6):
      res.append(a[(n >> shift) & 0x3f])
  return bytes(res)


def _decode(symbols:bytes) -> bytes:
  'Decode symbols of valid length, mapping any byte outside of the alphabet to zero.'
  inv = b64_alphabet_inverse_zero
  res = bytearray()
  full_len = len(symbols) - len(symbols) % 4
  for i in range(0, full_len, 4): # Each four symbols become three bytes.
    n = (inv[symbols[i]] << 18) | (inv[symbols[i+1]] << 12) | (inv[symbols[i+2]] << 6) | inv[symbols[i+3]]
    res.extend(n.to_bytes(3, byteorder='big'))
  tail = symbols[full_len:]
  if tail:
    n = 0
    for c in tail:
      n = (n << 6) | inv[c]
    byte_len = len(tail) * 6 // 8
    n >>= fill_bit_count(len(tail)) # Drop the zero fill.
    res.extend(n.to_bytes(byte_len, byteorder='big'))
  return bytes(res)


def check_symbols(symbols:bytes, offset:int=0) -> None:
  '''
  Raise an error for the first byte of `symbols` that is not an alphabet character.
  `offset` is added to reported positions, for callers that pass a slice of their input.
  '''
  inv = b64_alphabet_inverse
  for i, c in enumerate(symbols):
    if inv[c] == 0xff:
      if c == pad_char: raise InvalidPadding('unexpected pad character', pos=offset+i)
      raise InvalidCharacter(pos=offset+i, char=c)


def decode(symbols:Union[str, BytesLike], length:Optional[int]=None) -> bytes:
  '''
  Decode unpadded base64 symbols.
  If `length` is provided, it must equal the number of bytes implied by the number of symbols.
  Raises `InvalidLength`, `InvalidCharacter`, or `InvalidPadding` (for any '=' character) on malformed input.
  '''
  s = as_symbol_bytes(symbols)
  if not is_valid_encoded_len(len(s)): raise InvalidLength(length=len(s))
  if length is not None and length != decoded_len(len(s)):
    raise InvalidLength(length=len(s), expected=length)
  check_symbols(s)
  return _decode(s)


def decode_unchecked(symbols:Union[str, BytesLike]) -> bytes:
  '''
  Decode unpadded base64 symbols without validating characters.
  Bytes outside of the alphabet, including '=', decode as if they were 'A' (zero).
  The input length is still checked, because an invalid length leaves the output length undefined.
  '''
  s = as_symbol_bytes(symbols)
  if not is_valid_encoded_len(len(s)): raise InvalidLength(length=len(s))
  return _decode(s)


def is_canonical(symbols:Union[str, BytesLike]) -> bool:
  '''
  Return True if the fill bits of the final symbol are all zero, as `encode` always leaves them.
  Symbols that differ only in their fill bits decode to the same bytes,
  so only the canonical form can be produced by `encode`.
  '''
  s = as_symbol_bytes(symbols)
  if not s: return True
  mask = (1 << fill_bit_count(len(s))) - 1
  return not (b64_alphabet_inverse_zero[s[-1]] & mask)


def canonicalize(symbols:Union[str, BytesLike]) -> bytes:
  'Return the validated symbols with the fill bits of the final symbol cleared.'
  s = as_symbol_bytes(symbols)
  if not is_valid_encoded_len(len(s)): raise InvalidLength(length=len(s))
  check_symbols(s)
  if not s: return s
  mask = (1 << fill_bit_count(len(s))) - 1
  last = b64_alphabet[b64_alphabet_inverse[s[-1]] & ~mask]
  return s[:-1] + bytes((last,))

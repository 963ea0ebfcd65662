# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Padded base64 as specified by RFC 4648: the unpadded symbols are followed by '=' characters
until the total length is a multiple of four.
'''

from typing import Optional, Union

from .alphabet import pad_char
from .core import as_symbol_bytes, BytesLike, check_symbols, decode, encode, is_canonical
from .exceptions import InvalidLength, InvalidPadding


def pad_count(length:int) -> int:
  'The number of pad characters that follow the encoding of `length` bytes: 0, 2, or 1 for `length % 3` of 0, 1, or 2.'
  if length < 0: raise ValueError(length)
  return -length % 3


def padded_len(length:int) -> int:
  'The length of the padded encoding of `length` bytes: 4 * ceil(length / 3).'
  if length < 0: raise ValueError(length)
  return (length + 2) // 3 * 4


def count_pad(symbols:Union[str, BytesLike]) -> int:
  'Count the trailing pad characters of `symbols`. More than two is an error.'
  s = as_symbol_bytes(symbols)
  n = len(s) - len(s.rstrip(b'='))
  if n > 2: raise InvalidPadding(f'too many pad characters: {n}', pos=len(s)-n)
  return n


def b64encode(data:BytesLike) -> bytes:
  'Encode `data` as padded base64.'
  res = encode(data)
  return res + b'=' * (-len(res) % 4)


def b64decode(symbols:Union[str, BytesLike], pad:Optional[int]=None, *, strict=False) -> bytes:
  '''
  Decode padded base64.
  If `pad` is None, the pad count is taken from the trailing '=' characters;
  otherwise it must agree with the pad characters present.
  If `strict` is True, then the fill bits of the final symbol must be zero,
  which guarantees that the input is exactly what `b64encode` produces for the result.
  '''
  s = as_symbol_bytes(symbols)
  if len(s) % 4: raise InvalidLength(length=len(s))
  found = count_pad(s)
  body_len = len(s) - found
  pos = s.find(pad_char, 0, body_len)
  if pos >= 0: raise InvalidPadding('pad character before end of input', pos=pos)
  if pad is not None and pad != found:
    raise InvalidPadding(f'expected {pad} pad characters; found {found}', pos=body_len)
  body = s[:body_len]
  check_symbols(body)
  if strict and not is_canonical(body):
    raise InvalidPadding('nonzero fill bits in final symbol', pos=body_len-1)
  return decode(body)


def b64encode_str(s:Union[str, BytesLike], encoding='utf8') -> str:
  'Encode a string or byte string as padded base64, returning a string.'
  if isinstance(s, str): s = s.encode(encoding)
  return b64encode(s).decode('ascii')


def b64decode_str(s:Union[str, BytesLike], pad:Optional[int]=None, *, strict=False, encoding='utf8') -> str:
  'Decode padded base64, then decode the resulting bytes as text.'
  return b64decode(s, pad, strict=strict).decode(encoding)

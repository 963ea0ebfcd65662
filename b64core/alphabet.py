# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The standard base64 alphabet of RFC 4648 and its inverse lookup table.
'''


def _byte_index(alphabet:bytes, char:int) -> int:
  try: return alphabet.index(char)
  except ValueError: return 0xff

# The standard alphabet maps 0-25 to 'A'-'Z', 26-51 to 'a'-'z', 52-61 to '0'-'9', 62 to '+' and 63 to '/'.
b64_alphabet = b'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/'
assert len(b64_alphabet) == 64

# Bytes outside of the alphabet map to 0xff, which is never a valid 6-bit value.
b64_alphabet_inverse = bytes(_byte_index(b64_alphabet, c) for c in range(0x100))

# The lossy variant used by the unchecked decoder: bytes outside of the alphabet map to 0.
b64_alphabet_inverse_zero = bytes(0 if v == 0xff else v for v in b64_alphabet_inverse)

pad_char = ord('=')


def forward(v:int) -> int:
  'Return the alphabet character (as a byte value) for the 6-bit value `v`.'
  if not 0 <= v < 64: raise ValueError(f'not a 6-bit value: {v!r}')
  return b64_alphabet[v]


def inverse(c:int) -> int:
  '''
  Return the 6-bit value for the alphabet character `c`.
  Every byte value outside of the alphabet maps to 0; use `is_alphabet_char` to test membership.
  '''
  if not 0 <= c < 0x100: raise ValueError(f'not a byte value: {c!r}')
  return b64_alphabet_inverse_zero[c]


def is_alphabet_char(c:int) -> bool:
  'Return True if the byte value `c` is one of the 64 alphabet characters. The pad character is not.'
  return 0 <= c < 0x100 and b64_alphabet_inverse[c] != 0xff

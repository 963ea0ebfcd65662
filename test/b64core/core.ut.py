# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from base64 import standard_b64encode
from random import randbytes

from b64core.core import (canonicalize, decode, decode_unchecked, decoded_len, encode, encoded_len, fill_bit_count,
  is_canonical, is_valid_encoded_len)
from b64core.exceptions import InvalidCharacter, InvalidLength, InvalidPadding
from utest import utest, utest_exc, utest_val


vectors = [
  (b'', b''),
  (b'f', b'Zg'),
  (b'fo', b'Zm8'),
  (b'foo', b'Zm9v'),
  (b'foob', b'Zm9vYg'),
  (b'fooba', b'Zm9vYmE'),
  (b'foobar', b'Zm9vYmFy'),
]

for raw, enc in vectors:
  utest(enc, encode, raw)
  utest(raw, decode, enc)
  utest(raw, decode, enc.decode(), len(raw))
  utest(raw, decode_unchecked, enc)

utest(b'Zm9v', encode, bytearray(b'foo'))
utest(b'Zm9v', encode, memoryview(b'foo'))
utest(b'AAAA', encode, b'\x00\x00\x00')
utest(b'/w', encode, b'\xff')
utest(b'//8', encode, b'\xff\xff')
utest(b'+/8', encode, b'\xfb\xff')


# Length arithmetic.

utest(0, encoded_len, 0)
utest(2, encoded_len, 1)
utest(3, encoded_len, 2)
utest(4, encoded_len, 3)
utest(6, encoded_len, 4)
utest_exc(ValueError, encoded_len, -1)

utest(0, decoded_len, 0)
utest(1, decoded_len, 2)
utest(2, decoded_len, 3)
utest(3, decoded_len, 4)
utest(4, decoded_len, 6)
utest_exc(ValueError, decoded_len, -1)

utest(True, is_valid_encoded_len, 0)
utest(False, is_valid_encoded_len, 1)
utest(False, is_valid_encoded_len, 5)
utest(False, is_valid_encoded_len, -4)

utest(0, fill_bit_count, 0)
utest(4, fill_bit_count, 2)
utest(2, fill_bit_count, 3)
utest(0, fill_bit_count, 4)

for n in range(1000):
  utest_val(n, decoded_len(encoded_len(n)), n)
  utest_val(True, is_valid_encoded_len(encoded_len(n)), n)


# Validation.

utest_exc(InvalidLength(length=1), decode, b'Z')
utest_exc(InvalidLength(length=5), decode, b'Zm9vY')
utest_exc(InvalidLength(length=2, expected=2), decode, b'Zg', 2)
utest_exc(InvalidLength(length=0, expected=1), decode, b'', 1)
utest_exc(InvalidCharacter(pos=2, char=ord('!')), decode, b'Zm!v')
utest_exc(InvalidCharacter(pos=1, char=ord('é')), decode, 'Zé')
utest_exc(InvalidCharacter(pos=0, char=ord('-')), decode, b'-_')
utest_exc(InvalidPadding('unexpected pad character', pos=2), decode, b'Zg==')
utest_exc(ValueError, decode, b'Zm!v')

# The unchecked decoder treats bytes outside of the alphabet as zero, but still checks the length.
utest(b'd', decode_unchecked, b'Z!')
utest(b'd', decode_unchecked, b'ZA')
utest(b'\x00\x00\x00', decode_unchecked, b'====')
utest_exc(InvalidLength(length=1), decode_unchecked, b'Z')


# Symbols that differ only in the fill bits of the final symbol decode to the same bytes.
utest(b'\xff', decode, b'/w')
utest(b'\xff', decode, b'/x')
utest(b'\xff', decode, b'//')
utest(b'\xff\xff', decode, b'//+')
utest(b'\xff\xff', decode, b'///')

# Only the form with zero fill bits is ever produced by the encoder.
utest_val(False, any(encode(bytes((b,))) == b'/x' for b in range(0x100)), 'no byte encodes to /x')
utest_val(True, any(encode(bytes((b,))) == b'/w' for b in range(0x100)), 'some byte encodes to /w')

utest(True, is_canonical, b'')
utest(True, is_canonical, b'Zm9v')
utest(True, is_canonical, b'/w')
utest(False, is_canonical, b'/x')
utest(True, is_canonical, b'//8')
utest(False, is_canonical, b'///')
utest(False, is_canonical, '//+')

utest(b'/w', canonicalize, b'/x')
utest(b'//8', canonicalize, b'///')
utest(b'Zm9v', canonicalize, b'Zm9v')
utest(b'', canonicalize, b'')
utest_exc(InvalidCharacter(pos=1, char=ord('*')), canonicalize, b'/*')
utest_exc(InvalidLength(length=1), canonicalize, b'/')


# Randomized round trips, checked against the standard library.

for width in range(0, 65):
  for _ in range(16):
    b = randbytes(width)
    e = encode(b)
    utest_val(standard_b64encode(b).rstrip(b'='), e, b)
    utest_val(encoded_len(width), len(e), b)
    utest_val(True, is_canonical(e), b)
    utest(b, decode, e)
    utest(b, decode, e, width)

# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Base64 encoding and decoding with the standard alphabet of RFC 4648.
'''

from .alphabet import b64_alphabet, forward, inverse, is_alphabet_char, pad_char
from .core import (canonicalize, decode, decode_unchecked, decoded_len, encode, encoded_len, is_canonical,
  is_valid_encoded_len)
from .exceptions import Base64Error, InvalidCharacter, InvalidLength, InvalidPadding
from .padding import b64decode, b64decode_str, b64encode, b64encode_str, count_pad, pad_count, padded_len

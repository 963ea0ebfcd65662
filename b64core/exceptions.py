# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes raised by the validating decoders.
All of them subclass ValueError, so callers may catch either the specific class or ValueError.
'''

from typing import Optional


class Base64Error(ValueError):
  'Base class for malformed base64 input.'


class InvalidCharacter(Base64Error):
  'Raised when a decoder input byte is neither an alphabet character nor a permitted pad character.'

  def __init__(self, *, pos:int, char:int) -> None:
    self.pos = pos
    self.char = char
    super().__init__(f'invalid base64 character at position {pos}: {chr(char)!r}')


class InvalidLength(Base64Error):
  '''
  Raised when the length of a decoder input cannot be produced by the encoder,
  or when it disagrees with a length supplied by the caller.
  '''

  def __init__(self, *, length:int, expected:Optional[int]=None) -> None:
    self.length = length
    self.expected = expected # The decoded length claimed by the caller, if any.
    if expected is None:
      msg = f'invalid base64 input length: {length}'
    else:
      msg = f'base64 input of length {length} cannot decode to {expected} bytes'
    super().__init__(msg)


class InvalidPadding(Base64Error):
  '''
  Raised when pad characters are misplaced or too numerous,
  when a caller-supplied pad count disagrees with the pad characters present,
  or when strict decoding finds nonzero trailing bits.
  '''

  def __init__(self, msg:str, *, pos:int) -> None:
    self.pos = pos
    super().__init__(f'{msg} (position {pos})')

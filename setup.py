# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='b64core',
  version='0.0.1',
  description='Base64 encoding and decoding with the standard alphabet of RFC 4648, with typed validation errors.',
  python_requires='>=3.10',

  packages=['b64core', 'utest'],
)

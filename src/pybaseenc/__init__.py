"""
pybaseenc

Configurable base32 and base64 codecs. Each codec is an immutable object
built from an alphabet and a padding symbol, with explicit control over
padding when encoding and strictness when decoding:

    >>> from pybaseenc import base64
    >>> base64.encode(b"Ma")
    'TWE='
    >>> base64.encode(b"Ma", include_padding=False)
    'TWE'
    >>> base64.decode("TWE", strict=False)
    b'Ma'

Custom alphabets are built the same way the predefined codecs are:

    >>> from pybaseenc import Base32Encoding
    >>> crockford_ish = Base32Encoding("0123456789ABCDEFGHJKMNPQRSTVWXYZ", padding="*")
"""

from .errors import (
    EncodingError,
    InvalidAlphabetError,
    InvalidPaddingError,
    InvalidCharacterError,
    InvalidDataError
)

from .encoding import Encoding

from .base32 import (
    Base32Encoding,
    base32,
    base32hex,
    encode_base32,
    decode_base32
)

from .base64 import (
    Base64Encoding,
    base64,
    base64url,
    encode_base64,
    decode_base64,
    encode_base64url,
    decode_base64url
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "EncodingError",
    "InvalidAlphabetError",
    "InvalidPaddingError",
    "InvalidCharacterError",
    "InvalidDataError",

    # Codecs
    "Encoding",
    "Base32Encoding",
    "Base64Encoding",
    "base32",
    "base32hex",
    "base64",
    "base64url",

    # Deprecated helpers
    "encode_base32",
    "decode_base32",
    "encode_base64",
    "decode_base64",
    "encode_base64url",
    "decode_base64url",
]

"""
Base64 encoding and decoding (RFC 4648 sections 4 and 5)

Every 3 bytes become 4 symbols of 6 bits each. Both the standard alphabet and
the URL and filename safe alphabet are provided.
"""

import warnings

from .encoding import BytesLike, Encoding


# RFC4648 standard encoding table
RFC4648_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

# RFC4648 URL and filename safe encoding table
RFC4648_URL_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"


class Base64Encoding(Encoding):
    """Base64 codec over a 64-symbol alphabet"""

    symbol_count = 64
    bits_per_symbol = 6
    group_bytes = 3
    group_symbols = 4
    # A lone symbol carries 6 bits, less than a byte
    invalid_pad_counts = frozenset({3, 4})

    __slots__ = ()


base64 = Base64Encoding(RFC4648_ALPHABET)
base64url = Base64Encoding(RFC4648_URL_ALPHABET)


def encode_base64(data: BytesLike, padding: bool = True) -> str:
    """Deprecated, use base64.encode()"""
    warnings.warn("encode_base64() is deprecated, use base64.encode()",
                  DeprecationWarning, stacklevel=2)
    return base64.encode(data, include_padding=padding)


def decode_base64(data: str) -> bytes:
    """Deprecated, use base64.decode(). Accepts unpadded input."""
    warnings.warn("decode_base64() is deprecated, use base64.decode()",
                  DeprecationWarning, stacklevel=2)
    return base64.decode(data, strict=False)


def encode_base64url(data: BytesLike) -> str:
    """Deprecated, use base64url.encode(). Never pads."""
    warnings.warn("encode_base64url() is deprecated, use base64url.encode()",
                  DeprecationWarning, stacklevel=2)
    return base64url.encode(data, include_padding=False)


def decode_base64url(data: str) -> bytes:
    """Deprecated, use base64url.decode(). Accepts unpadded input."""
    warnings.warn("decode_base64url() is deprecated, use base64url.decode()",
                  DeprecationWarning, stacklevel=2)
    return base64url.decode(data, strict=False)

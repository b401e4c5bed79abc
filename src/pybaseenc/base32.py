"""
Base32 encoding and decoding (RFC 4648 sections 6 and 7)

Every 5 bytes become 8 symbols of 5 bits each. Both the standard alphabet and
the "extended hex" alphabet are provided.
"""

import warnings

from .encoding import BytesLike, Encoding


# RFC4648 standard encoding table
RFC4648_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

# RFC4648 "extended hex" encoding table
RFC4648_HEX_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUV"


class Base32Encoding(Encoding):
    """Base32 codec over a 32-symbol alphabet"""

    symbol_count = 32
    bits_per_symbol = 5
    group_bytes = 5
    group_symbols = 8
    # 8 symbols hold 40 bits; 1, 3, 4 and 6 trailing pad symbols drop a whole
    # number of bytes (4, 3, 2 and 1 left), every other count does not
    invalid_pad_counts = frozenset({2, 5, 7, 8})

    __slots__ = ()


base32 = Base32Encoding(RFC4648_ALPHABET)
base32hex = Base32Encoding(RFC4648_HEX_ALPHABET)


def encode_base32(data: BytesLike, padding: bool = True) -> str:
    """Deprecated, use base32.encode()"""
    warnings.warn("encode_base32() is deprecated, use base32.encode()",
                  DeprecationWarning, stacklevel=2)
    return base32.encode(data, include_padding=padding)


def decode_base32(data: str) -> bytes:
    """Deprecated, use base32.decode(). Accepts unpadded input."""
    warnings.warn("decode_base32() is deprecated, use base32.decode()",
                  DeprecationWarning, stacklevel=2)
    return base32.decode(data, strict=False)

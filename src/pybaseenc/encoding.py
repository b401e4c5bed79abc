"""
Fixed-alphabet binary-to-text encoding

Base32 and base64 are the same algorithm with different numbers: a group of
bytes is packed into one big-endian integer and cut into equal-width symbols,
most significant bits first. Encoding subclasses only fill in those numbers.
"""

import logging
from types import MappingProxyType
from typing import FrozenSet, Mapping, Union

from .errors import (
    InvalidAlphabetError,
    InvalidPaddingError,
    InvalidCharacterError,
    InvalidDataError,
)


logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class Encoding:
    """
    Codec for one alphabet and padding symbol

    Instances hold no mutable state once constructed and can be shared freely
    between threads.
    """

    # Filled in by subclasses
    symbol_count: int = 0
    bits_per_symbol: int = 0
    group_bytes: int = 0
    group_symbols: int = 0
    # Pad counts that leave a non-whole number of bytes (or none at all) in a group
    invalid_pad_counts: FrozenSet[int] = frozenset()

    __slots__ = ('_alphabet', '_padding', '_decode_map')

    def __init__(self, alphabet: str, padding: str = "="):
        """
        Args:
            alphabet: Symbols in value order, symbol i decodes to i
            padding: Single symbol used to fill the final group

        Raises:
            InvalidAlphabetError: If the alphabet has the wrong length or repeats a symbol
            InvalidPaddingError: If padding is not one symbol outside the alphabet
        """
        if len(alphabet) != self.symbol_count:
            raise InvalidAlphabetError(
                f"Alphabet must have {self.symbol_count} symbols, got {len(alphabet)}")
        if len(set(alphabet)) != len(alphabet):
            raise InvalidAlphabetError("Alphabet contains duplicate symbols")
        if len(padding) != 1 or padding in alphabet:
            raise InvalidPaddingError(f"Invalid padding: {padding!r}")

        self._alphabet = alphabet
        self._padding = padding
        self._decode_map = MappingProxyType({c: i for i, c in enumerate(alphabet)})
        logger.debug("Built %s decode table for alphabet %r", type(self).__name__, alphabet)

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def padding(self) -> str:
        return self._padding

    @property
    def decode_map(self) -> Mapping[str, int]:
        """Read-only symbol -> value table"""
        return self._decode_map

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._alphabet!r}, padding={self._padding!r})"

    def encode(self, data: BytesLike, include_padding: bool = True) -> str:
        """
        Encode bytes into a string

        Args:
            data: Bytes to encode
            include_padding: Whether to fill the final group with padding symbols

        Returns:
            Encoded string, a multiple of group_symbols long when padded
        """
        data = bytes(memoryview(data))
        group_bits = self.group_bytes * 8
        mask = (1 << self.bits_per_symbol) - 1
        result = []

        # Process data in whole groups, zero-filling a short final group
        for i in range(0, len(data), self.group_bytes):
            chunk = data[i:i + self.group_bytes]
            buf = int.from_bytes(chunk.ljust(self.group_bytes, b"\x00"), "big")
            for j in range(self.group_symbols):
                shift = group_bits - (j + 1) * self.bits_per_symbol
                result.append(self._alphabet[(buf >> shift) & mask])

        # Symbols built only from the zero fill carry no data
        pad_count = 0
        remainder = len(data) % self.group_bytes
        if remainder:
            used = (remainder * 8 + self.bits_per_symbol - 1) // self.bits_per_symbol
            pad_count = self.group_symbols - used
            del result[len(result) - pad_count:]

        encoded = "".join(result)
        if include_padding:
            encoded += self._padding * pad_count
        return encoded

    def decode(self, data: str, strict: bool = True) -> bytes:
        """
        Decode a string into bytes

        Args:
            data: Encoded string
            strict: Reject text that stops short of a whole group. When false,
                missing trailing symbols are treated like padding.

        Returns:
            Decoded bytes

        Raises:
            InvalidCharacterError: If a symbol is not in the alphabet, or padding
                appears before the final group or is followed by a symbol
            InvalidDataError: If strict and the length is not a multiple of group_symbols
            InvalidPaddingError: If the final group has an impossible amount of padding
        """
        group_count = (len(data) + self.group_symbols - 1) // self.group_symbols
        result = bytearray()

        for i in range(group_count):
            pad_count = 0
            buf = 0
            for j in range(self.group_symbols):
                pos = i * self.group_symbols + j
                if pos >= len(data):
                    if strict:
                        raise InvalidDataError(
                            f"Length must be a multiple of {self.group_symbols}, got {len(data)}")
                    pad_count += 1
                    continue

                c = data[pos]
                if c == self._padding:
                    if i + 1 != group_count:
                        raise InvalidCharacterError(c, pos)
                    pad_count += 1
                    continue
                if pad_count:
                    raise InvalidCharacterError(c, pos)

                value = self._decode_map.get(c)
                if value is None:
                    raise InvalidCharacterError(c, pos)
                buf |= value << ((self.group_symbols - 1 - j) * self.bits_per_symbol)

            if pad_count in self.invalid_pad_counts:
                raise InvalidPaddingError(f"Invalid padding: {pad_count} of {self.group_symbols} symbols")

            # Only whole bytes covered by real symbols are kept
            byte_count = (self.group_symbols - pad_count) * self.bits_per_symbol // 8
            result += buf.to_bytes(self.group_bytes, "big")[:byte_count]

        return bytes(result)

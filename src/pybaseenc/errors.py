"""
Errors raised while configuring a codec or decoding text

All of them derive from ValueError so code written against the standard
library's base64 module (which raises binascii.Error, a ValueError) keeps
catching them.
"""

from typing import Optional


class EncodingError(ValueError):
    """Base class for every error raised by this package"""
    pass


class InvalidAlphabetError(EncodingError):
    """Alphabet has the wrong number of symbols or repeats a symbol"""
    pass


class InvalidPaddingError(EncodingError):
    """Padding symbol is malformed, or a group carries an impossible amount of padding"""
    pass


class InvalidCharacterError(EncodingError):
    """A symbol is not in the alphabet, or padding shows up where it cannot"""

    def __init__(self, character: str, position: Optional[int] = None):
        self.character = character
        self.position = position
        if position is None:
            super().__init__(f"Invalid character: {character!r}")
        else:
            super().__init__(f"Invalid character: {character!r} at position {position}")


class InvalidDataError(EncodingError):
    """Strict decode of text whose length is not a whole number of groups"""
    pass

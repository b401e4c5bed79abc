"""
Test cases for the base64 codecs, including the RFC 4648 section 10 vectors
"""

import base64 as stdlib_base64
import random

import pytest

from pybaseenc import (
    InvalidCharacterError,
    InvalidDataError,
    InvalidPaddingError,
    base64,
    base64url,
    decode_base64,
    decode_base64url,
    encode_base64,
    encode_base64url,
)


RFC4648_VECTORS = [
    (b"", ""),
    (b"f", "Zg=="),
    (b"fo", "Zm8="),
    (b"foo", "Zm9v"),
    (b"foob", "Zm9vYg=="),
    (b"fooba", "Zm9vYmE="),
    (b"foobar", "Zm9vYmFy"),
]


@pytest.mark.parametrize("data,encoded", RFC4648_VECTORS)
def test_rfc4648_vectors(data, encoded):
    assert base64.encode(data) == encoded
    assert base64.decode(encoded) == data
    assert base64.encode(data, include_padding=False) == encoded.rstrip("=")
    assert base64.decode(encoded.rstrip("="), strict=False) == data


def test_man():
    assert base64.encode(bytes([0x4D, 0x61, 0x6E])) == "TWFu"
    assert base64.encode(bytes([0x4D, 0x61])) == "TWE="
    assert base64.encode(bytes([0x4D, 0x61]), include_padding=False) == "TWE"
    assert base64.encode(bytes([0x4D])) == "TQ=="
    assert base64.decode("TWFu") == b"Man"
    assert base64.decode("TWE=") == b"Ma"
    assert base64.decode("TWE", strict=False) == b"Ma"


def test_url_alphabet():
    data = b"\xfb\xff\xbf"
    assert base64.encode(data) == "+/+/"
    assert base64url.encode(data) == "-_-_"
    assert base64url.decode("-_-_") == data
    assert base64.encode(b"\xfb\xff") == "+/8="
    assert base64url.encode(b"\xfb\xff") == "-_8="
    with pytest.raises(InvalidCharacterError):
        base64url.decode("+/+/")
    with pytest.raises(InvalidCharacterError):
        base64.decode("-_-_")


def test_matches_stdlib():
    rng = random.Random(64)
    for length in range(0, 50):
        data = bytes(rng.getrandbits(8) for _ in range(length))
        assert base64.encode(data) == stdlib_base64.b64encode(data).decode("ascii")
        assert base64url.encode(data) == stdlib_base64.urlsafe_b64encode(data).decode("ascii")


@pytest.mark.parametrize("pad_count", range(0, 5))
def test_every_pad_count(pad_count):
    group = "TWFu"[:4 - pad_count] + "=" * pad_count
    expected_length = {0: 3, 1: 2, 2: 1}
    if pad_count in expected_length:
        assert base64.decode(group) == b"Man"[:expected_length[pad_count]]
    else:
        with pytest.raises(InvalidPaddingError):
            base64.decode(group)


@pytest.mark.parametrize("pad_count", range(0, 4))
def test_every_missing_count_lenient(pad_count):
    group = "TWFu"[:4 - pad_count]
    expected_length = {0: 3, 1: 2, 2: 1}
    if pad_count in expected_length:
        assert base64.decode(group, strict=False) == b"Man"[:expected_length[pad_count]]
    else:
        with pytest.raises(InvalidPaddingError):
            base64.decode(group, strict=False)


def test_one_symbol_three_padding():
    with pytest.raises(InvalidPaddingError):
        base64.decode("TWFuT===")


def test_whole_group_of_padding():
    with pytest.raises(InvalidPaddingError):
        base64.decode("TWFu====")


def test_strict_rejects_short_input():
    for text in ["T", "TW", "TWE", "TWFuT", "TWFuTWE", "TWFu=="]:
        with pytest.raises(InvalidDataError):
            base64.decode(text)


def test_lenient_accepts_short_input():
    assert base64.decode("TWFuTWE", strict=False) == b"ManMa"
    assert base64.decode("TQ", strict=False) == b"M"
    assert base64.decode("TQ=", strict=False) == b"M"


def test_padding_before_final_group():
    with pytest.raises(InvalidCharacterError) as excinfo:
        base64.decode("TWE=TWFu")
    assert excinfo.value.character == "="
    assert excinfo.value.position == 3

    with pytest.raises(InvalidCharacterError):
        base64.decode("TWE=TWE", strict=False)


def test_symbol_after_padding():
    with pytest.raises(InvalidCharacterError) as excinfo:
        base64.decode("TW=u")
    assert excinfo.value.character == "u"
    assert excinfo.value.position == 3


@pytest.mark.parametrize("text,character,position", [
    ("TW!u", "!", 2),
    ("TWFu TWFu", " ", 4),
    ("TWFu\nTWF", "\n", 4),
    ("TWFé", "é", 3),
])
def test_invalid_character(text, character, position):
    with pytest.raises(InvalidCharacterError) as excinfo:
        base64.decode(text, strict=False)
    assert excinfo.value.character == character
    assert excinfo.value.position == position


def test_non_zero_trailing_bits_accepted():
    # "TWF=" differs from the canonical "TWE=" only in bits that carry no data
    assert base64.decode("TWF=") == b"Ma"


def test_length_law():
    for length in range(0, 30):
        assert len(base64.encode(b"\x00" * length)) % 4 == 0
        assert len(base64.encode(b"\x00" * length, include_padding=False)) == (length * 8 + 5) // 6


def test_deprecated_helpers():
    with pytest.warns(DeprecationWarning):
        assert encode_base64(b"Ma") == "TWE="
    with pytest.warns(DeprecationWarning):
        assert encode_base64(b"Ma", padding=False) == "TWE"
    with pytest.warns(DeprecationWarning):
        assert decode_base64("TWE") == b"Ma"
    with pytest.warns(DeprecationWarning):
        assert encode_base64url(b"\xfb\xff") == "-_8"
    with pytest.warns(DeprecationWarning):
        assert decode_base64url("-_8") == b"\xfb\xff"
    with pytest.warns(DeprecationWarning):
        assert decode_base64url("-_8=") == b"\xfb\xff"

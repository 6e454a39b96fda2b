import pytest

from qsn.helpers import (
    decode_utf8_scalar,
    format_hex_escape,
    format_unicode_escape,
    hex_digit_value,
    is_printable_ascii,
    is_scalar_value,
    utf8_sequence_length,
)
from qsn.types import Case


@pytest.mark.parametrize(
    "ch,expected",
    [
        ("0", 0),
        ("9", 9),
        ("a", 10),
        ("f", 15),
        ("A", 10),
        ("F", 15),
        ("g", None),
        ("G", None),
        ("{", None),
        (" ", None),
    ],
)
def test_hex_digit_value(ch: str, expected: int | None):
    assert hex_digit_value(ord(ch)) == expected


@pytest.mark.parametrize(
    "byte,expected",
    [
        (0x20, True),
        (ord("~"), True),
        (ord("a"), True),
        (0x7F, False),
        (0x1F, False),
        (0x0B, False),
        (0x80, False),
    ],
)
def test_is_printable_ascii(byte: int, expected: bool):
    assert is_printable_ascii(byte) == expected


@pytest.mark.parametrize(
    "codepoint,expected",
    [
        (0, True),
        (0xD7FF, True),
        (0xD800, False),
        (0xDFFF, False),
        (0xE000, True),
        (0x10FFFF, True),
        (0x110000, False),
    ],
)
def test_is_scalar_value(codepoint: int, expected: bool):
    assert is_scalar_value(codepoint) == expected


@pytest.mark.parametrize(
    "lead,expected",
    [
        (0x41, 1),
        (0x80, None),
        (0xBF, None),
        (0xC3, 2),
        (0xE2, 3),
        (0xF0, 4),
        (0xF8, None),
        (0xFF, None),
    ],
)
def test_utf8_sequence_length(lead: int, expected: int | None):
    assert utf8_sequence_length(lead) == expected


@pytest.mark.parametrize(
    "sequence,expected",
    [
        (b"\xc3\xa9", 0xE9),
        (b"\xe2\x82\xac", 0x20AC),
        (b"\xf0\x9f\x91\xba", 0x1F47A),
        (b"\xc3A", None),
        (b"\xed\xa0\x80", None),
        (b"\xc0\xaf", None),
        (b"ab", None),
    ],
)
def test_decode_utf8_scalar(sequence: bytes, expected: int | None):
    assert decode_utf8_scalar(sequence) == expected


def test_format_hex_escape():
    assert format_hex_escape(0x0A, Case.LOWER) == b"\\x0a"
    assert format_hex_escape(0xAB, Case.LOWER) == b"\\xab"
    assert format_hex_escape(0xAB, Case.UPPER) == b"\\xAB"


@pytest.mark.parametrize(
    "codepoint,case,padding,expected",
    [
        (0xE9, Case.LOWER, 2, b"\\u{e9}"),
        (0xE9, Case.UPPER, 6, b"\\u{0000E9}"),
        (0x41, Case.LOWER, 3, b"\\u{041}"),
        (0x1F47A, Case.LOWER, 2, b"\\u{1f47a}"),
    ],
)
def test_format_unicode_escape(codepoint: int, case: Case, padding: int, expected: bytes):
    assert format_unicode_escape(codepoint, case, padding) == expected

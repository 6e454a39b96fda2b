from qsn.constants import MAX_CODEPOINT
from qsn.types import Case


def hex_digit_value(byte: int) -> int | None:
    if 0x30 <= byte <= 0x39:  # 0-9
        return byte - 0x30
    if 0x61 <= byte <= 0x66:  # a-f
        return byte - 0x61 + 10
    if 0x41 <= byte <= 0x46:  # A-F
        return byte - 0x41 + 10
    return None


def is_printable_ascii(byte: int) -> bool:
    return 0x20 <= byte <= 0x7E


def is_scalar_value(codepoint: int) -> bool:
    if 0xD800 <= codepoint <= 0xDFFF:
        return False
    return 0 <= codepoint <= MAX_CODEPOINT


def utf8_sequence_length(lead: int) -> int | None:
    """Number of bytes in the UTF-8 sequence announced by `lead`, or None."""
    if lead < 0x80:
        return 1
    if 0xC0 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF7:
        return 4
    return None


def decode_utf8_scalar(sequence: bytes | bytearray) -> int | None:
    """Decode `sequence` as exactly one scalar value, or None if malformed."""
    try:
        decoded = bytes(sequence).decode("utf-8")
    except UnicodeDecodeError:
        return None
    if len(decoded) != 1:
        return None
    return ord(decoded)


def format_hex_escape(byte: int, case: Case) -> bytes:
    digits = format(byte, "02X" if case is Case.UPPER else "02x")
    return b"\\x" + digits.encode("ascii")


def format_unicode_escape(codepoint: int, case: Case, padding: int) -> bytes:
    spec = f"0{padding}{'X' if case is Case.UPPER else 'x'}"
    return b"\\u{" + format(codepoint, spec).encode("ascii") + b"}"

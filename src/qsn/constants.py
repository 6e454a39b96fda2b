from enum import Enum
from typing import Dict, Final


class DecoderState(Enum):
    START = "start"
    INNER = "inner"
    ESCAPE = "escape"
    UNICODE = "unicode"
    UNICODE_DIGITS = "unicode_digits"
    HEX = "hex"
    # terminal
    END = "end"
    ERROR = "error"


class EncoderState(Enum):
    START = "start"
    INNER = "inner"
    UNICODE = "unicode"
    END = "end"


QUOTE: Final = ord("'")
BACKSLASH: Final = ord("\\")
OPEN_BRACE: Final = ord("{")
CLOSE_BRACE: Final = ord("}")

# Escape letter -> decoded byte.
ESCAPE_MAP: Dict[int, int] = {
    ord("n"): ord("\n"),
    ord("r"): ord("\r"),
    ord("t"): ord("\t"),
    ord("\\"): ord("\\"),
    ord("0"): 0x00,
    ord("'"): ord("'"),
    ord('"'): ord('"'),
}

# Raw byte -> escape letter. Inverse of ESCAPE_MAP.
SHORTHAND_MAP: Dict[int, int] = {raw: letter for letter, raw in ESCAPE_MAP.items()}

HEX_ESCAPE_PREFIX: Final = ord("x")
UNICODE_ESCAPE_PREFIX: Final = ord("u")

MAX_UTF8_LEN: Final = 4
MAX_HEX_DIGITS: Final = 2
MAX_CODEPOINT_DIGITS: Final = 6
MAX_CODEPOINT: Final = 0x10FFFF

# "\xHH" for every byte of the longest UTF-8 sequence.
ENCODER_PENDING_CAPACITY: Final = 4 * MAX_UTF8_LEN
REREAD_CAPACITY: Final = MAX_UTF8_LEN - 1

MIN_PADDING: Final = 2
MAX_PADDING: Final = 6

# Returned by the transition functions while more input is required.
NEED_MORE: Final = -1

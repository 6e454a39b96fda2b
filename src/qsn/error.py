class QsnError(Exception):
    pass


class StreamError(QsnError):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            "Failed to read from byte source" + (f": {message}" if message else "")
        )
        self.message = message


class ConfigError(QsnError):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            "Invalid encoder configuration" + (f": {message}" if message else "")
        )
        self.message = message


class DecodeError(QsnError):
    pass


class UnexpectedEndOfStreamError(DecodeError):
    def __init__(self, state: str) -> None:
        super().__init__(
            f"Byte source ended in state '{state}' before the closing quote"
        )
        self.state = state


class DecoderHaltedError(DecodeError):
    def __init__(self) -> None:
        super().__init__("Decoder cannot be resumed after a previous error")


class TrailingDataError(DecodeError):
    def __init__(self, offset: int, remaining: int) -> None:
        super().__init__(
            f"Found {remaining} trailing byte(s) after the closing quote at offset {offset}"
        )
        self.offset = offset
        self.remaining = remaining


class GrammarError(DecodeError):
    def __init__(self, byte: int | None, state: str, message: str) -> None:
        shown = "" if byte is None else f" on byte {byte:#04x}"
        super().__init__(f"{message}{shown} in state '{state}'")
        self.byte = byte
        self.state = state


class StartConditionFailedError(GrammarError):
    def __init__(self, byte: int) -> None:
        super().__init__(byte, "start", "Literal must start with a single quote")


class UnexpectedEscapeError(GrammarError):
    def __init__(self, byte: int) -> None:
        super().__init__(byte, "escape", "Unknown escape sequence")


class UnicodeStartConditionError(GrammarError):
    def __init__(self, byte: int) -> None:
        super().__init__(byte, "unicode", "Expected '{' after '\\u'")


class InvalidUnicodeDigitError(GrammarError):
    def __init__(self, byte: int) -> None:
        super().__init__(byte, "unicode_digits", "Invalid digit in codepoint escape")


class InvalidHexDigitError(GrammarError):
    def __init__(self, byte: int) -> None:
        super().__init__(byte, "hex", "Invalid digit in hex escape")


class EmptyCodepointError(GrammarError):
    def __init__(self) -> None:
        super().__init__(None, "unicode_digits", "Codepoint escape has no digits")


class CodepointTooLongError(GrammarError):
    def __init__(self, max_digits: int) -> None:
        super().__init__(
            None,
            "unicode_digits",
            f"Codepoint escape has more than {max_digits} digits",
        )
        self.max_digits = max_digits


class InvalidCodepointError(GrammarError):
    def __init__(self, codepoint: int) -> None:
        super().__init__(
            None,
            "unicode_digits",
            f"U+{codepoint:04X} is not a Unicode scalar value",
        )
        self.codepoint = codepoint

import logging

from qsn.constants import (
    BACKSLASH,
    CLOSE_BRACE,
    ESCAPE_MAP,
    HEX_ESCAPE_PREFIX,
    MAX_CODEPOINT_DIGITS,
    MAX_HEX_DIGITS,
    MAX_UTF8_LEN,
    NEED_MORE,
    OPEN_BRACE,
    QUOTE,
    UNICODE_ESCAPE_PREFIX,
    DecoderState,
)
from qsn.error import (
    CodepointTooLongError,
    DecoderHaltedError,
    EmptyCodepointError,
    InvalidCodepointError,
    InvalidHexDigitError,
    InvalidUnicodeDigitError,
    StartConditionFailedError,
    UnexpectedEndOfStreamError,
    UnexpectedEscapeError,
    UnicodeStartConditionError,
)
from qsn.fifo import BoundedFifo
from qsn.helpers import hex_digit_value, is_scalar_value
from qsn.types import IAsyncByteSource, IByteSource

logger = logging.getLogger(__name__)


class Decoder:
    r"""
    Streaming decoder for a single QSN literal.

    The source must be positioned on the opening quote. Each call to `next`
    pulls as many bytes as needed and returns one decoded byte, or None once
    the closing quote has been consumed. Bytes produced by `\xHH` escapes are
    returned as-is, so the output is not guaranteed to be valid UTF-8.

    Any error is final: the decoder refuses further input afterwards.
    """

    def __init__(self) -> None:
        self._state = DecoderState.START
        self._pending = BoundedFifo(MAX_UTF8_LEN)
        self._digits = 0
        self._hex_value = 0
        self._codepoint = 0

    @property
    def state(self) -> DecoderState:
        return self._state

    @property
    def pending(self) -> BoundedFifo:
        return self._pending

    def next(self, source: IByteSource) -> int | None:
        if self._pending:
            return self._pending.read()
        while True:
            self._check_runnable()
            if self._state is DecoderState.END:
                return None
            try:
                out = self._advance(source.read_byte())
            except Exception:
                self._state = DecoderState.ERROR
                raise
            if out != NEED_MORE:
                return out

    async def anext(self, source: IAsyncByteSource) -> int | None:
        if self._pending:
            return self._pending.read()
        while True:
            self._check_runnable()
            if self._state is DecoderState.END:
                return None
            try:
                out = self._advance(await source.read_byte())
            except Exception:
                self._state = DecoderState.ERROR
                raise
            if out != NEED_MORE:
                return out

    def _check_runnable(self) -> None:
        if self._state is DecoderState.ERROR:
            raise DecoderHaltedError()

    def _advance(self, ch: int | None) -> int | None:
        if ch is None:
            logger.debug("Byte source ended in state %s", self._state.value)
            raise UnexpectedEndOfStreamError(self._state.value)

        match self._state:
            case DecoderState.START:
                if ch != QUOTE:
                    raise StartConditionFailedError(ch)
                self._state = DecoderState.INNER
                return NEED_MORE

            case DecoderState.INNER:
                if ch == BACKSLASH:
                    self._state = DecoderState.ESCAPE
                    return NEED_MORE
                if ch == QUOTE:
                    self._state = DecoderState.END
                    return None
                return ch

            case DecoderState.ESCAPE:
                if ch == HEX_ESCAPE_PREFIX:
                    self._state = DecoderState.HEX
                    self._digits = 0
                    self._hex_value = 0
                    return NEED_MORE
                if ch == UNICODE_ESCAPE_PREFIX:
                    self._state = DecoderState.UNICODE
                    return NEED_MORE
                escaped = ESCAPE_MAP.get(ch)
                if escaped is None:
                    raise UnexpectedEscapeError(ch)
                self._state = DecoderState.INNER
                return escaped

            case DecoderState.UNICODE:
                if ch != OPEN_BRACE:
                    raise UnicodeStartConditionError(ch)
                self._state = DecoderState.UNICODE_DIGITS
                self._digits = 0
                self._codepoint = 0
                return NEED_MORE

            case DecoderState.UNICODE_DIGITS:
                return self._advance_codepoint(ch)

            case DecoderState.HEX:
                digit = hex_digit_value(ch)
                if digit is None:
                    raise InvalidHexDigitError(ch)
                self._hex_value = (self._hex_value << 4) | digit
                self._digits += 1
                if self._digits < MAX_HEX_DIGITS:
                    return NEED_MORE
                self._state = DecoderState.INNER
                return self._hex_value

            case _:
                raise RuntimeError(f"Decoder cannot advance from state {self._state}.")

    def _advance_codepoint(self, ch: int) -> int:
        if ch == CLOSE_BRACE:
            if self._digits == 0:
                raise EmptyCodepointError()
            if not is_scalar_value(self._codepoint):
                raise InvalidCodepointError(self._codepoint)
            self._pending.write_all(chr(self._codepoint).encode("utf-8"))
            self._state = DecoderState.INNER
            return self._pending.read()

        digit = hex_digit_value(ch)
        if digit is None:
            raise InvalidUnicodeDigitError(ch)
        self._digits += 1
        if self._digits > MAX_CODEPOINT_DIGITS:
            raise CodepointTooLongError(MAX_CODEPOINT_DIGITS)
        self._codepoint = (self._codepoint << 4) | digit
        return NEED_MORE

import logging
from typing import Any

from qsn.config import EncoderConfig
from qsn.constants import (
    BACKSLASH,
    ENCODER_PENDING_CAPACITY,
    NEED_MORE,
    QUOTE,
    REREAD_CAPACITY,
    SHORTHAND_MAP,
    EncoderState,
)
from qsn.fifo import BoundedFifo
from qsn.helpers import (
    decode_utf8_scalar,
    format_hex_escape,
    format_unicode_escape,
    is_printable_ascii,
    utf8_sequence_length,
)
from qsn.types import IAsyncByteSource, IByteSource, UnicodeMode

logger = logging.getLogger(__name__)


class Encoder:
    r"""
    Streaming encoder producing one QSN literal from raw bytes.

    Each call to `next` returns one byte of the literal, starting with the
    opening quote, or None after the closing quote has been returned.
    Malformed input is never an error: bytes that cannot be represented
    otherwise are written as `\xHH`. Exceptions raised by the source are
    propagated unchanged.
    """

    def __init__(self, config: EncoderConfig | None = None, **options: Any) -> None:
        if config is not None and options:
            raise TypeError("Pass either an EncoderConfig or keyword options, not both.")
        if config is None:
            config = EncoderConfig.build(**options)
        config.validate_bounds()
        self._config = config
        self._state = EncoderState.START
        self._pending = BoundedFifo(ENCODER_PENDING_CAPACITY)
        self._reread = BoundedFifo(REREAD_CAPACITY)
        self._sequence = bytearray()
        self._sequence_len = 0
        self._exhausted = False

    @property
    def config(self) -> EncoderConfig:
        return self._config

    @property
    def state(self) -> EncoderState:
        return self._state

    @property
    def reread(self) -> BoundedFifo:
        return self._reread

    def next(self, source: IByteSource) -> int | None:
        if self._pending:
            return self._pending.read()
        while True:
            match self._state:
                case EncoderState.START:
                    self._state = EncoderState.INNER
                    return QUOTE
                case EncoderState.END:
                    return None
            if self._reread:
                ch = self._reread.read()
            elif self._exhausted:
                ch = None
            else:
                ch = source.read_byte()
            out = self._advance(ch)
            if out != NEED_MORE:
                return out

    async def anext(self, source: IAsyncByteSource) -> int | None:
        if self._pending:
            return self._pending.read()
        while True:
            match self._state:
                case EncoderState.START:
                    self._state = EncoderState.INNER
                    return QUOTE
                case EncoderState.END:
                    return None
            if self._reread:
                ch = self._reread.read()
            elif self._exhausted:
                ch = None
            else:
                ch = await source.read_byte()
            out = self._advance(ch)
            if out != NEED_MORE:
                return out

    def _advance(self, ch: int | None) -> int | None:
        if ch is None:
            self._exhausted = True

        if self._state is EncoderState.UNICODE:
            if ch is None:
                logger.debug(
                    "Input ended inside UTF-8 sequence %s", self._sequence.hex()
                )
                return self._abandon_sequence()
            self._sequence.append(ch)
            if len(self._sequence) < self._sequence_len:
                return NEED_MORE
            return self._finish_sequence()

        if ch is None:
            self._state = EncoderState.END
            return QUOTE
        return self._encode_byte(ch)

    def _encode_byte(self, ch: int) -> int:
        if ch < 0x80:
            shorthand = SHORTHAND_MAP.get(ch)
            if shorthand is not None:
                return self._emit(bytes((BACKSLASH, shorthand)))
            if is_printable_ascii(ch):
                return ch
            return self._emit(format_hex_escape(ch, self._config.case))

        match self._config.mode:
            case UnicodeMode.RAW:
                return ch
            case UnicodeMode.HEX:
                return self._emit(format_hex_escape(ch, self._config.case))

        length = utf8_sequence_length(ch)
        if length is None:
            return self._emit(format_hex_escape(ch, self._config.case))
        self._sequence = bytearray((ch,))
        self._sequence_len = length
        self._state = EncoderState.UNICODE
        return NEED_MORE

    def _finish_sequence(self) -> int:
        codepoint = decode_utf8_scalar(self._sequence)
        if codepoint is None:
            logger.debug("Invalid UTF-8 sequence %s", self._sequence.hex())
            return self._abandon_sequence()

        self._reset_sequence()
        return self._emit(
            format_unicode_escape(codepoint, self._config.case, self._config.padding)
        )

    def _abandon_sequence(self) -> int:
        # Only the lead byte is escaped; the rest is fed back as fresh input.
        lead, rest = self._sequence[0], self._sequence[1:]
        self._reread.unget(rest)
        self._reset_sequence()
        return self._emit(format_hex_escape(lead, self._config.case))

    def _reset_sequence(self) -> None:
        self._sequence = bytearray()
        self._sequence_len = 0
        self._state = EncoderState.INNER

    def _emit(self, escape: bytes) -> int:
        self._pending.write_all(escape)
        return self._pending.read()

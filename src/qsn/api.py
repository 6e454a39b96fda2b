from typing import Any, AsyncGenerator, Generator, Tuple

from qsn.config import EncoderConfig
from qsn.decoder import Decoder
from qsn.encoder import Encoder
from qsn.error import TrailingDataError
from qsn.source import BytesSource
from qsn.types import IAsyncByteSource, IByteSource


def iter_decode(source: IByteSource) -> Generator[int, None, None]:
    return _drain(Decoder(), source)


def iter_encode(
    source: IByteSource, config: EncoderConfig | None = None, **options: Any
) -> Generator[int, None, None]:
    # The encoder is built eagerly so a bad configuration fails here.
    return _drain(Encoder(config, **options), source)


def adecode(source: IAsyncByteSource) -> AsyncGenerator[int, None]:
    return _adrain(Decoder(), source)


def aencode(
    source: IAsyncByteSource, config: EncoderConfig | None = None, **options: Any
) -> AsyncGenerator[int, None]:
    return _adrain(Encoder(config, **options), source)


def _drain(
    transducer: Decoder | Encoder, source: IByteSource
) -> Generator[int, None, None]:
    while (byte := transducer.next(source)) is not None:
        yield byte


async def _adrain(
    transducer: Decoder | Encoder, source: IAsyncByteSource
) -> AsyncGenerator[int, None]:
    while (byte := await transducer.anext(source)) is not None:
        yield byte


def decode_prefix(data: bytes | str) -> Tuple[bytes, int]:
    """Decode the literal at the start of `data`.

    Returns the decoded bytes and the number of input bytes the literal spans.
    """
    source = BytesSource(_as_bytes(data))
    decoded = bytes(iter_decode(source))
    return decoded, source.position


def decode(data: bytes | str) -> bytes:
    raw = _as_bytes(data)
    decoded, consumed = decode_prefix(raw)
    if consumed != len(raw):
        raise TrailingDataError(offset=consumed, remaining=len(raw) - consumed)
    return decoded


def encode(
    data: bytes | bytearray | memoryview,
    config: EncoderConfig | None = None,
    **options: Any,
) -> bytes:
    return bytes(iter_encode(BytesSource(data), config, **options))


def _as_bytes(data: bytes | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)

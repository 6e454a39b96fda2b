from qsn.api import (
    adecode,
    aencode,
    decode,
    decode_prefix,
    encode,
    iter_decode,
    iter_encode,
)
from qsn.config import EncoderConfig
from qsn.decoder import Decoder
from qsn.encoder import Encoder
from qsn.error import (
    ConfigError,
    DecodeError,
    GrammarError,
    QsnError,
    StreamError,
)
from qsn.source import AsyncIterSource, BytesSource, ReaderSource
from qsn.types import Case, IAsyncByteSource, IByteSource, UnicodeMode

__all__ = [
    "AsyncIterSource",
    "BytesSource",
    "Case",
    "ConfigError",
    "DecodeError",
    "Decoder",
    "Encoder",
    "EncoderConfig",
    "GrammarError",
    "IAsyncByteSource",
    "IByteSource",
    "QsnError",
    "ReaderSource",
    "StreamError",
    "UnicodeMode",
    "adecode",
    "aencode",
    "decode",
    "decode_prefix",
    "encode",
    "iter_decode",
    "iter_encode",
]

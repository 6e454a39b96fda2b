from enum import Enum
from typing import Protocol, runtime_checkable


class Case(Enum):
    LOWER = "lower"
    UPPER = "upper"


class UnicodeMode(Enum):
    RAW = "raw"
    HEX = "hex"
    UNICODE = "unicode"


@runtime_checkable
class IByteSource(Protocol):
    def read_byte(self) -> int | None:
        """Return the next byte, or None once the source is exhausted."""
        ...


@runtime_checkable
class IAsyncByteSource(Protocol):
    async def read_byte(self) -> int | None:
        """Return the next byte, or None once the source is exhausted."""
        ...

from typing import AsyncIterable, AsyncIterator, BinaryIO

from qsn.error import StreamError


class BytesSource:
    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    def remaining(self) -> bytes:
        return self._data[self._position :]

    def read_byte(self) -> int | None:
        if self._position >= len(self._data):
            return None
        byte = self._data[self._position]
        self._position += 1
        return byte


class ReaderSource:
    """Reads bytes from a binary file-like object, one chunk at a time."""

    def __init__(self, stream: BinaryIO, chunk_size: int = 4096) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}.")
        self._stream = stream
        self._chunk_size = chunk_size
        self._chunk = b""
        self._offset = 0
        self._exhausted = False

    def read_byte(self) -> int | None:
        if self._offset >= len(self._chunk):
            if self._exhausted:
                return None
            try:
                self._chunk = self._stream.read(self._chunk_size)
            except OSError as e:
                raise StreamError(str(e)) from e
            self._offset = 0
            if not self._chunk:
                self._exhausted = True
                return None
        byte = self._chunk[self._offset]
        self._offset += 1
        return byte


class AsyncIterSource:
    """Adapts an async iterable of byte chunks, e.g. a network stream."""

    def __init__(self, chunks: AsyncIterable[bytes]) -> None:
        self._chunks: AsyncIterator[bytes] = aiter(chunks)
        self._chunk = b""
        self._offset = 0
        self._exhausted = False

    async def read_byte(self) -> int | None:
        while self._offset >= len(self._chunk):
            if self._exhausted:
                return None
            try:
                self._chunk = await anext(self._chunks)
            except StopAsyncIteration:
                self._exhausted = True
                return None
            self._offset = 0
        byte = self._chunk[self._offset]
        self._offset += 1
        return byte

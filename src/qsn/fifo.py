from __future__ import annotations

from typing import Iterable


class BoundedFifo:
    """
    Fixed-capacity byte queue backed by a preallocated ring buffer.
    Never grows: writing past the capacity raises OverflowError.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"Capacity must be positive, got {capacity}.")
        self._buffer = bytearray(capacity)
        self._head = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count != 0

    def __repr__(self) -> str:
        return f"BoundedFifo(capacity={self.capacity}, items={self.to_bytes()!r})"

    def write(self, item: int) -> None:
        if self._count == self.capacity:
            raise OverflowError(f"FIFO is full (capacity {self.capacity}).")
        tail = (self._head + self._count) % self.capacity
        self._buffer[tail] = item
        self._count += 1

    def write_all(self, items: Iterable[int]) -> None:
        for item in items:
            self.write(item)

    def read(self) -> int:
        if not self._count:
            raise IndexError("FIFO is empty.")
        item = self._buffer[self._head]
        self._head = (self._head + 1) % self.capacity
        self._count -= 1
        return item

    def peek(self) -> int:
        if not self._count:
            raise IndexError("FIFO is empty.")
        return self._buffer[self._head]

    def unget(self, items: bytes | bytearray) -> None:
        """Put `items` back in front of the queue, keeping their order."""
        if self._count + len(items) > self.capacity:
            raise OverflowError(
                f"Cannot unget {len(items)} byte(s): FIFO holds {self._count} of {self.capacity}."
            )
        for item in reversed(items):
            self._head = (self._head - 1) % self.capacity
            self._buffer[self._head] = item
            self._count += 1

    def clear(self) -> None:
        self._head = 0
        self._count = 0

    def to_bytes(self) -> bytes:
        return bytes(
            self._buffer[(self._head + i) % self.capacity] for i in range(self._count)
        )

"""Fixed-size circular buffer."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class RingBufferError(Exception):
    """Raised on overflow or underflow of a ring buffer."""


class RingBuffer:
    """A fixed-length FIFO ring.

    One slot is always kept free, so the buffer holds at most ``length - 1``
    items; an add must leave at least one slot free or it is refused.
    """

    def __init__(self, length: int, name: str) -> None:
        if length <= 0:
            raise ValueError("length must be positive")
        self._length = length
        self._name = name
        self._buffer: list[Any] = [0] * length
        self._in = 0
        self._out = 0

    @property
    def name(self) -> str:
        return self._name

    def add_data(self, data: Iterable[Any]) -> None:
        """Append items; raise RingBufferError if they do not fit."""
        items = list(data)
        free = self.free_space()
        if len(items) >= free:
            raise RingBufferError(
                f"Overflow in {self._name} ring buffer, {len(items)} >= {free}"
            )
        for item in items:
            self._buffer[self._in] = item
            self._in = (self._in + 1) % self._length

    def _collect(self, count: int, what: str) -> list[Any]:
        size = self.data_size()
        if size < count:
            raise RingBufferError(
                f"Underflow{what} in {self._name} ring buffer, {size} < {count}"
            )
        return [self._buffer[(self._out + i) % self._length] for i in range(count)]

    def get_data(self, count: int) -> list[Any]:
        """Remove and return ``count`` items in FIFO order."""
        items = self._collect(count, "")
        self._out = (self._out + count) % self._length
        return items

    def peek(self, count: int) -> list[Any]:
        """Return ``count`` items without removing them."""
        return self._collect(count, " peek")

    def clear(self) -> None:
        self._in = 0
        self._out = 0
        self._buffer = [0] * self._length

    def free_space(self) -> int:
        if self._out == self._in:
            return self._length
        if self._out > self._in:
            return self._out - self._in
        return self._length + self._out - self._in

    def data_size(self) -> int:
        return self._length - self.free_space()

    def has_space(self, length: int) -> bool:
        return self.free_space() > length

    def has_data(self) -> bool:
        return self._out != self._in

    def is_empty(self) -> bool:
        return self._out == self._in

    def __len__(self) -> int:
        return self.data_size()
# src/mdbook_uwuify/transforms/buffer.py

from mdbook_uwuify.errors import BufferBoundError

from .base import ExpansionBound


class TransformBuffer:
    """Fixed-capacity scratch area for one transformed text span.

    Owned by the single rewrite that allocated it. Writes are checked against
    the capacity; an oversized write raises instead of truncating.
    """

    __slots__ = ("_data", "_size")

    def __init__(self, capacity: int) -> None:
        self._data = bytearray(capacity)
        self._size = 0

    @classmethod
    def for_input(cls, input_size: int, bound: ExpansionBound) -> "TransformBuffer":
        return cls(bound.capacity(input_size))

    @property
    def capacity(self) -> int:
        return len(self._data)

    def write(self, data: bytes) -> None:
        if len(data) > self.capacity:
            raise BufferBoundError(self.capacity, len(data))
        self._data[: len(data)] = data
        self._size = len(data)

    def getvalue(self) -> bytes:
        return bytes(self._data[: self._size])

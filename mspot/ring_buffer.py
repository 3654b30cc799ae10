"""Fixed-capacity byte FIFO."""

import logging

logger = logging.getLogger(__name__)


class RingBufferError(Exception):
    """Raised on overflow or underflow of a ring buffer."""


class RingBuffer:
    """A byte FIFO of fixed length that holds at most ``length - 1`` bytes."""

    def __init__(self, length: int, name: str) -> None:
        if length <= 0:
            raise ValueError("ring buffer length must be positive")
        self._length = length
        self.name = name
        self._data = bytearray()

    @property
    def length(self) -> int:
        """The buffer's length."""
        return self._length

    def add_data(self, data) -> None:
        """Append bytes; raises RingBufferError if they do not fit."""
        data = bytes(data)
        free = self.free_space()
        if len(data) >= free:
            msg = f"Overflow in {self.name} ring buffer, {len(data)} >= {free}"
            logger.error("**** %s", msg)
            raise RingBufferError(msg)
        self._data.extend(data)

    def get_data(self, count: int) -> bytes:
        """Remove and return the oldest ``count`` bytes."""
        out = self.peek(count)
        del self._data[:count]
        return out

    def peek(self, count: int) -> bytes:
        """Return the oldest ``count`` bytes without removing them."""
        size = self.data_size()
        if size < count:
            msg = f"Underflow in {self.name} ring buffer, {size} < {count}"
            logger.error("**** %s", msg)
            raise RingBufferError(msg)
        return bytes(self._data[:count])

    def clear(self) -> None:
        """Discard all stored bytes."""
        self._data.clear()

    def free_space(self) -> int:
        """Free space; an empty buffer reports its full length."""
        return self._length - len(self._data)

    def data_size(self) -> int:
        """Number of stored bytes."""
        return len(self._data)

    def has_space(self, length: int) -> bool:
        """Whether ``length`` more bytes can be added."""
        return self.free_space() > length

    def has_data(self) -> bool:
        """Whether any bytes are stored."""
        return bool(self._data)

    def is_empty(self) -> bool:
        """Whether no bytes are stored."""
        return not self._data

    def __len__(self) -> int:
        return len(self._data)
"""Thread-safe FIFO queues for passing frames between threads."""

import threading
from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class SafePacketQueue(Generic[T]):
    """A FIFO queue guarded by a lock, with blocking and timed pops."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._cond = threading.Condition()

    def push(self, item: T) -> None:
        """Append an item and wake one waiting consumer."""
        with self._cond:
            self._items.append(item)
            self._cond.notify()

    def pop(self) -> Optional[T]:
        """Remove and return the oldest item, or None if the queue is empty."""
        with self._cond:
            return self._items.popleft() if self._items else None

    def pop_wait(self) -> T:
        """Remove and return the oldest item, waiting until one is available."""
        with self._cond:
            self._cond.wait_for(lambda: bool(self._items))
            return self._items.popleft()

    def pop_wait_for(self, ms: int) -> Optional[T]:
        """Wait up to ``ms`` milliseconds for an item; None if none arrived."""
        with self._cond:
            if self._cond.wait_for(lambda: bool(self._items), timeout=ms / 1000.0):
                return self._items.popleft()
            return None

    def is_empty(self) -> bool:
        """Whether the queue holds no items."""
        with self._cond:
            return not self._items

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)


# frames travelling from the host (modem side) to the gateway and back
HOST_TO_GATE: SafePacketQueue = SafePacketQueue()
GATE_TO_HOST: SafePacketQueue = SafePacketQueue()
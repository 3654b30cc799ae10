"""Common interface for modem connections."""

from abc import ABC, abstractmethod


class BasePort(ABC):
    """A byte-oriented link to a modem.

    ``open`` raises on failure. Usable as a context manager, which opens the
    port on entry and closes it on exit.
    """

    @abstractmethod
    def open(self) -> None:
        """Open the port."""

    @abstractmethod
    def read(self, length: int) -> bytes:
        """Read up to ``length`` bytes; an empty result means nothing was waiting."""

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes written."""

    @abstractmethod
    def close(self) -> None:
        """Close the port."""

    def __enter__(self) -> "BasePort":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
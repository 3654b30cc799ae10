"""Non-blocking UDP sockets and a UDP-connected modem port."""

import copy
import errno
import logging
import socket
from typing import Optional, Tuple

from .base_port import BasePort
from .ring_buffer import RingBuffer, RingBufferError
from .sock_address import SockAddress

logger = logging.getLogger(__name__)

UDP_BUFFER_LENMAX = 1024
_CONTROLLER_READ_LENGTH = 600
_CONTROLLER_BUFFER_LENGTH = 2000


class UdpSocket:
    """A bound, non-blocking UDP socket."""

    def __init__(self) -> None:
        self._sock: Optional[socket.socket] = None
        self._addr: Optional[SockAddress] = None

    def open(self, addr: SockAddress) -> None:
        """Create the socket and bind it to ``addr``; raises OSError on failure.

        If ``addr`` has port 0 the port the system assigned is recorded.
        """
        try:
            sock = socket.socket(addr.family, socket.SOCK_DGRAM)
        except OSError as exc:
            logger.error("socket() on %s: %s", addr.address, exc)
            raise
        try:
            sock.setblocking(False)
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind(addr.to_sockaddr())
        except OSError as exc:
            logger.error("bind() on %s err: %s", addr.address, exc)
            sock.close()
            raise
        self._sock = sock
        self._addr = copy.copy(addr)

        if self._addr.port == 0:
            try:
                bound = SockAddress.from_sockaddr(addr.family, sock.getsockname())
            except OSError as exc:
                logger.error("getsockname() on %s err: %s", addr.address, exc)
                self.close()
                raise
            if bound != self._addr:
                logger.warning(
                    "getsockname didn't return the same address as set: "
                    "returned %s, should have been %s",
                    bound.address,
                    self._addr.address,
                )
            self._addr.port = bound.port

    def close(self) -> None:
        """Close the socket if it is open."""
        if self._sock is not None:
            logger.info(
                "Closing socket %d on %s", self._sock.fileno(), self._addr.address
            )
            self._sock.close()
            self._sock = None

    def fileno(self) -> int:
        """The socket's file descriptor, or -1 when closed."""
        return self._sock.fileno() if self._sock is not None else -1

    @property
    def port(self) -> int:
        """The bound port, or 0 if never opened."""
        return self._addr.port if self._addr is not None else 0

    def read(self, size: int = UDP_BUFFER_LENMAX) -> Tuple[bytes, Optional[SockAddress]]:
        """Receive one datagram of at most ``size`` bytes and its sender.

        Returns ``(b"", None)`` when the socket is closed or nothing is waiting.
        """
        if self._sock is None:
            return b"", None
        try:
            data, sockaddr = self._sock.recvfrom(size)
        except BlockingIOError:
            return b"", None
        except OSError as exc:
            logger.error("recvfrom() on %s: %s", self._addr.address, exc)
            raise
        return data, SockAddress.from_sockaddr(self._sock.family, sockaddr)

    def write(self, data, addr: SockAddress) -> int:
        """Send ``data`` to ``addr``; returns the number of bytes sent."""
        data = bytes(data)
        if self._sock is None:
            logger.error("sendto() on %s: socket is not open", addr.address)
            raise OSError(errno.EBADF, "socket is not open")
        try:
            sent = self._sock.sendto(data, addr.to_sockaddr())
        except OSError as exc:
            logger.error("sendto() on %s: %s", addr.address, exc)
            raise
        if sent != len(data):
            logger.warning("Short Write, %d < %u to %s", sent, len(data), addr.address)
        return sent

    def __enter__(self) -> "UdpSocket":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class UdpController(BasePort):
    """A modem reached over UDP.

    Datagrams from the modem's address and port are buffered; anything else
    is ignored.
    """

    def __init__(
        self, modem_address: str, modem_port: int, local_address: str, local_port: int
    ) -> None:
        self.modem_address = modem_address
        self.modem_port = modem_port
        self.local_address = local_address
        self.local_port = local_port
        self._local: Optional[SockAddress] = None
        self._modem: Optional[SockAddress] = None
        self._socket = UdpSocket()
        self._buffer = RingBuffer(_CONTROLLER_BUFFER_LENGTH, "UDP Controller Ring Buffer")

    def open(self) -> None:
        """Resolve both addresses and bind the local socket."""
        self._local = SockAddress.from_host(self.local_address, self.local_port)
        self._modem = SockAddress.from_host(self.modem_address, self.modem_port)
        self._socket.open(self._local)

    def read(self, length: int) -> bytes:
        """Take in one waiting datagram, then return up to ``length`` buffered bytes."""
        if length <= 0:
            raise ValueError("length must be positive")
        data, sender = self._socket.read(_CONTROLLER_READ_LENGTH)
        if data and sender is not None and self._modem is not None:
            if sender == self._modem and sender.port == self._modem.port:
                try:
                    self._buffer.add_data(data)
                except RingBufferError:
                    pass
        count = min(length, self._buffer.data_size())
        return self._buffer.get_data(count) if count else b""

    def write(self, data) -> int:
        """Send ``data`` to the modem."""
        data = bytes(data)
        if not data:
            raise ValueError("nothing to write")
        if self._modem is None:
            raise OSError(errno.EBADF, "controller is not open")
        return self._socket.write(data, self._modem)

    def close(self) -> None:
        """Close the socket."""
        self._socket.close()
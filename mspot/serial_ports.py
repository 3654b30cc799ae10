"""Serial-line modem ports: a real UART device and a pseudo terminal."""

import contextlib
import fcntl
import logging
import os
import select
import struct
import termios
from typing import Optional

from .base_port import BasePort

logger = logging.getLogger(__name__)

_SUPPORTED_SPEEDS = (
    1200,
    2400,
    4800,
    9600,
    19200,
    38400,
    57600,
    115200,
    230400,
    460800,
    500000,
)

_BAUD_RATES = {
    speed: getattr(termios, f"B{speed}")
    for speed in _SUPPORTED_SPEEDS
    if hasattr(termios, f"B{speed}")
}

_IFLAG_CLEAR = (
    termios.IGNBRK
    | termios.BRKINT
    | termios.IGNPAR
    | termios.PARMRK
    | termios.INPCK
    | termios.ISTRIP
    | termios.INLCR
    | termios.IGNCR
    | termios.ICRNL
    | termios.IXON
    | termios.IXOFF
    | termios.IXANY
)
_CFLAG_CLEAR = (
    termios.CSIZE | termios.CSTOPB | termios.PARENB | getattr(termios, "CRTSCTS", 0)
)
_CFLAG_SET = termios.CS8 | termios.CLOCAL | termios.CREAD
_LFLAG_CLEAR = (
    termios.ISIG
    | termios.ICANON
    | termios.IEXTEN
    | termios.ECHO
    | termios.ECHOE
    | termios.ECHOK
    | termios.ECHONL
)


class SerialPortError(OSError):
    """Raised when a serial port cannot be opened, configured, read or written."""


class UartController(BasePort):
    """A modem on a serial device, used in raw 8N1 mode."""

    def __init__(self, device: str, speed: int, assert_rts: bool = False) -> None:
        if not device:
            raise ValueError("a device path is required")
        self._setup(speed, assert_rts)
        self.device = device

    def _setup(self, speed: int, assert_rts: bool) -> None:
        self.device = ""
        self.speed = speed
        self.assert_rts = assert_rts
        self._fd = -1

    def fileno(self) -> int:
        """The open file descriptor, or -1 when closed."""
        return self._fd

    def _require_open(self) -> None:
        if self._fd == -1:
            raise SerialPortError("port is not open")

    def _abandon(self) -> None:
        with contextlib.suppress(OSError):
            os.close(self._fd)
        self._fd = -1

    def open(self) -> None:
        """Open the device; a terminal device is also put into raw mode."""
        if self._fd != -1:
            raise SerialPortError(f"{self.device} is already open")
        try:
            self._fd = os.open(self.device, os.O_RDWR | os.O_NOCTTY | os.O_NDELAY)
        except OSError as exc:
            logger.error("Cannot open device - %s", self.device)
            raise SerialPortError(f"Cannot open device - {self.device}") from exc
        if os.isatty(self._fd):
            self._set_raw()

    def _set_raw(self) -> None:
        try:
            iflag, oflag, cflag, lflag, _ispeed, _ospeed, cc = termios.tcgetattr(self._fd)
        except (termios.error, OSError) as exc:
            logger.error("Cannot get the attributes for %s", self.device)
            self._abandon()
            raise SerialPortError(f"Cannot get the attributes for {self.device}") from exc

        iflag &= ~_IFLAG_CLEAR
        oflag &= ~termios.OPOST
        cflag = (cflag & ~_CFLAG_CLEAR) | _CFLAG_SET
        lflag &= ~_LFLAG_CLEAR
        cc = list(cc)
        cc[termios.VMIN] = 0
        cc[termios.VTIME] = 10

        baud = _BAUD_RATES.get(self.speed)
        if baud is None:
            logger.error("Unsupported serial port speed - %u", self.speed)
            self._abandon()
            raise SerialPortError(f"Unsupported serial port speed - {self.speed}")

        try:
            termios.tcsetattr(
                self._fd, termios.TCSANOW, [iflag, oflag, cflag, lflag, baud, baud, cc]
            )
        except (termios.error, OSError) as exc:
            logger.error("Cannot set the attributes for %s", self.device)
            self._abandon()
            raise SerialPortError(f"Cannot set the attributes for {self.device}") from exc

        if self.assert_rts:
            self._raise_rts()

    def _raise_rts(self) -> None:
        get_req = getattr(termios, "TIOCMGET", None)
        set_req = getattr(termios, "TIOCMSET", None)
        rts = getattr(termios, "TIOCM_RTS", None)
        try:
            if get_req is None or set_req is None or rts is None:
                raise OSError("modem control lines are not supported")
            raw = fcntl.ioctl(self._fd, get_req, struct.pack("I", 0))
        except OSError as exc:
            logger.error("Cannot get the control attributes for %s", self.device)
            self._abandon()
            raise SerialPortError(
                f"Cannot get the control attributes for {self.device}"
            ) from exc
        lines = struct.unpack("I", raw)[0] | rts
        try:
            fcntl.ioctl(self._fd, set_req, struct.pack("I", lines))
        except OSError as exc:
            logger.error("Cannot set the control attributes for %s", self.device)
            self._abandon()
            raise SerialPortError(
                f"Cannot set the control attributes for {self.device}"
            ) from exc

    def read(self, length: int) -> bytes:
        """Read exactly ``length`` bytes, or return b"" if none are waiting.

        Once the first byte has arrived the call waits for the rest.
        """
        if length < 0:
            raise ValueError("length must not be negative")
        self._require_open()
        if length == 0:
            return b""

        received = bytearray()
        while len(received) < length:
            timeout: Optional[float] = 0 if not received else None
            try:
                ready, _, _ = select.select([self._fd], [], [], timeout)
            except OSError as exc:
                logger.error("Error from select(), errno=%d", exc.errno or 0)
                raise SerialPortError(f"Error from select(): {exc}") from exc
            if not ready:
                if not received:
                    return b""
                continue
            try:
                chunk = os.read(self._fd, length - len(received))
            except BlockingIOError:
                continue
            except OSError as exc:
                logger.error("Error from read(), errno=%d", exc.errno or 0)
                raise SerialPortError(f"Error from read(): {exc}") from exc
            if not chunk:
                logger.error("End of file on %s", self.device)
                raise SerialPortError(f"End of file on {self.device}")
            received += chunk
        return bytes(received)

    def write(self, data) -> int:
        """Write all of ``data``, retrying while the device is busy."""
        data = memoryview(bytes(data))
        self._require_open()
        written = 0
        while written < len(data):
            try:
                written += os.write(self._fd, data[written:])
            except BlockingIOError:
                select.select([], [self._fd], [], 0.01)
            except OSError as exc:
                logger.error("UART controller write() returned error: %s", exc.strerror)
                raise SerialPortError(f"UART controller write() failed: {exc}") from exc
        return len(data)

    def close(self) -> None:
        """Close the device."""
        self._require_open()
        os.close(self._fd)
        self._fd = -1


class PseudoTtyController(UartController):
    """A pseudo terminal whose other end is published through a symbolic link."""

    def __init__(self, symlink: str, speed: int, assert_rts: bool = False) -> None:
        self._setup(speed, assert_rts)
        self.symlink = os.fspath(symlink)
        self._slave_fd = -1

    def open(self) -> None:
        """Create the pseudo terminal, link to its far end and set raw mode."""
        if self._fd != -1:
            raise SerialPortError(f"{self.symlink} is already open")
        try:
            master, slave = os.openpty()
        except OSError as exc:
            logger.error("Cannot open the pseudo tty - errno : %d", exc.errno or 0)
            raise SerialPortError("Cannot open the pseudo tty") from exc
        slave_name = os.ttyname(slave)

        with contextlib.suppress(OSError):
            os.unlink(self.symlink)

        try:
            os.symlink(slave_name, self.symlink)
        except OSError as exc:
            logger.error("Cannot make symlink to %s with %s", slave_name, self.symlink)
            os.close(master)
            os.close(slave)
            raise SerialPortError(
                f"Cannot make symlink to {slave_name} with {self.symlink}"
            ) from exc

        logger.info("Made symbolic link from %s to %s", slave_name, self.symlink)

        self._fd = master
        self._slave_fd = slave
        try:
            self.device = os.ttyname(master)
        except OSError:
            self.device = slave_name

        try:
            self._set_raw()
        except SerialPortError:
            self._release_slave()
            with contextlib.suppress(OSError):
                os.unlink(self.symlink)
            raise

    def _release_slave(self) -> None:
        if self._slave_fd != -1:
            with contextlib.suppress(OSError):
                os.close(self._slave_fd)
            self._slave_fd = -1

    def close(self) -> None:
        """Close the pseudo terminal and remove the link."""
        super().close()
        self._release_slave()
        with contextlib.suppress(OSError):
            os.unlink(self.symlink)
"""IPv4 and IPv6 socket addresses."""

import ipaddress
import logging
import socket
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

_PACKED_LENGTH = {socket.AF_INET: 4, socket.AF_INET6: 16}
_SOCKADDR_SIZE = {socket.AF_INET: 16, socket.AF_INET6: 28}
_LOOPBACK = {socket.AF_INET: "127.0.0.1", socket.AF_INET6: "::1"}
_ANY = {socket.AF_INET: "0.0.0.0", socket.AF_INET6: "::"}


class AddressError(ValueError):
    """Raised when an address cannot be resolved or parsed."""


class SockAddress:
    """An IP address with a port.

    Two addresses compare equal when their families and addresses match;
    the port is not compared.
    """

    __slots__ = ("_family", "_packed", "_port")

    def __init__(self, family: int, packed: bytes, port: int = 0) -> None:
        if family not in _PACKED_LENGTH:
            raise AddressError("Address Family must be IPv4 or IPv6")
        packed = bytes(packed)
        if len(packed) != _PACKED_LENGTH[family]:
            raise AddressError(
                f"packed address must be {_PACKED_LENGTH[family]} bytes, got {len(packed)}"
            )
        self._family = family
        self._packed = packed
        self._port = 0
        self.port = port

    @classmethod
    def from_host(cls, address: str, port: int = 0) -> "SockAddress":
        """Resolve a host name or numeric address for UDP use."""
        try:
            infos = socket.getaddrinfo(
                address, str(port) if port else None, socket.AF_UNSPEC, socket.SOCK_DGRAM
            )
        except (socket.gaierror, UnicodeError) as exc:
            logger.error("Could not find address for %s", address)
            raise AddressError(f"Could not find address for {address}") from exc
        for family, _type, _proto, _name, sockaddr in infos:
            if family in _PACKED_LENGTH:
                result = cls.from_sockaddr(family, sockaddr)
                if port:
                    result.port = port
                return result
        logger.error("Could not find address for %s", address)
        raise AddressError(f"Could not find address for {address}")

    @classmethod
    def from_family(
        cls, family: int, port: int = 0, address: Optional[str] = None
    ) -> "SockAddress":
        """Build an address of the given family.

        ``address`` may be a numeric address, or start with "loc" for the
        loopback address or "any" for the wildcard address (either case).
        Without an address the wildcard address is used.
        """
        if family not in _PACKED_LENGTH:
            logger.error("Address Family must be IPv4 or IPv6")
            raise AddressError("Address Family must be IPv4 or IPv6")
        if address is None:
            text = _ANY[family]
        elif address[:3].lower() == "loc":
            text = _LOOPBACK[family]
        elif address[:3].lower() == "any":
            text = _ANY[family]
        else:
            text = address
        try:
            packed = socket.inet_pton(family, text)
        except (OSError, ValueError) as exc:
            kind = "IPv4" if family == socket.AF_INET else "IPv6"
            logger.error("%s SockAddress initialization failed for '%s'", kind, address)
            raise AddressError(
                f"{kind} SockAddress initialization failed for '{address}'"
            ) from exc
        return cls(family, packed, port)

    @classmethod
    def from_sockaddr(cls, family: int, sockaddr: Tuple) -> "SockAddress":
        """Build from a socket-module address tuple such as ``(host, port)``."""
        if family not in _PACKED_LENGTH:
            raise AddressError("Address Family must be IPv4 or IPv6")
        host = str(sockaddr[0]).split("%", 1)[0]
        try:
            packed = socket.inet_pton(family, host)
        except (OSError, ValueError) as exc:
            raise AddressError(f"invalid address '{host}'") from exc
        return cls(family, packed, int(sockaddr[1]))

    @property
    def address(self) -> str:
        """The address in its usual text form."""
        return str(ipaddress.ip_address(self._packed))

    @property
    def family(self) -> int:
        """The address family, AF_INET or AF_INET6."""
        return self._family

    @property
    def packed(self) -> bytes:
        """The address in network byte order."""
        return self._packed

    @property
    def port(self) -> int:
        """The port number."""
        return self._port

    @port.setter
    def port(self, value: int) -> None:
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"port must be between 0 and 65535, got {value}")
        self._port = value

    def address_is_zero(self) -> bool:
        """Whether this is the wildcard address."""
        return not any(self._packed)

    @property
    def size(self) -> int:
        """Size of the matching C socket address structure."""
        return _SOCKADDR_SIZE[self._family]

    def to_sockaddr(self) -> Tuple:
        """The address as a tuple for the socket module."""
        if self._family == socket.AF_INET6:
            return (self.address, self._port, 0, 0)
        return (self.address, self._port)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SockAddress):
            return NotImplemented
        return self._family == other._family and self._packed == other._packed

    def __hash__(self) -> int:
        return hash((self._family, self._packed))

    def __str__(self) -> str:
        text = f"[{self.address}]" if self._family == socket.AF_INET6 else self.address
        return f"{text}:{self._port}" if self._port else text

    def __repr__(self) -> str:
        return f"SockAddress({str(self)!r})"
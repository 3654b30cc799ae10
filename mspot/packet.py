"""M17 network frames and reflector control packets."""

import struct
from dataclasses import dataclass, field
from typing import Optional

IPFRAMESIZE = 54
LSD_SIZE = 28

_LSD = struct.Struct(">6s6sH14s")
_FRAME = struct.Struct(">4sH28sH16sH")


def _check_length(name: str, value: bytes, size: int) -> None:
    if len(value) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(value)}")


def _check_u16(name: str, value: int) -> None:
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"{name} must fit in 16 bits, got {value}")


@dataclass
class Lsd:
    """Link setup data: destination, source, frame type and meta data."""

    dst: bytes = bytes(6)
    src: bytes = bytes(6)
    frame_type: int = 0
    meta: bytes = bytes(14)

    def __post_init__(self) -> None:
        self.dst = bytes(self.dst)
        self.src = bytes(self.src)
        self.meta = bytes(self.meta)
        _check_length("dst", self.dst, 6)
        _check_length("src", self.src, 6)
        _check_length("meta", self.meta, 14)
        _check_u16("frame_type", self.frame_type)

    @classmethod
    def from_bytes(cls, data) -> "Lsd":
        """Decode the 28-byte wire form."""
        data = bytes(data)
        _check_length("link setup data", data, LSD_SIZE)
        dst, src, frame_type, meta = _LSD.unpack(data)
        return cls(dst, src, frame_type, meta)

    def to_bytes(self) -> bytes:
        """Encode to the 28-byte wire form; multi-byte fields are big-endian."""
        _check_u16("frame_type", self.frame_type)
        return _LSD.pack(self.dst, self.src, self.frame_type, self.meta)


@dataclass
class IPFrame:
    """A 54-byte M17 stream frame as carried over IP."""

    magic: bytes = bytes(4)
    stream_id: int = 0
    lsd: Lsd = field(default_factory=Lsd)
    frame_number: int = 0
    payload: bytes = bytes(16)
    crc: int = 0

    def __post_init__(self) -> None:
        self.magic = bytes(self.magic)
        self.payload = bytes(self.payload)
        _check_length("magic", self.magic, 4)
        _check_length("payload", self.payload, 16)
        _check_u16("stream_id", self.stream_id)
        _check_u16("frame_number", self.frame_number)
        _check_u16("crc", self.crc)

    @classmethod
    def from_bytes(cls, data) -> "IPFrame":
        """Decode a frame from its 54-byte wire form."""
        data = bytes(data)
        _check_length("frame", data, IPFRAMESIZE)
        magic, stream_id, lsd, frame_number, payload, crc = _FRAME.unpack(data)
        return cls(magic, stream_id, Lsd.from_bytes(lsd), frame_number, payload, crc)

    def to_bytes(self) -> bytes:
        """Encode to the 54-byte wire form; multi-byte fields are big-endian."""
        for name in ("stream_id", "frame_number", "crc"):
            _check_u16(name, getattr(self, name))
        return _FRAME.pack(
            self.magic,
            self.stream_id,
            self.lsd.to_bytes(),
            self.frame_number,
            self.payload,
            self.crc,
        )


@dataclass
class RefPacket:
    """Reflector control packet for linking, unlinking and pinging.

    The wire form is 11 bytes, or 10 without a module, or 4 with only the magic.
    """

    magic: bytes
    cscode: bytes = b""
    module: Optional[str] = None

    def __post_init__(self) -> None:
        self.magic = bytes(self.magic)
        self.cscode = bytes(self.cscode)
        _check_length("magic", self.magic, 4)
        if len(self.cscode) not in (0, 6):
            raise ValueError(f"cscode must be empty or 6 bytes, got {len(self.cscode)}")
        if self.module is not None:
            if not self.cscode:
                raise ValueError("a module needs an encoded callsign")
            if len(self.module) != 1:
                raise ValueError(f"module must be one character, got {self.module!r}")

    @classmethod
    def from_bytes(cls, data) -> "RefPacket":
        """Decode a 4, 10 or 11 byte packet."""
        data = bytes(data)
        if len(data) not in (4, 10, 11):
            raise ValueError(f"reflector packet must be 4, 10 or 11 bytes, got {len(data)}")
        module = data[10:11].decode("latin-1") if len(data) == 11 else None
        return cls(data[:4], data[4:10], module)

    def to_bytes(self) -> bytes:
        """Encode to the shortest wire form that holds the set fields."""
        tail = self.module.encode("latin-1") if self.module is not None else b""
        return self.magic + self.cscode + tail
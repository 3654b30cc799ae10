"""Bit manipulation helpers and hex dumps for logging."""

import logging
from typing import Iterable, Iterator, List, Sequence

logger = logging.getLogger(__name__)

_BYTES_PER_LINE = 16


def hexdump_lines(data) -> Iterator[str]:
    """Yield hex dump lines of 16 bytes: offset, hex bytes and printable text."""
    data = bytes(data)
    for offset in range(0, len(data), _BYTES_PER_LINE):
        chunk = data[offset : offset + _BYTES_PER_LINE]
        hex_part = "".join(f"{b:02X} " for b in chunk).ljust(3 * _BYTES_PER_LINE)
        text = "".join(chr(b) if 0x20 <= b < 0x7F else "." for b in chunk)
        yield f"{offset:04X}:  {hex_part}   *{text}*"


def dump(title: str, data, level: int = logging.DEBUG) -> None:
    """Log a title followed by a hex dump of ``data``."""
    logger.log(level, "%s", title)
    for line in hexdump_lines(data):
        logger.log(level, "%s", line)


def dump_bits(title: str, bits: Iterable[bool], level: int = logging.DEBUG) -> None:
    """Log a hex dump of a bit sequence packed most significant bit first."""
    bit_list = [bool(b) for b in bits]
    packed = bytes(
        bits_to_byte_be(bit_list[n : n + 8] + [False] * (8 - len(bit_list[n : n + 8])))
        for n in range(0, len(bit_list), 8)
    )
    dump(title, packed, level)


def _check_byte(byte: int) -> None:
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")


def byte_to_bits_be(byte: int) -> List[bool]:
    """Bits of a byte, most significant first."""
    _check_byte(byte)
    return [bool(byte & (0x80 >> i)) for i in range(8)]


def byte_to_bits_le(byte: int) -> List[bool]:
    """Bits of a byte, least significant first."""
    _check_byte(byte)
    return [bool(byte & (1 << i)) for i in range(8)]


def _first_eight(bits: Sequence[bool]) -> List[bool]:
    bits = list(bits)
    if len(bits) < 8:
        raise ValueError(f"need 8 bits, got {len(bits)}")
    return bits[:8]


def bits_to_byte_be(bits: Sequence[bool]) -> int:
    """Pack the first eight bits into a byte, most significant first."""
    value = 0
    for bit in _first_eight(bits):
        value = (value << 1) | (1 if bit else 0)
    return value


def bits_to_byte_le(bits: Sequence[bool]) -> int:
    """Pack the first eight bits into a byte, least significant first."""
    return sum(1 << i for i, bit in enumerate(_first_eight(bits)) if bit)


def count_bits(v: int) -> int:
    """Number of set bits in a non-negative integer."""
    if v < 0:
        raise ValueError("count_bits needs a non-negative integer")
    return bin(v).count("1")


def remove_char(haystack, needle):
    """Drop every ``needle`` from ``haystack``, which ends at its first NUL.

    Works on ``str`` or ``bytes``; the result has the same type as ``haystack``.
    """
    if isinstance(haystack, str):
        text = haystack.split("\0", 1)[0]
        return text.replace(needle, "")
    data = bytes(haystack).split(b"\0", 1)[0]
    if isinstance(needle, int):
        needle = bytes((needle,))
    elif isinstance(needle, str):
        needle = needle.encode("latin-1")
    return data.replace(needle, b"")
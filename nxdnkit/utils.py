"""Hex dumps and bit packing helpers."""

from __future__ import annotations

from collections.abc import Sequence

from nxdnkit.log import LogLevel, log


def hex_dump_lines(data: bytes) -> list[str]:
    """Format ``data`` as 16-byte hex dump lines with a printable column."""
    lines = []
    for offset in range(0, len(data), 16):
        chunk = data[offset:offset + 16]
        hex_part = "".join(f"{b:02X} " for b in chunk).ljust(48)
        text = "".join(chr(b) if 0x20 <= b < 0x7F else "." for b in chunk)
        lines.append(f"{offset:04X}:  {hex_part}   *{text}*")
    return lines


def dump(title: str, data: bytes, level: int = LogLevel.MESSAGE) -> None:
    """Log ``title`` followed by a hex dump of ``data``."""
    log(level, title)
    for line in hex_dump_lines(data):
        log(level, line)


def dump_bits(title: str, bits: Sequence[bool], level: int = LogLevel.MESSAGE) -> None:
    """Pack ``bits`` big-endian into bytes and log a hex dump of them."""
    padded = list(bits) + [False] * (-len(bits) % 8)
    data = bytes(bits_to_byte_be(padded[i:i + 8]) for i in range(0, len(padded), 8))
    dump(title, data, level)


def _check_byte(byte: int) -> None:
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte: {byte}")


def _check_bits(bits: Sequence[bool]) -> None:
    if len(bits) != 8:
        raise ValueError(f"expected 8 bits, got {len(bits)}")


def byte_to_bits_be(byte: int) -> list[bool]:
    """Unpack a byte, most significant bit first."""
    _check_byte(byte)
    return [bool(byte & (0x80 >> i)) for i in range(8)]


def byte_to_bits_le(byte: int) -> list[bool]:
    """Unpack a byte, least significant bit first."""
    _check_byte(byte)
    return [bool(byte & (0x01 << i)) for i in range(8)]


def bits_to_byte_be(bits: Sequence[bool]) -> int:
    """Pack eight bits, most significant first, into a byte."""
    _check_bits(bits)
    return sum(0x80 >> i for i, bit in enumerate(bits) if bit)


def bits_to_byte_le(bits: Sequence[bool]) -> int:
    """Pack eight bits, least significant first, into a byte."""
    _check_bits(bits)
    return sum(0x01 << i for i, bit in enumerate(bits) if bit)
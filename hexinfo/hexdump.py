"""Hex-dump style lines used for the dashboard background and banner."""

from __future__ import annotations

import time
from collections.abc import Iterable

BANNER = "i v0.1"

_MIN_BYTES = 8
_MAX_BYTES = 32


class NoiseGenerator:
    """Linear congruential generator producing pseudo-random bytes."""

    def __init__(self, seed: int) -> None:
        self.state = seed & 0xFFFFFFFF

    def next_byte(self) -> int:
        """Advance the generator and return the next byte."""
        self.state = (self.state * 1103515245 + 12345) & 0x7FFFFFFF
        return (self.state >> 16) & 0xFF


def bytes_per_line(width: int) -> int:
    """How many bytes fit on one dump line of a terminal ``width`` wide."""
    available = width - 15
    max_bytes = abs(available) // 4 * (1 if available >= 0 else -1)
    max_bytes = max(_MIN_BYTES, min(_MAX_BYTES, max_bytes))
    return max_bytes // 8 * 8


def _printable(byte: int) -> str:
    return chr(byte) if 32 <= byte <= 126 else "."


def format_line(addr: int, data: Iterable[int], width: int) -> str:
    """Format one dump line, padded or cut to ``width - 1`` characters."""
    values = bytes(data)
    half = len(values) // 2
    hex_text = (
        " ".join(f"{b:02x}" for b in values[:half])
        + "  "
        + " ".join(f"{b:02x}" for b in values[half:])
    )
    ascii_text = "".join(_printable(b) for b in values)
    line = f"{addr:08x}  {hex_text} |{ascii_text}|"
    limit = max(width - 1, 0)
    return line.ljust(limit)[:limit]


def banner_line(width: int) -> str:
    """The dump line spelling out the program banner at address zero."""
    count = bytes_per_line(width)
    raw = BANNER.encode("ascii") + b"\x00"
    data = (raw + b" " * count)[:count]
    return format_line(0, data, width)


def background_lines(width: int, height: int, seed: int | None = None) -> list[str]:
    """Pseudo-random dump lines filling a ``width`` x ``height`` screen."""
    if seed is None:
        seed = int(time.time() * 1_000_000) & 0xFFFFFF
    noise = NoiseGenerator(seed)
    count = bytes_per_line(width)
    lines = []
    for row in range(height):
        data = bytearray()
        for column in range(count):
            byte = noise.next_byte()
            if column % 4 == 0:
                byte &= 0xF0
            if column == count // 2:
                byte = 0x00
            data.append(byte)
        lines.append(format_line(row * count, data, width))
    return lines
from __future__ import annotations

from typing import List

_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000

_GROUP_MASK = 0b11111
_CONTINUATION = 0x20
_ASCII_OFFSET = 63

# Offsets 0..30 cover all 32 bits of the value (seven groups).
_MAX_OFFSET = 30


# ──────────────────────────────────────────────────────────────
# Fixed-width helpers
# ──────────────────────────────────────────────────────────────

def uint32(value: int) -> int:
    """Reinterpret the low 32 bits of `value` as unsigned."""
    return value & _UINT32_MASK


def int32(value: int) -> int:
    """Reinterpret the low 32 bits of `value` as two's-complement signed."""
    value &= _UINT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


def mark_continuation(groups: List[int]) -> List[int]:
    """
    Flag every group but the last with 0x20 ("more follows") and shift all
    of them into printable ASCII (+63).
    """
    last = len(groups) - 1
    marked = []
    for i, g in enumerate(groups):
        if i < last:
            g |= _CONTINUATION
        marked.append(g + _ASCII_OFFSET)
    return marked


# ──────────────────────────────────────────────────────────────
# Chunks
# ──────────────────────────────────────────────────────────────

class Chunks:
    """
    5-bit groups of a single polyline value.

    Filled by `parse` (from an already zig-zagged uint32) or `parse_line`
    (from one encoded character group), then read back with `string` or
    `coordinate`.
    """

    def __init__(self) -> None:
        self.chunks: List[int] = []

    def parse(self, element: int) -> None:
        if element == 0:
            self.chunks = [0]
            return

        groups: List[int] = []
        offset = 0
        while offset <= _MAX_OFFSET and (1 << offset) <= element:
            groups.append((element >> offset) & _GROUP_MASK)
            offset += 5
        self.chunks = groups

    def parse_line(self, line: str) -> None:
        groups: List[int] = []
        last = len(line) - 1
        for i, letter in enumerate(line):
            g = uint32(ord(letter) - _ASCII_OFFSET)
            if i != last:
                g &= _GROUP_MASK
            groups.append(g)
        self.chunks = groups

    def string(self) -> str:
        return "".join(chr(g) for g in mark_continuation(self.chunks))

    def coordinate(self, precision: int) -> float:
        result = 0
        for i, g in enumerate(self.chunks):
            # shift amount wraps at the register width
            result = int32(result + uint32(g << ((i * 5) & 31)))

        if result & 1:
            result = ~result
        result >>= 1

        return result / float(10 ** precision)

from __future__ import annotations

from collections.abc import Iterable

__all__ = ("BYTE_COUNTS", "count_bits", "count_cells")

#: Table of the number of set bits in each possible cell value (0-255).
BYTE_COUNTS: tuple[int, ...] = tuple(bin(byte).count("1") for byte in range(256))


def count_bits(n: int) -> int:
    """
    Counts the set bits of ``n``, treated as an unsigned 32-bit integer. Anything above the low
    32 bits is discarded, so ``count_bits(2 ** 32 + 1) == 1``.
    """

    n &= 0xFFFFFFFF
    n -= (n >> 1) & 0x55555555
    n = (n & 0x33333333) + ((n >> 2) & 0x33333333)
    n = (n + (n >> 4)) & 0x0F0F0F0F
    return ((n * 0x01010101) & 0xFFFFFFFF) >> 24


def count_cells(cells: Iterable[int]) -> int:
    """
    Counts the set bits across a sequence of 8-bit cells.
    """

    return sum(BYTE_COUNTS[cell] for cell in cells)

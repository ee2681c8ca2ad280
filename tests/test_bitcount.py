import pytest
from bitvec import count_bits
from bitvec.utils.bitcount import BYTE_COUNTS, count_cells

bit_data = [
    (0, 0),
    (1, 1),
    (2, 1),
    (3, 2),
    (4, 1),
    (9, 2),
    (255, 8),
    (34224, 6),
    (1374212244, 13),
    (2**31, 1),
    (2**27, 1),
    (2**12, 1),
    (0xFFFFFFFF, 32),
]


@pytest.mark.parametrize(("value", "expected"), bit_data)
def test_count_bits(value: int, expected: int):
    """
    Tests population counts of known values.
    """

    assert count_bits(value) == expected


def test_count_bits_truncates_to_32_bits():
    """
    Tests that only the low 32 bits are counted.
    """

    assert count_bits(6374221234) == 21
    assert count_bits(2**32) == 0
    assert count_bits(2**32 + 1) == 1
    assert count_bits(-1) == 32


def test_byte_counts_table():
    """
    Tests the per-cell lookup table against the slow method.
    """

    assert len(BYTE_COUNTS) == 256
    for cell, expected in enumerate(BYTE_COUNTS):
        assert count_bits(cell) == expected


def test_count_cells():
    """
    Tests counting across a cell buffer.
    """

    assert count_cells(b"") == 0
    assert count_cells(bytearray([0xFF, 0x01, 0x80, 0x00])) == 10

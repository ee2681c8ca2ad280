from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, ClassVar, Self

import attr

from bitvec.exc import InvalidSizeError, OutOfRangeError
from bitvec.utils import LoggerWithTrace
from bitvec.utils.bitcount import count_cells

__all__ = ("CELL_BITS", "BitVector", "ShortLong")

#: The bit width of a single storage cell.
CELL_BITS = 8

# maps every cell value to its complement
_INVERT_TABLE = bytes(0xFF - cell for cell in range(256))

logger: LoggerWithTrace = LoggerWithTrace.get(__name__)


@attr.s(frozen=True, slots=True)
class ShortLong:
    """
    The cell buffers of two operands, classified by length.
    """

    #: The buffer of the operand with fewer cells.
    short: bytearray = attr.ib()

    #: The buffer of the operand with more cells. On a tie, this is the receiver's buffer.
    long: bytearray = attr.ib()


class BitVector:
    """
    A fixed-capacity array of bits, packed eight to a cell.

    Bit ``i`` lives in cell ``i // 8`` at offset ``i % 8``, least significant bit first. The
    capacity is always a whole number of cells; bits past the requested size are real bits
    and take part in every operation.

    Vectors of differing lengths can be combined. The shorter operand is treated as if it
    were zero-extended to the length of the longer one, and the result has the longer
    length.
    """

    __slots__ = ("_cells",)

    #: The bit width of a single storage cell.
    bits_per_cell: ClassVar[int] = CELL_BITS

    def __init__(self, size: int) -> None:
        """
        :param size: The number of bits this vector needs to hold. This is rounded up to the
                     nearest whole cell.
        """

        size = operator.index(size)
        if size < 0:
            raise InvalidSizeError(size)

        self._cells: bytearray = bytearray(-(-size // CELL_BITS))
        logger.trace(f"NEW: {size} bits ({len(self._cells)} cells)")

    @classmethod
    def _wrap(cls, cells: bytearray) -> BitVector:
        # takes ownership of ``cells`` as-is; only ever handed freshly built buffers
        vec = cls.__new__(cls)
        vec._cells = cells
        return vec

    @classmethod
    def from_buffer(cls, cells: bytes | bytearray | memoryview | Iterable[int]) -> BitVector:
        """
        Creates a new vector from an already populated sequence of cells. The cells are copied
        into a buffer that the new vector owns exclusively.

        :param cells: The cell values, each in the range 0-255.
        :return: A new :class:`.BitVector` with a capacity of ``len(cells) * 8`` bits.
        """

        if isinstance(cells, int):
            raise TypeError("from_buffer takes a sequence of cells, not a size")

        return cls._wrap(bytearray(cells))

    from_array = from_buffer

    ## DERIVED FIELDS ##

    @property
    def capacity(self) -> int:
        """
        The number of addressable bits in this vector.
        """

        return len(self._cells) * CELL_BITS

    bits = capacity

    @property
    def cell_count(self) -> int:
        """
        The number of cells backing this vector.
        """

        return len(self._cells)

    @property
    def buffer(self) -> bytearray:
        """
        The backing cell buffer. This is *not* a copy; writes to it are writes to this vector.
        It must never be resized.
        """

        return self._cells

    def to_buffer(self) -> bytearray:
        """
        Returns the backing cell buffer. See :attr:`.buffer`.
        """

        return self._cells

    to_array = to_buffer
    bit_vector = to_buffer

    def copy(self) -> BitVector:
        """
        Returns an independent copy of this vector.
        """

        return BitVector._wrap(bytearray(self._cells))

    __copy__ = copy

    ## BIT ACCESS ##

    def _locate(self, index: int) -> tuple[int, int]:
        index = operator.index(index)
        capacity = len(self._cells) * CELL_BITS
        if index < 0 or index >= capacity:
            raise OutOfRangeError(index, capacity)

        return divmod(index, CELL_BITS)

    def get(self, index: int) -> int:
        """
        Gets the value of a single bit.

        :param index: The bit index.
        :return: 1 if the bit is set, 0 otherwise.
        """

        cell, offset = self._locate(index)
        return (self._cells[cell] >> offset) & 1

    def set(self, index: int, value: Any = 1) -> Self:
        """
        Sets or clears a single bit.

        :param index: The bit index.
        :param value: If truthy, the bit is set, otherwise it is cleared.
        :return: This vector.
        """

        cell, offset = self._locate(index)
        if value:
            self._cells[cell] |= 1 << offset
        else:
            self._cells[cell] &= ~(1 << offset) & 0xFF

        return self

    def clear(self, index: int) -> Self:
        """
        Clears a single bit.
        """

        return self.set(index, 0)

    def flip(self, index: int) -> Self:
        """
        Toggles a single bit.
        """

        cell, offset = self._locate(index)
        self._cells[cell] ^= 1 << offset
        return self

    def test(self, index: int) -> bool:
        """
        Checks if a single bit is set.
        """

        return self.get(index) == 1

    def set_range(self, begin: int, end: int, value: Any = 1) -> Self:
        """
        Sets or clears every bit in the half-open range ``[begin, end)``. An empty or inverted
        range does nothing.
        """

        for index in range(begin, end):
            self.set(index, value)

        return self

    def clear_range(self, begin: int, end: int) -> Self:
        """
        Clears every bit in the half-open range ``[begin, end)``.
        """

        return self.set_range(begin, end, 0)

    def iter_set_bits(self) -> Iterator[int]:
        """
        Yields the index of every set bit, in ascending order.
        """

        for cell_idx, cell in enumerate(self._cells):
            if not cell:
                continue

            base = cell_idx * CELL_BITS
            for offset in range(CELL_BITS):
                if (cell >> offset) & 1:
                    yield base + offset

    def count(self) -> int:
        """
        Returns the number of set bits in this vector.
        """

        return count_cells(self._cells)

    def is_empty(self) -> bool:
        """
        Checks if no bit in this vector is set.
        """

        return not any(self._cells)

    ## BOOLEAN ALGEBRA ##

    def short_long(self, other: BitVector) -> ShortLong:
        """
        Classifies this vector and ``other`` into a short and a long operand by cell count. If
        both have the same length, this vector is the long operand.
        """

        if len(other._cells) <= len(self._cells):
            return ShortLong(short=other._cells, long=self._cells)

        return ShortLong(short=self._cells, long=other._cells)

    def _combine(
        self,
        other: BitVector,
        op: Callable[[int, int], int],
        name: str,
        keep_tail: bool,
    ) -> BitVector:
        if not isinstance(other, BitVector):
            raise TypeError(f"cannot {name} a BitVector with {type(other).__name__}")

        pair = self.short_long(other)
        short, long = pair.short, pair.long
        size = len(short)

        result = bytearray(op(a, b) for a, b in zip(short, long))
        # the short side is zero-extended, so the tail is either ``0 OP long`` == long, or 0
        if keep_tail:
            result += long[size:]
        else:
            result += bytes(len(long) - size)

        logger.trace(f"{name.upper()}: {len(self._cells)} cells with {len(other._cells)} cells")
        return BitVector._wrap(result)

    def or_(self, other: BitVector) -> BitVector:
        """
        Returns a new vector that is the bitwise OR of this vector and ``other``.
        """

        return self._combine(other, operator.or_, "or", keep_tail=True)

    def xor(self, other: BitVector) -> BitVector:
        """
        Returns a new vector that is the bitwise XOR of this vector and ``other``.
        """

        return self._combine(other, operator.xor, "xor", keep_tail=True)

    def and_(self, other: BitVector) -> BitVector:
        """
        Returns a new vector that is the bitwise AND of this vector and ``other``.

        Cells of the longer operand past the end of the shorter one are ANDed against the
        shorter operand's zero padding, so they are always zero in the result.
        """

        return self._combine(other, operator.and_, "and", keep_tail=False)

    def not_(self) -> BitVector:
        """
        Returns a new vector with every bit of this vector complemented.
        """

        return BitVector._wrap(self._cells.translate(_INVERT_TABLE))

    def equals(self, other: BitVector) -> bool:
        """
        Checks if this vector holds the same bits as ``other``. A vector is equal to a longer
        vector if the longer one has no bits set past the end of the shorter one.
        """

        if not isinstance(other, BitVector):
            raise TypeError(f"cannot compare a BitVector with {type(other).__name__}")

        pair = self.short_long(other)
        size = len(pair.short)
        if pair.long[:size] != pair.short:
            return False

        return not any(pair.long[size:])

    def _replace(self, result: BitVector) -> Self:
        logger.trace(f"REPLACE: {len(self._cells)} cells -> {len(result._cells)} cells")
        self._cells = result._cells
        return self

    def or_equal(self, other: BitVector) -> Self:
        """
        ORs ``other`` into this vector. The capacity grows to that of ``other`` if it is longer.
        """

        return self._replace(self.or_(other))

    def xor_equal(self, other: BitVector) -> Self:
        """
        XORs ``other`` into this vector. The capacity grows to that of ``other`` if it is
        longer.
        """

        return self._replace(self.xor(other))

    def and_equal(self, other: BitVector) -> Self:
        """
        ANDs ``other`` into this vector. The capacity grows to that of ``other`` if it is
        longer.
        """

        return self._replace(self.and_(other))

    def invert(self) -> Self:
        """
        Complements every bit of this vector in place.
        """

        return self._replace(self.not_())

    not_equal = invert

    ## PROTOCOLS ##

    def __len__(self) -> int:
        return len(self._cells) * CELL_BITS

    def __iter__(self) -> Iterator[int]:
        for cell in self._cells:
            for offset in range(CELL_BITS):
                yield (cell >> offset) & 1

    def __getitem__(self, index: int) -> bool:
        return self.test(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)

    def __contains__(self, index: object) -> bool:
        if not isinstance(index, int) or not 0 <= index < len(self):
            return False

        return self.test(index)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented

        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __or__(self, other: object) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented

        return self.or_(other)

    def __xor__(self, other: object) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented

        return self.xor(other)

    def __and__(self, other: object) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented

        return self.and_(other)

    def __ior__(self, other: object) -> Self:
        if not isinstance(other, BitVector):
            return NotImplemented

        return self.or_equal(other)

    def __ixor__(self, other: object) -> Self:
        if not isinstance(other, BitVector):
            return NotImplemented

        return self.xor_equal(other)

    def __iand__(self, other: object) -> Self:
        if not isinstance(other, BitVector):
            return NotImplemented

        return self.and_equal(other)

    def __invert__(self) -> BitVector:
        return self.not_()

    def to_bitstring(self) -> str:
        """
        Renders every bit of this vector as ``0`` or ``1``, lowest index first.
        """

        return "".join("1" if bit else "0" for bit in self)

    def __repr__(self) -> str:
        return f"<BitVector capacity={len(self)} {self.to_bitstring()}>"

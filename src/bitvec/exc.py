from __future__ import annotations

from collections.abc import Callable
from typing import Self

from typing_extensions import override

__all__ = (
    "BitVectorError",
    "OutOfRangeError",
    "InvalidSizeError",
)


class BitVectorError(Exception):
    """
    Base class exception for all bit vector exceptions.
    """

    __slots__ = ()


class OutOfRangeError(BitVectorError, IndexError):
    """
    Thrown when a bit index falls outside of a vector's capacity.
    """

    __slots__ = ("index", "capacity")

    def __init__(self, index: int, capacity: int):
        #: The offending bit index.
        self.index: int = index
        #: The capacity, in bits, of the vector that was indexed.
        self.capacity: int = capacity

        super().__init__(index, capacity)

    @override
    def __str__(self) -> str:
        return f"index {self.index} out of range (capacity: {self.capacity} bits)"

    __repr__: Callable[[Self], str] = __str__


class InvalidSizeError(BitVectorError, ValueError):
    """
    Thrown when a vector is created with a negative size.
    """

    __slots__ = ("size",)

    def __init__(self, size: int):
        #: The requested size, in bits.
        self.size: int = size

        super().__init__(f"vector size must be non-negative, not {size}")

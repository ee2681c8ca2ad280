import logging

# our public exports, relatively minimal
from bitvec.exc import (
    BitVectorError as BitVectorError,
    InvalidSizeError as InvalidSizeError,
    OutOfRangeError as OutOfRangeError,
)
from bitvec.utils import TRACE
from bitvec.utils.bitcount import count_bits as count_bits
from bitvec.vector import CELL_BITS as CELL_BITS, BitVector as BitVector

logging.addLevelName(TRACE, "TRACE")

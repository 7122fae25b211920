"""
biguint — arbitrary-precision unsigned integers over a growable byte buffer.
"""

from biguint.core.domain import (
    AllocationFailure,
    Arena,
    BigUInt,
    BigUIntConfig,
    BigUIntError,
    ShiftOverflowError,
    UnderflowError,
    UseAfterReleaseError,
    copy,
)
from biguint.core.math import (
    add,
    add_small,
    bit_and,
    bit_length,
    bit_or,
    bit_xor,
    compare,
    equals,
    is_zero,
    isqrt,
    mul,
    shr,
    sqrt,
    sub,
    trim,
)
from biguint.display import print_hex, to_hex, to_snapshot

__version__ = "0.1.0"

__all__ = [
    "AllocationFailure",
    "Arena",
    "BigUInt",
    "BigUIntConfig",
    "BigUIntError",
    "ShiftOverflowError",
    "UnderflowError",
    "UseAfterReleaseError",
    "add",
    "add_small",
    "bit_and",
    "bit_length",
    "bit_or",
    "bit_xor",
    "compare",
    "copy",
    "equals",
    "is_zero",
    "isqrt",
    "mul",
    "print_hex",
    "shr",
    "sqrt",
    "sub",
    "to_hex",
    "to_snapshot",
    "trim",
]

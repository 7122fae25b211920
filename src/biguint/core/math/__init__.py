"""
Core math modules для biguint

Арифметические, побитовые операции и сравнения над BigUInt.
Все операции принимают destination первым аргументом.
"""

# Normalizer / Comparator
from biguint.core.math.compare import (
    bit_length,
    compare,
    equals,
    is_zero,
    trim,
)

# Arithmetic
from biguint.core.math.arithmetic import (
    add,
    add_small,
    sub,
)

# Bitwise
from biguint.core.math.bitwise import (
    bit_and,
    bit_or,
    bit_xor,
)

# Shift
from biguint.core.math.shift import (
    shift_amount,
    shr,
)

# Multiplication
from biguint.core.math.multiplication import mul

# Integer square root
from biguint.core.math.isqrt import (
    isqrt,
    sqrt,
)

__all__ = [
    # Normalizer / Comparator
    "bit_length",
    "compare",
    "equals",
    "is_zero",
    "trim",
    # Arithmetic
    "add",
    "add_small",
    "sub",
    # Bitwise
    "bit_and",
    "bit_or",
    "bit_xor",
    # Shift
    "shift_amount",
    "shr",
    # Multiplication
    "mul",
    # Integer square root
    "isqrt",
    "sqrt",
]

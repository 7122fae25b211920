"""
Domain models and value objects.

Contains the BigUInt value type, its construction config, the arena that
owns its storage, and the engine's exception hierarchy.
"""

from biguint.core.domain.arena import Arena
from biguint.core.domain.config import (
    BITS_PER_BYTE,
    BYTE_MASK,
    DEFAULT_INITIAL_CAPACITY,
    MAX_SHIFT_BITS,
    BigUIntConfig,
)
from biguint.core.domain.errors import (
    AllocationFailure,
    BigUIntError,
    ShiftOverflowError,
    UnderflowError,
    UseAfterReleaseError,
)
from biguint.core.domain.value import BigUInt, copy

__all__ = [
    # Constants
    "BITS_PER_BYTE",
    "BYTE_MASK",
    "DEFAULT_INITIAL_CAPACITY",
    "MAX_SHIFT_BITS",
    # Config
    "BigUIntConfig",
    # Storage ownership
    "Arena",
    # Value
    "BigUInt",
    "copy",
    # Exceptions
    "BigUIntError",
    "UnderflowError",
    "ShiftOverflowError",
    "AllocationFailure",
    "UseAfterReleaseError",
]

"""
Тесты для isqrt (floor квадратного корня, бинарный поиск)
"""

import math

import pytest

from biguint.core.domain import BigUInt
from biguint.core.math import isqrt, sqrt


class TestIsqrt:
    """Тесты для isqrt"""

    def test_perfect_square(self) -> None:
        """sqrt(16) == 4"""
        dest = BigUInt()
        isqrt(dest, BigUInt.from_bytes(bytes([16])))
        assert dest.to_int() == 4

    def test_floor(self) -> None:
        """sqrt(17) == 4 (floor)"""
        dest = BigUInt()
        isqrt(dest, BigUInt.from_int(17))
        assert dest.to_int() == 4

    @pytest.mark.parametrize(
        "value", [0, 1, 2, 3, 4, 8, 9, 255, 256, 65535, 2**64, 2**100 + 12345, 3**99]
    )
    def test_matches_math_isqrt(self, value: int) -> None:
        """Совпадение с math.isqrt"""
        dest = BigUInt()
        isqrt(dest, BigUInt.from_int(value))
        assert dest.to_int() == math.isqrt(value)

    def test_untrimmed_input(self) -> None:
        """Ненормализованный вход"""
        dest = BigUInt()
        isqrt(dest, BigUInt.from_bytes(b"\x51\x00\x00\x00"))
        assert dest.to_int() == 9

    def test_dest_aliases_source(self) -> None:
        """dest совпадает с x"""
        x = BigUInt.from_int(10**30)
        isqrt(x, x)
        assert x.to_int() == 10**15

    def test_temporaries_released(self) -> None:
        """Временные значения освобождены после операции"""
        dest = BigUInt()
        isqrt(dest, BigUInt.from_int(2**80 + 1))
        assert dest.arena.block_count == 1
        assert dest.arena.bytes_in_use == len(dest)

    def test_sqrt_alias(self) -> None:
        """sqrt — то же, что isqrt"""
        dest = BigUInt()
        sqrt(dest, BigUInt.from_int(144))
        assert dest.to_int() == 12

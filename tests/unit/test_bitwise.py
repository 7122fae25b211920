"""
Тесты для побайтовых AND / OR / XOR

Ключевая семантика: короткий операнд дополняется нулями до длины длинного.
"""

import pytest

from biguint.core.domain import BigUInt
from biguint.core.math import bit_and, bit_or, bit_xor

LONG = b"\xff\xff\xff"
SHORT = b"\x0f"


class TestZeroExtension:
    """Тесты для операндов разной длины"""

    def test_and_zeroes_tail(self) -> None:
        """AND даёт нули за пределами короткого операнда"""
        dest = BigUInt.with_capacity(1)
        bit_and(dest, BigUInt.from_bytes(LONG), BigUInt.from_bytes(SHORT))
        assert dest.to_bytes() == b"\x0f\x00\x00"

    def test_and_is_symmetric_in_length(self) -> None:
        """AND не зависит от порядка операндов разной длины"""
        dest = BigUInt.with_capacity(1)
        bit_and(dest, BigUInt.from_bytes(SHORT), BigUInt.from_bytes(LONG))
        assert dest.to_bytes() == b"\x0f\x00\x00"

    def test_or_copies_longer_tail(self) -> None:
        """OR копирует хвост длинного операнда"""
        dest = BigUInt.with_capacity(1)
        bit_or(dest, BigUInt.from_bytes(SHORT), BigUInt.from_bytes(b"\xf0\x12\x34"))
        assert dest.to_bytes() == b"\xff\x12\x34"

    def test_xor_copies_longer_tail(self) -> None:
        """XOR копирует хвост длинного операнда"""
        dest = BigUInt.with_capacity(1)
        bit_xor(dest, BigUInt.from_bytes(LONG), BigUInt.from_bytes(SHORT))
        assert dest.to_bytes() == b"\xf0\xff\xff"


class TestAgainstIntegers:
    """Сверка с int для многобайтовых значений"""

    @pytest.mark.parametrize(
        "op, expected",
        [
            (bit_and, lambda x, y: x & y),
            (bit_or, lambda x, y: x | y),
            (bit_xor, lambda x, y: x ^ y),
        ],
    )
    @pytest.mark.parametrize("x, y", [(0xDEADBEEF, 0xFF00FF), (2**130 + 7, 3**50), (0, 0xABCDEF)])
    def test_matches_int(self, op, expected, x: int, y: int) -> None:
        """Результат совпадает с операцией над int"""
        dest = BigUInt()
        op(dest, BigUInt.from_int(x), BigUInt.from_int(y))
        assert dest.to_int() == expected(x, y)


class TestAliasing:
    """Тесты для dest, совпадающего с источником"""

    def test_xor_with_self_is_zero(self) -> None:
        """a ^ a == 0 при dest is a"""
        a = BigUInt.from_int(0xCAFEBABE)
        bit_xor(a, a, a)
        assert a.to_int() == 0

    def test_or_into_shorter_source(self) -> None:
        """dest совпадает с коротким источником"""
        a = BigUInt.from_bytes(SHORT)
        bit_or(a, a, BigUInt.from_bytes(b"\x00\x00\x80"))
        assert a.to_bytes() == b"\x0f\x00\x80"

    def test_stale_high_bytes_cleared(self) -> None:
        """Старые старшие байты dest обнуляются"""
        dest = BigUInt.from_int(2**100 - 1)
        bit_and(dest, BigUInt.from_int(0xFF), BigUInt.from_int(0x0F))
        assert dest.to_int() == 0x0F

"""
IntegerSqrt — целочисленный квадратный корень (floor)

Бинарный поиск наибольшего s в [0, 2^ceil(n/2)], n = bit_length(x),
такого что s * s <= x. Каждый шаг — одно умножение и одно сравнение,
число шагов пропорционально половине битовой длины x.

Временные значения выделяются в арене dest (co-owned) и освобождаются
до возврата. Результат устанавливается в dest свежим блоком, поэтому
dest может совпадать с x.
"""

from biguint.core.domain.config import BITS_PER_BYTE
from biguint.core.domain.value import BigUInt
from biguint.core.math.arithmetic import add, add_small, sub
from biguint.core.math.compare import bit_length, compare, trim
from biguint.core.math.multiplication import mul
from biguint.core.math.shift import shr


def _power_of_two(exponent: int, owner) -> BigUInt:
    size = exponent // BITS_PER_BYTE + 1
    content = bytearray(size)
    content[-1] = 1 << (exponent % BITS_PER_BYTE)
    return BigUInt.from_bytes(content, owner=owner)


def isqrt(dest: BigUInt, x: BigUInt) -> None:
    """
    dest = floor(sqrt(x))

    Examples:
        isqrt(16) → 4
        isqrt(17) → 4
    """
    arena = dest.arena
    n_bits = bit_length(x)
    temporaries: list[BigUInt] = []

    def scratch(value: int) -> BigUInt:
        temp = BigUInt.from_int(value, owner=arena)
        temporaries.append(temp)
        return temp

    try:
        low = scratch(0)
        high = _power_of_two((n_bits + 1) // 2, arena)
        temporaries.append(high)
        mid = scratch(0)
        square = scratch(0)
        one = scratch(1)

        # Инвариант: low * low <= x, ответ лежит в [low, high]
        while compare(low, high) < 0:
            # mid = (low + high + 1) >> 1, верхняя медиана
            add(mid, low, high)
            add_small(mid, mid, 1)
            shr(mid, mid, 1)
            trim(mid)

            mul(square, mid, mid)
            if compare(square, x) <= 0:
                low, mid = mid, low
            else:
                sub(high, mid, one)
                trim(high)

        result = arena.allocate(len(low))
        result[:] = low.buffer
        dest.install(result)
    finally:
        for temp in temporaries:
            temp.destroy()


# Имя операции в публичном наборе движка
sqrt = isqrt

"""
Shift — логический сдвиг вправо

shr(dest, a, n): dest = floor(a / 2^n), n — число бит.

Алгоритм:
1. Сдвиг на целые байты: n // 8
2. Сдвиг внутри байта: n % 8, с переносом младших бит следующего
   (более старшего) байта

dest может совпадать с a: запись индекса i читает только индексы >= i.
Величина сдвига может быть передана как int или как BigUInt.
"""

from typing import Union

from biguint.core.domain.config import BITS_PER_BYTE, BYTE_MASK, MAX_SHIFT_BITS
from biguint.core.domain.errors import ShiftOverflowError
from biguint.core.domain.value import BigUInt


def shift_amount(n: Union[int, BigUInt]) -> int:
    """
    Приведение величины сдвига к int с проверкой диапазона.

    Raises:
        ValueError: Если n < 0
        ShiftOverflowError: Если n > MAX_SHIFT_BITS
        TypeError: Если n не int и не BigUInt
    """
    if isinstance(n, BigUInt):
        n = n.to_int()
    elif isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"shift amount must be int or BigUInt, got {type(n).__name__}")

    if n < 0:
        raise ValueError(f"shift amount must be non-negative, got {n}")
    if n > MAX_SHIFT_BITS:
        raise ShiftOverflowError(f"shift amount {n} exceeds maximum {MAX_SHIFT_BITS}")
    return n


def shr(dest: BigUInt, a: BigUInt, n: Union[int, BigUInt]) -> None:
    """
    dest = a >> n

    Examples:
        shr([0x10], 4) → [0x01]
        shr(a, n) для n >= 8 * len(a) → [0x00]
    """
    bits = shift_amount(n)
    byte_shift, bit_shift = divmod(bits, BITS_PER_BYTE)

    len_a = len(a)
    if byte_shift >= len_a:
        # Результат — ровно один нулевой байт
        dest.truncate(1)
        dest.buffer[0] = 0
        return

    out_len = len_a - byte_shift
    dest.ensure_capacity(out_len)
    buf_a, out = a.buffer, dest.buffer

    for i in range(out_len):
        src = i + byte_shift
        low = buf_a[src] >> bit_shift
        high = buf_a[src + 1] if src + 1 < len_a else 0
        out[i] = (low | (high << (BITS_PER_BYTE - bit_shift))) & BYTE_MASK

    if len(out) > out_len:
        out[out_len:] = bytes(len(out) - out_len)

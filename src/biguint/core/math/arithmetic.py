"""
Arithmetic — сложение и вычитание

add(dest, a, b), add_small(dest, a, k), sub(dest, a, b)

dest может быть тем же объектом, что a и/или b. Длины операндов
фиксируются до роста dest; проход один, по возрастанию индекса,
и каждый индекс читается до записи.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. dest растёт до max(len(a), len(b)) + 1 перед сложением (байт под carry)
2. Байты dest выше ширины результата обнуляются
3. b > a при вычитании → UnderflowError до любой записи в dest
"""

from biguint.core.domain.config import BITS_PER_BYTE, BYTE_MASK
from biguint.core.domain.errors import UnderflowError
from biguint.core.domain.value import BigUInt
from biguint.core.math.compare import compare


def _zero_tail(out: bytearray, width: int) -> None:
    """Обнуление байт выше width (старое содержимое dest)."""
    if len(out) > width:
        out[width:] = bytes(len(out) - width)


def _add_into(out: bytearray, addend_a, len_a: int, addend_b, len_b: int) -> None:
    width = max(len_a, len_b)

    carry = 0
    for i in range(width):
        total = carry
        if i < len_a:
            total += addend_a[i]
        if i < len_b:
            total += addend_b[i]
        out[i] = total & BYTE_MASK
        carry = total >> BITS_PER_BYTE

    out[width] = carry
    _zero_tail(out, width + 1)


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add(dest: BigUInt, a: BigUInt, b: BigUInt) -> None:
    """
    dest = a + b

    Сложение беззнаковых значений никогда не завершается ошибкой
    (кроме AllocationFailure).

    Examples:
        [0xff, 0xfe] + [0xfe, 0xea] → [0xfd, 0xe9, 0x01] (после trim)
    """
    len_a, len_b = len(a), len(b)
    dest.ensure_capacity(max(len_a, len_b) + 1)
    # Буферы берутся после роста: при релокации dest is a старый блок освобождён
    _add_into(dest.buffer, a.buffer, len_a, b.buffer, len_b)


def add_small(dest: BigUInt, a: BigUInt, k: int) -> None:
    """
    dest = a + k для неотрицательного int k.

    Raises:
        ValueError: Если k < 0
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")

    k_bytes = k.to_bytes(max(1, (k.bit_length() + 7) // 8), "little")
    len_a = len(a)
    dest.ensure_capacity(max(len_a, len(k_bytes)) + 1)
    _add_into(dest.buffer, a.buffer, len_a, k_bytes, len(k_bytes))


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def sub(dest: BigUInt, a: BigUInt, b: BigUInt) -> None:
    """
    dest = a - b (беззнаково)

    Raises:
        UnderflowError: Если b > a. Проверка выполняется до записи,
            но вызывающий код не должен полагаться на содержимое dest.
    """
    if compare(a, b) < 0:
        raise UnderflowError("subtraction result would be negative")

    len_a, len_b = len(a), len(b)
    dest.ensure_capacity(len_a)
    buf_a, buf_b, out = a.buffer, b.buffer, dest.buffer

    borrow = 0
    for i in range(len_a):
        diff = buf_a[i] - borrow
        if i < len_b:
            diff -= buf_b[i]
        if diff < 0:
            diff += 1 << BITS_PER_BYTE
            borrow = 1
        else:
            borrow = 0
        out[i] = diff

    # b <= a: старшие байты b за пределами len_a нулевые, заём погашен
    if borrow:
        raise UnderflowError("borrow remains after the final byte")

    _zero_tail(out, len_a)

"""
Multiplication — полное умножение столбиком (schoolbook)

Для каждой пары позиций (i, j) произведение a[i] * b[j] добавляется
в аккумулятор на позицию i + j; перенос распространяется вверх столько
байт, сколько нужно.

Каждый байт результата зависит от каждого байта источников, поэтому
результат считается в свежем блоке из арены dest длиной len(a) + len(b)
и устанавливается в dest атомарно.
"""

from biguint.core.domain.config import BITS_PER_BYTE, BYTE_MASK
from biguint.core.domain.value import BigUInt


def mul(dest: BigUInt, a: BigUInt, b: BigUInt) -> None:
    """
    dest = a * b

    Результат обычно содержит старшие нулевые байты; trim их удаляет.

    Examples:
        [5] * [6] → [30, 0] (до trim), [30] (после trim)
    """
    buf_a, buf_b = a.buffer, b.buffer
    len_a, len_b = len(buf_a), len(buf_b)

    acc = dest.arena.allocate(len_a + len_b)

    for i in range(len_a):
        digit = buf_a[i]
        if digit == 0:
            continue

        carry = 0
        for j in range(len_b):
            total = acc[i + j] + digit * buf_b[j] + carry
            acc[i + j] = total & BYTE_MASK
            carry = total >> BITS_PER_BYTE

        k = i + len_b
        while carry:
            total = acc[k] + carry
            acc[k] = total & BYTE_MASK
            carry = total >> BITS_PER_BYTE
            k += 1

    dest.install(acc)

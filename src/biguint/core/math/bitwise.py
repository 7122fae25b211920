"""
Bitwise — побайтовые AND / OR / XOR

Оба операнда концептуально дополняются нулями до max(len(a), len(b)):
- AND: байты за пределами короткого операнда дают 0
- OR / XOR: байты за пределами короткого операнда равны байтам длинного

dest может совпадать с a и/или b: проход один, индекс читается до записи.
"""

import operator
from typing import Callable

from biguint.core.domain.value import BigUInt


def _combine(dest: BigUInt, a: BigUInt, b: BigUInt, op: Callable[[int, int], int]) -> None:
    len_a, len_b = len(a), len(b)
    width = max(len_a, len_b)
    dest.ensure_capacity(width)
    buf_a, buf_b, out = a.buffer, b.buffer, dest.buffer

    for i in range(width):
        byte_a = buf_a[i] if i < len_a else 0
        byte_b = buf_b[i] if i < len_b else 0
        out[i] = op(byte_a, byte_b)

    if len(out) > width:
        out[width:] = bytes(len(out) - width)


def bit_and(dest: BigUInt, a: BigUInt, b: BigUInt) -> None:
    """dest = a & b"""
    _combine(dest, a, b, operator.and_)


def bit_or(dest: BigUInt, a: BigUInt, b: BigUInt) -> None:
    """dest = a | b"""
    _combine(dest, a, b, operator.or_)


def bit_xor(dest: BigUInt, a: BigUInt, b: BigUInt) -> None:
    """dest = a ^ b"""
    _combine(dest, a, b, operator.xor)

"""
Normalizer / Comparator — нормализация и сравнения

- trim: удаление старших нулевых байт (минимум один байт)
- is_zero: все байты нулевые, независимо от длины
- equals / compare: сравнение с концептуальным zero-extension короткого операнда
- bit_length: позиция старшего установленного бита

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. trim не меняет числовое значение и идемпотентен
2. Результаты is_zero / equals / compare не зависят от нормализации
"""

import logging

from biguint.core.domain.config import BITS_PER_BYTE
from biguint.core.domain.value import BigUInt

logger = logging.getLogger(__name__)


def _top_nonzero_index(buf: bytearray) -> int:
    """Индекс старшего ненулевого байта или -1 для нуля."""
    for i in range(len(buf) - 1, -1, -1):
        if buf[i]:
            return i
    return -1


def trim(x: BigUInt) -> None:
    """
    Нормализация: удаление старших (хвостовых, little-endian) нулевых байт.

    Ноль сохраняется как один байт 0x00.
    """
    buf = x.buffer
    new_len = max(1, _top_nonzero_index(buf) + 1)
    freed = len(buf) - new_len
    if freed:
        logger.debug("trim freed %d of %d bytes", freed, len(buf))
        x.truncate(new_len)


def is_zero(x: BigUInt) -> bool:
    """True если каждый байт хранилища равен 0."""
    return not any(x.buffer)


def compare(a: BigUInt, b: BigUInt) -> int:
    """
    Беззнаковое сравнение.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    buf_a, buf_b = a.buffer, b.buffer
    len_a, len_b = len(buf_a), len(buf_b)

    for i in range(max(len_a, len_b) - 1, -1, -1):
        byte_a = buf_a[i] if i < len_a else 0
        byte_b = buf_b[i] if i < len_b else 0
        if byte_a != byte_b:
            return -1 if byte_a < byte_b else 1
    return 0


def equals(a: BigUInt, b: BigUInt) -> bool:
    """True если a и b представляют одно и то же число."""
    return compare(a, b) == 0


def bit_length(x: BigUInt) -> int:
    """Число значащих бит (0 для нуля)."""
    buf = x.buffer
    top = _top_nonzero_index(buf)
    if top < 0:
        return 0
    return top * BITS_PER_BYTE + buf[top].bit_length()

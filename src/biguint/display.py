"""
Display — диагностическое отображение значений

Только чтение: модуль не меняет хранилище и не участвует в числовом
контракте движка. Hex выводится от старшего байта к младшему, то есть
в порядке, обратном little-endian хранилищу.
"""

import sys
from typing import Any, Dict, Optional, TextIO

from biguint.core.domain.value import BigUInt
from biguint.core.math.compare import is_zero

SNAPSHOT_SCHEMA_VERSION = "1"


def _significant_len(buf: bytearray) -> int:
    length = len(buf)
    while length > 1 and buf[length - 1] == 0:
        length -= 1
    return length


def to_hex(x: BigUInt, trimmed: bool = False) -> str:
    """
    Hex-строка, два символа на байт, старший байт первым.

    Args:
        x: значение
        trimmed: не выводить старшие нулевые байты (хранилище не меняется)

    Examples:
        [0xfd, 0xe9, 0x01] → "01E9FD"
    """
    buf = x.buffer
    length = _significant_len(buf) if trimmed else len(buf)
    return bytes(reversed(buf[:length])).hex().upper()


def print_hex(x: BigUInt, stream: Optional[TextIO] = None) -> None:
    """Вывод to_hex(x) с переводом строки (default: stdout)."""
    out = stream or sys.stdout
    out.write(to_hex(x) + "\n")
    out.flush()


def to_snapshot(x: BigUInt) -> Dict[str, Any]:
    """JSON-совместимый снапшот значения (контракт biguint_snapshot)."""
    buf = x.buffer
    return {
        "schema_version": SNAPSHOT_SCHEMA_VERSION,
        "length": len(buf),
        "bytes_le_hex": bytes(buf).hex(),
        "hex": to_hex(x),
        "is_zero": is_zero(x),
        "is_normalized": _significant_len(buf) == len(buf),
    }

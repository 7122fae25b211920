"""
BigUInt — беззнаковое целое произвольной точности

Единственная сущность движка:
- storage: bytearray, little-endian (индекс 0 — младший байт), длина >= 1
- arena: область владения, которой принадлежит storage

Нормализация не выполняется неявно: старшие нулевые байты сохраняются
до явного вызова trim (см. core.math.compare).

Операции (add, sub, mul, ...) — функции модулей core.math, принимающие
destination первым аргументом; destination может совпадать с источником.
"""

from typing import Optional

from biguint.core.domain.arena import Arena
from biguint.core.domain.config import BigUIntConfig
from biguint.core.domain.errors import UseAfterReleaseError


class BigUInt:
    """
    Значение с собственным хранилищем.

    Создаётся либо с zero-filled буфером заданной ёмкости, либо копированием
    явной последовательности байт. Если owner не передан, значение владеет
    собственной ареной; иначе значение co-owned переданной ареной и
    становится невалидным при её освобождении.
    """

    def __init__(
        self,
        config: Optional[BigUIntConfig] = None,
        *,
        owner: Optional[Arena] = None,
    ):
        """
        Args:
            config: конфигурация (default: BigUIntConfig())
            owner: арена для co-owned значения (временные значения операций)

        Бюджет co-owned значения — бюджет арены owner, поэтому
        config.max_capacity вместе с owner не допускается.

        Raises:
            ValueError: Если переданы и owner, и config.max_capacity
        """
        config = config or BigUIntConfig()

        if owner is not None and config.max_capacity is not None:
            raise ValueError("max_capacity cannot be set for a value co-owned by an existing arena")

        self._owns_arena = owner is None
        self._arena = Arena(max_capacity=config.max_capacity) if owner is None else owner
        self._destroyed = False

        self._storage = self._arena.allocate(config.initial_size)
        if config.initial_content is not None:
            self._storage[:] = config.initial_content

    # =========================================================================
    # АЛЬТЕРНАТИВНЫЕ КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_bytes(cls, content: bytes, owner: Optional[Arena] = None) -> "BigUInt":
        """Значение из little-endian байт (копия)."""
        return cls(BigUIntConfig(initial_content=bytes(content)), owner=owner)

    @classmethod
    def from_int(cls, value: int, owner: Optional[Arena] = None) -> "BigUInt":
        """
        Значение из неотрицательного int, минимальной длины.

        Raises:
            ValueError: Если value < 0
        """
        if value < 0:
            raise ValueError(f"value must be non-negative, got {value}")
        size = max(1, (value.bit_length() + 7) // 8)
        return cls.from_bytes(value.to_bytes(size, "little"), owner=owner)

    @classmethod
    def with_capacity(cls, capacity: int, owner: Optional[Arena] = None) -> "BigUInt":
        """Ноль с zero-filled буфером на capacity байт."""
        return cls(BigUIntConfig(initial_capacity=capacity), owner=owner)

    # =========================================================================
    # ДОСТУП К ХРАНИЛИЩУ
    # =========================================================================

    @property
    def arena(self) -> Arena:
        self._check_alive()
        return self._arena

    @property
    def buffer(self) -> bytearray:
        """Живой буфер хранилища (для модулей core.math)."""
        self._check_alive()
        return self._storage

    @property
    def released(self) -> bool:
        return self._destroyed or self._arena.released

    def __len__(self) -> int:
        return len(self.buffer)

    def __repr__(self) -> str:
        if self.released:
            return "BigUInt(<released>)"
        return f"BigUInt(len={len(self._storage)}, hex=0x{bytes(reversed(self._storage)).hex().upper()})"

    def to_bytes(self) -> bytes:
        """Копия хранилища, little-endian, без нормализации."""
        return bytes(self.buffer)

    def to_int(self) -> int:
        return int.from_bytes(self.buffer, "little")

    # =========================================================================
    # УПРАВЛЕНИЕ ХРАНИЛИЩЕМ
    # =========================================================================

    def ensure_capacity(self, min_len: int) -> None:
        """
        Рост хранилища до min_len байт (zero-fill, старые байты сохраняются).

        Raises:
            AllocationFailure: Если арена не может выделить память
        """
        self._storage = self.arena.grow(self._storage, min_len)

    def truncate(self, new_len: int) -> None:
        """Отбрасывание старших байт выше new_len."""
        self._storage = self.arena.shrink(self._storage, new_len)

    def install(self, block: bytearray) -> None:
        """
        Атомарная замена хранилища блоком из той же арены.

        Старый блок освобождается. Используется mul и isqrt, где каждый
        байт результата зависит от каждого байта источника.
        """
        arena = self.arena
        if not arena.owns(block):
            raise ValueError("installed block must be allocated from the value's arena")
        if block is self._storage:
            return

        old = self._storage
        self._storage = block
        arena.free(old)

    # =========================================================================
    # ВРЕМЯ ЖИЗНИ
    # =========================================================================

    def destroy(self) -> None:
        """
        Освобождение значения.

        Владелец арены освобождает всю арену (включая co-owned временные
        значения); co-owned значение возвращает только свой блок.
        Повторный вызов ничего не делает.
        """
        if self.released:
            self._destroyed = True
            return

        if self._owns_arena:
            self._arena.release()
        else:
            self._arena.free(self._storage)
        self._destroyed = True

    def __enter__(self) -> "BigUInt":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def _check_alive(self) -> None:
        if self.released:
            raise UseAfterReleaseError("BigUInt used after its arena was released")


def copy(x: BigUInt, owner: Optional[Arena] = None) -> BigUInt:
    """
    Независимая копия значения.

    Хранилище копируется байт-в-байт, включая старшие нулевые байты
    (нормализация не выполняется).

    Args:
        x: исходное значение
        owner: арена для копии (default: собственная новая арена)

    Returns:
        Новое значение
    """
    return BigUInt.from_bytes(x.to_bytes(), owner=owner)

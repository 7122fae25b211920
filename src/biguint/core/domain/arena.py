"""
Arena — область владения памятью (LifetimeOwner) и политика роста буфера

Каждое значение BigUInt владеет собственной ареной. Временные значения,
создаваемые во время операции (например, внутри isqrt), выделяются из арены
destination и освобождаются вместе с ней.

Политика роста (StorageBuffer):
- Сначала попытка расширить блок на месте
- При неудаче: новый блок, копирование старых байт, zero-fill расширения,
  освобождение старого блока через ту же арену
- Рост никогда не уменьшает блок неявно

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Байты ниже старой длины сохраняются, байты выше — нули
2. Отказ аллокатора → AllocationFailure, без повторов
3. Отказ по бюджету происходит до изменения блока (состояние валидно)
4. release() освобождает всё ровно один раз; повторный вызов — no-op
"""

import logging
from typing import Optional

from biguint.core.domain.errors import AllocationFailure, UseAfterReleaseError

logger = logging.getLogger(__name__)


class Arena:
    """
    Арена блоков хранилища.

    Блоки — bytearray, учитываются по идентичности объекта. Арена
    не thread-safe: доступ из нескольких потоков сериализуется снаружи.
    """

    def __init__(self, max_capacity: Optional[int] = None):
        """
        Args:
            max_capacity: бюджет арены в байтах (None = без ограничения)
        """
        if max_capacity is not None and max_capacity < 1:
            raise ValueError(f"max_capacity must be positive, got {max_capacity}")

        self.max_capacity = max_capacity
        self._blocks: dict[int, bytearray] = {}
        self._bytes_in_use = 0
        self._released = False

    def __repr__(self) -> str:
        state = "released" if self._released else f"{self.block_count} blocks"
        return f"Arena({state}, bytes_in_use={self._bytes_in_use})"

    # =========================================================================
    # СОСТОЯНИЕ
    # =========================================================================

    @property
    def released(self) -> bool:
        return self._released

    @property
    def bytes_in_use(self) -> int:
        return self._bytes_in_use

    @property
    def block_count(self) -> int:
        return len(self._blocks)

    def owns(self, block: bytearray) -> bool:
        """True если блок выделен этой ареной и ещё не освобождён."""
        return self._blocks.get(id(block)) is block

    # =========================================================================
    # ВЫДЕЛЕНИЕ И РОСТ
    # =========================================================================

    def allocate(self, size: int) -> bytearray:
        """
        Выделение нового zero-filled блока.

        Args:
            size: размер блока в байтах (>= 1)

        Returns:
            Новый блок, зарегистрированный в арене

        Raises:
            ValueError: Если size < 1
            AllocationFailure: Если бюджет исчерпан или аллокатор отказал
            UseAfterReleaseError: Если арена уже освобождена
        """
        self._check_alive()
        if size < 1:
            raise ValueError(f"block size must be at least 1 byte, got {size}")

        self._reserve(size)
        try:
            block = bytearray(size)
        except MemoryError as exc:
            raise AllocationFailure(f"cannot allocate {size} bytes") from exc

        self._register(block)
        return block

    def grow(self, block: bytearray, min_len: int) -> bytearray:
        """
        Рост блока до длины не меньше min_len.

        Args:
            block: блок этой арены
            min_len: требуемая минимальная длина

        Returns:
            Тот же блок (рост на месте) или новый блок (релокация).
            Вызывающий код обязан использовать возвращённый объект.

        Raises:
            AllocationFailure: Если рост невозможен
        """
        self._check_alive()
        self._check_owned(block)

        old_len = len(block)
        if min_len <= old_len:
            return block

        extra = min_len - old_len
        self._reserve(extra)
        try:
            block.extend(bytes(extra))
        except MemoryError:
            logger.debug("in-place growth %d -> %d failed, relocating", old_len, min_len)
            return self._relocate(block, min_len)

        self._bytes_in_use += extra
        return block

    def shrink(self, block: bytearray, new_len: int) -> bytearray:
        """
        Усечение блока до new_len байт (старшие байты отбрасываются).

        Raises:
            ValueError: Если new_len < 1 или больше текущей длины
        """
        self._check_alive()
        self._check_owned(block)

        if new_len < 1 or new_len > len(block):
            raise ValueError(f"cannot shrink {len(block)}-byte block to {new_len}")

        freed = len(block) - new_len
        if freed:
            del block[new_len:]
            self._bytes_in_use -= freed
        return block

    def free(self, block: bytearray) -> None:
        """Возврат одного блока арене."""
        self._check_alive()
        self._check_owned(block)

        del self._blocks[id(block)]
        self._bytes_in_use -= len(block)

    def release(self) -> None:
        """
        Освобождение всех блоков арены.

        Все значения, выделенные в арене, становятся невалидными.
        Повторный вызов ничего не делает.
        """
        if self._released:
            return

        logger.debug(
            "releasing arena: %d blocks, %d bytes", len(self._blocks), self._bytes_in_use
        )
        self._blocks.clear()
        self._bytes_in_use = 0
        self._released = True

    # =========================================================================
    # ВНУТРЕННЕЕ
    # =========================================================================

    def _relocate(self, block: bytearray, min_len: int) -> bytearray:
        self._reserve(min_len)
        try:
            new_block = bytearray(min_len)
        except MemoryError as exc:
            raise AllocationFailure(f"cannot relocate block to {min_len} bytes") from exc

        new_block[: len(block)] = block
        self._register(new_block)
        self.free(block)
        return new_block

    def _register(self, block: bytearray) -> None:
        self._blocks[id(block)] = block
        self._bytes_in_use += len(block)

    def _reserve(self, size: int) -> None:
        if self.max_capacity is None:
            return
        if self._bytes_in_use + size > self.max_capacity:
            raise AllocationFailure(
                f"arena budget exceeded: {self._bytes_in_use} + {size} > {self.max_capacity}"
            )

    def _check_alive(self) -> None:
        if self._released:
            raise UseAfterReleaseError("arena already released")

    def _check_owned(self, block: bytearray) -> None:
        if not self.owns(block):
            raise ValueError("block is not owned by this arena")

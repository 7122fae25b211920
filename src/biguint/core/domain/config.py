"""
BigUIntConfig — конфигурация создания значения

Immutable Pydantic модель с распознаваемыми опциями конструктора:
- initial_capacity: размер zero-filled буфера в байтах (default 64)
- initial_content: явная последовательность байт (little-endian), копируется
  и перекрывает initial_capacity
- max_capacity: бюджет арены в байтах (None = без ограничения)

Wire-форма конфигурации (initial_content как hex) описана JSON Schema
biguint_config.json, см. core.contracts.
"""

from typing import Any, Final, Optional

from pydantic import (
    BaseModel,
    Field,
    StrictBytes,
    StrictInt,
    field_validator,
    model_validator,
)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Размер буфера по умолчанию для нового значения (байт)
DEFAULT_INITIAL_CAPACITY: Final[int] = 64

# Разрядность байта хранилища
BITS_PER_BYTE: Final[int] = 8

# Маска младших 8 бит
BYTE_MASK: Final[int] = 0xFF

# Максимальная величина сдвига в битах (сдвиг хранится как u64)
MAX_SHIFT_BITS: Final[int] = 2**64 - 1


# =============================================================================
# CONFIG MODEL
# =============================================================================


class BigUIntConfig(BaseModel):
    """
    Конфигурация конструктора BigUInt.

    Immutable модель (frozen=True): одна конфигурация может использоваться
    для создания любого числа значений.
    """

    initial_capacity: StrictInt = Field(
        DEFAULT_INITIAL_CAPACITY, ge=1, description="Размер zero-filled буфера (байт)"
    )
    initial_content: Optional[StrictBytes] = Field(
        None, description="Начальное содержимое, little-endian (перекрывает capacity)"
    )
    max_capacity: Optional[StrictInt] = Field(
        None, ge=1, description="Бюджет арены в байтах (None = без ограничения)"
    )

    model_config = {"frozen": True}

    @field_validator("initial_content")
    @classmethod
    def validate_content_not_empty(cls, v: Optional[bytes]) -> Optional[bytes]:
        """Хранилище всегда содержит хотя бы один байт (ноль = [0x00])."""
        if v is not None and len(v) == 0:
            raise ValueError("initial_content must contain at least one byte")
        return v

    @model_validator(mode="after")
    def validate_fits_budget(self) -> "BigUIntConfig":
        """Начальный блок должен помещаться в бюджет арены."""
        if self.max_capacity is not None and self.initial_size > self.max_capacity:
            raise ValueError(
                f"initial size {self.initial_size} exceeds max_capacity {self.max_capacity}"
            )
        return self

    @property
    def initial_size(self) -> int:
        """Фактический размер первого блока хранилища."""
        if self.initial_content is not None:
            return len(self.initial_content)
        return self.initial_capacity

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "BigUIntConfig":
        """
        Создание конфигурации из wire-документа (контракт biguint_config).

        Args:
            document: dict с ключами initial_capacity / initial_content_hex /
                max_capacity; initial_content_hex записан little-endian

        Returns:
            BigUIntConfig

        Raises:
            jsonschema.ValidationError: Если документ не соответствует схеме
            pydantic.ValidationError: Если значения нарушают ограничения модели
        """
        # Локальный импорт: contracts зависит от domain, не наоборот
        from biguint.core.contracts.validators import validate_config_document

        validate_config_document(document)

        content_hex = document.get("initial_content_hex")
        return cls(
            initial_capacity=document.get("initial_capacity", DEFAULT_INITIAL_CAPACITY),
            initial_content=bytes.fromhex(content_hex) if content_hex is not None else None,
            max_capacity=document.get("max_capacity"),
        )

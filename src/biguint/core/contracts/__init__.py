"""
Contract Validation Module

Валидация JSON документов движка (конфигурация, снапшот значения).
"""

from .validators import (
    ConfigContractValidator,
    ContractValidator,
    SchemaLoader,
    SnapshotContractValidator,
    validate_config_document,
    validate_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConfigContractValidator",
    "SnapshotContractValidator",
    # Functions
    "validate_config_document",
    "validate_snapshot",
]

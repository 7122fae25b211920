"""
Tests for JSON Schema Contract Validators

Проверяет:
- Валидность самих схем
- Валидацию правильных документов
- Детекцию нарушений типов, pattern и additionalProperties
- Интеграцию с BigUIntConfig
"""

import pytest
from jsonschema import ValidationError

from biguint.core.contracts import (
    ConfigContractValidator,
    SchemaLoader,
    SnapshotContractValidator,
    validate_config_document,
    validate_snapshot,
)
from biguint.core.domain import BigUIntConfig


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_snapshot():
    """Валидный снапшот значения 0x01E9FD."""
    return {
        "schema_version": "1",
        "length": 3,
        "bytes_le_hex": "fde901",
        "hex": "01E9FD",
        "is_zero": False,
        "is_normalized": True,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты для SchemaLoader"""

    @pytest.mark.parametrize("name", ["biguint_config", "biguint_snapshot"])
    def test_schemas_load(self, name: str) -> None:
        """Все схемы загружаются и проходят meta-validation"""
        schema = SchemaLoader().load_schema(name)
        assert schema["$schema"].endswith("2020-12/schema")

    def test_schema_is_cached(self) -> None:
        """Повторная загрузка берёт схему из кэша"""
        loader = SchemaLoader()
        assert loader.load_schema("biguint_config") is loader.load_schema("biguint_config")

    def test_missing_schema(self) -> None:
        """Несуществующая схема → FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("no_such_schema")

    def test_missing_directory(self, tmp_path) -> None:
        """Несуществующий каталог → RuntimeError"""
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")


# =============================================================================
# CONFIG CONTRACT
# =============================================================================


class TestConfigContract:
    """Тесты для biguint_config"""

    @pytest.mark.parametrize(
        "document",
        [
            {},
            {"initial_capacity": 8},
            {"initial_content_hex": "FFfe"},
            {"initial_capacity": 8, "max_capacity": None},
        ],
    )
    def test_valid(self, document) -> None:
        """Валидные документы конфигурации"""
        validate_config_document(document)

    @pytest.mark.parametrize(
        "document",
        [
            {"initial_capacity": 0},
            {"initial_capacity": "64"},
            {"initial_content_hex": "abc"},
            {"initial_content_hex": ""},
            {"initial_content_hex": "zz"},
            {"preheat": 64},
        ],
    )
    def test_invalid(self, document) -> None:
        """Невалидные документы конфигурации"""
        with pytest.raises(ValidationError):
            validate_config_document(document)

    def test_iter_errors_reports_all(self) -> None:
        """iter_errors возвращает все нарушения"""
        errors = list(
            ConfigContractValidator().iter_errors(
                {"initial_capacity": 0, "initial_content_hex": "x"}
            )
        )
        assert len(errors) == 2

    def test_config_from_document_rejects_invalid(self) -> None:
        """from_document проверяет документ по схеме"""
        with pytest.raises(ValidationError):
            BigUIntConfig.from_document({"initial_capacity": -1})

    def test_config_from_document(self) -> None:
        """from_document строит конфигурацию"""
        config = BigUIntConfig.from_document({"initial_capacity": 16})
        assert config.initial_capacity == 16
        assert config.initial_content is None


# =============================================================================
# SNAPSHOT CONTRACT
# =============================================================================


class TestSnapshotContract:
    """Тесты для biguint_snapshot"""

    def test_valid(self, valid_snapshot) -> None:
        """Валидный снапшот"""
        validate_snapshot(valid_snapshot)
        assert SnapshotContractValidator().is_valid(valid_snapshot)

    def test_missing_required(self, valid_snapshot) -> None:
        """Отсутствие обязательного поля"""
        del valid_snapshot["hex"]
        with pytest.raises(ValidationError, match="'hex' is a required property"):
            validate_snapshot(valid_snapshot)

    def test_lowercase_display_hex_rejected(self, valid_snapshot) -> None:
        """hex для отображения только в верхнем регистре"""
        valid_snapshot["hex"] = "01e9fd"
        assert not SnapshotContractValidator().is_valid(valid_snapshot)

    def test_zero_length_rejected(self, valid_snapshot) -> None:
        """Длина хранилища не может быть нулевой"""
        valid_snapshot["length"] = 0
        assert not SnapshotContractValidator().is_valid(valid_snapshot)

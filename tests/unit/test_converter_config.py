"""
Tests for ConverterConfig and converter_config JSON Schema contract

Покрывает:
- Pydantic модель: значения по умолчанию, валидация алфавитов, immutability
- JSON Schema: валидность самой схемы, допустимые и недопустимые данные
- load_converter_config: schema → model
- RadixConverter.from_config
"""

import json

import pytest
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from src.core.contracts import (
    ConverterConfigValidator,
    SchemaLoader,
    load_converter_config,
    validate_converter_config,
)
from src.core.domain import DECIMAL_SYMBOLS, AlphabetKind, ConverterConfig
from src.radix import RadixConverter

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_config_data():
    """Валидная конфигурация: десятичная → Ook-токены."""
    return {
        "input_system": 10,
        "output_system": ["Ook.", "Ook!", "Ook?"],
    }


# =============================================================================
# PYDANTIC MODEL
# =============================================================================


class TestConverterConfigModel:
    """Тесты Pydantic модели ConverterConfig"""

    def test_defaults_are_decimal(self) -> None:
        """По умолчанию обе системы десятичные"""
        config = ConverterConfig()
        assert config.input_system == DECIMAL_SYMBOLS
        assert config.output_system == DECIMAL_SYMBOLS

    def test_valid_config(self, valid_config_data) -> None:
        """Создание из валидных данных"""
        config = ConverterConfig(**valid_config_data)
        assert config.input_system == 10
        assert config.build_input_system().radix == 10
        assert config.build_output_system().alphabet_kind == AlphabetKind.LIST

    @pytest.mark.parametrize(
        "field, value",
        [
            ("input_system", 1),
            ("input_system", 37),
            ("input_system", "aa"),
            ("output_system", "x"),
            ("output_system", ["Ook.", "Ook."]),
            ("output_system", []),
        ],
    )
    def test_invalid_alphabet_raises(self, field, value) -> None:
        """Недопустимый алфавит → ValidationError"""
        with pytest.raises(ValidationError):
            ConverterConfig(**{field: value})

    def test_bool_radix_rejected(self) -> None:
        """bool не принимается как radix (strict)"""
        with pytest.raises(ValidationError):
            ConverterConfig(input_system=True)

    def test_frozen(self) -> None:
        """Модель неизменяема"""
        config = ConverterConfig()
        with pytest.raises(ValidationError):
            config.input_system = 2

    def test_json_roundtrip(self, valid_config_data) -> None:
        """JSON сериализация/десериализация"""
        config = ConverterConfig(**valid_config_data)
        restored = ConverterConfig.model_validate_json(config.model_dump_json())
        assert restored == config


# =============================================================================
# JSON SCHEMA CONTRACT
# =============================================================================


class TestConverterConfigSchema:
    """Тесты JSON Schema контракта converter_config"""

    def test_schema_is_valid(self) -> None:
        """Схема проходит meta-validation"""
        schema = SchemaLoader().load_schema("converter_config")
        assert schema["title"] == "converter_config"

    def test_schema_cached(self) -> None:
        """Повторная загрузка берётся из кэша"""
        loader = SchemaLoader()
        assert loader.load_schema("converter_config") is loader.load_schema("converter_config")

    def test_missing_schema_raises(self) -> None:
        """Отсутствующая схема → FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("no_such_schema")

    def test_valid_data(self, valid_config_data) -> None:
        """Валидные данные проходят"""
        validate_converter_config(valid_config_data)
        assert ConverterConfigValidator().is_valid({})

    @pytest.mark.parametrize(
        "data",
        [
            {"input_system": 1},
            {"input_system": 37},
            {"input_system": "0"},
            {"output_system": ["only"]},
            {"output_system": ["a", "a"]},
            {"output_system": [1, 2]},
            {"output_system": True},
            {"unknown_field": 10},
        ],
    )
    def test_invalid_data(self, data) -> None:
        """Нарушения схемы → jsonschema.ValidationError"""
        with pytest.raises(SchemaValidationError):
            validate_converter_config(data)

    def test_iter_errors(self) -> None:
        """Все ошибки перечисляются"""
        errors = list(ConverterConfigValidator().iter_errors({"input_system": 1, "output_system": 0}))
        assert len(errors) == 2


# =============================================================================
# LOADING
# =============================================================================


class TestLoadConverterConfig:
    """Тесты load_converter_config и RadixConverter.from_config"""

    def test_load_from_json(self) -> None:
        """Загрузка из JSON-строки"""
        data = json.loads('{"input_system": 2, "output_system": "ABCDEF"}')
        config = load_converter_config(data)
        converter = RadixConverter.from_config(config)
        assert converter.convert("00000000") == "A"
        assert converter.convert("1111") == "CD"

    def test_schema_violation_raises_first(self) -> None:
        """Нарушение схемы обнаруживается до построения модели"""
        with pytest.raises(SchemaValidationError):
            load_converter_config({"input_system": 1})

    def test_duplicate_characters_caught_by_model(self) -> None:
        """Повторы символов в строке ловит модель (схема их не видит)"""
        with pytest.raises(ValidationError):
            load_converter_config({"input_system": "0120"})

    def test_from_config_defaults(self) -> None:
        """from_config с конфигурацией по умолчанию"""
        converter = RadixConverter.from_config(ConverterConfig())
        assert converter.input_symbols() == DECIMAL_SYMBOLS
        assert converter.convert("007") == "7"

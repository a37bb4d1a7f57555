"""
Contract Validation Module

Модуль для валидации JSON контрактов конфигурации radix converter.
"""

from .validators import (
    ContractValidator,
    ConverterConfigValidator,
    SchemaLoader,
    load_converter_config,
    validate_converter_config,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConverterConfigValidator",
    # Functions
    "validate_converter_config",
    "load_converter_config",
]

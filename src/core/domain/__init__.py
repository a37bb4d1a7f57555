"""
Domain models and value objects.

Contains symbol systems (numeral alphabets) and converter configuration.
"""

from src.core.domain.converter_config import ConverterConfig
from src.core.domain.symbol_system import (
    CANONICAL_DIGITS,
    DECIMAL_SYMBOLS,
    MAX_CANONICAL_RADIX,
    MAX_RADIX,
    MIN_RADIX,
    AlphabetKind,
    ConfigError,
    RadixConversionError,
    StringSymbolSystem,
    SymbolSpec,
    SymbolSystem,
    TokenSymbolSystem,
    canonical_symbols,
)

__all__ = [
    # Symbol system — Constants
    "CANONICAL_DIGITS",
    "DECIMAL_SYMBOLS",
    "MAX_CANONICAL_RADIX",
    "MAX_RADIX",
    "MIN_RADIX",
    # Symbol system — Exceptions
    "RadixConversionError",
    "ConfigError",
    # Symbol system — Types
    "AlphabetKind",
    "SymbolSpec",
    "SymbolSystem",
    "StringSymbolSystem",
    "TokenSymbolSystem",
    # Symbol system — Functions
    "canonical_symbols",
    # Converter config
    "ConverterConfig",
]

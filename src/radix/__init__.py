"""Radix — конвертер целых чисел между произвольными системами счисления.

- SymbolSystem: алфавит системы (канонический radix 2..36, строка или список токенов)
- RadixConverter: parse → limb-представление → render в выходной системе
"""

from src.core.domain.symbol_system import (
    DECIMAL_SYMBOLS,
    MAX_RADIX,
    MIN_RADIX,
    AlphabetKind,
    ConfigError,
    RadixConversionError,
    SymbolSystem,
)

from .converter import RadixConverter, UnknownDigitError, convert

__all__ = [
    "RadixConverter",
    "convert",
    "SymbolSystem",
    "AlphabetKind",
    "RadixConversionError",
    "ConfigError",
    "UnknownDigitError",
    "DECIMAL_SYMBOLS",
    "MAX_RADIX",
    "MIN_RADIX",
]

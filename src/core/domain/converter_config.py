"""
ConverterConfig — Конфигурация конвертера систем счисления

Immutable Pydantic модель: спецификации входной и выходной систем счисления.
Соответствует схеме contracts/schema/converter_config.json.

Каждое поле принимает:
- int radix 2..36 (канонический алфавит)
- str (строковый алфавит)
- list[str] (алфавит из токенов)
"""

from pydantic import BaseModel, Field, field_validator

from src.core.domain.symbol_system import DECIMAL_SYMBOLS, SymbolSystem


class ConverterConfig(BaseModel):
    """
    Конфигурация RadixConverter.

    Immutable модель (frozen=True). Алфавиты проверяются при создании:
    недопустимый алфавит приводит к pydantic ValidationError.
    """

    input_system: int | str | list[str] = Field(
        DECIMAL_SYMBOLS, description="Спецификация входной системы счисления"
    )
    output_system: int | str | list[str] = Field(
        DECIMAL_SYMBOLS, description="Спецификация выходной системы счисления"
    )

    model_config = {"frozen": True, "strict": True}

    @field_validator("input_system", "output_system")
    @classmethod
    def validate_symbol_spec(cls, v: int | str | list[str]) -> int | str | list[str]:
        """Проверка, что спецификация задаёт допустимый алфавит (ConfigError → ValueError)"""
        SymbolSystem.configure(v)
        return v

    def build_input_system(self) -> SymbolSystem:
        """Входная система счисления."""
        return SymbolSystem.configure(self.input_system)

    def build_output_system(self) -> SymbolSystem:
        """Выходная система счисления."""
        return SymbolSystem.configure(self.output_system)

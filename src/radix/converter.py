"""RadixConverter — преобразование последовательности цифр между системами счисления.

Целое неотрицательное число произвольной величины переводится из входной
системы счисления в выходную через внутреннее limb-представление:

1. Parse: value = value * input_radix + digit для каждой цифры (старшая первой)
2. Render: повторное деление value на output_radix, остатки → символы
3. Shape: str для строковой выходной системы, list для списочной

Сложность O(n·m), n — длина входа, m — длина выхода.
"""

from collections.abc import Hashable, Iterable

from src.core.domain.converter_config import ConverterConfig
from src.core.domain.symbol_system import (
    DECIMAL_SYMBOLS,
    RadixConversionError,
    SymbolSpec,
    SymbolSystem,
)
from src.core.math.limbs import LimbArray


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownDigitError(RadixConversionError, ValueError):
    """Входная цифра отсутствует в алфавите входной системы.

    Преобразование прерывается целиком, частичный результат не возвращается.
    """

    def __init__(self, digit: object, position: int):
        self.digit = digit
        self.position = position
        super().__init__(f"unknown digit {digit!r} at position {position}")


# =============================================================================
# CONVERTER
# =============================================================================


class RadixConverter:
    """Конвертер между двумя системами счисления.

    Владеет ровно одной входной и одной выходной SymbolSystem; каждую можно
    заменить независимо. Другого состояния между вызовами convert() нет.

    Экземпляр не потокобезопасен: конкурентная переконфигурация и convert()
    на одном экземпляре должны синхронизироваться вызывающей стороной.

    Examples:
        >>> RadixConverter(10, 16).convert("255")
        'ff'
        >>> RadixConverter("01", ["zero", "one"]).convert("101")
        ['one', 'zero', 'one']
    """

    def __init__(
        self,
        input_system: SymbolSpec = DECIMAL_SYMBOLS,
        output_system: SymbolSpec = DECIMAL_SYMBOLS,
    ):
        """
        Args:
            input_system: спецификация входной системы (default: десятичная)
            output_system: спецификация выходной системы (default: десятичная)

        Raises:
            ConfigError: если любая из спецификаций недопустима
        """
        self._input_system = SymbolSystem.configure(input_system)
        self._output_system = SymbolSystem.configure(output_system)

    @classmethod
    def from_config(cls, config: ConverterConfig) -> "RadixConverter":
        """Построение конвертера из ConverterConfig."""
        return cls(config.build_input_system(), config.build_output_system())

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def set_input_system(self, spec: SymbolSpec) -> "RadixConverter":
        """Замена входной системы.

        Новая система строится полностью до присваивания: при ConfigError
        текущая конфигурация не меняется.

        Returns:
            self (для цепочки вызовов)
        """
        self._input_system = SymbolSystem.configure(spec)
        return self

    def set_output_system(self, spec: SymbolSpec) -> "RadixConverter":
        """Замена выходной системы (те же гарантии, что у set_input_system)."""
        self._output_system = SymbolSystem.configure(spec)
        return self

    @property
    def input_system(self) -> SymbolSystem:
        return self._input_system

    @property
    def output_system(self) -> SymbolSystem:
        return self._output_system

    def input_symbols(self) -> str | list:
        """Алфавит входной системы."""
        return self._input_system.symbols

    def output_symbols(self) -> str | list:
        """Алфавит выходной системы."""
        return self._output_system.symbols

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def convert(self, input_digits: Iterable[Hashable]) -> str | list:
        """Преобразование последовательности цифр (старшая первой).

        Args:
            input_digits: str или list/tuple символов входной системы

        Returns:
            Последовательность цифр выходной системы без ведущих нулей
            (ноль → ровно один нулевой символ); str или list в зависимости
            от вида алфавита выходной системы

        Raises:
            UnknownDigitError: если символ отсутствует во входном алфавите
        """
        value = self._parse(input_digits)
        return self._render(value)

    def _parse(self, input_digits: Iterable[Hashable]) -> LimbArray:
        system = self._input_system
        radix = system.radix

        value = LimbArray()
        for position, symbol in enumerate(input_digits):
            digit_value = system.index_of(symbol)
            if digit_value is None:
                raise UnknownDigitError(symbol, position)
            value.accumulate_digit(radix, digit_value)

        return value

    def _render(self, value: LimbArray) -> str | list:
        system = self._output_system
        radix = system.radix

        # do-while: ноль даёт одну нулевую цифру
        digits = []
        while True:
            remainder = value.divmod_scalar(radix)
            digits.append(system.symbol_at(remainder))
            if value.is_zero():
                break

        digits.reverse()
        return system.shape_digits(digits)

    def __repr__(self) -> str:
        return (
            f"RadixConverter(input_system={self._input_system!r}, "
            f"output_system={self._output_system!r})"
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def convert(
    input_digits: Iterable[Hashable],
    input_system: SymbolSpec,
    output_system: SymbolSpec,
) -> str | list:
    """Однократное преобразование без сохранения конвертера.

    Examples:
        >>> convert("00000000", 2, "ABCDEF")
        'A'
    """
    return RadixConverter(input_system, output_system).convert(input_digits)

"""
SymbolSystem — Система счисления как упорядоченный алфавит символов

Система счисления задаётся упорядоченным списком попарно различных символов:
значение цифры равно позиции символа в алфавите, radix равен длине алфавита.

Допустимые способы задания (SymbolSpec):
- int 2..36 → канонический алфавит "0123456789abcdefghijklmnopqrstuvwxyz"[:radix]
- str → каждый символ строки является цифрой (строковая система)
- list/tuple → произвольные hashable токены (списочная система)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. MIN_RADIX <= radix <= MAX_RADIX
2. Все символы попарно различны
3. Система неизменяема после создания; переконфигурация = новая система
4. Форма выходной последовательности (str или list) определяется видом алфавита
"""

from abc import ABC, abstractmethod
from collections.abc import Hashable, Sequence
from enum import Enum
from typing import Final, Union

# =============================================================================
# ПАРАМЕТРЫ АЛФАВИТОВ
# =============================================================================

# Минимальное основание системы счисления
MIN_RADIX: Final[int] = 2

# Максимальное основание (размер алфавита)
MAX_RADIX: Final[int] = 0x8000

# Канонический алфавит для числового задания radix
CANONICAL_DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

# Максимальное основание, выводимое из канонического алфавита
MAX_CANONICAL_RADIX: Final[int] = len(CANONICAL_DIGITS)

# Десятичный алфавит (система по умолчанию)
DECIMAL_SYMBOLS: Final[str] = CANONICAL_DIGITS[:10]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RadixConversionError(Exception):
    """Базовое исключение конвертера систем счисления."""

    pass


class ConfigError(RadixConversionError, ValueError):
    """
    Недопустимая конфигурация системы счисления.

    Возникает при:
    - radix < MIN_RADIX (в том числе пустой алфавит или один символ)
    - radix > MAX_RADIX
    - повторяющихся символах
    - числовом radix вне [2, 36]
    - unhashable токенах или неподдерживаемом типе спецификации
    """

    pass


# =============================================================================
# ENUMS
# =============================================================================


class AlphabetKind(str, Enum):
    """Вид алфавита: определяет форму выходной последовательности цифр"""

    STRING = "string"
    LIST = "list"


# =============================================================================
# SYMBOL SYSTEM
# =============================================================================


class SymbolSystem(ABC):
    """
    Система счисления: упорядоченный алфавит без повторов.

    Предоставляет прямой (value → symbol) и обратный (symbol → value) поиск.
    Конкретные варианты: StringSymbolSystem и TokenSymbolSystem,
    выбираются фабрикой SymbolSystem.configure().
    """

    __slots__ = ("_symbols", "_index")

    def __init__(self, symbols: Sequence[Hashable]) -> None:
        radix = len(symbols)
        if radix < MIN_RADIX:
            raise ConfigError(
                f"alphabet must contain at least {MIN_RADIX} symbols, got {radix}"
            )
        if radix > MAX_RADIX:
            raise ConfigError(
                f"alphabet must contain at most {MAX_RADIX} symbols, got {radix}"
            )

        # Lookup строится локально; поля присваиваются только после валидации
        index: dict[Hashable, int] = {}
        for position, symbol in enumerate(symbols):
            try:
                first = index.setdefault(symbol, position)
            except TypeError:
                raise ConfigError(
                    f"symbol {symbol!r} at position {position} is not hashable"
                ) from None
            if first != position:
                raise ConfigError(
                    f"duplicate symbol {symbol!r} at positions {first} and {position}"
                )

        self._symbols = symbols
        self._index = index

    # -------------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------------

    @classmethod
    def configure(cls, spec: "SymbolSpec") -> "SymbolSystem":
        """
        Построение системы счисления из спецификации.

        Args:
            spec: int radix 2..36, строка символов, list/tuple токенов
                или уже построенная SymbolSystem

        Returns:
            Новая (или переданная) неизменяемая SymbolSystem

        Raises:
            ConfigError: Если спецификация не задаёт допустимый алфавит

        Examples:
            >>> SymbolSystem.configure(16).symbols
            '0123456789abcdef'
            >>> SymbolSystem.configure(["Ook.", "Ook!", "Ook?"]).radix
            3
        """
        if isinstance(spec, SymbolSystem):
            return spec

        # bool является подклассом int, но radix=True не имеет смысла
        if isinstance(spec, bool):
            raise ConfigError(f"radix must be an integer, got {spec!r}")

        if isinstance(spec, int):
            return StringSymbolSystem(canonical_symbols(spec))

        if isinstance(spec, str):
            return StringSymbolSystem(spec)

        if isinstance(spec, (list, tuple)):
            return TokenSymbolSystem(spec)

        raise ConfigError(
            f"unsupported symbol spec type {type(spec).__name__}: "
            "expected int radix, str or list of symbols"
        )

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    @property
    def radix(self) -> int:
        """Основание системы (длина алфавита)."""
        return len(self._symbols)

    def symbol_at(self, index: int) -> Hashable:
        """
        Символ для значения цифры index.

        Raises:
            IndexError: Если index вне [0, radix)
        """
        if not 0 <= index < len(self._symbols):
            raise IndexError(f"digit value {index} out of range for radix {self.radix}")
        return self._symbols[index]

    def index_of(self, symbol: object) -> int | None:
        """
        Значение цифры для символа.

        Returns:
            Позиция символа в алфавите или None, если символ не из алфавита
        """
        try:
            return self._index.get(symbol)
        except TypeError:
            # unhashable значение не может быть символом алфавита
            return None

    @property
    def zero_symbol(self) -> Hashable:
        """Символ нулевой цифры."""
        return self._symbols[0]

    # -------------------------------------------------------------------------
    # Shape
    # -------------------------------------------------------------------------

    @property
    @abstractmethod
    def alphabet_kind(self) -> AlphabetKind:
        """Вид алфавита (STRING или LIST)."""

    @property
    @abstractmethod
    def symbols(self) -> str | list:
        """Алфавит в исходной форме (str для строковых систем, list для списочных)."""

    @abstractmethod
    def shape_digits(self, digits: list) -> str | list:
        """Упаковка последовательности символов в форму, заданную алфавитом."""

    # -------------------------------------------------------------------------
    # Dunder
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return self.index_of(symbol) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymbolSystem):
            return NotImplemented
        return (
            self.alphabet_kind == other.alphabet_kind
            and tuple(self._symbols) == tuple(other._symbols)
        )

    def __hash__(self) -> int:
        return hash((self.alphabet_kind, tuple(self._symbols)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.symbols!r})"


class StringSymbolSystem(SymbolSystem):
    """Система, алфавит которой задан строкой: символ = один character."""

    __slots__ = ()

    def __init__(self, symbols: str) -> None:
        super().__init__(symbols)

    @property
    def alphabet_kind(self) -> AlphabetKind:
        return AlphabetKind.STRING

    @property
    def symbols(self) -> str:
        return self._symbols

    def shape_digits(self, digits: list) -> str:
        return "".join(digits)


class TokenSymbolSystem(SymbolSystem):
    """Система, алфавит которой задан списком произвольных hashable токенов."""

    __slots__ = ()

    def __init__(self, symbols: Sequence[Hashable]) -> None:
        # Копия: внешний список может измениться после конфигурации
        super().__init__(tuple(symbols))

    @property
    def alphabet_kind(self) -> AlphabetKind:
        return AlphabetKind.LIST

    @property
    def symbols(self) -> list:
        return list(self._symbols)

    def shape_digits(self, digits: list) -> list:
        return digits


SymbolSpec = Union[int, str, Sequence[Hashable], SymbolSystem]


# =============================================================================
# CANONICAL ALPHABETS
# =============================================================================


def canonical_symbols(radix: int) -> str:
    """
    Канонический алфавит "0"-"9", "a"-"z" для заданного radix.

    Args:
        radix: Основание 2..36

    Returns:
        Префикс CANONICAL_DIGITS длины radix

    Raises:
        ConfigError: Если radix вне [MIN_RADIX, MAX_CANONICAL_RADIX]

    Examples:
        >>> canonical_symbols(2)
        '01'
        >>> canonical_symbols(16)
        '0123456789abcdef'
    """
    if not MIN_RADIX <= radix <= MAX_CANONICAL_RADIX:
        raise ConfigError(
            f"radix must be in [{MIN_RADIX}, {MAX_CANONICAL_RADIX}] "
            f"for canonical alphabet, got {radix}"
        )
    return CANONICAL_DIGITS[:radix]

"""
LimbArray — внутреннее беззнаковое целое произвольной точности

Целое хранится как список 16-битных limbs, младший limb первым.
Поддерживаются ровно две операции, нужные конвертеру систем счисления:
- accumulate_digit: value = value * radix + digit (разбор входных цифр)
- divmod_scalar: value //= radix, возвращает остаток (рендеринг выходных цифр)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Старший limb (последний) ненулевой, кроме нуля, который хранится как [0]
2. Каждый limb в диапазоне [0, LIMB_BASE)
3. Экземпляр создаётся на одно преобразование и не разделяется между вызовами
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Ширина limb в битах
LIMB_BITS: Final[int] = 16

# Основание limb-представления (2^16)
LIMB_BASE: Final[int] = 1 << LIMB_BITS

# Маска младших LIMB_BITS бит
LIMB_MASK: Final[int] = LIMB_BASE - 1


# =============================================================================
# LIMB ARRAY
# =============================================================================


class LimbArray:
    """
    Неотрицательное целое как последовательность limbs (младший первым).

    Новый экземпляр представляет ноль: [0].
    """

    __slots__ = ("_limbs",)

    def __init__(self) -> None:
        self._limbs: list[int] = [0]

    def accumulate_digit(self, radix: int, digit_value: int) -> None:
        """
        Сдвиг на один разряд по основанию radix и добавление цифры.

        value = value * radix + digit_value, выполняется по всем limbs
        с переносом; при переполнении старшего limb добавляются новые.

        Args:
            radix: Основание входной системы (>= 2)
            digit_value: Значение цифры, 0 <= digit_value < radix

        Raises:
            ValueError: Если radix < 2 или digit_value вне [0, radix)
        """
        if radix < 2:
            raise ValueError(f"radix must be >= 2, got {radix}")
        if not 0 <= digit_value < radix:
            raise ValueError(f"digit_value must be in [0, {radix}), got {digit_value}")

        limbs = self._limbs
        carry = digit_value
        for i, limb in enumerate(limbs):
            carry += limb * radix
            limbs[i] = carry & LIMB_MASK
            carry >>= LIMB_BITS

        while carry:
            limbs.append(carry & LIMB_MASK)
            carry >>= LIMB_BITS

    def divmod_scalar(self, divisor: int) -> int:
        """
        Деление на месте на скаляр (длинное деление от старшего limb к младшему).

        Остаток каждого limb переносится в делимое следующего младшего limb.
        После деления старшие нулевые limbs отбрасываются.

        Args:
            divisor: Делитель (основание выходной системы, >= 2)

        Returns:
            Остаток от деления, 0 <= remainder < divisor

        Raises:
            ValueError: Если divisor < 2

        Examples:
            >>> value = LimbArray.from_int(1234)
            >>> value.divmod_scalar(10)
            4
            >>> int(value)
            123
        """
        if divisor < 2:
            raise ValueError(f"divisor must be >= 2, got {divisor}")

        limbs = self._limbs
        remainder = 0
        for i in range(len(limbs) - 1, -1, -1):
            remainder = (remainder << LIMB_BITS) | limbs[i]
            limbs[i], remainder = divmod(remainder, divisor)

        self._normalize()
        return remainder

    def is_zero(self) -> bool:
        """True если значение равно нулю."""
        return len(self._limbs) == 1 and self._limbs[0] == 0

    @property
    def limbs(self) -> tuple[int, ...]:
        """Копия limbs (младший первым), только для диагностики."""
        return tuple(self._limbs)

    def _normalize(self) -> None:
        # Ноль остаётся одним limb [0]
        limbs = self._limbs
        while len(limbs) > 1 and limbs[-1] == 0:
            limbs.pop()

    @classmethod
    def from_int(cls, value: int) -> "LimbArray":
        """
        Построение из Python int (для тестов и диагностики).

        Raises:
            ValueError: Если value < 0
        """
        if value < 0:
            raise ValueError(f"value must be non-negative, got {value}")

        result = cls()
        if value:
            limbs = []
            while value:
                limbs.append(value & LIMB_MASK)
                value >>= LIMB_BITS
            result._limbs = limbs
        return result

    def __int__(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = (value << LIMB_BITS) | limb
        return value

    def __len__(self) -> int:
        return len(self._limbs)

    def __repr__(self) -> str:
        return f"LimbArray({self._limbs!r})"

"""
Rounding: Режимы округления и изменение scale

Единственное место, где fixed-point значение может потерять цифры:
уменьшение scale. Увеличение scale всегда точное (домножение на 10**k).

Режимы повторяют семантику java.math.RoundingMode и сохраняют его
целочисленные коды (legacy_code) для обмена с внешними системами.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Если отбрасываемые цифры нулевые, результат одинаков для всех режимов
2. UNNECESSARY никогда не округляет: при потере цифр RoundingNecessaryError
3. Округление симметрично относительно знака для UP/DOWN/HALF_*
"""

from enum import Enum
from typing import Final

from fixdec.core.exceptions import RoundingNecessaryError
from fixdec.core.math.scaling import pow10

# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """Режим округления при уменьшении scale"""

    UP = "up"  # от нуля
    DOWN = "down"  # к нулю
    CEILING = "ceiling"  # к +inf
    FLOOR = "floor"  # к -inf
    HALF_UP = "half_up"  # к ближайшему, середина от нуля
    HALF_DOWN = "half_down"  # к ближайшему, середина к нулю
    HALF_EVEN = "half_even"  # к ближайшему, середина к чётному
    UNNECESSARY = "unnecessary"  # округление запрещено

    @property
    def legacy_code(self) -> int:
        """Целочисленный код режима (порядок java.math.RoundingMode)"""
        return _LEGACY_CODES[self]

    @classmethod
    def from_legacy_code(cls, code: int) -> "RoundingMode":
        """
        Поиск режима по целочисленному коду.

        Raises:
            ValueError: Если код неизвестен или передан bool
        """
        if isinstance(code, bool):
            raise ValueError(f"Unknown rounding mode code: {code!r}")
        for mode, mode_code in _LEGACY_CODES.items():
            if mode_code == code:
                return mode
        raise ValueError(f"Unknown rounding mode code: {code}")


_LEGACY_CODES: Final[dict[RoundingMode, int]] = {
    RoundingMode.UP: 0,
    RoundingMode.DOWN: 1,
    RoundingMode.CEILING: 2,
    RoundingMode.FLOOR: 3,
    RoundingMode.HALF_UP: 4,
    RoundingMode.HALF_DOWN: 5,
    RoundingMode.HALF_EVEN: 6,
    RoundingMode.UNNECESSARY: 7,
}

DEFAULT_ROUNDING: Final[RoundingMode] = RoundingMode.HALF_UP


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def _should_increment(
    mode: RoundingMode,
    negative: bool,
    quotient: int,
    remainder: int,
    divisor: int,
) -> bool:
    # Сравнение отброшенной части с половиной делителя: 2r vs d
    half_cmp = (2 * remainder > divisor) - (2 * remainder < divisor)

    if mode is RoundingMode.UP:
        return True
    if mode is RoundingMode.DOWN:
        return False
    if mode is RoundingMode.CEILING:
        return not negative
    if mode is RoundingMode.FLOOR:
        return negative
    if mode is RoundingMode.HALF_UP:
        return half_cmp >= 0
    if mode is RoundingMode.HALF_DOWN:
        return half_cmp > 0
    if mode is RoundingMode.HALF_EVEN:
        return half_cmp > 0 or (half_cmp == 0 and quotient % 2 == 1)
    raise ValueError(f"Unsupported rounding mode: {mode!r}")


def drop_digits(significand: int, count: int, mode: RoundingMode = DEFAULT_ROUNDING) -> int:
    """
    Отбрасывание count младших десятичных цифр significand с округлением.

    Округление выполняется по модулю, затем знак восстанавливается,
    поэтому CEILING/FLOOR учитывают знак явно.

    Args:
        significand: Исходный significand
        count: Количество отбрасываемых цифр (>= 0)
        mode: Режим округления

    Returns:
        Округлённый significand (scale уменьшен на count)

    Raises:
        RoundingNecessaryError: Режим UNNECESSARY и отбрасываемые цифры ненулевые
        ValueError: Если count < 0

    Examples:
        >>> drop_digits(12345, 2, RoundingMode.HALF_UP)
        123
        >>> drop_digits(-125, 1, RoundingMode.HALF_EVEN)
        -12
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count == 0:
        return significand

    divisor = pow10(count)
    negative = significand < 0
    quotient, remainder = divmod(abs(significand), divisor)

    if remainder == 0:
        return -quotient if negative else quotient

    if mode is RoundingMode.UNNECESSARY:
        raise RoundingNecessaryError(
            f"Rounding necessary: dropping {count} digit(s) loses non-zero digits"
        )

    if _should_increment(mode, negative, quotient, remainder, divisor):
        quotient += 1

    return -quotient if negative else quotient


def rescale(
    significand: int,
    from_scale: int,
    to_scale: int,
    mode: RoundingMode = DEFAULT_ROUNDING,
) -> int:
    """
    Пересчёт significand при переходе от from_scale к to_scale.

    Увеличение scale: точное домножение на 10**diff.
    Уменьшение scale: drop_digits с режимом mode.

    Raises:
        ValueError: Если to_scale < 0
        RoundingNecessaryError: См. drop_digits
    """
    if to_scale < 0:
        raise ValueError(f"Scale must be non-negative, got {to_scale}")
    if to_scale >= from_scale:
        return significand * pow10(to_scale - from_scale)
    return drop_digits(significand, from_scale - to_scale, mode)

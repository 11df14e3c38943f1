"""
Scaling: Целочисленные примитивы для fixed-point представления

Fixed-point число хранится как пара (significand, scale), значение
которой равно significand / 10**scale. Модуль содержит операции над
этой парой, не зависящие от модели DecimalValue:
- Степени десяти с кэшем
- Выравнивание двух пар к общему scale
- Подсчёт десятичных цифр
- Разбор десятичного литерала [-]?digits[.digits]
- Преобразование длинных строк цифр в int и обратно

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции точные: только целочисленная арифметика, без float
2. scale никогда не бывает отрицательным
3. Длина операндов не ограничена (лимит CPython на int <-> str обходится
   разбиением строки на части)
"""

import re
from typing import Final

from fixdec.core.exceptions import FormatError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Степени десяти 10**0 .. 10**POW10_CACHE_MAX хранятся в таблице
POW10_CACHE_MAX: Final[int] = 100

# Максимальная длина строки цифр, которая конвертируется одним вызовом int()/str().
# Ниже минимального допустимого значения sys.set_int_max_str_digits (640).
STR_DIGITS_CHUNK: Final[int] = 600

DECIMAL_POINT: Final[str] = "."
MINUS_SIGN: Final[str] = "-"

_POW10_TABLE: Final[tuple[int, ...]] = tuple(10**i for i in range(POW10_CACHE_MAX + 1))

_ALLOWED_CHARS: Final[frozenset[str]] = frozenset("-0123456789.")
_LITERAL_RE: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")


# =============================================================================
# СТЕПЕНИ ДЕСЯТИ
# =============================================================================


def pow10(n: int) -> int:
    """
    10 в степени n.

    Args:
        n: Неотрицательный показатель

    Returns:
        10**n (из таблицы для n <= POW10_CACHE_MAX)

    Raises:
        ValueError: Если n < 0
    """
    if n < 0:
        raise ValueError(f"Negative power of ten: {n}")
    if n <= POW10_CACHE_MAX:
        return _POW10_TABLE[n]
    return 10**n


# =============================================================================
# ВЫРАВНИВАНИЕ SCALE
# =============================================================================


def align_scales(
    significand_a: int,
    scale_a: int,
    significand_b: int,
    scale_b: int,
) -> tuple[int, int, int]:
    """
    Приведение двух fixed-point пар к общему (большему) scale.

    Significand операнда с меньшим scale домножается на 10**diff,
    значения чисел не меняются.

    Args:
        significand_a: Significand первого операнда
        scale_a: Scale первого операнда
        significand_b: Significand второго операнда
        scale_b: Scale второго операнда

    Returns:
        (aligned_a, aligned_b, common_scale)

    Examples:
        >>> align_scales(15, 1, 2, 3)  # 1.5 и 0.002
        (1500, 2, 3)
    """
    if scale_a == scale_b:
        return significand_a, significand_b, scale_a
    if scale_a > scale_b:
        return significand_a, significand_b * pow10(scale_a - scale_b), scale_a
    return significand_a * pow10(scale_b - scale_a), significand_b, scale_b


def digit_count(value: int) -> int:
    """
    Количество десятичных цифр в abs(value). Для нуля возвращает 1.

    Examples:
        >>> digit_count(0)
        1
        >>> digit_count(-12345)
        5
    """
    magnitude = abs(value)
    if magnitude == 0:
        return 1
    # bit_length даёт оценку снизу, уточняем сравнением со степенью десяти
    estimate = max(1, (magnitude.bit_length() - 1) * 30103 // 100000 + 1)
    while magnitude >= pow10(estimate):
        estimate += 1
    while estimate > 1 and magnitude < pow10(estimate - 1):
        estimate -= 1
    return estimate


# =============================================================================
# ДЛИННЫЕ СТРОКИ ЦИФР
# =============================================================================


def digits_to_int(digits: str) -> int:
    """
    Преобразование строки ASCII-цифр (без знака) в int.

    Длинные строки разбиваются пополам рекурсивно, поэтому лимит
    CPython на длину int(str) не применяется.
    """
    if len(digits) <= STR_DIGITS_CHUNK:
        return int(digits)
    low_len = len(digits) // 2
    high = digits_to_int(digits[:-low_len])
    low = digits_to_int(digits[-low_len:])
    return high * pow10(low_len) + low


def int_to_digits(value: int) -> str:
    """
    Десятичные цифры abs(value) без знака и без ведущих нулей.
    """
    magnitude = abs(value)
    if magnitude < pow10(STR_DIGITS_CHUNK):
        return str(magnitude)
    low_len = digit_count(magnitude) // 2
    high, low = divmod(magnitude, pow10(low_len))
    return int_to_digits(high) + int_to_digits(low).rjust(low_len, "0")


# =============================================================================
# РАЗБОР ЛИТЕРАЛА
# =============================================================================


def parse_literal(text: str) -> tuple[int, int]:
    """
    Разбор десятичного литерала в пару (significand, scale).

    Грамматика: [-]?digits[.digits]

    Цифры целой и дробной части конкатенируются, знак сохраняется
    отдельно. scale равен числу цифр после точки (0 без точки).
    Хвостовые нули не отбрасываются.

    Args:
        text: Литерал, например "-123.450"

    Returns:
        (significand, scale)

    Raises:
        FormatError: Пустая строка, недопустимые символы, больше одной
            точки или нарушение грамматики ("-", "1.", ".5", "1-2")

    Examples:
        >>> parse_literal("123.45")
        (12345, 2)
        >>> parse_literal("-0.050")
        (-50, 3)
    """
    if not isinstance(text, str):
        raise FormatError(text, f"expected str, got {type(text).__name__}")
    if not text:
        raise FormatError(text, "empty string")

    illegal = sorted(set(text) - _ALLOWED_CHARS)
    if illegal:
        raise FormatError(text, f"illegal characters {''.join(illegal)!r}")
    if text.count(DECIMAL_POINT) > 1:
        raise FormatError(text, "more than one decimal point")
    if _LITERAL_RE.fullmatch(text) is None:
        raise FormatError(text, "expected [-]digits[.digits]")

    negative = text.startswith(MINUS_SIGN)
    body = text[1:] if negative else text
    integer_part, _, fraction_part = body.partition(DECIMAL_POINT)

    significand = digits_to_int(integer_part + fraction_part)
    if negative:
        significand = -significand
    return significand, len(fraction_part)


def format_fixed_point(significand: int, scale: int) -> str:
    """
    Рендеринг significand / 10**scale как десятичного литерала.

    Точка вставляется за scale цифр от правого края; если цифр меньше
    scale + 1, слева добавляются нули. При scale == 0 точки нет.
    Хвостовые нули сохраняются.

    Examples:
        >>> format_fixed_point(5, 3)
        '0.005'
        >>> format_fixed_point(-10000, 3)
        '-10.000'
    """
    digits = int_to_digits(significand)
    sign = MINUS_SIGN if significand < 0 else ""
    if scale == 0:
        return sign + digits
    digits = digits.rjust(scale + 1, "0")
    return f"{sign}{digits[:-scale]}{DECIMAL_POINT}{digits[-scale:]}"

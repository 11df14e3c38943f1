"""
Тесты для модуля Scaling

Проверяет:
1. Степени десяти и кэш
2. Выравнивание scale
3. Подсчёт цифр
4. Разбор литералов и ошибки формата
5. Рендеринг fixed-point строки
6. Длинные строки цифр (больше лимита CPython int <-> str)
"""

import pytest

from fixdec.core.exceptions import DecimalError, FormatError
from fixdec.core.math.scaling import (
    POW10_CACHE_MAX,
    STR_DIGITS_CHUNK,
    align_scales,
    digit_count,
    digits_to_int,
    format_fixed_point,
    int_to_digits,
    parse_literal,
    pow10,
)

# =============================================================================
# СТЕПЕНИ ДЕСЯТИ
# =============================================================================


class TestPow10:
    """Тесты для pow10"""

    def test_small_powers(self) -> None:
        """Малые степени из таблицы"""
        assert pow10(0) == 1
        assert pow10(1) == 10
        assert pow10(9) == 1_000_000_000

    def test_cache_boundary(self) -> None:
        """Граница таблицы и за ней"""
        assert pow10(POW10_CACHE_MAX) == 10**POW10_CACHE_MAX
        assert pow10(POW10_CACHE_MAX + 1) == 10 ** (POW10_CACHE_MAX + 1)
        assert pow10(1000) == 10**1000

    def test_negative_power_rejected(self) -> None:
        """Отрицательная степень отклоняется"""
        with pytest.raises(ValueError, match="Negative power"):
            pow10(-1)


# =============================================================================
# ВЫРАВНИВАНИЕ SCALE
# =============================================================================


class TestAlignScales:
    """Тесты для align_scales"""

    def test_equal_scales_unchanged(self) -> None:
        """Одинаковый scale не меняет significand"""
        assert align_scales(12, 2, 34, 2) == (12, 34, 2)

    def test_left_larger_scale(self) -> None:
        """Правый операнд домножается"""
        assert align_scales(1234, 3, 5, 1) == (1234, 500, 3)

    def test_right_larger_scale(self) -> None:
        """Левый операнд домножается"""
        assert align_scales(15, 1, 2, 3) == (1500, 2, 3)

    def test_negative_significand(self) -> None:
        """Знак сохраняется"""
        assert align_scales(-7, 0, 25, 2) == (-700, 25, 2)


# =============================================================================
# ПОДСЧЁТ ЦИФР
# =============================================================================


class TestDigitCount:
    """Тесты для digit_count"""

    def test_zero_has_one_digit(self) -> None:
        """Ноль имеет одну цифру"""
        assert digit_count(0) == 1

    def test_powers_of_ten_boundaries(self) -> None:
        """Границы степеней десяти"""
        assert digit_count(9) == 1
        assert digit_count(10) == 2
        assert digit_count(99) == 2
        assert digit_count(100) == 3
        assert digit_count(10**50 - 1) == 50
        assert digit_count(10**50) == 51

    def test_sign_ignored(self) -> None:
        """Знак не считается цифрой"""
        assert digit_count(-12345) == 5

    def test_matches_string_length(self) -> None:
        """Совпадает с длиной str() на произвольных значениях"""
        for value in (1, 7, 123456789, 2**64, 3**200, 10**299 + 1):
            assert digit_count(value) == len(str(value))


# =============================================================================
# РАЗБОР ЛИТЕРАЛОВ
# =============================================================================


class TestParseLiteral:
    """Тесты для parse_literal"""

    def test_integer_literal(self) -> None:
        """Литерал без точки имеет scale 0"""
        assert parse_literal("42") == (42, 0)

    def test_fractional_literal(self) -> None:
        """Цифры конкатенируются, scale = число дробных цифр"""
        assert parse_literal("123.45") == (12345, 2)

    def test_negative_literal(self) -> None:
        """Знак сохраняется"""
        assert parse_literal("-5.0") == (-50, 1)

    def test_trailing_zeros_preserved(self) -> None:
        """Хвостовые нули входят в scale"""
        assert parse_literal("1.10") == (110, 2)
        assert parse_literal("2.000") == (2000, 3)

    def test_leading_zeros_accepted(self) -> None:
        """Ведущие нули допустимы"""
        assert parse_literal("007.50") == (750, 2)
        assert parse_literal("0.005") == (5, 3)

    def test_negative_zero_collapses(self) -> None:
        """-0.00 даёт significand 0, scale сохраняется"""
        assert parse_literal("-0.00") == (0, 2)

    def test_empty_string_rejected(self) -> None:
        """Пустая строка отклоняется"""
        with pytest.raises(FormatError, match="empty string"):
            parse_literal("")

    def test_illegal_characters_rejected(self) -> None:
        """Символы вне [-0-9.] отклоняются"""
        for text in ("abc", "1e5", "+1", " 1", "1,5", "1_000", "١٢"):
            with pytest.raises(FormatError, match="illegal characters"):
                parse_literal(text)

    def test_multiple_points_rejected(self) -> None:
        """Больше одной точки отклоняется"""
        with pytest.raises(FormatError, match="more than one decimal point"):
            parse_literal("1.2.3")

    def test_malformed_rejected(self) -> None:
        """Нарушения грамматики из допустимых символов"""
        for text in ("-", ".", "1.", ".5", "-.5", "1-2", "--1", "1.-2"):
            with pytest.raises(FormatError, match="expected"):
                parse_literal(text)

    def test_non_string_rejected(self) -> None:
        """Не-строка отклоняется FormatError"""
        with pytest.raises(FormatError, match="expected str"):
            parse_literal(12.5)  # type: ignore[arg-type]

    def test_format_error_is_value_error(self) -> None:
        """FormatError перехватывается как ValueError и DecimalError"""
        with pytest.raises(ValueError):
            parse_literal("x")
        with pytest.raises(DecimalError):
            parse_literal("x")

    def test_format_error_carries_input(self) -> None:
        """Ошибка хранит исходную строку и причину"""
        with pytest.raises(FormatError) as exc_info:
            parse_literal("12a")
        assert exc_info.value.text == "12a"
        assert "illegal characters" in exc_info.value.reason
        assert "'12a'" in str(exc_info.value)


# =============================================================================
# РЕНДЕРИНГ
# =============================================================================


class TestFormatFixedPoint:
    """Тесты для format_fixed_point"""

    def test_scale_zero_is_plain_integer(self) -> None:
        """scale 0 без точки"""
        assert format_fixed_point(42, 0) == "42"
        assert format_fixed_point(-42, 0) == "-42"
        assert format_fixed_point(0, 0) == "0"

    def test_point_inserted(self) -> None:
        """Точка за scale цифр справа"""
        assert format_fixed_point(83810205, 4) == "8381.0205"

    def test_left_padding(self) -> None:
        """Недостающие цифры дополняются нулями слева"""
        assert format_fixed_point(5, 3) == "0.005"
        assert format_fixed_point(1, 2) == "0.01"
        assert format_fixed_point(123, 3) == "0.123"

    def test_negative_padding(self) -> None:
        """Знак перед нулями дополнения"""
        assert format_fixed_point(-5, 3) == "-0.005"

    def test_trailing_zeros_kept(self) -> None:
        """Хвостовые нули не отбрасываются"""
        assert format_fixed_point(-10000, 3) == "-10.000"
        assert format_fixed_point(0, 2) == "0.00"


# =============================================================================
# ДЛИННЫЕ СТРОКИ ЦИФР
# =============================================================================


class TestLongDigitStrings:
    """Тесты для digits_to_int / int_to_digits"""

    def test_short_strings(self) -> None:
        """Короткие строки через int()/str()"""
        assert digits_to_int("00123") == 123
        assert int_to_digits(-123) == "123"
        assert int_to_digits(0) == "0"

    def test_beyond_cpython_limit(self) -> None:
        """Строки длиннее лимита CPython (4300 цифр) конвертируются"""
        digits = "9" + "0123456789" * 1000
        value = digits_to_int(digits)
        assert value % 10**10 == 123456789
        assert int_to_digits(value) == digits
        assert digit_count(value) == len(digits)

    def test_inner_zero_runs_preserved(self) -> None:
        """Нули на стыке частей не теряются"""
        digits = "1" + "0" * (STR_DIGITS_CHUNK * 3) + "1"
        value = digits_to_int(digits)
        assert value == 10 ** (STR_DIGITS_CHUNK * 3 + 1) + 1
        assert int_to_digits(value) == digits

    def test_literal_roundtrip_beyond_limit(self) -> None:
        """Длинный литерал разбирается и рендерится обратно"""
        text = "-" + "7" * 5000 + "." + "3" * 5000
        significand, scale = parse_literal(text)
        assert scale == 5000
        assert format_fixed_point(significand, scale) == text

"""
DecimalValue: Fixed-point число произвольной точности

Immutable Pydantic модель: целочисленный significand и неотрицательный
scale, значение равно significand / 10**scale.

Умножение точное: significand перемножаются как int произвольной длины,
scale складываются. Округление возникает только в set_scale/to_integer
при явном уменьшении scale.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. scale >= 0
2. Литерал разбирается без нормализации: scale == число дробных цифр
3. multiply(a, b).scale == a.scale + b.scale, результат без округления
4. Рендеринг не отбрасывает хвостовые нули ("8378.2430", а не "8378.243")
5. == сравнивает представление (significand, scale); числовое
   сравнение: compare_to и операторы <, <=, >, >=
"""

from typing import Any, Dict, Final, Union

from pydantic import BaseModel, Field, field_validator

from fixdec.core.contracts import validate_decimal_value
from fixdec.core.exceptions import FormatError
from fixdec.core.math.rounding import DEFAULT_ROUNDING, RoundingMode, drop_digits, rescale
from fixdec.core.math.scaling import (
    align_scales,
    digit_count,
    format_fixed_point,
    parse_literal,
)

Operand = Union["DecimalValue", int]


# =============================================================================
# DECIMAL VALUE MODEL
# =============================================================================


class DecimalValue(BaseModel):
    """
    Fixed-point десятичное число произвольной точности.

    Immutable модель (frozen=True): все операции возвращают новый экземпляр.
    strict=True запрещает неявные конверсии полей (например, "5" -> 5, True -> 1).
    """

    significand: int = Field(..., description="Цифры числа без десятичной точки, со знаком")
    scale: int = Field(..., ge=0, description="Количество цифр справа от десятичной точки")

    model_config = {"frozen": True, "strict": True}

    @field_validator("significand", "scale", mode="before")
    @classmethod
    def reject_bool(cls, v: Any) -> Any:
        """bool является подклассом int, но не является числом для модели"""
        if isinstance(v, bool):
            raise ValueError("bool is not a valid integer component")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "DecimalValue":
        """
        Создание из десятичного литерала [-]?digits[.digits].

        Args:
            text: Литерал, например "123.45" или "-5.0"

        Returns:
            DecimalValue, scale которого равен числу дробных цифр

        Raises:
            FormatError: Если строка не соответствует грамматике
        """
        significand, scale = parse_literal(text)
        return cls(significand=significand, scale=scale)

    @classmethod
    def from_int(cls, value: int) -> "DecimalValue":
        """Целое число со scale 0"""
        return cls(significand=value, scale=0)

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "DecimalValue":
        """
        Восстановление из JSON контракта decimal_value.

        Строка significand дополнительно проходит грамматику литерала:
        pattern схемы в Python допускает завершающий перевод строки.

        Raises:
            jsonschema.ValidationError: Если data не соответствует схеме
            FormatError: Если significand не является строкой цифр со знаком
        """
        validate_decimal_value(data)
        text = data["significand"]
        significand, scale = parse_literal(text)
        if scale != 0:
            raise FormatError(text, "significand must not contain a decimal point")
        # "integer" в JSON Schema допускает 1.0
        return cls(significand=significand, scale=int(data["scale"]))

    def to_contract(self) -> Dict[str, Any]:
        """
        Сериализация в JSON контракт decimal_value.

        significand передаётся строкой цифр со знаком, scale числом.
        """
        return {"significand": format_fixed_point(self.significand, 0), "scale": self.scale}

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def multiply(self, other: "DecimalValue") -> "DecimalValue":
        """
        Точное умножение.

        significand = a.significand * b.significand
        scale = a.scale + b.scale

        Ошибок нет: int в Python не переполняется.
        """
        return DecimalValue(
            significand=self.significand * other.significand,
            scale=self.scale + other.scale,
        )

    def add(self, other: "DecimalValue") -> "DecimalValue":
        """Точное сложение, scale результата = max(a.scale, b.scale)"""
        a, b, scale = align_scales(self.significand, self.scale, other.significand, other.scale)
        return DecimalValue(significand=a + b, scale=scale)

    def subtract(self, other: "DecimalValue") -> "DecimalValue":
        """Точное вычитание, scale результата = max(a.scale, b.scale)"""
        a, b, scale = align_scales(self.significand, self.scale, other.significand, other.scale)
        return DecimalValue(significand=a - b, scale=scale)

    def negate(self) -> "DecimalValue":
        return DecimalValue(significand=-self.significand, scale=self.scale)

    def abs(self) -> "DecimalValue":
        if self.significand < 0:
            return self.negate()
        return self

    def pow(self, exponent: int) -> "DecimalValue":
        """
        Точное возведение в неотрицательную целую степень.

        significand**n, scale * n. pow(0) == ONE.

        Raises:
            ValueError: Если exponent < 0
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"exponent must be int, got {type(exponent).__name__}")
        if exponent < 0:
            raise ValueError(f"Negative exponent not supported: {exponent}")
        return DecimalValue(significand=self.significand**exponent, scale=self.scale * exponent)

    # -------------------------------------------------------------------------
    # Scale и округление
    # -------------------------------------------------------------------------

    def set_scale(
        self,
        new_scale: int,
        rounding: Union[RoundingMode, int] = DEFAULT_ROUNDING,
    ) -> "DecimalValue":
        """
        Изменение scale.

        Увеличение scale точное (дописываются нули). Уменьшение отбрасывает
        младшие цифры с округлением по rounding.

        Args:
            new_scale: Новый scale (>= 0)
            rounding: RoundingMode или его целочисленный legacy код

        Raises:
            ValueError: Если new_scale < 0 или код режима неизвестен
            RoundingNecessaryError: UNNECESSARY и теряются ненулевые цифры
        """
        mode = rounding if isinstance(rounding, RoundingMode) else RoundingMode.from_legacy_code(rounding)
        significand = rescale(self.significand, self.scale, new_scale, mode)
        return DecimalValue(significand=significand, scale=new_scale)

    def to_integer(self) -> int:
        """Целая часть (округление к нулю)"""
        return drop_digits(self.significand, self.scale, RoundingMode.DOWN)

    # -------------------------------------------------------------------------
    # Знак и свойства
    # -------------------------------------------------------------------------

    def signum(self) -> int:
        """-1, 0 или 1"""
        return (self.significand > 0) - (self.significand < 0)

    def is_zero(self) -> bool:
        return self.significand == 0

    def is_positive(self) -> bool:
        return self.significand > 0

    def is_negative(self) -> bool:
        return self.significand < 0

    def precision(self) -> int:
        """Количество цифр в abs(significand); для нуля 1"""
        return digit_count(self.significand)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare_to(self, other: "DecimalValue") -> int:
        """
        Числовое сравнение с выравниванием scale.

        Returns:
            -1, 0 или 1. compare_to(2.0, 2.00) == 0, хотя 2.0 != 2.00
        """
        a, b, _ = align_scales(self.significand, self.scale, other.significand, other.scale)
        return (a > b) - (a < b)

    def max_of(self, other: "DecimalValue") -> "DecimalValue":
        """Большее по значению; при равенстве self"""
        return self if self.compare_to(other) >= 0 else other

    def min_of(self, other: "DecimalValue") -> "DecimalValue":
        """Меньшее по значению; при равенстве self"""
        return self if self.compare_to(other) <= 0 else other

    # -------------------------------------------------------------------------
    # Рендеринг
    # -------------------------------------------------------------------------

    def to_canonical_string(self) -> str:
        """
        Десятичный литерал из significand и scale без обрезки нулей.

        Examples:
            significand=5, scale=3 -> "0.005"
            significand=83782430, scale=4 -> "8378.2430"
        """
        return format_fixed_point(self.significand, self.scale)

    def __str__(self) -> str:
        return self.to_canonical_string()

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __mul__(self, other: Operand) -> "DecimalValue":
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.multiply(operand)

    def __rmul__(self, other: Operand) -> "DecimalValue":
        return self.__mul__(other)

    def __add__(self, other: Operand) -> "DecimalValue":
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    def __radd__(self, other: Operand) -> "DecimalValue":
        return self.__add__(other)

    def __sub__(self, other: Operand) -> "DecimalValue":
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.subtract(operand)

    def __rsub__(self, other: Operand) -> "DecimalValue":
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return operand.subtract(self)

    def __neg__(self) -> "DecimalValue":
        return self.negate()

    def __pos__(self) -> "DecimalValue":
        return self

    def __abs__(self) -> "DecimalValue":
        return self.abs()

    def __lt__(self, other: Operand) -> bool:
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.compare_to(operand) < 0

    def __le__(self, other: Operand) -> bool:
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.compare_to(operand) <= 0

    def __gt__(self, other: Operand) -> bool:
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.compare_to(operand) > 0

    def __ge__(self, other: Operand) -> bool:
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.compare_to(operand) >= 0


def _coerce(value: object) -> Union[DecimalValue, None]:
    # int продвигается до scale 0, остальные типы не поддерживаются
    if isinstance(value, DecimalValue):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return DecimalValue.from_int(value)
    return None


# =============================================================================
# MODULE-LEVEL API
# =============================================================================


def multiply(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """Точное произведение a * b (см. DecimalValue.multiply)"""
    return a.multiply(b)


ZERO: Final[DecimalValue] = DecimalValue(significand=0, scale=0)
ONE: Final[DecimalValue] = DecimalValue(significand=1, scale=0)
TEN: Final[DecimalValue] = DecimalValue(significand=10, scale=0)

"""
Core math modules для fixdec

Целочисленные примитивы fixed-point арифметики: степени десяти,
выравнивание scale, разбор и рендеринг литералов, округление.
"""

# Scaling
from fixdec.core.math.scaling import (
    DECIMAL_POINT,
    MINUS_SIGN,
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

# Rounding
from fixdec.core.math.rounding import (
    DEFAULT_ROUNDING,
    RoundingMode,
    drop_digits,
    rescale,
)

__all__ = [
    # Scaling: Constants
    "DECIMAL_POINT",
    "MINUS_SIGN",
    "POW10_CACHE_MAX",
    "STR_DIGITS_CHUNK",
    # Scaling: Functions
    "align_scales",
    "digit_count",
    "digits_to_int",
    "format_fixed_point",
    "int_to_digits",
    "parse_literal",
    "pow10",
    # Rounding: Types
    "DEFAULT_ROUNDING",
    "RoundingMode",
    # Rounding: Functions
    "drop_digits",
    "rescale",
]

"""
Domain models and value objects.

Contains the DecimalValue fixed-point number and its module-level constants.
"""

from fixdec.core.domain.decimal_value import (
    ONE,
    TEN,
    ZERO,
    DecimalValue,
    multiply,
)

__all__ = [
    # Model
    "DecimalValue",
    # Constants
    "ZERO",
    "ONE",
    "TEN",
    # Functions
    "multiply",
]

"""
fixdec: exact scale-tracking decimal arithmetic.

    >>> from fixdec import DecimalValue
    >>> str(DecimalValue.parse("123.4") * DecimalValue.parse("67.895"))
    '8378.2430'
"""

from fixdec.core.domain import ONE, TEN, ZERO, DecimalValue, multiply
from fixdec.core.exceptions import DecimalError, FormatError, RoundingNecessaryError
from fixdec.core.math import RoundingMode

__version__ = "0.1.0"

__all__ = [
    "DecimalValue",
    "ZERO",
    "ONE",
    "TEN",
    "multiply",
    "RoundingMode",
    "DecimalError",
    "FormatError",
    "RoundingNecessaryError",
    "__version__",
]

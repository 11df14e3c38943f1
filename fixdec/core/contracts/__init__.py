"""
Contract Validation Module

Модуль для валидации JSON контрактов fixdec.
"""

from .validators import (
    ContractValidator,
    DecimalValueValidator,
    SchemaLoader,
    validate_decimal_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DecimalValueValidator",
    # Functions
    "validate_decimal_value",
]

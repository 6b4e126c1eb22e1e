"""
Contract Validation Module

Модуль для валидации JSON контрактов значений движка.
"""

from .validators import (
    BigIntegerValidator,
    ContractValidator,
    DivisionResultValidator,
    SchemaLoader,
    division_result_from_contract,
    division_result_to_contract,
    validate_big_integer,
    validate_division_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntegerValidator",
    "DivisionResultValidator",
    # Functions
    "validate_big_integer",
    "validate_division_result",
    "division_result_to_contract",
    "division_result_from_contract",
]

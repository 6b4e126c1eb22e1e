"""
Domain models and value objects.

BigInteger и таксономия ошибок движка.
"""

from src.core.domain.big_integer import SCHEMA_VERSION, BigInteger
from src.core.domain.errors import (
    BigNumError,
    DivisionByZero,
    MalformedNumber,
    NegativeExponent,
    NoDigits,
)

__all__ = [
    # Value type
    "BigInteger",
    "SCHEMA_VERSION",
    # Errors
    "BigNumError",
    "MalformedNumber",
    "NoDigits",
    "DivisionByZero",
    "NegativeExponent",
]

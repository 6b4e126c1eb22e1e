"""
Public text API: операции над текстовыми представлениями чисел.
"""

from src.api.text_operations import (
    add,
    divide,
    divmod_text,
    eq,
    ge,
    gt,
    le,
    lt,
    mod,
    multiply,
    negate,
    power,
    powmod,
    subtract,
)

__all__ = [
    # Arithmetic
    "add",
    "subtract",
    "negate",
    "multiply",
    "power",
    "divide",
    "mod",
    "divmod_text",
    "powmod",
    # Comparisons
    "lt",
    "le",
    "eq",
    "ge",
    "gt",
]

"""
Core math modules: движок длинной десятичной арифметики

Слои (от листьев):
digits → canonical → comparison → additive → multiplicative → division → power
"""

# Digit Accessor
from src.core.math.digits import (
    BASE,
    digit_at,
    digit_range,
    is_even,
    strip_leading_zeros,
)

# Canonicalizer
from src.core.math.canonical import (
    DEFAULT_DISPLAY_CONFIG,
    ONE,
    TWO,
    ZERO,
    DisplayConfig,
    absolute_value,
    canonicalize,
    format_display,
    from_int,
    from_magnitude,
    is_negative,
    is_zero,
    negate,
    parse,
)

# Comparator
from src.core.math.comparison import (
    compare,
    compare_magnitudes,
    eq,
    ge,
    gt,
    le,
    lt,
)

# Additive Engine
from src.core.math.additive import (
    add,
    add_magnitudes,
    signed_difference,
    subtract,
    subtract_magnitudes,
)

# Multiplicative Engine
from src.core.math.multiplicative import (
    multiply,
    multiply_by_single_digit,
    multiply_magnitudes,
)

# Division Engine
from src.core.math.division import (
    NORMALIZATION_MULTIPLIERS,
    DivisionResult,
    divide,
    divide_by_single_digit,
    divide_magnitudes,
    estimate_quotient_digit,
    mod,
    normalization_multiplier,
    normalize,
)

# Power Engine
from src.core.math.exponentiation import power, power_mod

__all__ = [
    # Digit Accessor
    "BASE",
    "digit_at",
    "digit_range",
    "is_even",
    "strip_leading_zeros",
    # Canonicalizer
    "DEFAULT_DISPLAY_CONFIG",
    "ONE",
    "TWO",
    "ZERO",
    "DisplayConfig",
    "absolute_value",
    "canonicalize",
    "format_display",
    "from_int",
    "from_magnitude",
    "is_negative",
    "is_zero",
    "negate",
    "parse",
    # Comparator
    "compare",
    "compare_magnitudes",
    "eq",
    "ge",
    "gt",
    "le",
    "lt",
    # Additive Engine
    "add",
    "add_magnitudes",
    "signed_difference",
    "subtract",
    "subtract_magnitudes",
    # Multiplicative Engine
    "multiply",
    "multiply_by_single_digit",
    "multiply_magnitudes",
    # Division Engine
    "NORMALIZATION_MULTIPLIERS",
    "DivisionResult",
    "divide",
    "divide_by_single_digit",
    "divide_magnitudes",
    "estimate_quotient_digit",
    "mod",
    "normalization_multiplier",
    "normalize",
    # Power Engine
    "power",
    "power_mod",
]

"""
Text Operations — публичный текстовый интерфейс движка

Каждая операция принимает операнды в любом допустимом для parse виде
(текст вроде "1,000", "10d", "-3.000", int, BigInteger), канонизирует их
на входе и возвращает Display Text:
    789    → "789d"
    56789  → "56,789"
    0      → "0d"
Сравнения возвращают bool.

Ошибки разбора (MalformedNumber, NoDigits) и предусловий
(DivisionByZero, NegativeExponent) пробрасываются вызывающему коду.
"""

from typing import Any

from src.core.math import additive, canonical, comparison, division, multiplicative
from src.core.math import exponentiation
from src.core.math.canonical import format_display


def add(a: Any, b: Any) -> str:
    """
    Examples:
        >>> add("-3", "4")
        '1d'
        >>> add("1,000", "10")
        '1,010'
    """
    return format_display(additive.add(a, b))


def subtract(a: Any, b: Any) -> str:
    """
    Examples:
        >>> subtract("-3", "4")
        '-7d'
    """
    return format_display(additive.subtract(a, b))


def negate(a: Any) -> str:
    """
    Examples:
        >>> negate("-7d")
        '7d'
    """
    return format_display(canonical.negate(a))


def multiply(a: Any, b: Any) -> str:
    """
    Examples:
        >>> multiply("11d", "7d")
        '77d'
    """
    return format_display(multiplicative.multiply(a, b))


def power(a: Any, b: Any) -> str:
    """
    Examples:
        >>> power("10d", "5d")
        '100,000'
    """
    return format_display(exponentiation.power(a, b))


def divide(a: Any, b: Any) -> str:
    """
    Floor-частное.

    Examples:
        >>> divide("10d", "2d")
        '5d'
        >>> divide("-10", "9")
        '-2d'
    """
    return format_display(division.divide(a, b).quotient)


def mod(a: Any, b: Any) -> str:
    """
    Остаток со знаком делителя.

    Examples:
        >>> mod("13d", "5d")
        '3d'
    """
    return format_display(division.divide(a, b).remainder)


def divmod_text(a: Any, b: Any) -> tuple[str, str]:
    """Частное и остаток за одно деление."""
    quotient, remainder = division.divide(a, b)
    return format_display(quotient), format_display(remainder)


def powmod(a: Any, b: Any, c: Any) -> str:
    """
    Examples:
        >>> powmod("10d", "5d", "3d")
        '1d'
    """
    return format_display(exponentiation.power_mod(a, b, c))


def lt(a: Any, b: Any) -> bool:
    return comparison.lt(a, b)


def le(a: Any, b: Any) -> bool:
    return comparison.le(a, b)


def eq(a: Any, b: Any) -> bool:
    return comparison.eq(a, b)


def ge(a: Any, b: Any) -> bool:
    return comparison.ge(a, b)


def gt(a: Any, b: Any) -> bool:
    return comparison.gt(a, b)

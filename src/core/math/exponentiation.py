"""
Power Engine — возведение в степень и по модулю

Square-and-multiply с инвариантом result = a * x^n:
    пока n != 0:
        n чётно (по младшей цифре) → x = x * x, n = n // 2
        n нечётно                 → a = a * x, n = n - 1

power_mod повторяет тот же цикл, но после каждого возведения в квадрат
и каждого умножения аккумулятора берёт остаток по модулю m (floor
semantics, остаток со знаком m). Размер промежуточных значений при этом
ограничен размером m независимо от величины n.
"""

from typing import Any

from src.core.domain.big_integer import BigInteger
from src.core.domain.errors import DivisionByZero, NegativeExponent
from src.core.math.additive import subtract
from src.core.math.canonical import ONE, TWO, format_display, parse
from src.core.math.digits import is_even
from src.core.math.division import divide, mod
from src.core.math.multiplicative import multiply
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)


def _validate_exponent(exponent: BigInteger) -> None:
    if exponent.negative:
        raise NegativeExponent(f"negative exponent: {format_display(exponent)}")


def power(base: Any, exponent: Any) -> BigInteger:
    """
    base ** exponent.

    Args:
        base: Основание
        exponent: Неотрицательная степень

    Raises:
        NegativeExponent: Если exponent < 0

    Examples:
        >>> str(power("10", "5"))
        '100000'
        >>> str(power("0", "0"))
        '1'
    """
    x = parse(base)
    n = parse(exponent)
    _validate_exponent(n)

    accumulator = ONE
    steps = 0

    while not n.is_zero:
        if is_even(n.digits):
            x = multiply(x, x)
            n = divide(n, TWO).quotient
        else:
            accumulator = multiply(accumulator, x)
            n = subtract(n, ONE)
        steps += 1

    logger.debug("power: %d square-and-multiply steps", steps)
    return accumulator


def power_mod(base: Any, exponent: Any, modulus: Any) -> BigInteger:
    """
    (base ** exponent) mod modulus без построения полной степени.

    Результат совпадает с mod(power(base, exponent), modulus), в том числе
    при exponent == 0 (1 mod modulus).

    Args:
        base: Основание
        exponent: Неотрицательная степень
        modulus: Ненулевой модуль

    Raises:
        NegativeExponent: Если exponent < 0
        DivisionByZero: Если modulus == 0

    Examples:
        >>> str(power_mod("10", "5", "3"))
        '1'
        >>> str(power_mod("2", "3", "3"))
        '2'
    """
    x = parse(base)
    n = parse(exponent)
    m = parse(modulus)
    _validate_exponent(n)
    if m.is_zero:
        raise DivisionByZero(f"powmod modulus is zero (base {format_display(x)})")

    accumulator = mod(ONE, m)
    steps = 0

    while not n.is_zero:
        if is_even(n.digits):
            x = mod(multiply(x, x), m)
            n = divide(n, TWO).quotient
        else:
            accumulator = mod(multiply(accumulator, x), m)
            n = subtract(n, ONE)
        steps += 1

    logger.debug("power_mod: %d square-and-multiply steps", steps)
    return accumulator

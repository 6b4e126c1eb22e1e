"""
Multiplicative Engine — школьное умножение

multiply_by_single_digit: однопроходное умножение с переносом на цифру [0, 9].
multiply: для каждой цифры b (от младшей) частичное произведение a * digit,
сдвинутое на позицию цифры (дописыванием нулей), накапливается через
add_magnitudes. Сложность O(len(a) * len(b)).

Знак результата: XOR знаков операндов.
"""

from typing import Any, Sequence

from src.core.domain.big_integer import BigInteger
from src.core.math.additive import add_magnitudes
from src.core.math.canonical import from_magnitude, parse
from src.core.math.digits import BASE, digit_at, strip_leading_zeros


def multiply_by_single_digit(magnitude: Sequence[int], digit: int) -> tuple[int, ...]:
    """
    Произведение модуля на одну цифру.

    Args:
        magnitude: Цифры модуля (старшая первой)
        digit: Множитель в [0, 9]

    Returns:
        Канонический модуль произведения

    Raises:
        ValueError: Если digit вне [0, 9]

    Examples:
        >>> multiply_by_single_digit((9, 9, 9, 9), 9)
        (8, 9, 9, 9, 1)
        >>> multiply_by_single_digit((1, 2), 5)
        (6, 0)
    """
    if not 0 <= digit < BASE:
        raise ValueError(f"digit must be in [0, 9], got {digit}")

    result: list[int] = []
    carry = 0

    for position in range(len(magnitude)):
        value = carry + digit_at(magnitude, position) * digit
        carry, low = divmod(value, BASE)
        result.append(low)

    if carry:
        result.append(carry)

    result.reverse()
    return strip_leading_zeros(result)


def multiply_magnitudes(left: Sequence[int], right: Sequence[int]) -> tuple[int, ...]:
    """Произведение модулей (школьный алгоритм)."""
    accumulator: tuple[int, ...] = (0,)

    for position in range(len(right)):
        digit = digit_at(right, position)
        if digit == 0:
            continue
        partial = multiply_by_single_digit(left, digit) + (0,) * position
        accumulator = add_magnitudes(accumulator, partial)

    return strip_leading_zeros(accumulator)


def multiply(a: Any, b: Any) -> BigInteger:
    """
    Произведение a * b.

    Examples:
        >>> str(multiply("11", "7"))
        '77'
        >>> str(multiply("-12", "12"))
        '-144'
    """
    a = parse(a)
    b = parse(b)
    return from_magnitude(
        multiply_magnitudes(a.digits, b.digits),
        negative=a.negative != b.negative,
    )

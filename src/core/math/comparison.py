"""
Comparator — полный порядок на канонических целых

Алгоритм lt(a, b):
1. Разные знаки → ответ сразу по знаку
2. Оба отрицательные → lt(|b|, |a|)
3. Одинаковый знак → сравнение модулей: сначала длина (канонический
   модуль без ведущих нулей короче ⇔ меньше), затем цифры от старшей

eq(a, b) определяется как not lt(a, b) and not lt(b, a).
Операнды принимаются в любом виде, допустимом для parse.
"""

from typing import Any, Sequence

from src.core.math.canonical import parse


def compare_magnitudes(left: Sequence[int], right: Sequence[int]) -> int:
    """
    Сравнение канонических модулей.

    Returns:
        -1 если left < right, 0 если равны, +1 если left > right
    """
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    for left_digit, right_digit in zip(left, right):
        if left_digit != right_digit:
            return -1 if left_digit < right_digit else 1
    return 0


def lt(a: Any, b: Any) -> bool:
    a = parse(a)
    b = parse(b)

    if a.negative != b.negative:
        return a.negative
    if a.negative:
        # Оба отрицательные: -x < -y ⇔ y < x
        return compare_magnitudes(b.digits, a.digits) < 0
    return compare_magnitudes(a.digits, b.digits) < 0


def eq(a: Any, b: Any) -> bool:
    return not lt(a, b) and not lt(b, a)


def le(a: Any, b: Any) -> bool:
    return lt(a, b) or eq(a, b)


def ge(a: Any, b: Any) -> bool:
    return le(b, a)


def gt(a: Any, b: Any) -> bool:
    return lt(b, a)


def compare(a: Any, b: Any) -> int:
    """
    Трёхзначное сравнение.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if lt(a, b):
        return -1
    if lt(b, a):
        return 1
    return 0

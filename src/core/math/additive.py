"""
Additive Engine — сложение, вычитание, смена знака

Беззнаковые примитивы работают над модулями (старшая цифра первой)
поразрядно от младшей цифры:
- add_magnitudes: перенос 0 или 1
- subtract_magnitudes: заём 0 или -1 как слагаемое переноса
  (value = d1 - d2 + borrow, digit = value mod 10, borrow = floor(value / 10))

Знаковые операции: таблица диспетчеризации по четырём комбинациям
знаков; каждая ветка вызывает беззнаковый примитив ровно один раз,
поэтому рекурсии между add/subtract/negate нет.

Все результаты проходят каноникализацию (ведущие нули, знак нуля).
"""

from typing import Any, Callable, Final, Sequence

from src.core.domain.big_integer import BigInteger
from src.core.math.canonical import from_magnitude, negate, parse
from src.core.math.comparison import compare_magnitudes
from src.core.math.digits import BASE, digit_at

__all__ = [
    "add",
    "add_magnitudes",
    "negate",
    "signed_difference",
    "subtract",
    "subtract_magnitudes",
]


# =============================================================================
# БЕЗЗНАКОВЫЕ ПРИМИТИВЫ
# =============================================================================


def add_magnitudes(left: Sequence[int], right: Sequence[int]) -> tuple[int, ...]:
    """
    Сумма модулей.

    Цикл идёт до длины более длинного операнда, короткий дочитывается
    нулями; итоговый перенос добавляется старшей цифрой.
    """
    result: list[int] = []
    carry = 0

    for position in range(max(len(left), len(right))):
        value = carry + digit_at(left, position) + digit_at(right, position)
        carry, digit = divmod(value, BASE)
        result.append(digit)

    if carry:
        result.append(carry)

    result.reverse()
    return tuple(result)


def subtract_magnitudes(minuend: Sequence[int], subtrahend: Sequence[int]) -> tuple[int, ...]:
    """
    Разность модулей при minuend >= subtrahend.

    Returns:
        Модуль разности (возможно с ведущими нулями)

    Raises:
        ValueError: Если minuend < subtrahend
    """
    if compare_magnitudes(minuend, subtrahend) < 0:
        raise ValueError("minuend must not be smaller than subtrahend")

    result: list[int] = []
    borrow = 0

    for position in range(len(minuend)):
        value = digit_at(minuend, position) - digit_at(subtrahend, position) + borrow
        # divmod округляет к -inf: borrow ∈ {0, -1}, digit ∈ [0, 9]
        borrow, digit = divmod(value, BASE)
        result.append(digit)

    result.reverse()
    return tuple(result)


def signed_difference(left: Sequence[int], right: Sequence[int]) -> BigInteger:
    """left - right для модулей, со знаком результата."""
    if compare_magnitudes(left, right) >= 0:
        return from_magnitude(subtract_magnitudes(left, right))
    return from_magnitude(subtract_magnitudes(right, left), negative=True)


# =============================================================================
# ТАБЛИЦЫ ДИСПЕТЧЕРИЗАЦИИ ПО ЗНАКАМ
# =============================================================================

# Ключ: (a отрицательно, b отрицательно)
_SignDispatch = dict[tuple[bool, bool], Callable[[Sequence[int], Sequence[int]], BigInteger]]

_ADD_DISPATCH: Final[_SignDispatch] = {
    # a + b
    (False, False): lambda a, b: from_magnitude(add_magnitudes(a, b)),
    # -a + -b = -(a + b)
    (True, True): lambda a, b: from_magnitude(add_magnitudes(a, b), negative=True),
    # a + -b = a - b
    (False, True): lambda a, b: signed_difference(a, b),
    # -a + b = b - a
    (True, False): lambda a, b: signed_difference(b, a),
}

_SUBTRACT_DISPATCH: Final[_SignDispatch] = {
    # a - b
    (False, False): lambda a, b: signed_difference(a, b),
    # -a - -b = b - a
    (True, True): lambda a, b: signed_difference(b, a),
    # a - -b = a + b
    (False, True): lambda a, b: from_magnitude(add_magnitudes(a, b)),
    # -a - b = -(a + b)
    (True, False): lambda a, b: from_magnitude(add_magnitudes(a, b), negative=True),
}


# =============================================================================
# ЗНАКОВЫЕ ОПЕРАЦИИ
# =============================================================================


def add(a: Any, b: Any) -> BigInteger:
    """
    Сумма a + b.

    Examples:
        >>> str(add("-3", "4"))
        '1'
        >>> str(add("99", "1"))
        '100'
    """
    a = parse(a)
    b = parse(b)
    return _ADD_DISPATCH[(a.negative, b.negative)](a.digits, b.digits)


def subtract(a: Any, b: Any) -> BigInteger:
    """
    Разность a - b.

    Examples:
        >>> str(subtract("-3", "4"))
        '-7'
        >>> str(subtract("1000000", "1"))
        '999999'
    """
    a = parse(a)
    b = parse(b)
    return _SUBTRACT_DISPATCH[(a.negative, b.negative)](a.digits, b.digits)

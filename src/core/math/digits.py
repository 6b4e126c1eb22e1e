"""
Digit Accessor — позиционный доступ к цифрам модуля

Модуль (magnitude): последовательность десятичных цифр, старшая первой.
Позиции считаются от младшей цифры (позиция 0). Позиции за пределами
числа читаются как цифра 0 (zero-extension), что позволяет циклам
сложения/вычитания идти по более длинному операнду без проверок границ.

Функции только читают последовательность и не создают BigInteger.
"""

from typing import Final, Sequence

# Основание системы счисления
BASE: Final[int] = 10


def digit_at(magnitude: Sequence[int], position: int) -> int:
    """
    Цифра на позиции position, считая от младшей.

    Args:
        magnitude: Цифры модуля (старшая первой)
        position: Позиция от младшей цифры (0: единицы)

    Returns:
        Цифра в [0, 9]; 0 для позиций вне числа (включая отрицательные)

    Examples:
        >>> digit_at((2, 3, 4, 5, 6), 4)
        2
        >>> digit_at((1, 2, 3), 100)
        0
    """
    if 0 <= position < len(magnitude):
        return magnitude[len(magnitude) - 1 - position]
    return 0


def digit_range(magnitude: Sequence[int], low: int, high: int) -> int:
    """
    Число из цифр на позициях high..low включительно (старшая первой).

    Используется для извлечения одной-двух ведущих цифр при оценке
    цифры частного.

    Args:
        magnitude: Цифры модуля (старшая первой)
        low: Младшая позиция диапазона
        high: Старшая позиция диапазона

    Returns:
        Целое значение среза (позиции вне числа дают цифру 0)

    Examples:
        >>> digit_range((2, 3, 4, 5, 6), 3, 4)
        23
        >>> digit_range((1, 2, 3, 4, 5, 6, 7, 8, 9, 0), 3, 9)
        1234567
        >>> digit_range((1, 2, 3), 13, 19)
        0
    """
    result = 0
    for position in range(high, low - 1, -1):
        result = result * BASE + digit_at(magnitude, position)
    return result


def is_even(magnitude: Sequence[int]) -> bool:
    """Чётность по младшей цифре."""
    return digit_at(magnitude, 0) % 2 == 0


def strip_leading_zeros(magnitude: Sequence[int]) -> tuple[int, ...]:
    """
    Удаление ведущих нулей.

    Returns:
        Канонический модуль; пустой или нулевой вход даёт (0,)
    """
    start = 0
    while start < len(magnitude) and magnitude[start] == 0:
        start += 1
    if start == len(magnitude):
        return (0,)
    return tuple(magnitude[start:])

"""
Ошибки движка длинной арифметики

Таксономия ошибок:
- MalformedNumber: текст нарушает допустимую грамматику числа
- NoDigits: после очистки текста не осталось ни одной цифры
- DivisionByZero: делитель (или модуль в powmod) равен нулю
- NegativeExponent: отрицательная степень в pow/powmod

Все ошибки: нарушения предусловий. Внутри движка они не перехватываются
и пробрасываются вызывающему коду как есть.
"""


class BigNumError(ValueError):
    """Базовый класс всех ошибок движка."""

    pass


class MalformedNumber(BigNumError):
    """
    Текст не соответствует грамматике целого числа.

    Возникает при: нескольких знаках минус, минусе не в начале,
    нескольких точках, ненулевой дробной части.
    """

    pass


class NoDigits(BigNumError):
    """Во входном тексте нет ни одной десятичной цифры."""

    pass


class DivisionByZero(BigNumError, ZeroDivisionError):
    """
    Деление (или взятие остатка) на ноль.

    Наследует ZeroDivisionError, чтобы вызывающий код мог обрабатывать
    её так же, как встроенное деление на ноль.
    """

    pass


class NegativeExponent(BigNumError):
    """Отрицательная степень в pow или powmod."""

    pass

"""
Canonicalizer — разбор текста и каноническая форма целых

Модуль отвечает за границу между текстом и BigInteger:
- parse: сырой текст (или int/float/BigInteger) → BigInteger
- canonicalize: "[-]цифры" → BigInteger (ведущие нули, знак нуля)
- format_display: BigInteger → Display Text ("56,789", "789d", "-12d")
- Предикаты знака и negate/absolute_value

ГРАММАТИКА ТЕКСТА:
    Все символы кроме [0-9.-] отбрасываются. Далее:
    1. Не более одного минуса, и только в начале
    2. Не более одной точки
    3. После точки допускаются только нули (целое число)
    4. Хотя бы одна цифра

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. canonicalize идемпотентна на канонических значениях
2. "-0" канонизируется в "0"
3. parse никогда не возвращает неканоническое значение
"""

import math
from dataclasses import dataclass
from typing import Any, Final, Sequence

from src.core.domain.big_integer import BigInteger
from src.core.domain.errors import MalformedNumber, NoDigits
from src.core.math.digits import strip_leading_zeros

# Символы, которые сохраняются при очистке текста
_ADMITTED_CHARS: Final[frozenset[str]] = frozenset("0123456789.-")

_DIGIT_CHARS: Final[str] = "0123456789"


# =============================================================================
# DISPLAY CONFIG
# =============================================================================


@dataclass(frozen=True)
class DisplayConfig:
    """Конфигурация отображения Display Text."""

    # Разделитель групп разрядов
    grouping_mark: str = ","
    # Размер группы (от младшей цифры)
    group_size: int = 3
    # Суффикс для коротких чисел
    short_suffix: str = "d"
    # С какого количества цифр включается группировка
    min_grouped_digits: int = 4

    def __post_init__(self) -> None:
        if self.group_size < 1:
            raise ValueError(f"group_size must be >= 1, got {self.group_size}")
        if self.min_grouped_digits < 1:
            raise ValueError(
                f"min_grouped_digits must be >= 1, got {self.min_grouped_digits}"
            )


DEFAULT_DISPLAY_CONFIG: Final[DisplayConfig] = DisplayConfig()


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


def from_magnitude(magnitude: Sequence[int], negative: bool = False) -> BigInteger:
    """
    BigInteger из модуля и знака с нормализацией.

    Удаляет ведущие нули; у нуля знак сбрасывается.

    Args:
        magnitude: Цифры модуля (старшая первой), возможно с ведущими нулями
        negative: Знак

    Returns:
        Каноническое значение
    """
    digits = strip_leading_zeros(magnitude)
    return BigInteger(negative=negative and digits != (0,), digits=digits)


def canonicalize(text: str) -> BigInteger:
    """
    Каноническая форма строки "[-]цифры".

    Args:
        text: Необязательный минус и цифры (возможно с ведущими нулями,
            возможно пустые)

    Returns:
        Каноническое значение: без ведущих нулей, "-0" → "0"

    Raises:
        MalformedNumber: Если после знака встречается не цифра

    Examples:
        >>> str(canonicalize("-000123"))
        '-123'
        >>> str(canonicalize("-0"))
        '0'
    """
    negative = text.startswith("-")
    body = text[1:] if negative else text
    if any(c not in _DIGIT_CHARS for c in body):
        raise MalformedNumber(f"not a signed digit string: {text!r}")
    return from_magnitude(tuple(int(c) for c in body), negative)


def from_int(value: int) -> BigInteger:
    """BigInteger из встроенного int."""
    magnitude: list[int] = []
    remaining = abs(value)
    while remaining:
        remaining, digit = divmod(remaining, 10)
        magnitude.append(digit)
    magnitude.reverse()
    return from_magnitude(magnitude, value < 0)


# =============================================================================
# РАЗБОР ТЕКСТА
# =============================================================================


def parse(raw: Any) -> BigInteger:
    """
    Разбор произвольного ввода в BigInteger.

    Args:
        raw: Текст, BigInteger, int или float с целым значением

    Returns:
        Каноническое значение

    Raises:
        MalformedNumber: Текст нарушает грамматику; float не целый
        NoDigits: В тексте нет цифр
        TypeError: Неподдерживаемый тип

    Examples:
        >>> str(parse("   -123s"))
        '-123'
        >>> str(parse("1,000"))
        '1000'
        >>> str(parse("3.000"))
        '3'
        >>> parse("3.14")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        MalformedNumber: ...
    """
    if isinstance(raw, BigInteger):
        return raw
    if isinstance(raw, bool):
        raise TypeError(f"cannot interpret bool as an integer: {raw!r}")
    if isinstance(raw, int):
        return from_int(raw)
    if isinstance(raw, float):
        if not math.isfinite(raw) or not raw.is_integer():
            raise MalformedNumber(f"number has no integer representation: {raw!r}")
        return from_int(int(raw))
    if not isinstance(raw, str):
        raise TypeError(f"cannot interpret {type(raw).__name__} as an integer")

    cleaned = "".join(c for c in raw if c in _ADMITTED_CHARS)

    if cleaned.count("-") > 1:
        raise MalformedNumber(f"more than one minus sign: {raw!r}")
    if "-" in cleaned[1:]:
        raise MalformedNumber(f"minus sign must come first: {raw!r}")
    if cleaned.count(".") > 1:
        raise MalformedNumber(f"more than one period: {raw!r}")

    integer_part, _, fraction = cleaned.partition(".")
    if any(c != "0" for c in fraction):
        raise MalformedNumber(f"not an integer (nonzero fraction): {raw!r}")
    if not any(c in _DIGIT_CHARS for c in cleaned):
        raise NoDigits(f"no digits in {raw!r}")

    # ".000" → integer_part пуст, значение 0
    return canonicalize(integer_part)


# =============================================================================
# ОТОБРАЖЕНИЕ
# =============================================================================


def format_display(
    value: BigInteger,
    config: DisplayConfig = DEFAULT_DISPLAY_CONFIG,
) -> str:
    """
    Display Text для канонического значения.

    Модуль из min_grouped_digits и более цифр группируется по group_size
    от младшей цифры; более короткий получает short_suffix. Минус
    ставится перед всем остальным.

    Examples:
        >>> format_display(parse("56789"))
        '56,789'
        >>> format_display(parse("789"))
        '789d'
        >>> format_display(parse("-1234"))
        '-1,234'
    """
    text = "".join(str(d) for d in value.digits)

    if len(text) < config.min_grouped_digits:
        body = text + config.short_suffix
    else:
        groups: list[str] = []
        end = len(text)
        while end > 0:
            start = max(end - config.group_size, 0)
            groups.append(text[start:end])
            end = start
        body = config.grouping_mark.join(reversed(groups))

    return f"-{body}" if value.negative else body


# =============================================================================
# ЗНАК
# =============================================================================


def is_negative(value: Any) -> bool:
    """True только для отрицательных ненулевых значений."""
    value = parse(value)
    return value.negative and not value.is_zero


def is_zero(value: Any) -> bool:
    return parse(value).is_zero


def absolute_value(value: Any) -> BigInteger:
    value = parse(value)
    if not value.negative:
        return value
    return BigInteger(negative=False, digits=value.digits)


def negate(value: Any) -> BigInteger:
    """Смена знака; ноль остаётся нулём."""
    value = parse(value)
    if value.is_zero:
        return value
    return BigInteger(negative=not value.negative, digits=value.digits)


# Часто используемые константы
ZERO: Final[BigInteger] = BigInteger(digits=(0,))
ONE: Final[BigInteger] = BigInteger(digits=(1,))
TWO: Final[BigInteger] = BigInteger(digits=(2,))

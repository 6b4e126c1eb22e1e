"""
Division Engine — деление с остатком (floor semantics)

Контракт divide(num, den) → (quotient, remainder):
    num = quotient * den + remainder
    remainder == 0 или sign(remainder) == sign(den)
    0 <= |remainder| < |den|
То есть деление с округлением к -inf (как // и % в Python), а не к нулю.

АЛГОРИТМ (десятичный аналог Algorithm D, Knuth):
1. Знаки запоминаются, дальше работа с модулями
2. Однозначный делитель: проход от старшей цифры с бегущим остатком
3. Многозначный делитель:
   a. Нормализация: оба операнда умножаются на m ∈ {1, 2, 3, 5}, чтобы
      старшая цифра делителя стала >= 5 (m выбирается по исходной
      старшей цифре: >=5 → 1, 1 → 5, 2 → 3, 3/4 → 2)
   b. Окно делимого длины делителя + хвост, сносимый по одной цифре
   c. Оценка цифры частного q по двум старшим цифрам окна и старшей
      цифре делителя с коррекцией по второй цифре делителя
      (не более двух уменьшений при нормализованном делителе)
   d. Окно -= q * делитель; если q всё ещё велико: уменьшаем q,
      пока произведение не станет <= окна
   e. q дописывается к частному, сносится следующая цифра хвоста
   f. Остаток делится на m (точно) однозначным делением
4. Коррекция знака под floor semantics

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль → DivisionByZero (без частичного результата)
2. Окно всегда < 10 * делитель, поэтому цифра частного в [0, 9]
3. Промежуточные значения никогда не отрицательны
"""

from typing import Any, Final, Iterator, NamedTuple, Sequence

from src.core.domain.big_integer import BigInteger
from src.core.domain.errors import DivisionByZero
from src.core.math.additive import subtract, subtract_magnitudes
from src.core.math.canonical import ONE, format_display, from_magnitude, negate, parse
from src.core.math.comparison import compare_magnitudes
from src.core.math.digits import BASE, digit_at, digit_range, strip_leading_zeros
from src.core.math.multiplicative import multiply_by_single_digit
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

# Множитель нормализации по старшей цифре делителя (цифры >= 5 → 1)
NORMALIZATION_MULTIPLIERS: Final[dict[int, int]] = {1: 5, 2: 3, 3: 2, 4: 2}

# Минимальная старшая цифра нормализованного делителя
NORMALIZED_LEADING_DIGIT_MIN: Final[int] = 5


class DivisionResult(NamedTuple):
    """Частное и остаток (остаток со знаком делителя)."""

    quotient: BigInteger
    remainder: BigInteger


# =============================================================================
# ОДНОЗНАЧНЫЙ ДЕЛИТЕЛЬ
# =============================================================================


def divide_by_single_digit(
    magnitude: Sequence[int], divisor: int
) -> tuple[tuple[int, ...], int]:
    """
    Деление модуля на цифру.

    Args:
        magnitude: Цифры делимого (старшая первой)
        divisor: Делитель в [1, 9]

    Returns:
        (модуль частного, остаток в [0, divisor))

    Raises:
        DivisionByZero: Если divisor == 0
        ValueError: Если divisor вне [0, 9]

    Examples:
        >>> divide_by_single_digit((1, 4, 4), 6)
        ((2, 4), 0)
        >>> divide_by_single_digit((1, 0, 0), 3)
        ((3, 3), 1)
    """
    if divisor == 0:
        raise DivisionByZero("division by zero")
    if not 0 < divisor < BASE:
        raise ValueError(f"divisor must be a single digit, got {divisor}")

    quotient: list[int] = []
    remainder = 0

    for position in range(len(magnitude) - 1, -1, -1):
        value = remainder * BASE + digit_at(magnitude, position)
        quotient.append(value // divisor)
        remainder = value % divisor

    return strip_leading_zeros(quotient), remainder


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalization_multiplier(leading_digit: int) -> int:
    """
    Множитель, после которого старшая цифра делителя >= 5.

    Raises:
        ValueError: Если leading_digit вне [1, 9]
    """
    if not 0 < leading_digit < BASE:
        raise ValueError(f"leading digit must be in [1, 9], got {leading_digit}")
    if leading_digit >= NORMALIZED_LEADING_DIGIT_MIN:
        return 1
    return NORMALIZATION_MULTIPLIERS[leading_digit]


def normalize(
    numerator: Sequence[int], denominator: Sequence[int]
) -> tuple[tuple[int, ...], tuple[int, ...], int]:
    """
    Масштабирование делимого и делителя.

    Длина делителя при этом не меняется (19 * 5 = 95, 29 * 3 = 87, 49 * 2 = 98).

    Returns:
        (делимое * m, делитель * m, m)

    Examples:
        >>> normalize((1, 1, 1), (1, 1))
        ((5, 5, 5), (5, 5), 5)
        >>> normalize((1, 1, 1), (5, 5))
        ((1, 1, 1), (5, 5), 1)
    """
    multiplier = normalization_multiplier(denominator[0])
    if multiplier == 1:
        return tuple(numerator), tuple(denominator), 1
    return (
        multiply_by_single_digit(numerator, multiplier),
        multiply_by_single_digit(denominator, multiplier),
        multiplier,
    )


# =============================================================================
# МНОГОЗНАЧНЫЙ ДЕЛИТЕЛЬ
# =============================================================================


def estimate_quotient_digit(window: Sequence[int], divisor: Sequence[int]) -> int:
    """
    Оценка цифры частного для окна и нормализованного делителя.

    q = (две старшие цифры окна) // (старшая цифра делителя), затем пока
    q >= 10 или (r < 10 и q * d2 > r * 10 + w3): q -= 1, r += d1.
    Результат не меньше истинной цифры и превышает её не более чем на 2.

    Args:
        window: Текущее окно (< 10 * divisor)
        divisor: Нормализованный делитель, не короче двух цифр
    """
    size = len(divisor)
    leading, second = divisor[0], divisor[1]

    prefix = digit_range(window, size - 1, size)
    third = digit_at(window, size - 2)

    q, r = divmod(prefix, leading)
    while q >= BASE or (r < BASE and q * second > r * BASE + third):
        q -= 1
        r += leading
    return q


def _long_divide(
    numerator: tuple[int, ...], denominator: tuple[int, ...]
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Деление модулей при делителе из двух и более цифр."""
    numerator, denominator, multiplier = normalize(numerator, denominator)
    size = len(denominator)
    logger.debug("long division: multiplier=%d, divisor_digits=%d", multiplier, size)

    window = strip_leading_zeros(numerator[:size])
    pending: Iterator[int] = iter(numerator[size:])
    quotient: list[int] = []

    while True:
        q = estimate_quotient_digit(window, denominator)

        if q > 0:
            product = multiply_by_single_digit(denominator, q)
            # Страховка сверх ограниченной коррекции оценки
            while compare_magnitudes(window, product) < 0:
                product = strip_leading_zeros(subtract_magnitudes(product, denominator))
                q -= 1
            window = strip_leading_zeros(subtract_magnitudes(window, product))

        quotient.append(q)

        next_digit = next(pending, None)
        if next_digit is None:
            break
        window = strip_leading_zeros(window + (next_digit,))

    remainder, _ = divide_by_single_digit(window, multiplier)
    return strip_leading_zeros(quotient), remainder


def divide_magnitudes(
    numerator: Sequence[int], denominator: Sequence[int]
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Деление канонических модулей с остатком.

    Returns:
        (модуль частного, модуль остатка)

    Raises:
        DivisionByZero: Если делитель равен нулю
    """
    numerator = tuple(numerator)
    denominator = tuple(denominator)

    if denominator == (0,):
        raise DivisionByZero("division by zero")

    if len(denominator) == 1:
        quotient, remainder = divide_by_single_digit(numerator, denominator[0])
        return quotient, (remainder,)

    return _long_divide(numerator, denominator)


# =============================================================================
# ЗНАКОВОЕ ДЕЛЕНИЕ
# =============================================================================


def _apply_floor_sign(
    quotient: BigInteger,
    remainder: BigInteger,
    divisor: BigInteger,
    negative_numerator: bool,
    negative_denominator: bool,
) -> DivisionResult:
    """
    Перевод беззнаковых частного/остатка в floor semantics.

    divisor: модуль делителя.
    """
    if not negative_numerator and not negative_denominator:
        return DivisionResult(quotient, remainder)

    if negative_numerator and negative_denominator:
        # -a = q * -b + (-r)
        return DivisionResult(quotient, negate(remainder))

    quotient = negate(quotient)
    if remainder.is_zero:
        return DivisionResult(quotient, remainder)

    logger.debug("floor correction: negative_denominator=%s", negative_denominator)
    quotient = subtract(quotient, ONE)
    if negative_denominator:
        # a = (-q - 1) * -b + (r - b)
        remainder = subtract(remainder, divisor)
    else:
        # -a = (-q - 1) * b + (b - r)
        remainder = subtract(divisor, remainder)

    return DivisionResult(quotient, remainder)


def divide(numerator: Any, denominator: Any) -> DivisionResult:
    """
    Деление с остатком по floor semantics.

    Args:
        numerator: Делимое (BigInteger, int или текст)
        denominator: Делитель

    Returns:
        DivisionResult(quotient, remainder), остаток со знаком делителя

    Raises:
        DivisionByZero: Если делитель равен нулю

    Examples:
        >>> [str(x) for x in divide("-10", "9")]
        ['-2', '8']
        >>> [str(x) for x in divide("10", "-9")]
        ['-2', '-8']
        >>> [str(x) for x in divide("-10", "-9")]
        ['1', '-1']
    """
    numerator = parse(numerator)
    denominator = parse(denominator)

    if denominator.is_zero:
        raise DivisionByZero(f"division by zero: {format_display(numerator)} / 0")

    quotient, remainder = divide_magnitudes(numerator.digits, denominator.digits)

    return _apply_floor_sign(
        from_magnitude(quotient),
        from_magnitude(remainder),
        from_magnitude(denominator.digits),
        numerator.negative,
        denominator.negative,
    )


def mod(numerator: Any, denominator: Any) -> BigInteger:
    """Остаток от деления (знак делителя)."""
    return divide(numerator, denominator).remainder

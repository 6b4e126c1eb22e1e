"""
Тесты для Digit Accessor

Проверяет:
1. Позиционный доступ от младшей цифры
2. Zero-extension за пределами числа
3. Извлечение диапазона цифр как целого
4. Чётность и удаление ведущих нулей
"""

import pytest

from src.core.math.digits import (
    BASE,
    digit_at,
    digit_range,
    is_even,
    strip_leading_zeros,
)


def _digits(text: str) -> tuple[int, ...]:
    return tuple(int(c) for c in text)


# =============================================================================
# ТЕСТЫ: digit_at
# =============================================================================


class TestDigitAt:
    """Тесты digit_at: позиции от младшей цифры."""

    def test_least_significant_is_position_zero(self) -> None:
        assert digit_at(_digits("23456"), 0) == 6

    def test_most_significant_position(self) -> None:
        assert digit_at(_digits("23456"), 4) == 2

    def test_beyond_most_significant_reads_zero(self) -> None:
        """Позиции за старшей цифрой читаются как 0"""
        assert digit_at(_digits("1234567890"), 100) == 0
        assert digit_at(_digits("7"), 1) == 0

    def test_negative_position_reads_zero(self) -> None:
        assert digit_at(_digits("7"), -1) == 0

    def test_base_is_decimal(self) -> None:
        assert BASE == 10


# =============================================================================
# ТЕСТЫ: digit_range
# =============================================================================


class TestDigitRange:
    """Тесты digit_range: срез цифр high..low как целое."""

    def test_single_position(self) -> None:
        assert digit_range(_digits("23456"), 4, 4) == 2

    def test_two_leading_digits(self) -> None:
        assert digit_range(_digits("23456"), 3, 4) == 23

    def test_wide_range(self) -> None:
        assert digit_range(_digits("1234567890"), 3, 9) == 1234567

    def test_range_outside_number_is_zero(self) -> None:
        assert digit_range(_digits("1234567890"), 13, 19) == 0

    def test_range_straddling_top_is_zero_extended(self) -> None:
        """Позиция за старшей цифрой даёт ведущий 0"""
        assert digit_range(_digits("65"), 1, 2) == 6


# =============================================================================
# ТЕСТЫ: утилиты
# =============================================================================


class TestDigitUtilities:
    """Тесты is_even и strip_leading_zeros."""

    @pytest.mark.parametrize("text,expected", [("0", True), ("7", False), ("1234", True), ("99", False)])
    def test_is_even(self, text: str, expected: bool) -> None:
        assert is_even(_digits(text)) is expected

    def test_strip_leading_zeros(self) -> None:
        assert strip_leading_zeros((0, 0, 1, 0)) == (1, 0)

    def test_strip_all_zeros_gives_single_zero(self) -> None:
        assert strip_leading_zeros((0, 0, 0)) == (0,)

    def test_strip_empty_gives_single_zero(self) -> None:
        assert strip_leading_zeros(()) == (0,)

    def test_strip_canonical_is_identity(self) -> None:
        assert strip_leading_zeros((9, 0, 1)) == (9, 0, 1)

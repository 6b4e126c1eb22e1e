"""
Тесты для публичного текстового API

Проверяет:
1. Конкретные сценарии: ввод в свободном виде, вывод Display Text
2. Floor semantics деления в текстовом виде
3. Проброс ошибок разбора и предусловий
4. Алгебраические свойства на уровне текста
"""

import pytest
from hypothesis import given, strategies as st

from src.api import (
    add,
    divide,
    divmod_text,
    eq,
    ge,
    gt,
    le,
    lt,
    mod,
    multiply,
    negate,
    power,
    powmod,
    subtract,
)
from src.core.domain import (
    DivisionByZero,
    MalformedNumber,
    NegativeExponent,
    NoDigits,
)

WIDE = st.integers(min_value=-10**20, max_value=10**20)
NONZERO = st.integers(min_value=-10**12, max_value=10**12).filter(bool)


# =============================================================================
# ТЕСТЫ: сценарии
# =============================================================================


class TestScenarios:
    """Сценарии операций над текстом."""

    def test_add(self) -> None:
        assert add("-3", "4") == "1d"
        assert add("10d", "10d") == "20d"
        assert add("1,000", "10") == "1,010"

    def test_subtract_and_negate(self) -> None:
        assert subtract("-3", "4") == "-7d"
        assert negate("-7d") == "7d"
        assert negate("0d") == "0d"

    def test_multiply(self) -> None:
        assert multiply("11d", "7d") == "77d"
        assert multiply("-1,000", "1,000") == "-1,000,000"

    def test_divide_and_mod(self) -> None:
        assert divide("10d", "2d") == "5d"
        assert mod("13d", "5d") == "3d"

    def test_power(self) -> None:
        assert power("10d", "5d") == "100,000"
        assert power("10d", "10") == "10,000,000,000"

    def test_powmod(self) -> None:
        assert powmod("10d", "5d", "3d") == "1d"

    def test_comparisons(self) -> None:
        assert lt("4d", 10)
        assert lt("10s", "50s")
        assert le("10", "10d")
        assert eq("1,000", "1000")
        assert ge("-1", "-2")
        assert gt("1,001", "1,000")

    def test_zero_display(self) -> None:
        assert add("-5", "5") == "0d"


# =============================================================================
# ТЕСТЫ: floor semantics
# =============================================================================


class TestFloorDivisionText:
    """Частное и остаток со знаком делителя."""

    @pytest.mark.parametrize(
        "num,den,quotient,remainder",
        [
            ("-10", "9", "-2d", "8d"),
            ("10", "-9", "-2d", "-8d"),
            ("-10", "-9", "1d", "-1d"),
            (" 10s", " 8s", "1d", "2d"),
            (" 10s", "-8s", "-2d", "-6d"),
            ("-10s", " 8s", "-2d", "6d"),
            ("-10s", "-8s", "1d", "-2d"),
        ],
    )
    def test_sign_cases(self, num, den, quotient, remainder) -> None:
        assert divide(num, den) == quotient
        assert mod(num, den) == remainder
        assert divmod_text(num, den) == (quotient, remainder)


# =============================================================================
# ТЕСТЫ: ошибки
# =============================================================================


class TestErrors:
    """Ошибки пробрасываются вызывающему коду."""

    def test_malformed(self) -> None:
        with pytest.raises(MalformedNumber):
            add("3.14", "1")
        with pytest.raises(MalformedNumber):
            multiply("--4", "1")

    def test_no_digits(self) -> None:
        with pytest.raises(NoDigits):
            subtract("abc", "1")

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            divide("1", "0")
        with pytest.raises(DivisionByZero):
            mod("1", "0.000")
        with pytest.raises(DivisionByZero):
            powmod("2", "2", "0d")

    def test_negative_exponent(self) -> None:
        with pytest.raises(NegativeExponent):
            power("2", "-1")
        with pytest.raises(NegativeExponent):
            powmod("2", "-1", "5")


# =============================================================================
# ТЕСТЫ: свойства
# =============================================================================


class TestTextProperties:
    """Свойства на сгенерированных hypothesis значениях."""

    @given(WIDE, NONZERO)
    def test_division_identity(self, a: int, b: int) -> None:
        q = divide(a, b)
        r = mod(a, b)
        assert eq(add(multiply(q, b), r), a)
        assert lt(r, b) if b > 0 else gt(r, b)
        assert ge(r, 0) if b > 0 else le(r, 0)

    @given(WIDE, WIDE)
    def test_commutativity(self, a: int, b: int) -> None:
        assert add(a, b) == add(b, a)
        assert multiply(a, b) == multiply(b, a)

    @given(WIDE, WIDE, WIDE)
    def test_associativity(self, a: int, b: int, c: int) -> None:
        assert eq(add(add(a, b), c), add(a, add(b, c)))
        assert eq(multiply(multiply(a, b), c), multiply(a, multiply(b, c)))

    @given(WIDE)
    def test_additive_inverse(self, a: int) -> None:
        assert add(a, negate(a)) == "0d"

    def test_power_identities(self) -> None:
        for x in ("7", "-12", "1,000"):
            assert power(x, "0") == "1d"
            assert eq(power(x, "1"), x)

    @given(
        st.integers(min_value=-30, max_value=30),
        st.integers(min_value=0, max_value=12),
        st.integers(min_value=1, max_value=97),
    )
    def test_powmod_matches_mod_of_power(self, x: int, n: int, m: int) -> None:
        assert powmod(x, n, m) == mod(power(x, n), m)

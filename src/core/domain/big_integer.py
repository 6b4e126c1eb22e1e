"""
BigInteger — Каноническое знаковое целое произвольной точности

Immutable Pydantic модель: знак + последовательность десятичных цифр
(старшая цифра первой).

КАНОНИЧЕСКИЕ ИНВАРИАНТЫ:
1. Хотя бы одна цифра
2. Каждая цифра в [0, 9]
3. Нет ведущих нулей (кроме единственной цифры нуля)
4. Ноль не имеет знака ("-0" не является отдельным значением)

Каноническая форма: биекция, поэтому равенство полей совпадает
с числовым равенством, а hash согласован с ним.

Операторы (+, -, *, //, %, **, <, ...) делегируют в движки src.core.math.
Операнды могут быть BigInteger, int или допустимым текстом.
"""

from typing import Any, Final

from pydantic import BaseModel, Field, field_validator, model_validator

# Версия JSON контракта big_integer
SCHEMA_VERSION: Final[str] = "1"


class BigInteger(BaseModel):
    """
    Знаковое целое в канонической десятичной форме.

    Создаётся через src.core.math.canonical (parse/canonicalize/from_magnitude);
    прямой конструктор проверяет инварианты и отвергает неканонические данные.
    """

    negative: bool = Field(False, description="Знак: True для отрицательных")
    digits: tuple[int, ...] = Field(
        ..., min_length=1, description="Цифры модуля, старшая первой"
    )

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Цифры в [0, 9] и без ведущих нулей."""
        for digit in v:
            if not 0 <= digit <= 9:
                raise ValueError(f"digit out of range [0, 9]: {digit}")
        if len(v) > 1 and v[0] == 0:
            raise ValueError("digits must not have leading zeros")
        return v

    @model_validator(mode="after")
    def validate_zero_has_no_sign(self) -> "BigInteger":
        """Ноль всегда неотрицателен."""
        if self.negative and self.digits == (0,):
            raise ValueError("zero must not carry a sign")
        return self

    # ------------------------------------------------------------------
    # Представления
    # ------------------------------------------------------------------

    @property
    def magnitude(self) -> tuple[int, ...]:
        """Цифры модуля (старшая первой)."""
        return self.digits

    @property
    def is_zero(self) -> bool:
        return self.digits == (0,)

    @property
    def is_negative(self) -> bool:
        return self.negative

    def digit_at(self, position: int) -> int:
        """Цифра на позиции position, считая от младшей (0); вне числа: 0."""
        from src.core.math.digits import digit_at

        return digit_at(self.digits, position)

    def __str__(self) -> str:
        text = "".join(str(d) for d in self.digits)
        return f"-{text}" if self.negative else text

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

    def __int__(self) -> int:
        # Без int(str): у длинных строк срабатывает лимит int_max_str_digits
        value = 0
        for digit in self.digits:
            value = value * 10 + digit
        return -value if self.negative else value

    # ------------------------------------------------------------------
    # JSON контракт
    # ------------------------------------------------------------------

    def to_contract(self) -> dict[str, str]:
        """
        Сериализация в контракт big_integer.

        Returns:
            {"schema_version": "1", "sign": "+" | "-", "digits": "<модуль>"}
        """
        return {
            "schema_version": SCHEMA_VERSION,
            "sign": "-" if self.negative else "+",
            "digits": "".join(str(d) for d in self.digits),
        }

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "BigInteger":
        """
        Десериализация из контракта big_integer.

        Raises:
            jsonschema.ValidationError: Если data не соответствует схеме
            pydantic.ValidationError: Если значение неканонично ("-0")
        """
        from src.core.contracts.validators import validate_big_integer

        validate_big_integer(data)
        return cls(
            negative=data["sign"] == "-",
            digits=tuple(int(c) for c in data["digits"]),
        )

    # ------------------------------------------------------------------
    # Арифметические операторы
    # ------------------------------------------------------------------

    def __neg__(self) -> "BigInteger":
        from src.core.math.canonical import negate

        return negate(self)

    def __abs__(self) -> "BigInteger":
        from src.core.math.canonical import absolute_value

        return absolute_value(self)

    def __add__(self, other: Any) -> "BigInteger":
        from src.core.math.additive import add

        return add(self, other)

    def __radd__(self, other: Any) -> "BigInteger":
        from src.core.math.additive import add

        return add(other, self)

    def __sub__(self, other: Any) -> "BigInteger":
        from src.core.math.additive import subtract

        return subtract(self, other)

    def __rsub__(self, other: Any) -> "BigInteger":
        from src.core.math.additive import subtract

        return subtract(other, self)

    def __mul__(self, other: Any) -> "BigInteger":
        from src.core.math.multiplicative import multiply

        return multiply(self, other)

    def __rmul__(self, other: Any) -> "BigInteger":
        from src.core.math.multiplicative import multiply

        return multiply(other, self)

    def __floordiv__(self, other: Any) -> "BigInteger":
        from src.core.math.division import divide

        return divide(self, other).quotient

    def __mod__(self, other: Any) -> "BigInteger":
        from src.core.math.division import divide

        return divide(self, other).remainder

    def __rfloordiv__(self, other: Any) -> "BigInteger":
        from src.core.math.division import divide

        return divide(other, self).quotient

    def __rmod__(self, other: Any) -> "BigInteger":
        from src.core.math.division import divide

        return divide(other, self).remainder

    def __divmod__(self, other: Any):
        from src.core.math.division import divide

        return divide(self, other)

    def __rdivmod__(self, other: Any):
        from src.core.math.division import divide

        return divide(other, self)

    def __pow__(self, exponent: Any, modulus: Any = None) -> "BigInteger":
        from src.core.math.exponentiation import power, power_mod

        if modulus is None:
            return power(self, exponent)
        return power_mod(self, exponent, modulus)

    def __rpow__(self, base: Any, modulus: Any = None) -> "BigInteger":
        from src.core.math.exponentiation import power, power_mod

        if modulus is None:
            return power(base, self)
        return power_mod(base, self, modulus)

    # ------------------------------------------------------------------
    # Сравнения
    # ------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        # Только по значению полей (без fields_set Pydantic)
        if isinstance(other, int) and not isinstance(other, bool):
            from src.core.math.canonical import from_int

            other = from_int(other)
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.negative == other.negative and self.digits == other.digits

    def __hash__(self) -> int:
        # Совпадает с hash равного int
        return hash(int(self))

    def __lt__(self, other: Any) -> bool:
        from src.core.math.comparison import lt

        return lt(self, other)

    def __le__(self, other: Any) -> bool:
        from src.core.math.comparison import le

        return le(self, other)

    def __gt__(self, other: Any) -> bool:
        from src.core.math.comparison import gt

        return gt(self, other)

    def __ge__(self, other: Any) -> bool:
        from src.core.math.comparison import ge

        return ge(self, other)

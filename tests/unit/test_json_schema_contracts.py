"""
Tests for JSON Schema Contract Validators

Контракты проверяются на значениях, которые действительно выдаёт движок:
- Загрузка и meta-validation схем
- big_integer: pattern, enum, лишние поля, "-0"
- division_result: сериализация результатов divide по всем комбинациям
  знаков и восстановление DivisionResult из JSON
"""

import json

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from src.core.contracts import (
    BigIntegerValidator,
    DivisionResultValidator,
    SchemaLoader,
    division_result_from_contract,
    division_result_to_contract,
    validate_big_integer,
    validate_division_result,
)
from src.core.domain import BigInteger
from src.core.math.canonical import parse
from src.core.math.division import DivisionResult, divide


# =============================================================================
# FIXTURES - ENGINE OUTPUT
# =============================================================================


@pytest.fixture(
    params=[("-10", "9"), ("10", "-9"), ("-10", "-9"), ("10", "8"), ("0", "-7"), ("-1000", "37")],
    ids=["neg/pos", "pos/neg", "neg/neg", "pos/pos", "zero/neg", "long"],
)
def division(request) -> tuple[str, str, DivisionResult]:
    """Результат divide для пары делимое/делитель."""
    num, den = request.param
    return num, den, divide(num, den)


@pytest.fixture
def division_document(division) -> dict:
    """Проверенный по схеме JSON документ для результата divide."""
    _, _, result = division
    return division_result_to_contract(result)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    def test_schemas_load(self):
        loader = SchemaLoader()
        for name in ("big_integer", "division_result"):
            schema = loader.load_schema(name)
            assert schema["title"] == name

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("big_integer") is loader.load_schema("big_integer")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# BIG INTEGER CONTRACT
# =============================================================================


class TestBigIntegerContract:
    """Тесты контракта big_integer."""

    @pytest.mark.parametrize("text", ["0", "7", "-1234567", "-98765432109876543210"])
    def test_model_round_trip(self, text):
        value = parse(text)
        data = value.to_contract()
        validate_big_integer(data)
        assert BigInteger.from_contract(data) == value

    def test_zero_is_unsigned(self):
        assert parse("-0").to_contract()["sign"] == "+"

    def test_missing_required(self):
        data = parse("-5").to_contract()
        del data["digits"]
        with pytest.raises(ValidationError):
            validate_big_integer(data)

    @pytest.mark.parametrize("digits", ["", "007", "12a", "-5", "1,000"])
    def test_digits_pattern(self, digits):
        data = {"schema_version": "1", "sign": "+", "digits": digits}
        assert not BigIntegerValidator().is_valid(data)

    def test_sign_enum(self):
        with pytest.raises(ValidationError):
            validate_big_integer({"schema_version": "1", "sign": "minus", "digits": "5"})

    def test_additional_properties(self):
        data = dict(parse("5").to_contract(), base=10)
        errors = list(BigIntegerValidator().iter_errors(data))
        assert len(errors) == 1

    def test_from_contract_rejects_schema_violation(self):
        with pytest.raises(ValidationError):
            BigInteger.from_contract({"schema_version": "1", "sign": "+", "digits": "01"})

    def test_from_contract_rejects_negative_zero(self):
        """Схема допускает {"-", "0"}, модель: нет"""
        with pytest.raises(PydanticValidationError):
            BigInteger.from_contract({"schema_version": "1", "sign": "-", "digits": "0"})


# =============================================================================
# DIVISION RESULT CONTRACT
# =============================================================================


class TestDivisionResultContract:
    """Результаты divide проходят через контракт division_result."""

    def test_engine_output_is_valid(self, division_document):
        validate_division_result(division_document)
        assert DivisionResultValidator().is_valid(division_document)

    def test_remainder_sign_follows_divisor(self, division, division_document):
        _, den, _ = division
        remainder = division_document["remainder"]
        if remainder["digits"] != "0":
            assert remainder["sign"] == ("-" if den.startswith("-") else "+")

    def test_round_trip(self, division, division_document):
        _, _, result = division
        restored = division_result_from_contract(division_document)
        assert isinstance(restored, DivisionResult)
        assert restored == result

    def test_survives_json_text(self, division, division_document):
        _, _, result = division
        text = json.dumps(division_document)
        assert division_result_from_contract(json.loads(text)) == result

    def test_known_document(self):
        assert division_result_to_contract(divide("-10", "9")) == {
            "quotient": {"schema_version": "1", "sign": "-", "digits": "2"},
            "remainder": {"schema_version": "1", "sign": "+", "digits": "8"},
        }

    def test_missing_remainder(self, division_document):
        del division_document["remainder"]
        with pytest.raises(ValidationError):
            validate_division_result(division_document)

    def test_nested_violation_detected(self, division_document):
        division_document["quotient"]["digits"] = "007"
        with pytest.raises(ValidationError):
            division_result_from_contract(division_document)

    def test_negative_zero_remainder_rejected(self):
        document = division_result_to_contract(divide("10", "5"))
        document["remainder"]["sign"] = "-"
        with pytest.raises(PydanticValidationError):
            division_result_from_contract(document)

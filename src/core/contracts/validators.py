"""
JSON Schema Contract Validators

Модуль для валидации JSON представлений значений движка согласно
формальным JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (src/core/contracts/schema/):
- big_integer.json
- division_result.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.big_integer import BigInteger
from src.core.math.division import DivisionResult


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'big_integer')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class BigIntegerValidator(ContractValidator):
    """Валидатор для big_integer контракта."""

    def __init__(self):
        super().__init__("big_integer")


class DivisionResultValidator(ContractValidator):
    """Валидатор для division_result контракта."""

    def __init__(self):
        super().__init__("division_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_big_integer(data: Dict[str, Any]) -> None:
    """
    Валидация big_integer данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BigIntegerValidator().validate(data)


def validate_division_result(data: Dict[str, Any]) -> None:
    """
    Валидация division_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DivisionResultValidator().validate(data)


def division_result_to_contract(result: DivisionResult) -> Dict[str, Any]:
    """
    Сериализация результата деления в контракт division_result.

    Args:
        result: DivisionResult из src.core.math.division.divide

    Returns:
        Проверенный по схеме dict
    """
    data = {
        "quotient": result.quotient.to_contract(),
        "remainder": result.remainder.to_contract(),
    }
    validate_division_result(data)
    return data


def division_result_from_contract(data: Dict[str, Any]) -> DivisionResult:
    """
    Восстановление DivisionResult из контракта division_result.

    Частное и остаток дополнительно проходят канонические инварианты BigInteger.

    Raises:
        ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если частное или остаток неканоничны ("-0")
    """
    validate_division_result(data)
    return DivisionResult(
        quotient=BigInteger.from_contract(data["quotient"]),
        remainder=BigInteger.from_contract(data["remainder"]),
    )

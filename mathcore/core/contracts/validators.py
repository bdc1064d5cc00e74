"""
JSON Schema Contract Validators

Валидация запросов от UI против формальных JSON Schema контрактов
(jsonschema, Draft 2020-12) до какого-либо вычисления.

Схемы (mathcore/core/contracts/schema/):
- matrix_request.json — Matrix Calculator
- quadratic_request.json — Quadratic Solver
- prime_request.json — Prime Factorizer
- plot_request.json — Graph Plotter

Нарушение контракта поднимается как ContractViolation с JSON path поля.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from mathcore.errors import ContractViolation


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат внутри пакета (package data) в каталоге schema/ рядом с этим модулем.
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

    def available_schemas(self) -> list[str]:
        """Имена всех схем каталога (без расширения)."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'matrix_request')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


def _json_path(error: jsonschema.ValidationError) -> str:
    """deque(['matrix_a', 1, 0]) → '$.matrix_a[1][0]'"""
    path = "$"
    for part in error.absolute_path:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


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

        Из нескольких нарушений сообщается наиболее релевантное
        (jsonschema.exceptions.best_match).

        Raises:
            ContractViolation: Если данные не соответствуют схеме
        """
        error = best_match(self.validator.iter_errors(data))
        if error is None:
            return
        path = _json_path(error)
        raise ContractViolation(f"Invalid {self.schema_name} at {path}: {error.message}", path=path)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        """Итератор по всем ошибкам валидации (сырые jsonschema ошибки)."""
        return self.validator.iter_errors(data)


class MatrixRequestValidator(ContractValidator):
    def __init__(self):
        super().__init__("matrix_request")


class QuadraticRequestValidator(ContractValidator):
    def __init__(self):
        super().__init__("quadratic_request")


class PrimeRequestValidator(ContractValidator):
    def __init__(self):
        super().__init__("prime_request")


class PlotRequestValidator(ContractValidator):
    def __init__(self):
        super().__init__("plot_request")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_matrix_request(data: Dict[str, Any]) -> None:
    """
    Валидация запроса Matrix Calculator.

    Raises:
        ContractViolation: Если данные не соответствуют схеме
    """
    MatrixRequestValidator().validate(data)


def validate_quadratic_request(data: Dict[str, Any]) -> None:
    """
    Валидация запроса Quadratic Solver.

    Raises:
        ContractViolation: Если данные не соответствуют схеме
    """
    QuadraticRequestValidator().validate(data)


def validate_prime_request(data: Dict[str, Any]) -> None:
    """
    Валидация запроса Prime Factorizer.

    Raises:
        ContractViolation: Если данные не соответствуют схеме
    """
    PrimeRequestValidator().validate(data)


def validate_plot_request(data: Dict[str, Any]) -> None:
    """
    Валидация запроса Graph Plotter.

    Raises:
        ContractViolation: Если данные не соответствуют схеме
    """
    PlotRequestValidator().validate(data)

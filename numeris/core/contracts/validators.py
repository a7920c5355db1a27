"""
JSON Schema Contract Validators

Модуль для валидации JSON payload'ов numeris согласно JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (numeris/core/contracts/schema/):
- dense_matrix.json      (сериализованная DenseMatrix)
- quadrature_report.json (отчёт demo: интеграл + error metrics)
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются внутри пакета, в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'dense_matrix')

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

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор payload'а против одной JSON Schema.

    Экземпляры кэшируются в get_validator(): схема загружается и
    компилируется один раз на процесс.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> ContractValidator:
    """Кэшированный валидатор для схемы из пакета."""
    return ContractValidator(schema_name)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_dense_matrix(data: Dict[str, Any]) -> None:
    """
    Валидация dense_matrix payload (DenseMatrix.to_dict / from_dict).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    get_validator("dense_matrix").validate(data)


def validate_quadrature_report(data: Dict[str, Any]) -> None:
    """
    Валидация quadrature_report payload (отчёт demo).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    get_validator("quadrature_report").validate(data)

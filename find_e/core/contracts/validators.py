"""
JSON Schema Contract Validators

Модуль для валидации сериализованных результатов поиска согласно
формальным JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (find_e/core/contracts/schema/):
- series_search_result.json
- ratio_search_result.json
"""

import json
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

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
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
            schema_name: Имя схемы без расширения (например, 'series_search_result')

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

        # Валидируем саму схему (meta-validation)
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


class SeriesSearchResultValidator(ContractValidator):
    """Валидатор для series_search_result контракта."""

    def __init__(self):
        super().__init__("series_search_result")


class RatioSearchResultValidator(ContractValidator):
    """Валидатор для ratio_search_result контракта."""

    def __init__(self):
        super().__init__("ratio_search_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_series_search_result(data: Dict[str, Any]) -> None:
    """
    Валидация series_search_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    SeriesSearchResultValidator().validate(data)


def validate_ratio_search_result(data: Dict[str, Any]) -> None:
    """
    Валидация ratio_search_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RatioSearchResultValidator().validate(data)

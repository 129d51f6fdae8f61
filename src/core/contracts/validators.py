"""
JSON Schema Contract Validators

Проверка JSON-представления отчёта pipeline (PipelineReport.model_dump(mode="json"))
против формального контракта Draft 2020-12.

Схемы поставляются вместе с пакетом (src/core/contracts/schema/) и читаются
через importlib.resources, поэтому работают и из wheel, и из editable install.
"""

import json
from functools import lru_cache
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any, Dict, Iterator, Union

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SchemaDir = Union[Path, Traversable]

# Пакет, внутри которого лежит каталог schema/
SCHEMA_PACKAGE = "src.core.contracts"
SCHEMA_SUBDIR = "schema"

PIPELINE_REPORT_SCHEMA = "pipeline_report"


def default_schema_dir() -> Traversable:
    """Каталог схем внутри установленного пакета."""
    return resources.files(SCHEMA_PACKAGE) / SCHEMA_SUBDIR


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema с meta-validation и кэшем.

    По умолчанию читает схемы из ресурсов пакета; schema_dir позволяет
    подставить другой каталог.
    """

    def __init__(self, schema_dir: SchemaDir | None = None):
        self._schema_dir = schema_dir if schema_dir is not None else default_schema_dir()
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> SchemaDir:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если схема не проходит meta-validation
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_file = self._schema_dir / f"{schema_name}.json"
        if not schema_file.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_file}")

        schema = json.loads(schema_file.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def get_schema_loader() -> SchemaLoader:
    """Общий загрузчик пакетных схем (создаётся при первом обращении)."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной именованной схемы."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or get_schema_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: первая найденная ошибка контракта
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class PipelineReportValidator(ContractValidator):
    """Контракт pipeline_report."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(PIPELINE_REPORT_SCHEMA, loader)


@lru_cache(maxsize=None)
def _pipeline_report_validator() -> PipelineReportValidator:
    return PipelineReportValidator()


def validate_pipeline_report(data: Dict[str, Any]) -> None:
    """
    Валидация pipeline_report данных общим (кэшированным) валидатором.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _pipeline_report_validator().validate(data)

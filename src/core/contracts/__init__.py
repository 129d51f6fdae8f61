"""
Contract Validation Module

Модуль для валидации JSON контрактов pipeline.
"""

from .validators import (
    PIPELINE_REPORT_SCHEMA,
    ContractValidator,
    PipelineReportValidator,
    SchemaLoader,
    default_schema_dir,
    get_schema_loader,
    validate_pipeline_report,
)

__all__ = [
    # Constants
    "PIPELINE_REPORT_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PipelineReportValidator",
    # Functions
    "default_schema_dir",
    "get_schema_loader",
    "validate_pipeline_report",
]

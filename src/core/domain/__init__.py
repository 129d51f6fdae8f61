"""
Domain models and value objects.

Contains the immutable report of a pipeline run.
"""

from src.core.domain.pipeline_report import PipelineReport

__all__ = [
    # Pipeline report model
    "PipelineReport",
]

"""Pipeline — оркестрация even-squares pipeline и вывод результатов."""

from .runner import main, render_report, run, run_pipeline

__all__ = [
    "run_pipeline",
    "render_report",
    "run",
    "main",
]

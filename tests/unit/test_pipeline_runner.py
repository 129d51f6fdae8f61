"""
Тесты для Pipeline runner — end-to-end прогон

Coverage:
- Эталонный вход [1..6] → [2,4,6] → [4,16,36] → 56
- Точный вывод в stdout (посимвольно)
- Вход не мутируется
- Конфигурация (int_width, подписи)
"""

import io
import logging

import pytest

from src.core.config import PipelineConfig
from src.core.math.integral import NonIntegralTypeError
from src.pipeline import main, render_report, run, run_pipeline

EXPECTED_OUTPUT = (
    'Original numbers: {"1", "2", "3", "4", "5", "6"}\n'
    'Even numbers: {"2", "4", "6"}\n'
    'Squared even numbers: {"4", "16", "36"}\n'
    "Sum of squared even numbers: 56\n"
)


class TestRunPipeline:
    """Тесты run_pipeline."""

    def test_reference_input(self):
        report = run_pipeline([1, 2, 3, 4, 5, 6])
        assert report.original == [1, 2, 3, 4, 5, 6]
        assert report.evens == [2, 4, 6]
        assert report.squared_evens == [4, 16, 36]
        assert report.total == 56

    def test_empty_input(self):
        report = run_pipeline([])
        assert report.evens == []
        assert report.squared_evens == []
        assert report.total == 0

    def test_no_evens(self):
        report = run_pipeline([1, 3, 5])
        assert report.total == 0

    def test_negative_input(self):
        report = run_pipeline([-4, -3, 2])
        assert report.evens == [-4, 2]
        assert report.squared_evens == [16, 4]
        assert report.total == 20

    def test_input_not_mutated(self):
        numbers = [1, 2, 3, 4]
        run_pipeline(numbers)
        assert numbers == [1, 2, 3, 4]

    def test_int32_wraparound(self):
        report = run_pipeline([46342], int_width=32)
        assert report.squared_evens == [-2147386332]
        assert report.total == -2147386332

    def test_non_integral_input(self):
        with pytest.raises(NonIntegralTypeError):
            run_pipeline([1, 2.0])

    def test_bool_input(self):
        """bool — целочисленный тип: приводится к int, отчёт строится."""
        report = run_pipeline([False, 2, True])
        assert report.original == [0, 2, 1]
        assert report.evens == [0, 2]
        assert report.squared_evens == [0, 4]
        assert report.total == 4
        assert all(type(n) is int for n in report.original)

    def test_int_subclass_input_normalized(self):
        class Count(int):
            pass

        report = run_pipeline([Count(3), Count(4)])
        assert report.evens == [4]
        assert all(type(n) is int for n in report.original + report.evens)

    def test_report_checked_against_contract(self, monkeypatch):
        """Каждый отчёт проходит через JSON контракт pipeline_report."""
        checked = []
        monkeypatch.setattr(
            "src.pipeline.runner.validate_pipeline_report", checked.append
        )
        run_pipeline([1, 2, 3, 4, 5, 6])
        assert checked == [
            {
                "schema_version": "1",
                "original": [1, 2, 3, 4, 5, 6],
                "evens": [2, 4, 6],
                "squared_evens": [4, 16, 36],
                "total": 56,
                "int_width": None,
            }
        ]

    def test_debug_logging(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="src.pipeline.runner"):
            run_pipeline([1, 2, 3, 4, 5, 6])
        assert "total=56" in caplog.text


class TestRenderReport:
    """Тесты render_report."""

    def test_reference_lines(self):
        lines = render_report(run_pipeline([1, 2, 3, 4, 5, 6]))
        assert lines == EXPECTED_OUTPUT.splitlines()

    def test_empty_lines(self):
        lines = render_report(run_pipeline([]))
        assert lines == [
            "Original numbers: {}",
            "Even numbers: {}",
            "Squared even numbers: {}",
            "Sum of squared even numbers: 0",
        ]

    def test_custom_labels(self):
        config = PipelineConfig(label_total="Total")
        lines = render_report(run_pipeline([2]), config)
        assert lines[-1] == "Total: 4"


class TestRunAndMain:
    """Тесты run и main."""

    def test_run_writes_to_stream(self):
        stream = io.StringIO()
        report = run(stream=stream)
        assert stream.getvalue() == EXPECTED_OUTPUT
        assert report.total == 56

    def test_run_with_bool_config(self):
        stream = io.StringIO()
        report = run(PipelineConfig(numbers=(True, 2)), stream=stream)
        assert report.total == 4
        assert stream.getvalue().splitlines() == [
            'Original numbers: {"1", "2"}',
            'Even numbers: {"2"}',
            'Squared even numbers: {"4"}',
            "Sum of squared even numbers: 4",
        ]

    def test_run_with_config(self):
        stream = io.StringIO()
        run(PipelineConfig(numbers=(10, 11)), stream=stream)
        assert stream.getvalue().splitlines()[-1] == "Sum of squared even numbers: 100"

    def test_main_output_exact(self, capsys):
        assert main() == 0
        captured = capsys.readouterr()
        assert captured.out == EXPECTED_OUTPUT

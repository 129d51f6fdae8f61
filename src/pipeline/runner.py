"""Pipeline runner — однократный прогон even-squares pipeline.

Поток данных:
    numbers → filter_even → square → constrained_sum
    original / evens / squared_evens → stringify → format_set (отображение)

Вывод — ровно четыре строки в stdout; логирование идёт в stderr.
"""

import logging
import sys
from typing import Optional, Sequence, TextIO

from src.core.config import PipelineConfig
from src.core.contracts import validate_pipeline_report
from src.core.display import format_line, format_set
from src.core.domain import PipelineReport
from src.core.math import (
    constrained_sum,
    filter_even,
    require_integral_sequence,
    square,
    stringify,
)

_LOGGER = logging.getLogger(__name__)


def run_pipeline(
    numbers: Sequence[int],
    int_width: Optional[int] = None,
) -> PipelineReport:
    """Прогон числовой цепочки.

    Args:
        numbers: входная последовательность целых (не мутируется)
        int_width: ширина signed целого для wraparound (None — без ограничения)

    Returns:
        PipelineReport со всеми стадиями

    Raises:
        NonIntegralTypeError: нецелочисленный элемент во входе
    """
    # bool и прочие numbers.Integral приводятся к int до первой стадии
    original = [int(n) for n in require_integral_sequence(numbers, "numbers")]
    evens = filter_even(original)
    squared_evens = square(evens, int_width)
    total = constrained_sum(squared_evens, int_width)

    report = PipelineReport(
        original=original,
        evens=evens,
        squared_evens=squared_evens,
        total=total,
        int_width=int_width,
    )
    validate_pipeline_report(report.model_dump(mode="json"))
    _LOGGER.debug("pipeline stages: %s, total=%d", report.stage_sizes(), report.total)
    return report


def render_report(
    report: PipelineReport,
    config: Optional[PipelineConfig] = None,
) -> list[str]:
    """Четыре строки вывода для отчёта."""
    config = config or PipelineConfig()
    return [
        format_line(config.label_original, format_set(stringify(report.original))),
        format_line(config.label_evens, format_set(stringify(report.evens))),
        format_line(config.label_squared, format_set(stringify(report.squared_evens))),
        format_line(config.label_total, report.total),
    ]


def run(config: Optional[PipelineConfig] = None, stream: Optional[TextIO] = None) -> PipelineReport:
    """Прогон pipeline по конфигурации и печать результата."""
    config = config or PipelineConfig()
    stream = stream or sys.stdout

    report = run_pipeline(config.numbers, config.int_width)
    for line in render_report(report, config):
        print(line, file=stream)
    return report


def main() -> int:
    """Точка входа: фиксированный вход, четыре строки в stdout, exit status 0."""
    logging.basicConfig(
        level=logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    run()
    return 0

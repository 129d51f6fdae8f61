"""
Config — параметры pipeline

Фиксированный входной литерал, подписи строк вывода и режим
целочисленной арифметики. Внешних источников конфигурации нет.
"""

from dataclasses import dataclass
from typing import Final, Optional

from src.core.math.integral import SUPPORTED_INT_WIDTHS, require_integral_sequence

# =============================================================================
# DEFAULTS
# =============================================================================

# Входная последовательность
DEFAULT_NUMBERS: Final[tuple[int, ...]] = (1, 2, 3, 4, 5, 6)

# Подписи строк вывода
LABEL_ORIGINAL: Final[str] = "Original numbers"
LABEL_EVENS: Final[str] = "Even numbers"
LABEL_SQUARED: Final[str] = "Squared even numbers"
LABEL_TOTAL: Final[str] = "Sum of squared even numbers"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PipelineConfig:
    """Конфигурация запуска pipeline.

    int_width:
    - None: Python int (arbitrary precision, переполнения нет)
    - 8/16/32/64: wraparound как у signed целого заданной ширины
    """
    numbers: tuple[int, ...] = DEFAULT_NUMBERS
    int_width: Optional[int] = None

    label_original: str = LABEL_ORIGINAL
    label_evens: str = LABEL_EVENS
    label_squared: str = LABEL_SQUARED
    label_total: str = LABEL_TOTAL

    def __post_init__(self):
        # Кортеж гарантирует неизменяемость входа
        object.__setattr__(
            self, "numbers", tuple(require_integral_sequence(self.numbers, "numbers"))
        )

        if self.int_width is not None and (
            type(self.int_width) is not int or self.int_width not in SUPPORTED_INT_WIDTHS
        ):
            raise ValueError(
                f"int_width must be one of {SUPPORTED_INT_WIDTHS}, got {self.int_width}"
            )

"""
PipelineReport — Модель результата even-squares pipeline

Immutable Pydantic модель со всеми промежуточными стадиями pipeline.
Полная совместимость с JSON Schema (src/core/contracts/schema/pipeline_report.json).
Строгие int: run_pipeline приводит bool и прочие numbers.Integral к int заранее.

Инварианты модели:
- evens == filter_even(original)
- squared_evens == square(evens, int_width)
- total == constrained_sum(squared_evens, int_width)
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictInt, field_validator, model_validator

from src.core.math.integral import SUPPORTED_INT_WIDTHS
from src.core.math.reducers import constrained_sum
from src.core.math.sequences import filter_even, square


# =============================================================================
# PIPELINE REPORT MODEL
# =============================================================================


class PipelineReport(BaseModel):
    """
    Снапшот всех стадий pipeline.

    Immutable модель (frozen=True). Строгие целые: float и числовые строки
    отвергаются при валидации.
    """

    schema_version: str = Field(
        "1", pattern="^1$", description="Версия схемы для tracking совместимости"
    )

    # Стадии
    original: list[StrictInt] = Field(..., description="Исходная последовательность")
    evens: list[StrictInt] = Field(..., description="Чётные элементы original")
    squared_evens: list[StrictInt] = Field(..., description="Квадраты evens")
    total: StrictInt = Field(..., description="Сумма squared_evens")

    # Арифметика
    int_width: Optional[StrictInt] = Field(
        None, description="Ширина signed целого (None — arbitrary precision)"
    )

    model_config = {"frozen": True}

    @field_validator("int_width")
    @classmethod
    def validate_int_width(cls, v: Optional[int]) -> Optional[int]:
        """Ширина только из SUPPORTED_INT_WIDTHS."""
        if v is not None and v not in SUPPORTED_INT_WIDTHS:
            raise ValueError(f"int_width must be one of {SUPPORTED_INT_WIDTHS}, got {v}")
        return v

    @model_validator(mode="after")
    def validate_stages(self) -> "PipelineReport":
        """Согласованность стадий между собой."""
        expected_evens = filter_even(self.original)
        if self.evens != expected_evens:
            raise ValueError(
                f"evens {self.evens} do not match even elements of original {expected_evens}"
            )

        expected_squares = square(self.evens, self.int_width)
        if self.squared_evens != expected_squares:
            raise ValueError(
                f"squared_evens {self.squared_evens} do not match squares of evens "
                f"{expected_squares}"
            )

        expected_total = constrained_sum(self.squared_evens, self.int_width)
        if self.total != expected_total:
            raise ValueError(
                f"total {self.total} does not match sum of squared_evens {expected_total}"
            )

        return self

    def stage_sizes(self) -> dict[str, int]:
        """Размеры стадий (для диагностики)."""
        return {
            "original": len(self.original),
            "evens": len(self.evens),
            "squared_evens": len(self.squared_evens),
        }

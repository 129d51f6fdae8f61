"""
Core math modules для even-squares pipeline

Целочисленные guard'ы, ленивые трансформации последовательностей и
редукторы с ограничением на Integral.
"""

# Integral constraint
from src.core.math.integral import (
    SUPPORTED_INT_WIDTHS,
    IntegralT,
    NonIntegralTypeError,
    apply_int_width,
    is_integral,
    require_integral,
    require_integral_sequence,
    wrap_signed,
)

# Reducers
from src.core.math.reducers import constrained_sum

# Sequences
from src.core.math.sequences import (
    even_view,
    filter_even,
    materialize,
    square,
    square_view,
    stringify,
    stringify_view,
)

__all__ = [
    # Integral — Constants
    "SUPPORTED_INT_WIDTHS",
    # Integral — Types
    "IntegralT",
    # Integral — Exceptions
    "NonIntegralTypeError",
    # Integral — Functions
    "apply_int_width",
    "is_integral",
    "require_integral",
    "require_integral_sequence",
    "wrap_signed",
    # Reducers
    "constrained_sum",
    # Sequences — Views
    "even_view",
    "square_view",
    "stringify_view",
    "materialize",
    # Sequences — Transforms
    "filter_even",
    "square",
    "stringify",
]

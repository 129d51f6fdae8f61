"""
Reducers — редукторы, ограниченные целочисленными типами

constrained_sum: сумма последовательности, допустимая только для Integral.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все элементы проверяются ДО начала накопления
2. Пустая последовательность → 0 (аддитивный нейтральный элемент)
3. Накопление строго слева направо

Аккумуляция синтаксически работала бы и для float/str, поэтому guard
обязателен: float, Decimal, Fraction, str отвергаются NonIntegralTypeError.
"""

from typing import Iterable

from src.core.math.integral import (
    IntegralT,
    apply_int_width,
    require_integral_sequence,
)


def constrained_sum(
    numbers: Iterable[IntegralT], int_width: int | None = None
) -> int:
    """
    Сумма целочисленной последовательности.

    Args:
        numbers: Последовательность целых (int, bool, numbers.Integral)
        int_width: Ширина signed целого для wraparound (None — без ограничения)

    Returns:
        Сумма элементов как int; 0 для пустой последовательности

    Raises:
        NonIntegralTypeError: Если хотя бы один элемент не целочисленный

    Examples:
        >>> constrained_sum([])
        0
        >>> constrained_sum([1, 2, 3])
        6
        >>> constrained_sum([4, 16, 36])
        56
    """
    checked = require_integral_sequence(numbers, "numbers")

    total = 0
    for number in checked:
        total = apply_int_width(total + int(number), int_width)

    return total

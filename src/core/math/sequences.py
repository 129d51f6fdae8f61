"""
Sequences — ленивые views и материализующие трансформации

Модуль реализует три трансформации последовательностей целых чисел:
- even_view / filter_even: отбор чётных элементов (e % 2 == 0)
- square_view / square: возведение в квадрат
- stringify_view / stringify: каноническая десятичная запись

Каждая публичная трансформация = materialize(<view>(seq)).
View — одноразовый генератор, работа выполняется только при итерации.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входная последовательность никогда не мутируется
2. Порядок элементов сохраняется
3. square и stringify сохраняют длину
4. Нецелочисленный элемент → NonIntegralTypeError при достижении его view
"""

from typing import Iterable, Iterator, Sequence, TypeVar

from src.core.math.integral import apply_int_width, require_integral

T = TypeVar("T")


# =============================================================================
# LAZY VIEWS
# =============================================================================


def even_view(numbers: Iterable[int]) -> Iterator[int]:
    """
    Ленивый фильтр чётных элементов.

    Семантика Python % для отрицательных: -4 % 2 == 0, -3 % 2 == 1.
    """
    for index, number in enumerate(numbers):
        require_integral(number, f"numbers[{index}]")
        if number % 2 == 0:
            yield number


def square_view(numbers: Iterable[int], int_width: int | None = None) -> Iterator[int]:
    """
    Ленивое возведение в квадрат.

    Args:
        numbers: Исходные целые
        int_width: Ширина signed целого для wraparound (None — без ограничения)

    Yields:
        number * number (с wraparound при заданном int_width)
    """
    for index, number in enumerate(numbers):
        require_integral(number, f"numbers[{index}]")
        yield apply_int_width(number * number, int_width)


def stringify_view(numbers: Iterable[int]) -> Iterator[str]:
    """Ленивая десятичная запись: без ведущих нулей и разделителей, '-' для отрицательных."""
    for index, number in enumerate(numbers):
        require_integral(number, f"numbers[{index}]")
        yield str(int(number))


def materialize(view: Iterable[T]) -> list[T]:
    """Материализация view в новый список."""
    return list(view)


# =============================================================================
# MATERIALIZING TRANSFORMS
# =============================================================================


def filter_even(numbers: Sequence[int]) -> list[int]:
    """
    Отбор чётных элементов с сохранением порядка.

    Examples:
        >>> filter_even([1, 2, 3, 4, 5, 6])
        [2, 4, 6]
        >>> filter_even([1, 3, 5])
        []
        >>> filter_even([-4, -3, 0])
        [-4, 0]
    """
    return materialize(even_view(numbers))


def square(numbers: Sequence[int], int_width: int | None = None) -> list[int]:
    """
    Квадраты элементов, той же длины и в том же порядке.

    Examples:
        >>> square([2, 4, 6])
        [4, 16, 36]
        >>> square([46341], int_width=32)
        [-2147479015]
    """
    return materialize(square_view(numbers, int_width))


def stringify(numbers: Sequence[int]) -> list[str]:
    """
    Десятичная запись каждого элемента.

    Examples:
        >>> stringify([-5, 0, 12])
        ['-5', '0', '12']
    """
    return materialize(stringify_view(numbers))

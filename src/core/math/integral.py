"""
Integral — ограничение на целочисленные типы

Модуль задаёт "Integral capability" для обобщённых операций:
- Статически: IntegralT (TypeVar с bound=int) — type checker отвергает float/str
- В рантайме: явный guard через numbers.Integral до начала вычислений
- Эмуляция fixed-width signed арифметики (two's complement wraparound)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нецелочисленный тип отвергается ДО выполнения операции (NonIntegralTypeError)
2. bool считается целочисленным (подкласс int)
3. wrap_signed детерминирован и не зависит от платформы
"""

import numbers
from typing import Any, Final, Iterable, TypeVar

# =============================================================================
# TYPE PARAMETERS
# =============================================================================

# Обобщённый целочисленный тип для редукторов
IntegralT = TypeVar("IntegralT", bound=int)

# Допустимые ширины fixed-width целых (бит)
SUPPORTED_INT_WIDTHS: Final[tuple[int, ...]] = (8, 16, 32, 64)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NonIntegralTypeError(TypeError):
    """
    Попытка применить целочисленную операцию к нецелочисленному типу.

    Поднимается guard'ом до начала вычислений: частичный результат
    никогда не возвращается.
    """

    def __init__(self, name: str, value: Any):
        self.name = name
        self.value = value
        self.value_type = type(value)
        super().__init__(
            f"{name} must be an integral type, got {self.value_type.__name__} ({value!r})"
        )


# =============================================================================
# GUARDS
# =============================================================================


def is_integral(value: Any) -> bool:
    """
    Проверка, является ли значение целочисленным.

    Args:
        value: Проверяемое значение

    Returns:
        True для int, bool и любых numbers.Integral; False для float,
        Decimal, Fraction, str и прочего

    Examples:
        >>> is_integral(3)
        True
        >>> is_integral(3.0)
        False
        >>> is_integral("3")
        False
    """
    return isinstance(value, numbers.Integral)


def require_integral(value: IntegralT, name: str = "value") -> IntegralT:
    """
    Guard: значение обязано быть целочисленным.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        NonIntegralTypeError: Если value не numbers.Integral
    """
    if not is_integral(value):
        raise NonIntegralTypeError(name, value)
    return value


def require_integral_sequence(
    values: Iterable[IntegralT], name: str = "values"
) -> list[IntegralT]:
    """
    Guard для последовательности: проверяет ВСЕ элементы до возврата.

    Args:
        values: Последовательность значений
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Новый список с теми же элементами

    Raises:
        NonIntegralTypeError: Если хотя бы один элемент не целочисленный
            (в имени указывается индекс, например values[2])
    """
    checked: list[IntegralT] = []
    for index, value in enumerate(values):
        checked.append(require_integral(value, f"{name}[{index}]"))
    return checked


# =============================================================================
# FIXED-WIDTH ARITHMETIC
# =============================================================================


def wrap_signed(value: int, bits: int) -> int:
    """
    Приведение целого к signed fixed-width (two's complement wraparound).

    Python int не переполняется; функция воспроизводит поведение
    знакового целого заданной ширины.

    Args:
        value: Целое значение
        bits: Ширина в битах (> 0)

    Returns:
        Значение в диапазоне [-2**(bits-1), 2**(bits-1) - 1]

    Raises:
        ValueError: Если bits не положительное целое
        NonIntegralTypeError: Если value не целочисленный

    Examples:
        >>> wrap_signed(2**31, 32)
        -2147483648
        >>> wrap_signed(-1, 32)
        -1
        >>> wrap_signed(255, 8)
        -1
    """
    if isinstance(bits, bool) or not isinstance(bits, int) or bits <= 0:
        raise ValueError(f"bits must be a positive integer, got {bits!r}")

    require_integral(value, "value")

    modulus = 1 << bits
    half = 1 << (bits - 1)
    return ((int(value) + half) % modulus) - half


def apply_int_width(value: int, int_width: int | None) -> int:
    """Wraparound при заданной ширине, иначе значение без изменений."""
    if int_width is None:
        return value
    return wrap_signed(value, int_width)

"""
FormatSet — отображение последовательностей для консоли

Рендеринг только для вывода: результат не предназначен для обратного
парсинга, экранирование кавычек не выполняется.

Формат:
    []            → {}
    ["a"]         → {"a"}
    ["a", "b"]    → {"a", "b"}
"""

from typing import Final, Sequence

# Разделители формата
SET_OPEN: Final[str] = "{"
SET_CLOSE: Final[str] = "}"
ITEM_SEPARATOR: Final[str] = ", "
ITEM_QUOTE: Final[str] = '"'

# Разделитель label/value в строке вывода
LINE_SEPARATOR: Final[str] = ": "


def quote(item: str) -> str:
    """Обёртка элемента в двойные кавычки."""
    return f"{ITEM_QUOTE}{item}{ITEM_QUOTE}"


def format_set(items: Sequence[str]) -> str:
    """
    Рендеринг последовательности строк в brace-delimited список.

    Args:
        items: Строки для отображения (порядок сохраняется)

    Returns:
        '{' + '"a", "b", ...' + '}'; для пустой последовательности '{}'

    Raises:
        TypeError: Если элемент не str

    Examples:
        >>> format_set([])
        '{}'
        >>> format_set(["a"])
        '{"a"}'
        >>> format_set(["a", "b"])
        '{"a", "b"}'
    """
    for index, item in enumerate(items):
        if not isinstance(item, str):
            raise TypeError(
                f"items[{index}] must be str, got {type(item).__name__} ({item!r})"
            )

    return f"{SET_OPEN}{ITEM_SEPARATOR.join(quote(item) for item in items)}{SET_CLOSE}"


def format_line(label: str, value: object) -> str:
    """
    Строка вывода вида '<label>: <value>'.

    Examples:
        >>> format_line("Sum of squared even numbers", 56)
        'Sum of squared even numbers: 56'
    """
    return f"{label}{LINE_SEPARATOR}{value}"

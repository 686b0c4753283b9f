"""
Text View — Представление значения как последовательности символов

Единственное место, где поддерживаемые текстовые типы приводятся к str.
Алгоритм токенизации и сравнения реализован один раз и работает только с str;
все остальные типы делегируют через as_text().

Поддерживаемые типы:
- str и подклассы (включая HumaneStr)
- collections.UserString
- os.PathLike (pathlib.Path и т.п.; bytes-пути декодируются через os.fsdecode)
"""

import os
from collections import UserString
from typing import Any


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NotTextError(TypeError):
    """
    Значение не имеет текстового представления.

    Единственная ошибка границы API: сам алгоритм тотален для любого текста.
    """

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"humane ordering requires a text value, got {type(value).__name__}: {value!r}"
        )


# =============================================================================
# TEXT VIEW
# =============================================================================


def is_text(value: Any) -> bool:
    """Проверка, что значение имеет текстовое представление"""
    return isinstance(value, (str, UserString, os.PathLike))


def as_text(value: Any) -> str:
    """
    Приведение значения к str.

    Args:
        value: str, UserString или os.PathLike

    Returns:
        Строковое представление значения

    Raises:
        NotTextError: Если значение не текстовое (int, None, bytes, ...)

    Examples:
        >>> as_text("file-2")
        'file-2'
        >>> as_text(Path("logs/run-10.txt"))
        'logs/run-10.txt'
    """
    if isinstance(value, str):
        return value
    if isinstance(value, UserString):
        return value.data
    if isinstance(value, os.PathLike):
        path = os.fspath(value)
        if isinstance(path, bytes):
            return os.fsdecode(path)
        return path
    raise NotTextError(value)

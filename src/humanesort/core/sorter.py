"""
Sorter — Стабильная сортировка по humane ordering

humane_sort сортирует изменяемую последовательность на месте (по возрастанию,
стабильно), humane_sorted возвращает новый list.

Элементы коллекции:
- текстовые значения (str, UserString, os.PathLike) → HumaneKey
  (токенизация один раз на элемент, а не на каждое сравнение)
- объекты с методом humane_cmp (HumaneOrder) → сравнение через humane_cmp

Коллекция, где текстовые значения смешаны с произвольными HumaneOrder
объектами, не упорядочиваема: сравнение ключей разных видов даёт TypeError.
"""

import logging
from functools import total_ordering
from typing import Any, Callable, Iterable, MutableSequence, Optional

from humanesort.core.comparator import compare_sequences
from humanesort.core.text import NotTextError, is_text
from humanesort.core.tokenizer import tokenize
from humanesort.domain.capabilities import HumaneOrder
from humanesort.domain.ordering import Ordering

logger = logging.getLogger(__name__)

KeyFunc = Callable[[Any], Any]


# =============================================================================
# SORT KEYS
# =============================================================================


@total_ordering
class HumaneKey:
    """
    Ключ сортировки для текстового значения.

    Совместим с sorted(), min(), max(), bisect. Два ключа равны, если
    значения EQUAL по humane ordering ("a007" == "a7").
    """

    __slots__ = ("value", "tokens")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any):
        self.value = value
        self.tokens = tokenize(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HumaneKey):
            return NotImplemented
        return compare_sequences(self.tokens, other.tokens) is Ordering.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HumaneKey):
            return NotImplemented
        return compare_sequences(self.tokens, other.tokens) is Ordering.LESS

    def __repr__(self) -> str:
        return f"HumaneKey({self.value!r})"


@total_ordering
class _OrderKey:
    """Ключ сортировки для объекта, реализующего HumaneOrder"""

    __slots__ = ("value",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: HumaneOrder):
        self.value = value

    def _compare(self, other: "_OrderKey") -> Ordering:
        # humane_cmp может вернуть обычный int (-1/0/1) вместо Ordering
        return Ordering.from_int(self.value.humane_cmp(other.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _OrderKey):
            return NotImplemented
        return self._compare(other) is Ordering.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _OrderKey):
            return NotImplemented
        return self._compare(other) is Ordering.LESS


def humane_key(value: Any) -> HumaneKey:
    """
    Ключ сортировки для текстового значения.

    Args:
        value: Текстовое значение

    Returns:
        HumaneKey

    Raises:
        NotTextError: Если значение не текстовое

    Examples:
        >>> sorted(["v10", "v9"], key=humane_key)
        ['v9', 'v10']
    """
    return HumaneKey(value)


def _sort_key(key: Optional[KeyFunc]) -> Callable[[Any], Any]:
    def sort_key(item: Any) -> Any:
        value = item if key is None else key(item)
        if is_text(value):
            return HumaneKey(value)
        if isinstance(value, HumaneOrder):
            return _OrderKey(value)
        raise NotTextError(value)

    return sort_key


# =============================================================================
# SORTING
# =============================================================================


def humane_sort(
    items: MutableSequence[Any],
    *,
    key: Optional[KeyFunc] = None,
    reverse: bool = False,
) -> None:
    """
    Стабильная сортировка на месте по humane ordering.

    Args:
        items: Изменяемая последовательность (list, deque, ...)
        key: Функция, извлекающая сравниваемое значение из элемента
        reverse: По убыванию (равные элементы сохраняют исходный порядок)

    Raises:
        NotTextError: Если сравниваемое значение не текстовое и не HumaneOrder

    Examples:
        >>> names = ["something-11", "something-1", "something-2"]
        >>> humane_sort(names)
        >>> names
        ['something-1', 'something-2', 'something-11']
    """
    logger.debug("humane_sort: %d items (reverse=%s)", len(items), reverse)

    if isinstance(items, list):
        items.sort(key=_sort_key(key), reverse=reverse)
        return

    ordered = sorted(items, key=_sort_key(key), reverse=reverse)
    for index, item in enumerate(ordered):
        items[index] = item


def humane_sorted(
    items: Iterable[Any],
    *,
    key: Optional[KeyFunc] = None,
    reverse: bool = False,
) -> list:
    """
    Новый list, отсортированный по humane ordering. Вход не изменяется.

    Args:
        items: Любой iterable
        key: Функция, извлекающая сравниваемое значение из элемента
        reverse: По убыванию

    Returns:
        Отсортированный list
    """
    return sorted(items, key=_sort_key(key), reverse=reverse)


# =============================================================================
# SORTABLE COLLECTIONS
# =============================================================================


class HumaneList(list):
    """list, реализующий HumaneSortable"""

    def humane_sort(self, *, key: Optional[KeyFunc] = None, reverse: bool = False) -> None:
        humane_sort(self, key=key, reverse=reverse)

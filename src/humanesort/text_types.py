"""
HumaneStr — str с humane ordering

Операторы <, <=, >, >= используют humane ordering.
Равенство и hash остаются как у str: HumaneStr("a007") != HumaneStr("a7"),
хотя ни одна из строк не меньше другой.
"""

from typing import Any

from humanesort.core.comparator import humane_cmp
from humanesort.core.text import is_text
from humanesort.domain.ordering import Ordering


class HumaneStr(str):
    """str, реализующий HumaneOrder"""

    __slots__ = ()

    def humane_cmp(self, other: Any) -> Ordering:
        return humane_cmp(self, other)

    def __lt__(self, other: Any) -> bool:
        if not is_text(other):
            return NotImplemented
        return humane_cmp(self, other) is Ordering.LESS

    def __le__(self, other: Any) -> bool:
        if not is_text(other):
            return NotImplemented
        return humane_cmp(self, other) is not Ordering.GREATER

    def __gt__(self, other: Any) -> bool:
        if not is_text(other):
            return NotImplemented
        return humane_cmp(self, other) is Ordering.GREATER

    def __ge__(self, other: Any) -> bool:
        if not is_text(other):
            return NotImplemented
        return humane_cmp(self, other) is not Ordering.LESS

    def __repr__(self) -> str:
        return f"HumaneStr({str.__repr__(self)})"

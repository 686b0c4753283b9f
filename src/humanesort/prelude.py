"""
Prelude — всё необходимое для сортировки одной строкой импорта

    from humanesort.prelude import *

    names = ["something-11", "something-1", "something-2"]
    humane_sort(names)
"""

from humanesort.core.comparator import humane_cmp
from humanesort.core.sorter import HumaneList, humane_key, humane_sort, humane_sorted
from humanesort.domain.capabilities import HumaneOrder, HumaneSortable
from humanesort.domain.ordering import Ordering
from humanesort.text_types import HumaneStr

__all__ = [
    "HumaneList",
    "HumaneOrder",
    "HumaneSortable",
    "HumaneStr",
    "Ordering",
    "humane_cmp",
    "humane_key",
    "humane_sort",
    "humane_sorted",
]

"""
Capabilities — HumaneOrder / HumaneSortable

- HumaneOrder: тип умеет сравнивать себя с другим экземпляром (humane_cmp)
- HumaneSortable: коллекция умеет сортировать себя на месте (humane_sort)

Structural typing (Protocol): реализация не требует наследования.
"""

from typing import Any, Protocol, runtime_checkable

from humanesort.domain.ordering import Ordering


@runtime_checkable
class HumaneOrder(Protocol):
    """Тип, упорядочиваемый по humane ordering"""

    def humane_cmp(self, other: Any) -> Ordering: ...


@runtime_checkable
class HumaneSortable(Protocol):
    """Коллекция, сортируемая на месте по humane ordering"""

    def humane_sort(self) -> None: ...

"""
Ordering — Результат сравнения двух значений

Единственный тип результата для всех сравнений пакета: LESS / EQUAL / GREATER.

Ordering наследует int, поэтому значение можно вернуть напрямую из
cmp-функции (functools.cmp_to_key) или сравнить с 0.
"""

from enum import Enum
from typing import Any


class Ordering(int, Enum):
    """Результат сравнения (left относительно right)"""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left: Any, right: Any) -> "Ordering":
        """
        Ordering для двух нативно сравнимых значений.

        Args:
            left: Левое значение
            right: Правое значение (того же типа)

        Returns:
            LESS если left < right, GREATER если left > right, иначе EQUAL

        Examples:
            >>> Ordering.of("a", "b")
            <Ordering.LESS: -1>
            >>> Ordering.of(3, 3)
            <Ordering.EQUAL: 0>
        """
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL

    @classmethod
    def from_int(cls, value: int) -> "Ordering":
        """Ordering по знаку int (интероп со старыми cmp-функциями)"""
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> "Ordering":
        """LESS ↔ GREATER, EQUAL без изменений"""
        return Ordering(-self.value)

    def is_eq(self) -> bool:
        return self is Ordering.EQUAL

    def is_lt(self) -> bool:
        return self is Ordering.LESS

    def is_gt(self) -> bool:
        return self is Ordering.GREATER

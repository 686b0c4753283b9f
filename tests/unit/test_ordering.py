"""
Тесты для Ordering

Проверяет:
1. Ordering.of для нативно сравнимых значений
2. Конверсию из int (cmp-интероп)
3. reverse и предикаты
"""

from functools import cmp_to_key

import pytest

from humanesort.domain import Ordering


class TestOrderingConstruction:
    """Тесты построения Ordering"""

    @pytest.mark.parametrize(
        "left,right,expected",
        [
            ("a", "b", Ordering.LESS),
            ("b", "a", Ordering.GREATER),
            ("a", "a", Ordering.EQUAL),
            (1, 2, Ordering.LESS),
            (3, 3, Ordering.EQUAL),
        ],
    )
    def test_of(self, left, right, expected: Ordering) -> None:
        """Ordering.of повторяет операторы < и >"""
        assert Ordering.of(left, right) is expected

    @pytest.mark.parametrize(
        "value,expected",
        [(-5, Ordering.LESS), (0, Ordering.EQUAL), (42, Ordering.GREATER)],
    )
    def test_from_int(self, value: int, expected: Ordering) -> None:
        """Ordering по знаку int"""
        assert Ordering.from_int(value) is expected


class TestOrderingBehaviour:
    """Тесты поведения Ordering"""

    def test_reverse(self) -> None:
        """LESS ↔ GREATER, EQUAL без изменений"""
        assert Ordering.LESS.reverse() is Ordering.GREATER
        assert Ordering.GREATER.reverse() is Ordering.LESS
        assert Ordering.EQUAL.reverse() is Ordering.EQUAL

    def test_predicates(self) -> None:
        assert Ordering.LESS.is_lt()
        assert Ordering.EQUAL.is_eq()
        assert Ordering.GREATER.is_gt()
        assert not Ordering.LESS.is_gt()

    def test_int_values(self) -> None:
        """Ordering — int, пригоден как результат cmp-функции"""
        assert Ordering.LESS == -1
        assert Ordering.EQUAL == 0
        assert Ordering.GREATER == 1
        assert Ordering.LESS < 0 < Ordering.GREATER

    def test_usable_with_cmp_to_key(self) -> None:
        """cmp-функция может возвращать Ordering напрямую"""
        result = sorted([3, 1, 2], key=cmp_to_key(Ordering.of))
        assert result == [1, 2, 3]

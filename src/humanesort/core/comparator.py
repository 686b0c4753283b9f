"""
Comparator — Humane ordering для последовательностей токенов

Сравнение позиционное, начиная с индекса 0. Правила для каждой позиции:
- Обе позиции отсутствуют → EQUAL (последовательности исчерпаны одновременно)
- Отсутствует одна → отсутствующая сторона меньше
- TEXT vs TEXT → обычный порядок строк (codepoint)
- NUMERIC vs NUMERIC → по magnitude: сначала длина без ведущих нулей, затем цифры
- NUMERIC vs TEXT → NUMERIC всегда больше

Равенство на позиции → переход к следующей позиции.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Числа не преобразуются в int фиксированной ширины (длина не ограничена)
2. Ведущие нули не влияют на результат: "a007" и "a7" равны
3. Нет fallback на сравнение исходного текста при равенстве
"""

from dataclasses import dataclass
from enum import Enum
from itertools import zip_longest
from typing import Any

from humanesort.core.tokenizer import tokenize
from humanesort.domain.ordering import Ordering
from humanesort.domain.token import Token, TokenKind, TokenSequence


# =============================================================================
# ENUMS
# =============================================================================


class DecisionRule(str, Enum):
    """Правило, определившее результат сравнения"""

    EXHAUSTED = "EXHAUSTED"  # обе последовательности исчерпаны без различий
    ABSENT = "ABSENT"  # у одной стороны нет токена на позиции
    TEXT = "TEXT"  # TEXT vs TEXT
    NUMERIC = "NUMERIC"  # NUMERIC vs NUMERIC
    KIND = "KIND"  # NUMERIC vs TEXT


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ComparisonTrace:
    """Результат сравнения с объяснением, где и почему он получен."""

    ordering: Ordering
    rule: DecisionRule

    # Позиция, на которой найдено различие (None при EXHAUSTED)
    position: int | None
    left_token: Token | None
    right_token: Token | None

    def describe(self) -> str:
        """Человекочитаемое описание решения"""
        if self.rule is DecisionRule.EXHAUSTED:
            return "equal: both sides exhausted without a difference"
        left = self.left_token.text if self.left_token is not None else "<absent>"
        right = self.right_token.text if self.right_token is not None else "<absent>"
        return (
            f"{self.ordering.name.lower()} at position {self.position} "
            f"({self.rule.value}): {left!r} vs {right!r}"
        )


# =============================================================================
# TOKEN COMPARISON
# =============================================================================


def compare_magnitudes(left: str, right: str) -> Ordering:
    """
    Сравнение двух строк цифр по числовому значению.

    Args:
        left: Цифры без ведущих нулей
        right: Цифры без ведущих нулей

    Returns:
        Ordering по длине, при равной длине — по цифрам
    """
    if len(left) != len(right):
        return Ordering.of(len(left), len(right))
    return Ordering.of(left, right)


def _rule_for(left: Token, right: Token) -> DecisionRule:
    if left.kind is not right.kind:
        return DecisionRule.KIND
    if left.kind is TokenKind.NUMERIC:
        return DecisionRule.NUMERIC
    return DecisionRule.TEXT


def compare_tokens(left: Token, right: Token) -> Ordering:
    """
    Сравнение двух токенов.

    Args:
        left: Токен левой стороны
        right: Токен правой стороны

    Returns:
        Ordering по правилам humane ordering для одной позиции

    Examples:
        >>> compare_tokens(Token.numeric("9"), Token.text_run("b"))
        <Ordering.GREATER: 1>
        >>> compare_tokens(Token.numeric("007"), Token.numeric("7"))
        <Ordering.EQUAL: 0>
    """
    rule = _rule_for(left, right)
    if rule is DecisionRule.TEXT:
        return Ordering.of(left.text, right.text)
    if rule is DecisionRule.NUMERIC:
        return compare_magnitudes(left.magnitude, right.magnitude)
    # NUMERIC всегда больше TEXT
    return Ordering.GREATER if left.kind is TokenKind.NUMERIC else Ordering.LESS


# =============================================================================
# SEQUENCE COMPARISON
# =============================================================================


def trace_sequences(left: TokenSequence, right: TokenSequence) -> ComparisonTrace:
    """
    Позиционное сравнение последовательностей с трассировкой решения.

    Args:
        left: Токены левой строки
        right: Токены правой строки

    Returns:
        ComparisonTrace с результатом, позицией и правилом
    """
    for position, (ours, theirs) in enumerate(zip_longest(left.tokens, right.tokens)):
        if ours is None:
            return ComparisonTrace(Ordering.LESS, DecisionRule.ABSENT, position, None, theirs)
        if theirs is None:
            return ComparisonTrace(Ordering.GREATER, DecisionRule.ABSENT, position, ours, None)

        ordering = compare_tokens(ours, theirs)
        if ordering is not Ordering.EQUAL:
            return ComparisonTrace(ordering, _rule_for(ours, theirs), position, ours, theirs)

    return ComparisonTrace(Ordering.EQUAL, DecisionRule.EXHAUSTED, None, None, None)


def compare_sequences(left: TokenSequence, right: TokenSequence) -> Ordering:
    """
    Позиционное сравнение последовательностей токенов.

    Args:
        left: Токены левой строки
        right: Токены правой строки

    Returns:
        LESS / EQUAL / GREATER
    """
    return trace_sequences(left, right).ordering


# =============================================================================
# TEXT COMPARISON
# =============================================================================


def humane_cmp(left: Any, right: Any) -> Ordering:
    """
    Humane ordering двух текстовых значений.

    Args:
        left: Текстовое значение (str, UserString, os.PathLike)
        right: Текстовое значение

    Returns:
        LESS / EQUAL / GREATER

    Raises:
        NotTextError: Если одно из значений не текстовое

    Examples:
        >>> humane_cmp("item-2", "item-11")
        <Ordering.LESS: -1>
        >>> humane_cmp("a007", "a7")
        <Ordering.EQUAL: 0>
    """
    return compare_sequences(tokenize(left), tokenize(right))


def explain(left: Any, right: Any) -> ComparisonTrace:
    """
    Объяснение результата humane_cmp.

    Args:
        left: Текстовое значение
        right: Текстовое значение

    Returns:
        ComparisonTrace; explain(a, b).ordering == humane_cmp(a, b)
    """
    return trace_sequences(tokenize(left), tokenize(right))

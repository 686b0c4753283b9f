"""
Core algorithm: tokenizer, comparator, sorter.

Все модули чистые и синхронные; состояние не переживает вызов.
"""

from humanesort.core.comparator import (
    ComparisonTrace,
    DecisionRule,
    compare_magnitudes,
    compare_sequences,
    compare_tokens,
    explain,
    humane_cmp,
    trace_sequences,
)
from humanesort.core.sorter import (
    HumaneKey,
    HumaneList,
    humane_key,
    humane_sort,
    humane_sorted,
)
from humanesort.core.text import NotTextError, as_text, is_text
from humanesort.core.tokenizer import classify_char, iter_tokens, tokenize

__all__ = [
    # Text view
    "NotTextError",
    "as_text",
    "is_text",
    # Tokenizer
    "classify_char",
    "iter_tokens",
    "tokenize",
    # Comparator
    "ComparisonTrace",
    "DecisionRule",
    "compare_magnitudes",
    "compare_sequences",
    "compare_tokens",
    "explain",
    "humane_cmp",
    "trace_sequences",
    # Sorter
    "HumaneKey",
    "HumaneList",
    "humane_key",
    "humane_sort",
    "humane_sorted",
]

"""
humanesort — сортировка так, как ожидает человек

Строка разбивается на чередующиеся числовые и нечисловые сегменты; числовые
сегменты сравниваются по значению: "item-2" < "item-11".

Правила сравнения сегментов:
- Нечисловые сегменты сравниваются обычным порядком строк
- Числа всегда больше нечисловых сегментов
- Числа упорядочены по значению (ведущие нули игнорируются)
- Отсутствующий сегмент всегда меньше присутствующего
"""

from humanesort.core import (
    ComparisonTrace,
    DecisionRule,
    HumaneKey,
    HumaneList,
    NotTextError,
    as_text,
    compare_sequences,
    compare_tokens,
    explain,
    humane_cmp,
    humane_key,
    humane_sort,
    humane_sorted,
    iter_tokens,
    tokenize,
)
from humanesort.domain import (
    HumaneOrder,
    HumaneSortable,
    Ordering,
    Token,
    TokenKind,
    TokenSequence,
)
from humanesort.text_types import HumaneStr

__version__ = "0.1.0"

__all__ = [
    # Domain
    "Ordering",
    "Token",
    "TokenKind",
    "TokenSequence",
    # Capabilities
    "HumaneOrder",
    "HumaneSortable",
    "HumaneStr",
    "HumaneList",
    # Errors
    "NotTextError",
    # Tokenizer
    "as_text",
    "iter_tokens",
    "tokenize",
    # Comparator
    "ComparisonTrace",
    "DecisionRule",
    "compare_sequences",
    "compare_tokens",
    "explain",
    "humane_cmp",
    # Sorter
    "HumaneKey",
    "humane_key",
    "humane_sort",
    "humane_sorted",
    "__version__",
]

"""
Domain models and value objects.

Contains the value types shared by every component: Token, TokenSequence, Ordering.
"""

from humanesort.domain.capabilities import HumaneOrder, HumaneSortable
from humanesort.domain.ordering import Ordering
from humanesort.domain.token import (
    ASCII_DIGITS,
    ZERO_MAGNITUDE,
    Token,
    TokenKind,
    TokenSequence,
    is_ascii_digit,
)

__all__ = [
    # Constants
    "ASCII_DIGITS",
    "ZERO_MAGNITUDE",
    # Capabilities
    "HumaneOrder",
    "HumaneSortable",
    # Ordering
    "Ordering",
    # Token models
    "Token",
    "TokenKind",
    "TokenSequence",
    # Classification
    "is_ascii_digit",
]

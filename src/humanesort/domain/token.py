"""
Token — Модель сегмента строки

Token представляет один максимальный непрерывный участок символов одного класса:
- NUMERIC: непустая последовательность ASCII цифр 0-9
- TEXT: непустая последовательность без ASCII цифр

TokenSequence — упорядоченная последовательность токенов одной строки.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый токен непустой
2. Соседние токены в последовательности всегда разного класса (чередование)
3. Конкатенация текстов всех токенов восстанавливает исходную строку

Immutable Pydantic модели (frozen=True). Токенизатор строит их через
model_construct (инварианты гарантированы алгоритмом), ручное создание
проходит полную валидацию.
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# КЛАССИФИКАЦИЯ СИМВОЛОВ
# =============================================================================

# Только ASCII цифры считаются числовыми (Unicode цифры других письменностей — TEXT)
ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")

# Magnitude числа, состоящего только из нулей
ZERO_MAGNITUDE: Final[str] = "0"


def is_ascii_digit(char: str) -> bool:
    """Проверка, что символ — ASCII цифра 0-9"""
    return char in ASCII_DIGITS


# =============================================================================
# ENUMS
# =============================================================================


class TokenKind(str, Enum):
    """Класс токена"""

    NUMERIC = "numeric"
    TEXT = "text"


# =============================================================================
# TOKEN MODEL
# =============================================================================


class Token(BaseModel):
    """
    Сегмент строки с тегом класса.

    Tagged variant с ровно двумя случаями (NUMERIC / TEXT), а не иерархия классов:
    компаратор разбирает все комбинации kind явно.
    """

    kind: TokenKind = Field(..., description="Класс токена (numeric/text)")
    text: str = Field(..., min_length=1, description="Исходные символы сегмента")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_text_matches_kind(self) -> "Token":
        """Проверка, что все символы соответствуют классу токена"""
        if self.kind is TokenKind.NUMERIC:
            if not all(is_ascii_digit(c) for c in self.text):
                raise ValueError(f"NUMERIC token must contain only ASCII digits: {self.text!r}")
        elif any(is_ascii_digit(c) for c in self.text):
            raise ValueError(f"TEXT token must not contain ASCII digits: {self.text!r}")
        return self

    @classmethod
    def numeric(cls, digits: str) -> "Token":
        """NUMERIC токен (с валидацией)"""
        return cls(kind=TokenKind.NUMERIC, text=digits)

    @classmethod
    def text_run(cls, chars: str) -> "Token":
        """TEXT токен (с валидацией)"""
        return cls(kind=TokenKind.TEXT, text=chars)

    @property
    def is_numeric(self) -> bool:
        return self.kind is TokenKind.NUMERIC

    @property
    def magnitude(self) -> str:
        """
        Числовое значение NUMERIC токена без ведущих нулей.

        Строка цифр, а не int: длина числа не ограничена.

        Returns:
            Цифры без ведущих нулей; "0" для токена из одних нулей

        Raises:
            ValueError: Для TEXT токена

        Examples:
            >>> Token.numeric("007").magnitude
            '7'
            >>> Token.numeric("000").magnitude
            '0'
        """
        if self.kind is not TokenKind.NUMERIC:
            raise ValueError(f"TEXT token has no magnitude: {self.text!r}")
        return self.text.lstrip("0") or ZERO_MAGNITUDE


# =============================================================================
# TOKEN SEQUENCE MODEL
# =============================================================================


class TokenSequence(BaseModel):
    """
    Последовательность токенов одной строки.

    Эфемерная: строится на время одного сравнения или сортировки.
    Пустая строка даёт пустую последовательность.
    """

    tokens: tuple[Token, ...] = Field(default=(), description="Токены в порядке следования")

    model_config = {"frozen": True}

    @field_validator("tokens")
    @classmethod
    def validate_alternation(cls, v: tuple[Token, ...]) -> tuple[Token, ...]:
        """Проверка чередования классов соседних токенов"""
        for index in range(1, len(v)):
            if v[index].kind is v[index - 1].kind:
                raise ValueError(
                    f"adjacent tokens at positions {index - 1} and {index} "
                    f"share kind {v[index].kind.value!r}"
                )
        return v

    @property
    def text(self) -> str:
        """Исходная строка (конкатенация текстов токенов)"""
        return "".join(token.text for token in self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]

"""
Tokenizer — Разбиение строки на чередующиеся сегменты

Алгоритм:
1. Проход слева направо, классификация каждого символа (digit / other)
2. Накопление подряд идущих символов одного класса в один токен
3. Новый токен при смене класса, сброс последнего участка в конце строки

Пустая строка → пустая TokenSequence. Классификация тотальна: всё, что не
ASCII цифра (пробелы, пунктуация, не-ASCII текст и цифры), — TEXT.
"""

from typing import Any, Iterator

from humanesort.core.text import as_text
from humanesort.domain.token import Token, TokenKind, TokenSequence, is_ascii_digit


def classify_char(char: str) -> TokenKind:
    """
    Класс символа.

    Args:
        char: Один символ

    Returns:
        NUMERIC для ASCII 0-9, иначе TEXT
    """
    return TokenKind.NUMERIC if is_ascii_digit(char) else TokenKind.TEXT


def iter_tokens(text: str) -> Iterator[Token]:
    """
    Ленивая токенизация строки.

    Args:
        text: Исходная строка

    Yields:
        Token для каждого максимального участка символов одного класса
    """
    start = 0
    current_kind: TokenKind | None = None

    for index, char in enumerate(text):
        kind = classify_char(char)
        if kind is current_kind:
            continue
        if current_kind is not None:
            # Участок непустой и однороден по классу: валидация модели не нужна
            yield Token.model_construct(kind=current_kind, text=text[start:index])
        start = index
        current_kind = kind

    if current_kind is not None:
        yield Token.model_construct(kind=current_kind, text=text[start:])


def tokenize(value: Any) -> TokenSequence:
    """
    Токенизация текстового значения.

    Args:
        value: Любое значение с текстовым представлением (см. as_text)

    Returns:
        TokenSequence; tokenize(s).text == s

    Raises:
        NotTextError: Если значение не текстовое

    Examples:
        >>> [t.text for t in tokenize("item-11").tokens]
        ['item-', '11']
        >>> len(tokenize(""))
        0
    """
    text = as_text(value)
    return TokenSequence.model_construct(tokens=tuple(iter_tokens(text)))

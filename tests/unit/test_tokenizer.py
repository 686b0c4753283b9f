"""
Тесты для Tokenizer

Проверяет:
1. Разбиение на максимальные участки одного класса
2. Lossless токенизацию (конкатенация == исход)
3. Чередование классов
4. Тотальность классификации (пробелы, пунктуация, не-ASCII)
5. Ленивую токенизацию (iter_tokens)
"""

from collections import UserString
from pathlib import PurePosixPath

import pytest

from humanesort.core import NotTextError, classify_char, iter_tokens, tokenize
from humanesort.domain import TokenKind, TokenSequence


def _texts(value) -> list[str]:
    return [token.text for token in tokenize(value).tokens]


def _kinds(value) -> list[TokenKind]:
    return [token.kind for token in tokenize(value).tokens]


# Корпус строк для проверки инвариантов
CORPUS = [
    "",
    "a",
    "1",
    "item-11",
    "11LOL",
    "v1.2.10-rc3",
    "007 bond",
    "  spaced  42  ",
    "ünïcødé-٣-7",
    "🙂1🙂22",
    "0000",
    "a\n1\tb",
]


class TestTokenize:
    """Тесты для tokenize"""

    def test_empty_input(self) -> None:
        """Пустая строка → пустая последовательность"""
        sequence = tokenize("")
        assert isinstance(sequence, TokenSequence)
        assert len(sequence) == 0

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("abc", ["abc"]),
            ("123", ["123"]),
            ("11LOL", ["11", "LOL"]),
            ("item-11", ["item-", "11"]),
            ("something-2.txt", ["something-", "2", ".txt"]),
            ("v1.2.10", ["v", "1", ".", "2", ".", "10"]),
            ("a-9", ["a-", "9"]),
        ],
    )
    def test_maximal_runs(self, text: str, expected: list[str]) -> None:
        assert _texts(text) == expected

    def test_kinds(self) -> None:
        assert _kinds("x10y") == [TokenKind.TEXT, TokenKind.NUMERIC, TokenKind.TEXT]
        assert _kinds("10y2") == [TokenKind.NUMERIC, TokenKind.TEXT, TokenKind.NUMERIC]

    def test_minus_is_text(self) -> None:
        """'-' — обычный текст, а не знак числа"""
        assert _texts("-5") == ["-", "5"]
        assert _kinds("-5") == [TokenKind.TEXT, TokenKind.NUMERIC]

    def test_decimal_point_is_text(self) -> None:
        assert _texts("3.14") == ["3", ".", "14"]

    def test_unicode_digits_are_text(self) -> None:
        """Цифры других письменностей — TEXT"""
        assert _texts("a٣1") == ["a٣", "1"]
        assert _kinds("४२") == [TokenKind.TEXT]

    def test_leading_zeros_kept(self) -> None:
        """Токенизация не теряет ведущие нули"""
        assert _texts("a007") == ["a", "007"]


class TestTokenizeInvariants:
    """Инварианты токенизации на корпусе строк"""

    @pytest.mark.parametrize("text", CORPUS)
    def test_lossless(self, text: str) -> None:
        """Конкатенация токенов восстанавливает исходную строку"""
        assert tokenize(text).text == text

    @pytest.mark.parametrize("text", CORPUS)
    def test_alternation_and_non_empty(self, text: str) -> None:
        tokens = list(tokenize(text).tokens)
        assert all(token.text for token in tokens)
        for previous, current in zip(tokens, tokens[1:]):
            assert previous.kind is not current.kind

    @pytest.mark.parametrize("text", CORPUS)
    def test_tokens_match_kind(self, text: str) -> None:
        for token in tokenize(text).tokens:
            for char in token.text:
                assert classify_char(char) is token.kind

    @pytest.mark.parametrize("text", CORPUS)
    def test_revalidates_as_model(self, text: str) -> None:
        """Построенная последовательность проходит полную валидацию Pydantic"""
        sequence = tokenize(text)
        assert TokenSequence.model_validate(sequence.model_dump()) == sequence


class TestTextInputs:
    """tokenize принимает любые текстовые значения"""

    def test_user_string(self) -> None:
        assert _texts(UserString("run-10")) == ["run-", "10"]

    def test_path_like(self) -> None:
        assert _texts(PurePosixPath("logs/run-10.txt")) == ["logs/run-", "10", ".txt"]

    @pytest.mark.parametrize("value", [None, 42, 4.2, b"bytes", ["a"]])
    def test_non_text_rejected(self, value) -> None:
        with pytest.raises(NotTextError):
            tokenize(value)

    def test_not_text_error_is_type_error(self) -> None:
        with pytest.raises(TypeError, match="got int"):
            tokenize(42)


class TestIterTokens:
    """Тесты для iter_tokens"""

    def test_lazy(self) -> None:
        iterator = iter_tokens("a1b2")
        assert next(iterator).text == "a"
        assert next(iterator).text == "1"

    def test_empty(self) -> None:
        assert list(iter_tokens("")) == []

    def test_single_run(self) -> None:
        tokens = list(iter_tokens("   "))
        assert len(tokens) == 1
        assert tokens[0].kind is TokenKind.TEXT

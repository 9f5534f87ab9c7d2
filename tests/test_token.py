import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from monkey.token import KEYWORDS, SINGLE_CHAR_TOKENS, Token, TokenKind, lookup_identifier  # noqa: E402


@pytest.mark.parametrize(
    "word, kind",
    [
        ("fn", TokenKind.FUNCTION),
        ("let", TokenKind.LET),
        ("true", TokenKind.TRUE),
        ("false", TokenKind.FALSE),
        ("if", TokenKind.IF),
        ("else", TokenKind.ELSE),
        ("return", TokenKind.RETURN),
    ],
)
def test_keywords(word, kind):
    assert lookup_identifier(word) is kind


@pytest.mark.parametrize("word", ["Let", "LET", "lets", "fun", "re", "x", "_"])
def test_non_keywords_are_identifiers(word):
    assert lookup_identifier(word) is TokenKind.IDENT


def test_keyword_table_is_closed():
    assert sorted(KEYWORDS) == ["else", "false", "fn", "if", "let", "return", "true"]


def test_two_char_operator_starters_need_lookahead():
    assert "=" not in SINGLE_CHAR_TOKENS
    assert "!" not in SINGLE_CHAR_TOKENS


def test_token_is_immutable_value():
    a = Token(TokenKind.IDENT, "five")
    b = Token(TokenKind.IDENT, "five")
    assert a == b
    assert hash(a) == hash(b)
    assert a != Token(TokenKind.IDENT, "six")
    with pytest.raises(AttributeError):
        a.text = "six"  # type: ignore[misc]

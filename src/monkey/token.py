"""
Token definitions for the Monkey language.

Token kinds, the keyword table and the table of single-character tokens
that need no lookahead.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict


class TokenKind(Enum):
    ILLEGAL = auto()  # character the language does not know about
    EOF = auto()

    # Identifiers / literals
    IDENT = auto()
    INT = auto()

    # Operators
    ASSIGN = auto()
    PLUS = auto()
    MINUS = auto()
    BANG = auto()
    ASTERISK = auto()
    SLASH = auto()
    LT = auto()
    GT = auto()
    EQ = auto()
    NOT_EQ = auto()

    # Delimiters
    COMMA = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    # Keywords
    FUNCTION = auto()
    LET = auto()
    TRUE = auto()
    FALSE = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()


KEYWORDS: Dict[str, TokenKind] = {
    "fn": TokenKind.FUNCTION,
    "let": TokenKind.LET,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "return": TokenKind.RETURN,
}

# '=' and '!' are absent: they may start a two-character operator.
SINGLE_CHAR_TOKENS: Dict[str, TokenKind] = {
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
    "+": TokenKind.PLUS,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "-": TokenKind.MINUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str


def lookup_identifier(text: str) -> TokenKind:
    """Return the keyword kind for ``text``, or IDENT for anything else.

    Matching is exact and case-sensitive.
    """
    return KEYWORDS.get(text, TokenKind.IDENT)


__all__ = ["TokenKind", "Token", "KEYWORDS", "SINGLE_CHAR_TOKENS", "lookup_identifier"]

"""
Monkey language lexer.

Single pass over ASCII source with one character of lookahead. Tokens are
produced on demand by ``next_token``; unknown characters come back as
ILLEGAL tokens rather than raising.
"""

import logging
from typing import Iterator, List

from .token import SINGLE_CHAR_TOKENS, Token, TokenKind, lookup_identifier

logger = logging.getLogger(__name__)

# Current character once the input is exhausted.
EOF_CHAR = "\0"

WHITESPACE = " \t\n\r"


class LexerError(Exception):
    def __init__(self, token: Token):
        super().__init__(f"Illegal character {token.text!r}")
        self.token = token


def is_letter(ch: str) -> bool:
    # Digits end an identifier: "foo1" is IDENT("foo"), INT("1").
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Scanner:
    def __init__(self, source: str):
        self.source = source
        self.length = len(source)
        self.position = 0
        self.read_position = 0
        self.ch = EOF_CHAR
        self._read_char()

    def next_token(self) -> Token:
        self._skip_whitespace()
        ch = self.ch

        if ch == "=":
            if self._peek_char() == "=":
                self._read_char()
                tok = Token(TokenKind.EQ, "==")
            else:
                tok = Token(TokenKind.ASSIGN, ch)
        elif ch == "!":
            if self._peek_char() == "=":
                self._read_char()
                tok = Token(TokenKind.NOT_EQ, "!=")
            else:
                tok = Token(TokenKind.BANG, ch)
        elif ch in SINGLE_CHAR_TOKENS:
            tok = Token(SINGLE_CHAR_TOKENS[ch], ch)
        elif ch == EOF_CHAR:
            return Token(TokenKind.EOF, "")
        elif is_letter(ch):
            # The run readers leave the cursor on the first character after
            # the run, so no extra advance here.
            text = self._read_identifier()
            return Token(lookup_identifier(text), text)
        elif is_digit(ch):
            return Token(TokenKind.INT, self._read_number())
        else:
            logger.debug("illegal character %r at offset %d", ch, self.position)
            tok = Token(TokenKind.ILLEGAL, ch)

        self._read_char()
        return tok

    def scan(self, strict: bool = False) -> List[Token]:
        """Drain the scanner into a list ending with a single EOF token.

        With ``strict`` set, the first ILLEGAL token raises LexerError.
        """
        tokens: List[Token] = []
        for tok in self:
            if strict and tok.kind is TokenKind.ILLEGAL:
                raise LexerError(tok)
            tokens.append(tok)
        logger.debug("scanned %d tokens", len(tokens))
        return tokens

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind is TokenKind.EOF:
                return

    def _read_char(self) -> None:
        if self.read_position >= self.length:
            self.ch = EOF_CHAR
            self.position = self.length
            self.read_position = self.length + 1
            return
        self.ch = self.source[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def _peek_char(self) -> str:
        if self.read_position >= self.length:
            return EOF_CHAR
        return self.source[self.read_position]

    def _skip_whitespace(self) -> None:
        while self.ch in WHITESPACE:
            self._read_char()

    def _read_identifier(self) -> str:
        start = self.position
        while is_letter(self.ch):
            self._read_char()
        return self.source[start : self.position]

    def _read_number(self) -> str:
        start = self.position
        while is_digit(self.ch):
            self._read_char()
        return self.source[start : self.position]


def new_scanner(source: str) -> Scanner:
    return Scanner(source)


__all__ = ["Scanner", "LexerError", "new_scanner"]

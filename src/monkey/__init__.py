from .lexer import LexerError, Scanner, new_scanner
from .token import KEYWORDS, Token, TokenKind, lookup_identifier

__version__ = "0.1.0"

__all__ = [
    "Scanner",
    "new_scanner",
    "LexerError",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "lookup_identifier",
]

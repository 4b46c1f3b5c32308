"""monkey lexer — maximal-munch tokenizer for the monkey language."""

from monkey.lexer.tokens import KEYWORDS, Token, TokenType
from monkey.lexer.lexer import IntegerOverflowError, Lexer, LexerError, tokenize

__all__ = [
    "KEYWORDS",
    "Token",
    "TokenType",
    "Lexer",
    "LexerError",
    "IntegerOverflowError",
    "tokenize",
]

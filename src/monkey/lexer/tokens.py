"""Token types and Token dataclass for the monkey lexer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Every distinct token the monkey lexer can produce."""

    # Sentinels
    ILLEGAL = auto()
    EOF = auto()

    # Literals
    IDENTIFIER = auto()
    INTEGER = auto()

    # Operators
    ASSIGN = auto()         # =
    PLUS = auto()
    MINUS = auto()
    BANG = auto()           # !
    SLASH = auto()
    ASTERISK = auto()
    LESS_THAN = auto()
    GREATER_THAN = auto()
    EQUALS = auto()         # ==
    NOT_EQUALS = auto()     # !=

    # Delimiters
    COMMA = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    # Keywords
    LET = auto()
    FUNCTION = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()
    TRUE = auto()
    FALSE = auto()


# Map keyword strings to token types
KEYWORDS: dict[str, TokenType] = {
    "let": TokenType.LET,
    "fn": TokenType.FUNCTION,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}

# Single-character symbols with no two-character form
SYMBOLS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.SLASH,
    "*": TokenType.ASTERISK,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

_SPELLINGS: dict[TokenType, str] = {
    **{tt: text for text, tt in SYMBOLS.items()},
    **{tt: text for text, tt in KEYWORDS.items()},
    TokenType.ASSIGN: "=",
    TokenType.BANG: "!",
    TokenType.EQUALS: "==",
    TokenType.NOT_EQUALS: "!=",
    TokenType.EOF: "",
}


# Digits per block when formatting integers past the interpreter's
# str/int conversion limit
_DIGIT_BLOCK = 1000


def format_integer(value: int) -> str:
    """Decimal spelling of a non-negative ``value`` of any size."""
    block = 10 ** _DIGIT_BLOCK
    if value < block:
        return str(value)
    parts: list[int] = []
    while value:
        value, rem = divmod(value, block)
        parts.append(rem)
    head = str(parts.pop())
    return head + "".join(f"{part:0{_DIGIT_BLOCK}d}" for part in reversed(parts))


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the lexer.

    ``value`` is the payload of data-bearing tokens: the lexeme text of an
    IDENTIFIER and the parsed ``int`` of an INTEGER.

    ``text`` is the source text the lexer scanned for ILLEGAL and INTEGER
    tokens. It is left out of equality, so ``Token(TokenType.ILLEGAL)``
    matches every ILLEGAL token whatever character produced it; read
    ``.text`` to find the offending character.
    """

    type: TokenType
    value: str | int | None = None
    text: str | None = field(default=None, compare=False)

    @property
    def lexeme(self) -> str:
        """Source spelling that scans back to this token."""
        if self.type in _SPELLINGS:
            return _SPELLINGS[self.type]
        if self.text is not None:
            return self.text
        if isinstance(self.value, int):
            return format_integer(self.value)
        if self.value is None:
            return ""
        return self.value

    def __repr__(self) -> str:
        if isinstance(self.value, int):
            return f"Token({self.type.name}, {format_integer(self.value)})"
        if self.type is TokenType.ILLEGAL and self.text is not None:
            return f"Token({self.type.name}, {self.text!r})"
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"

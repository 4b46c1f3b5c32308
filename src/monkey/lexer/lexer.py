"""monkey lexer — hand-written maximal-munch tokenizer.

Design decisions:
- Whitespace (space, tab, newline, carriage return) separates tokens and
  is never emitted.
- Unknown characters become ILLEGAL tokens; scanning never stops early.
- ``=`` and ``!`` look one character ahead to form ``==`` and ``!=``.
- Identifiers are runs of ASCII letters only; integers are runs of ASCII
  digits parsed as unsigned values of any length.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from monkey.lexer.tokens import KEYWORDS, SYMBOLS, Token, TokenType

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\n\r")

# Stays under the interpreter's str/int conversion limit
_DIGIT_BLOCK = 1000


class LexerError(Exception):
    """Raised on lexical errors with the source offset."""

    def __init__(self, message: str, offset: int):
        self.offset = offset
        super().__init__(f"offset {offset}: {message}")


class IntegerOverflowError(LexerError):
    """Raised when an integer literal does not fit the configured width."""

    def __init__(self, digits: str, bits: int, offset: int):
        self.digits = digits
        self.bits = bits
        shown = digits if len(digits) <= 24 else f"{digits[:12]}... ({len(digits)} digits)"
        super().__init__(
            f"Integer literal {shown} does not fit in {bits} unsigned bits",
            offset,
        )


class Lexer:
    """Tokenizes monkey source code into a stream of `Token` objects.

    The lexer owns a single forward-only cursor. Tokens can be pulled one
    at a time, iterated lazily, or drained in bulk::

        lexer = Lexer("let five = 5;")
        lexer.next_token()        # Token(LET)
        list(lexer)               # the remaining tokens
        Lexer(source).tokenize()  # everything at once

    With ``integer_bits`` set, integer literals larger than an unsigned
    value of that width raise `IntegerOverflowError`; by default they are
    kept at full precision.
    """

    def __init__(self, source: str, *, integer_bits: int | None = None) -> None:
        if integer_bits is not None and integer_bits <= 0:
            raise ValueError(f"integer_bits must be positive, got {integer_bits}")
        self.source = source
        self.integer_bits = integer_bits
        self.pos = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Scan and return the next token, or EOF once input is exhausted."""
        self._skip_whitespace()
        if self._at_end():
            return Token(TokenType.EOF)

        start = self.pos
        ch = self._advance()

        if ch in SYMBOLS:
            return Token(SYMBOLS[ch])

        # Two-character operators
        if ch == "=":
            return self._scan_pair(ch, TokenType.EQUALS, TokenType.ASSIGN)
        if ch == "!":
            return self._scan_pair(ch, TokenType.NOT_EQUALS, TokenType.BANG)

        if _is_digit(ch):
            return self._scan_integer(start)

        # Identifiers and keywords
        if _is_letter(ch):
            return self._scan_identifier(start)

        logger.debug("Illegal character %r at offset %d", ch, start)
        return Token(TokenType.ILLEGAL, text=ch)

    def tokenize(self) -> list[Token]:
        """Scan the rest of the source and return the token list."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token.type is TokenType.EOF:
                return
            yield token

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def _scan_pair(self, ch: str, pair_type: TokenType, single_type: TokenType) -> Token:
        """Scan ``ch`` optionally followed by ``=``."""
        following = self._peek()
        if following is None:
            logger.debug("%r at end of input", ch)
            return Token(TokenType.ILLEGAL, text=ch)
        if following == "=":
            self._advance()
            return Token(pair_type)
        return Token(single_type)

    def _scan_integer(self, start: int) -> Token:
        """Scan an unsigned decimal integer literal."""
        while not self._at_end() and _is_digit(self._peek()):
            self._advance()

        digits = self.source[start:self.pos]
        bits = self.integer_bits
        # Reject by length first so huge runs are never converted
        if bits is not None and len(digits.lstrip("0")) > _max_decimal_digits(bits):
            self._overflow(digits, start)
        value = _parse_digits(digits)
        if bits is not None and value.bit_length() > bits:
            self._overflow(digits, start)
        return Token(TokenType.INTEGER, value, text=digits)

    def _overflow(self, digits: str, start: int) -> None:
        logger.debug("Integer of %d digits overflows %d bits", len(digits), self.integer_bits)
        raise IntegerOverflowError(digits, self.integer_bits, start)

    def _scan_identifier(self, start: int) -> Token:
        """Scan an identifier or keyword."""
        while not self._at_end() and _is_letter(self._peek()):
            self._advance()

        word = self.source[start:self.pos]
        token_type = KEYWORDS.get(word)
        if token_type is not None:
            return Token(token_type)
        return Token(TokenType.IDENTIFIER, word)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _peek(self) -> str | None:
        """Return the current character without consuming it, or None at end."""
        if self._at_end():
            return None
        return self.source[self.pos]

    def _advance(self) -> str:
        """Consume and return the current character."""
        ch = self.source[self.pos]
        self.pos += 1
        return ch

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._peek() in WHITESPACE:
            self._advance()


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def _parse_digits(digits: str) -> int:
    """Convert a digit run of any length, block by block."""
    value = 0
    for i in range(0, len(digits), _DIGIT_BLOCK):
        block = digits[i:i + _DIGIT_BLOCK]
        value = value * 10 ** len(block) + int(block)
    return value


def _max_decimal_digits(bits: int) -> int:
    """Upper bound on the decimal digits of an unsigned ``bits``-wide value."""
    # 30103 / 100000 rounds log10(2) up
    return bits * 30103 // 100000 + 1


def tokenize(source: str, *, integer_bits: int | None = None) -> list[Token]:
    """Tokenize ``source`` with a fresh `Lexer`."""
    return Lexer(source, integer_bits=integer_bits).tokenize()

"""Lexical scanner for chemical formulas.

Splits a formula string into symbol runs (``Mg``), digit runs (``12``) and the
structural characters ``(``, ``)`` and ``*``. Every token remembers the
zero-based position of its first character for error reporting.
"""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass
from typing import Iterator, Optional

from chemp.errors import UnexpectedCharacterError


class TokenKind(enum.Enum):
    SYMBOL = "symbol"
    NUMBER = "number"
    LPAREN = "("
    RPAREN = ")"
    ASTERISK = "*"


_PUNCTUATION = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "*": TokenKind.ASTERISK,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str
    position: int


class Tokenizer:
    """Single-pass scanner over a formula string."""

    def __init__(self, formula: str):
        self.formula = formula
        self._cursor = 0

    @property
    def cursor(self) -> int:
        """Position of the next unread character."""
        return self._cursor

    def next_token(self) -> Optional[Token]:
        """Consume and return the next token, or ``None`` at end of input.

        Raises:
            UnexpectedCharacterError: If the next character cannot start a token.
        """
        if self._cursor >= len(self.formula):
            return None

        start = self._cursor
        char = self.formula[start]

        if char in string.ascii_uppercase:
            return self._take(TokenKind.SYMBOL, start, string.ascii_lowercase)
        if char in string.digits:
            return self._take(TokenKind.NUMBER, start, string.digits)
        if char in _PUNCTUATION:
            self._cursor += 1
            return Token(_PUNCTUATION[char], char, start)

        raise UnexpectedCharacterError(char, start)

    def _take(self, kind: TokenKind, start: int, tail: str) -> Token:
        # First character is already known to match; extend over the longest run.
        end = start + 1
        while end < len(self.formula) and self.formula[end] in tail:
            end += 1
        self._cursor = end
        return Token(kind, self.formula[start:end], start)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

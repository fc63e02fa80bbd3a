"""Recursive-descent parser building a :class:`~chemp.tokens.Substance` tree.

Grammar::

    substance   = coefficient? component+ hydrate?
    component   = element | group
    group       = '(' component* ')' subscript?
    element     = symbol subscript?
    hydrate     = '*' coefficient? 'H' '2' 'O'
    subscript   = digit+
    coefficient = digit+

The parser reads one token of lookahead from :class:`~chemp.tokenizer.Tokenizer`.
"""

from __future__ import annotations

import logging
from typing import Optional

from chemp.errors import (
    IncorrectHydrateError,
    UnexpectedEndError,
    UnexpectedEndOfGroupError,
    UnexpectedTokenError,
    UnknownElementError,
)
from chemp.periodic_table import PeriodicTable
from chemp.tokenizer import Token, Tokenizer, TokenKind
from chemp.tokens import Component, Element, Group, Hydrate, Substance

logger = logging.getLogger(__name__)

_WATER_TOKENS = (
    (TokenKind.SYMBOL, "H"),
    (TokenKind.NUMBER, "2"),
    (TokenKind.SYMBOL, "O"),
)

# Counts of up to MAX_DIGITS digits multiplied through MAX_DEPTH nested groups
# stay within float range.
MAX_DIGITS = 9
MAX_DEPTH = 16


class Parser:
    def __init__(self, table: PeriodicTable, formula: str):
        self.table = table
        self.formula = formula
        self.tokenizer = Tokenizer(formula)
        self.lookahead: Optional[Token] = None
        self.depth = 0

    def parse(self) -> Substance:
        """Parse the whole formula.

        Raises:
            ChempError: On the first grammar or lookup violation.
        """
        self.lookahead = self.tokenizer.next_token()
        return self._substance()

    def _substance(self) -> Substance:
        substance = Substance(coefficient=self._number())

        component = self._component()
        if component is None:
            self._fail_missing("element or group")
        while component is not None:
            substance.add_component(component)
            component = self._component()

        if self._at(TokenKind.ASTERISK):
            substance.hydrate = self._hydrate()

        if self.lookahead is not None:
            self._fail_unexpected(self.lookahead)

        return substance

    def _component(self) -> Optional[Component]:
        if self._at(TokenKind.LPAREN):
            return self._group()
        if self._at(TokenKind.SYMBOL):
            return self._element()
        return None

    def _group(self) -> Group:
        opening = self._advance()
        if self.depth >= MAX_DEPTH:
            logger.debug("group at %d in %r nests deeper than %d", opening.position, self.formula, MAX_DEPTH)
            self._fail_unexpected(opening)
        group = Group()

        self.depth += 1
        component = self._component()
        while component is not None:
            group.add_component(component)
            component = self._component()
        self.depth -= 1

        if self.lookahead is None:
            logger.debug("group opened at %d in %r is never closed", opening.position, self.formula)
            raise UnexpectedEndOfGroupError(opening.position)
        if not self._at(TokenKind.RPAREN):
            self._fail_unexpected(self.lookahead)
        self._advance()

        group.subscript = self._number()
        return group

    def _element(self) -> Element:
        symbol = self._advance()
        chemical_element = self.table.lookup(symbol.value)
        if chemical_element is None:
            logger.debug("unknown symbol %r in %r", symbol.value, self.formula)
            raise UnknownElementError(symbol.value, symbol.position)
        return Element(chemical_element, self._number())

    def _hydrate(self) -> Hydrate:
        asterisk = self._advance()
        hydrate = Hydrate(coefficient=self._number())

        for kind, value in _WATER_TOKENS:
            token = self.lookahead
            if token is None or token.kind is not kind or token.value != value:
                logger.debug("hydrate at %d in %r is not water", asterisk.position, self.formula)
                raise IncorrectHydrateError(asterisk.position)
            self._advance()

        return hydrate

    def _number(self) -> int:
        """Read an optional subscript or coefficient, defaulting to 1."""
        if not self._at(TokenKind.NUMBER):
            return 1
        token = self._advance()
        digits = token.value.lstrip("0")
        if not digits or len(digits) > MAX_DIGITS:
            self._fail_unexpected(token)
        return int(digits)

    def _at(self, kind: TokenKind) -> bool:
        return self.lookahead is not None and self.lookahead.kind is kind

    def _advance(self) -> Token:
        token = self.lookahead
        self.lookahead = self.tokenizer.next_token()
        return token

    def _fail_missing(self, expected: str) -> None:
        if self.lookahead is None:
            logger.debug("%r ended, expected %s", self.formula, expected)
            raise UnexpectedEndError(expected)
        self._fail_unexpected(self.lookahead)

    def _fail_unexpected(self, token: Token) -> None:
        logger.debug("unexpected %r at %d in %r", token.value, token.position, self.formula)
        raise UnexpectedTokenError(token.value, token.position)

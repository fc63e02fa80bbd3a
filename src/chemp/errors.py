"""Exceptions raised while reading a chemical formula."""

from __future__ import annotations


class ChempError(ValueError):
    """Base class for every formula parsing error."""


class UnexpectedCharacterError(ChempError):
    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"unexpected character {character!r} at position {position}")


class UnexpectedTokenError(ChempError):
    def __init__(self, token: str, position: int):
        self.token = token
        self.position = position
        super().__init__(f"unexpected token {token!r} at position {position}")


class UnexpectedEndError(ChempError):
    """The formula ended while ``expected`` was still required."""

    def __init__(self, expected: str):
        self.expected = expected
        super().__init__(f"unexpected end of formula, expected {expected}")


class UnexpectedEndOfGroupError(ChempError):
    """A group was opened at ``position`` but never closed."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"unexpected end of group opened at position {position}")


class UnknownElementError(ChempError):
    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"unknown element {symbol!r} at position {position}")


class IncorrectHydrateError(ChempError):
    """The ``*`` suffix at ``position`` is not water (``H2O``)."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"incorrect hydrate at position {position}, expected H2O")

"""chemp: chemical formula parser.

Reads a molecular formula such as ``"MgSO4*7H2O"`` and reports its chemical
composition, molar mass and the mass percent of every element::

    >>> compound = parse("MgSO4*7H2O")
    >>> round(compound.molar_mass, 3)
    246.466
    >>> [(c.chemical_element.symbol, c.atoms_count) for c in compound.composition]
    [('Mg', 1), ('S', 1), ('O', 11), ('H', 14)]
"""

from __future__ import annotations

import logging

from chemp.compound import Component, Compound, atoms_by_symbol
from chemp.errors import (
    ChempError,
    IncorrectHydrateError,
    UnexpectedCharacterError,
    UnexpectedEndError,
    UnexpectedEndOfGroupError,
    UnexpectedTokenError,
    UnknownElementError,
)
from chemp.parser import Parser
from chemp.periodic_table import ChemicalElement, PeriodicTable, default_table

logger = logging.getLogger(__name__)


def parse(formula: str, table: PeriodicTable | None = None) -> Compound:
    """Parse ``formula`` into a :class:`Compound`.

    Args:
        formula: Molecular formula, e.g. ``"Ca(NO3)2"``.
        table: Periodic table used to resolve symbols. Defaults to the shared
            table of all 118 elements.

    Raises:
        ChempError: If the formula is malformed or names an unknown element.
    """
    if table is None:
        table = default_table()
    substance = Parser(table, formula).parse()
    compound = Compound.from_substance(substance)
    logger.debug("parsed %r, molar mass %.4f", formula, compound.molar_mass)
    return compound


__all__ = [
    "parse",
    "atoms_by_symbol",
    "ChemicalElement",
    "ChempError",
    "Component",
    "Compound",
    "IncorrectHydrateError",
    "PeriodicTable",
    "UnexpectedCharacterError",
    "UnexpectedEndError",
    "UnexpectedEndOfGroupError",
    "UnexpectedTokenError",
    "UnknownElementError",
    "default_table",
]

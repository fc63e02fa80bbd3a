"""Compound composition, molar mass and mass percentages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping

from chemp.periodic_table import ChemicalElement
from chemp.tokens import Element, Substance


@dataclass
class Component:
    """All atoms of one chemical element inside a compound.

    Attributes:
        chemical_element: The element these atoms belong to.
        atoms_count: Number of atoms of the element in the compound.
        mass_percent: Share of the compound molar mass (%).
    """

    chemical_element: ChemicalElement
    atoms_count: int
    mass_percent: float = 0.0

    @classmethod
    def from_element(cls, element: Element) -> Component:
        return cls(element.chemical_element, element.subscript)

    @property
    def mass(self) -> float:
        """Mass of all atoms of the element (g/mol)."""
        return self.chemical_element.atomic_weight * self.atoms_count

    def add_atoms(self, atoms_count: int) -> None:
        self.atoms_count += atoms_count

    def calculate_mass_percent(self, compound_mass: float) -> None:
        self.mass_percent = self.mass / compound_mass * 100.0


@dataclass
class Compound:
    """Result of parsing a formula.

    ``components`` is keyed by chemical symbol, in order of first appearance
    in the formula.
    """

    components: Dict[str, Component] = field(default_factory=dict)
    molar_mass: float = 0.0

    @classmethod
    def from_substance(cls, substance: Substance) -> Compound:
        return cls.from_elements(substance.elements())

    @classmethod
    def from_elements(cls, elements: Iterable[Element]) -> Compound:
        compound = cls()
        for element in elements:
            compound._add_element(element)
        compound._calculate_mass_percentage()
        return compound

    @property
    def composition(self) -> List[Component]:
        return list(self.components.values())

    def to_dict(self, precision: int | None = None) -> Dict[str, Any]:
        """Serializable payload of the compound, optionally rounded."""

        def _round(value: float) -> float:
            return value if precision is None else round(value, precision)

        return {
            "molar_mass": _round(self.molar_mass),
            "composition": [
                {
                    "symbol": component.chemical_element.symbol,
                    "atomic_weight": component.chemical_element.atomic_weight,
                    "atoms_count": component.atoms_count,
                    "mass": _round(component.mass),
                    "mass_percent": _round(component.mass_percent),
                }
                for component in self.components.values()
            ],
        }

    def _add_element(self, element: Element) -> None:
        symbol = element.chemical_element.symbol
        if symbol in self.components:
            self.components[symbol].add_atoms(element.subscript)
        else:
            self.components[symbol] = Component.from_element(element)
        self.molar_mass += element.molar_mass

    def _calculate_mass_percentage(self) -> None:
        for component in self.components.values():
            component.calculate_mass_percent(self.molar_mass)


def atoms_by_symbol(compound: Compound) -> Mapping[str, int]:
    """Shortcut view ``{symbol: atoms_count}`` of a compound."""
    return {symbol: component.atoms_count for symbol, component in compound.components.items()}

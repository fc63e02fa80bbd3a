"""Parse tree of a chemical formula.

A :class:`Substance` owns a list of components, each either an
:class:`Element` or a parenthesized :class:`Group`, plus an optional
:class:`Hydrate` suffix. ``elements()`` flattens any node into a list of
elements whose subscripts are multiplied through every enclosing scope.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from chemp.periodic_table import HYDROGEN, OXYGEN, ChemicalElement


@dataclass(frozen=True)
class Element:
    chemical_element: ChemicalElement
    subscript: int = 1

    @staticmethod
    def multiply(element: Element, coefficient: int) -> Element:
        return Element(element.chemical_element, element.subscript * coefficient)

    @property
    def molar_mass(self) -> float:
        return self.chemical_element.atomic_weight * self.subscript


@dataclass
class Group:
    composition: List[Component] = field(default_factory=list)
    subscript: int = 1

    def add_component(self, component: Component) -> None:
        self.composition.append(component)

    def elements(self) -> List[Element]:
        return _flatten(self.composition, self.subscript)


WATER = (Element(HYDROGEN, 2), Element(OXYGEN, 1))


@dataclass
class Hydrate:
    """``*nH2O`` suffix; the water pair is fixed and never read from input."""

    coefficient: int = 1
    water: Tuple[Element, Element] = field(default=WATER, init=False, repr=False)

    def elements(self) -> List[Element]:
        return [Element.multiply(element, self.coefficient) for element in self.water]


@dataclass
class Substance:
    coefficient: int = 1
    composition: List[Component] = field(default_factory=list)
    hydrate: Optional[Hydrate] = None

    def add_component(self, component: Component) -> None:
        self.composition.append(component)

    def elements(self) -> List[Element]:
        """Flatten the substance, hydrate water last (hydrogen, then oxygen)."""
        elements = _flatten(self.composition, self.coefficient)
        if self.hydrate is not None:
            elements.extend(
                Element.multiply(element, self.coefficient)
                for element in self.hydrate.elements()
            )
        return elements


Component = Union[Element, Group]


def _flatten(composition: List[Component], multiplier: int) -> List[Element]:
    elements: List[Element] = []
    for component in composition:
        if isinstance(component, Group):
            nested = component.elements()
        else:
            nested = [component]
        elements.extend(Element.multiply(element, multiplier) for element in nested)
    return elements

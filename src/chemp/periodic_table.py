"""Periodic table of the chemical elements used to resolve formula symbols."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Iterable, Iterator, Optional


@dataclass(frozen=True)
class ChemicalElement:
    """A chemical element with its standard atomic weight.

    Attributes:
        symbol: Chemical symbol, e.g. ``"Mg"``.
        atomic_weight: Standard atomic weight (g/mol).
        name: English element name.
    """

    symbol: str
    atomic_weight: float
    name: str = ""


class PeriodicTable:
    """Read-only mapping from chemical symbol to :class:`ChemicalElement`."""

    def __init__(self, elements: Iterable[ChemicalElement]):
        self._elements: Dict[str, ChemicalElement] = {
            element.symbol: element for element in elements
        }

    def lookup(self, symbol: str) -> Optional[ChemicalElement]:
        """Return the element for ``symbol`` or ``None`` if it is unknown."""
        return self._elements.get(symbol)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._elements

    def __iter__(self) -> Iterator[ChemicalElement]:
        return iter(self._elements.values())

    def __len__(self) -> int:
        return len(self._elements)


ELEMENTS = (
    ChemicalElement("H", 1.008, "Hydrogen"),
    ChemicalElement("He", 4.002, "Helium"),
    ChemicalElement("Li", 6.94, "Lithium"),
    ChemicalElement("Be", 9.012, "Beryllium"),
    ChemicalElement("B", 10.81, "Boron"),
    ChemicalElement("C", 12.011, "Carbon"),
    ChemicalElement("N", 14.007, "Nitrogen"),
    ChemicalElement("O", 15.999, "Oxygen"),
    ChemicalElement("F", 18.998, "Fluorine"),
    ChemicalElement("Ne", 20.1797, "Neon"),
    ChemicalElement("Na", 22.989, "Sodium"),
    ChemicalElement("Mg", 24.305, "Magnesium"),
    ChemicalElement("Al", 26.981, "Aluminium"),
    ChemicalElement("Si", 28.085, "Silicon"),
    ChemicalElement("P", 30.973, "Phosphorus"),
    ChemicalElement("S", 32.06, "Sulfur"),
    ChemicalElement("Cl", 35.45, "Chlorine"),
    ChemicalElement("Ar", 39.95, "Argon"),
    ChemicalElement("K", 39.0983, "Potassium"),
    ChemicalElement("Ca", 40.078, "Calcium"),
    ChemicalElement("Sc", 44.955, "Scandium"),
    ChemicalElement("Ti", 47.867, "Titanium"),
    ChemicalElement("V", 50.9415, "Vanadium"),
    ChemicalElement("Cr", 51.9961, "Chromium"),
    ChemicalElement("Mn", 54.938, "Manganese"),
    ChemicalElement("Fe", 55.845, "Iron"),
    ChemicalElement("Co", 58.933, "Cobalt"),
    ChemicalElement("Ni", 58.6934, "Nickel"),
    ChemicalElement("Cu", 63.546, "Copper"),
    ChemicalElement("Zn", 65.38, "Zinc"),
    ChemicalElement("Ga", 69.723, "Gallium"),
    ChemicalElement("Ge", 72.630, "Germanium"),
    ChemicalElement("As", 74.921, "Arsenic"),
    ChemicalElement("Se", 78.971, "Selenium"),
    ChemicalElement("Br", 79.904, "Bromine"),
    ChemicalElement("Kr", 83.798, "Krypton"),
    ChemicalElement("Rb", 85.4678, "Rubidium"),
    ChemicalElement("Sr", 87.62, "Strontium"),
    ChemicalElement("Y", 88.905, "Yttrium"),
    ChemicalElement("Zr", 91.224, "Zirconium"),
    ChemicalElement("Nb", 92.906, "Niobium"),
    ChemicalElement("Mo", 95.95, "Molybdenum"),
    ChemicalElement("Tc", 97.0, "Technetium"),
    ChemicalElement("Ru", 101.07, "Ruthenium"),
    ChemicalElement("Rh", 102.905, "Rhodium"),
    ChemicalElement("Pd", 106.42, "Palladium"),
    ChemicalElement("Ag", 107.8682, "Silver"),
    ChemicalElement("Cd", 112.414, "Cadmium"),
    ChemicalElement("In", 114.818, "Indium"),
    ChemicalElement("Sn", 118.710, "Tin"),
    ChemicalElement("Sb", 121.760, "Antimony"),
    ChemicalElement("Te", 127.60, "Tellurium"),
    ChemicalElement("I", 126.904, "Iodine"),
    ChemicalElement("Xe", 131.293, "Xenon"),
    ChemicalElement("Cs", 132.905, "Caesium"),
    ChemicalElement("Ba", 137.327, "Barium"),
    ChemicalElement("La", 138.905, "Lanthanum"),
    ChemicalElement("Ce", 140.116, "Cerium"),
    ChemicalElement("Pr", 140.907, "Praseodymium"),
    ChemicalElement("Nd", 144.242, "Neodymium"),
    ChemicalElement("Pm", 145.0, "Promethium"),
    ChemicalElement("Sm", 150.36, "Samarium"),
    ChemicalElement("Eu", 151.964, "Europium"),
    ChemicalElement("Gd", 157.25, "Gadolinium"),
    ChemicalElement("Tb", 158.925, "Terbium"),
    ChemicalElement("Dy", 162.500, "Dysprosium"),
    ChemicalElement("Ho", 164.930, "Holmium"),
    ChemicalElement("Er", 167.259, "Erbium"),
    ChemicalElement("Tm", 168.934, "Thulium"),
    ChemicalElement("Yb", 173.045, "Ytterbium"),
    ChemicalElement("Lu", 174.9668, "Lutetium"),
    ChemicalElement("Hf", 178.486, "Hafnium"),
    ChemicalElement("Ta", 180.947, "Tantalum"),
    ChemicalElement("W", 183.84, "Tungsten"),
    ChemicalElement("Re", 186.207, "Rhenium"),
    ChemicalElement("Os", 190.23, "Osmium"),
    ChemicalElement("Ir", 192.217, "Iridium"),
    ChemicalElement("Pt", 195.084, "Platinum"),
    ChemicalElement("Au", 196.966, "Gold"),
    ChemicalElement("Hg", 200.592, "Mercury"),
    ChemicalElement("Tl", 204.38, "Thallium"),
    ChemicalElement("Pb", 207.2, "Lead"),
    ChemicalElement("Bi", 208.980, "Bismuth"),
    ChemicalElement("Po", 209.0, "Polonium"),
    ChemicalElement("At", 210.0, "Astatine"),
    ChemicalElement("Rn", 222.0, "Radon"),
    ChemicalElement("Fr", 223.0, "Francium"),
    ChemicalElement("Ra", 226.0, "Radium"),
    ChemicalElement("Ac", 227.0, "Actinium"),
    ChemicalElement("Th", 232.0377, "Thorium"),
    ChemicalElement("Pa", 231.035, "Protactinium"),
    ChemicalElement("U", 238.028, "Uranium"),
    ChemicalElement("Np", 237.0, "Neptunium"),
    ChemicalElement("Pu", 244.0, "Plutonium"),
    ChemicalElement("Am", 243.0, "Americium"),
    ChemicalElement("Cm", 247.0, "Curium"),
    ChemicalElement("Bk", 247.0, "Berkelium"),
    ChemicalElement("Cf", 251.0, "Californium"),
    ChemicalElement("Es", 252.0, "Einsteinium"),
    ChemicalElement("Fm", 257.0, "Fermium"),
    ChemicalElement("Md", 258.0, "Mendelevium"),
    ChemicalElement("No", 259.0, "Nobelium"),
    ChemicalElement("Lr", 262.0, "Lawrencium"),
    ChemicalElement("Rf", 267.0, "Rutherfordium"),
    ChemicalElement("Db", 270.0, "Dubnium"),
    ChemicalElement("Sg", 269.0, "Seaborgium"),
    ChemicalElement("Bh", 270.0, "Bohrium"),
    ChemicalElement("Hs", 270.0, "Hassium"),
    ChemicalElement("Mt", 278.0, "Meitnerium"),
    ChemicalElement("Ds", 281.0, "Darmstadtium"),
    ChemicalElement("Rg", 281.0, "Roentgenium"),
    ChemicalElement("Cn", 285.0, "Copernicium"),
    ChemicalElement("Nh", 286.0, "Nihonium"),
    ChemicalElement("Fl", 289.0, "Flerovium"),
    ChemicalElement("Mc", 289.0, "Moscovium"),
    ChemicalElement("Lv", 293.0, "Livermorium"),
    ChemicalElement("Ts", 293.0, "Tennessine"),
    ChemicalElement("Og", 294.0, "Oganesson"),
)

HYDROGEN = ELEMENTS[0]
OXYGEN = ELEMENTS[7]


@lru_cache(maxsize=None)
def default_table() -> PeriodicTable:
    """Shared periodic table, built on first use."""
    return PeriodicTable(ELEMENTS)

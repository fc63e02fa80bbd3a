import unittest

from chemp.periodic_table import default_table
from chemp.tokens import Element, Group, Hydrate, Substance


def element(symbol, subscript=1):
    return Element(default_table().lookup(symbol), subscript)


class TestFlattening(unittest.TestCase):
    def test_element_multiplication(self):
        self.assertEqual(Element.multiply(element("K", 2), 2).subscript, 4)
        self.assertAlmostEqual(element("K", 2).molar_mass, 39.0983 * 2)

    def test_group_subscript_multiplication(self):
        group = Group([element("N"), element("O", 3)], 2)
        self.assertEqual(group.elements(), [element("N", 2), element("O", 6)])

    def test_group_with_unit_subscript_matches_body(self):
        body = [element("N"), element("O", 3)]
        self.assertEqual(Group(list(body), 1).elements(), body)

    def test_nested_groups_compose(self):
        # (K(NO3)2)3
        group = Group([element("K"), Group([element("N"), element("O", 3)], 2)], 3)
        self.assertEqual(
            group.elements(),
            [element("K", 3), element("N", 6), element("O", 18)],
        )

    def test_empty_group_contributes_nothing(self):
        self.assertEqual(Group([], 5).elements(), [])

    def test_hydrate_coefficient(self):
        self.assertEqual(Hydrate(7).elements(), [element("H", 14), element("O", 7)])

    def test_substance_coefficient_reaches_hydrate(self):
        substance = Substance(
            3,
            [element("Mg"), element("S"), element("O", 4)],
            Hydrate(7),
        )
        self.assertEqual(
            substance.elements(),
            [
                element("Mg", 3),
                element("S", 3),
                element("O", 12),
                element("H", 42),
                element("O", 21),
            ],
        )


if __name__ == '__main__':
    unittest.main()

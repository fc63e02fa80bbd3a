import json
import unittest

from typer.testing import CliRunner

from chemp.cli import app


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_parse(self):
        result = self.runner.invoke(app, ["parse", "Ca(NO3)2", "--precision", "3"])
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.stdout)
        self.assertEqual(payload["formula"], "Ca(NO3)2")
        self.assertAlmostEqual(payload["molar_mass"], 164.086, places=3)
        self.assertEqual(
            {row["symbol"]: row["atoms_count"] for row in payload["composition"]},
            {"Ca": 1, "N": 2, "O": 6},
        )

    def test_parse_writes_output(self):
        with self.runner.isolated_filesystem():
            result = self.runner.invoke(app, ["parse", "MgSO4*7H2O", "--output", "out.json"])
            self.assertEqual(result.exit_code, 0, result.output)
            with open("out.json") as f:
                payload = json.load(f)
        self.assertEqual(len(payload["composition"]), 4)

    def test_parse_error(self):
        result = self.runner.invoke(app, ["parse", "Xx2"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("unknown element 'Xx'", result.output)

    def test_parse_oversized_count(self):
        result = self.runner.invoke(app, ["parse", "H" + "9" * 400])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("unexpected token", result.output)

    def test_elements(self):
        result = self.runner.invoke(app, ["elements"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(json.loads(result.stdout)["Mg"], 24.305)


if __name__ == '__main__':
    unittest.main()

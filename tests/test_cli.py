"""Tests for the CLI commands against a temporary device store."""

import json
import sys
import tempfile
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from typer.testing import CliRunner

from chem_inventory.cli import app

runner = CliRunner()


def _stored_products(store: Path) -> list[dict]:
    data = json.loads(store.read_text(encoding="utf-8"))
    return json.loads(data["chemicals"])


class TestCli(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.store = Path(self._tmp.name) / "device_store.json"

    def tearDown(self):
        self._tmp.cleanup()

    def _invoke(self, *args: str, input: str | None = None):
        return runner.invoke(app, [*args, "--store", str(self.store)], input=input)

    def _add(self, name: str, stock: str = "50", unit: str = "L", min_stock: str = "10"):
        return self._invoke("add", name, "--stock", stock, "--unit", unit, "--min-stock", min_stock)

    def test_add_then_list(self):
        result = self._add("Sulfuric Acid")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Added Sulfuric Acid", result.output)

        products = _stored_products(self.store)
        self.assertEqual(len(products), 1)
        self.assertEqual(products[0]["name"], "Sulfuric Acid")
        self.assertEqual(products[0]["stock"], 50.0)
        self.assertEqual(products[0]["minStock"], 10.0)

        listed = self._invoke("list")
        self.assertEqual(listed.exit_code, 0, listed.output)
        self.assertIn("Sulfuric", listed.output)

    def test_list_empty_store(self):
        result = self._invoke("list")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("No products", result.output)

    def test_add_rejects_blank_name(self):
        result = self._add("   ")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Product name cannot be empty", result.output)
        self.assertFalse(self.store.exists())

    def test_add_rejects_negative_stock(self):
        result = self._add("Acetone", stock="-5")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Quantities cannot be negative", result.output)

    def test_edit_updates_only_given_fields(self):
        self._add("Acetone", stock="20", unit="L", min_stock="5")
        product_id = _stored_products(self.store)[0]["id"]

        result = self._invoke("edit", str(product_id), "--stock", "3")
        self.assertEqual(result.exit_code, 0, result.output)
        product = _stored_products(self.store)[0]
        self.assertEqual(product["stock"], 3.0)
        self.assertEqual(product["name"], "Acetone")
        self.assertEqual(product["unit"], "L")
        self.assertEqual(product["minStock"], 5.0)

    def test_edit_unknown_id_exits_nonzero(self):
        result = self._invoke("edit", "12345", "--name", "Ghost")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("No product with id 12345", result.output)

    def test_show_flags_low_stock(self):
        self._add("Toluene", stock="2", unit="mL", min_stock="5")
        product_id = _stored_products(self.store)[0]["id"]
        result = self._invoke("show", str(product_id))
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Toluene", result.output)
        self.assertIn("Below minimum stock", result.output)

    def test_list_low_only(self):
        self._add("Plenty", stock="100", min_stock="1")
        self._add("Scarce", stock="1", min_stock="10")
        result = self._invoke("list", "--low")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Scarce", result.output)
        self.assertNotIn("Plenty", result.output)

    def test_delete_with_yes(self):
        self._add("Acetone")
        product_id = _stored_products(self.store)[0]["id"]
        result = self._invoke("delete", str(product_id), "--yes")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn(f"Deleted product {product_id}", result.output)
        self.assertEqual(_stored_products(self.store), [])

    def test_delete_declined_at_prompt(self):
        self._add("Acetone")
        product_id = _stored_products(self.store)[0]["id"]
        result = self._invoke("delete", str(product_id), input="n\n")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Nothing deleted", result.output)
        self.assertEqual(len(_stored_products(self.store)), 1)


if __name__ == "__main__":
    unittest.main()

# tests/test_product_model.py

"""Tests for the Product and suggestion dataclasses."""

import dataclasses
import unittest

from src.models.product import Product
from src.models.suggestion import CorrectionResult, SearchSuggestion


class TestProductModel(unittest.TestCase):
    """Product dataclass unit tests."""

    def test_init_with_all_fields(self) -> None:
        """All fields are stored correctly."""
        product = Product(
            id="7",
            name="Diamond Eternity Band",
            category="Rings",
            price=165000.0,
            slug="diamond-eternity-band",
            subcategory="Bands",
            description="Sparkling eternity band.",
            currency="INR",
            weight="5.8g",
            purity="18K",
            metal_type="white_gold",
            in_stock=True,
            stock_quantity=15,
            images=("/products/eternity-band-1.jpg",),
            tags=("diamond", "eternity"),
            featured=False,
            bestseller=True,
            new_arrival=False,
            countries=("IN", "AE", "UK"),
        )
        self.assertEqual(product.id, "7")
        self.assertEqual(product.name, "Diamond Eternity Band")
        self.assertEqual(product.metal_type, "white_gold")
        self.assertEqual(product.tags, ("diamond", "eternity"))
        self.assertEqual(product.countries, ("IN", "AE", "UK"))
        self.assertTrue(product.bestseller)

    def test_defaults(self) -> None:
        """Optional fields default to expected values."""
        product = Product(id="1", name="X", category="Rings", price=1.0)
        self.assertEqual(product.currency, "INR")
        self.assertEqual(product.metal_type, "gold")
        self.assertEqual(product.subcategory, "")
        self.assertEqual(product.tags, ())
        self.assertTrue(product.in_stock)
        self.assertFalse(product.new_arrival)

    def test_equality(self) -> None:
        """Two products with identical fields are equal."""
        a = Product(id="1", name="A", category="Rings", price=10.0)
        b = Product(id="1", name="A", category="Rings", price=10.0)
        self.assertEqual(a, b)

    def test_frozen(self) -> None:
        """Catalog entries cannot be mutated after creation."""
        product = Product(id="1", name="A", category="Rings", price=10.0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            product.price = 5.0  # type: ignore[misc]

    def test_hashable(self) -> None:
        """Products can live in sets (tuples, not lists)."""
        product = Product(
            id="1", name="A", category="Rings", price=10.0, tags=("a",)
        )
        self.assertIn(product, {product})


class TestSuggestionModels(unittest.TestCase):
    """SearchSuggestion and CorrectionResult defaults."""

    def test_suggestion_defaults(self) -> None:
        s = SearchSuggestion("tag", "jhumkas")
        self.assertIsNone(s.product)
        self.assertIsNone(s.category_slug)

    def test_correction_defaults(self) -> None:
        """An empty result means "no correction"."""
        result = CorrectionResult()
        self.assertIsNone(result.correction)
        self.assertEqual(result.results, [])


if __name__ == "__main__":
    unittest.main()

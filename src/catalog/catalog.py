# src/catalog/catalog.py

"""Immutable in-memory product catalog and its storefront helpers."""

from dataclasses import dataclass

from src.config.settings import Settings
from src.models.product import Product


def format_amount(value: float, currency: str = "INR") -> str:
    """Format a price with its currency symbol and no minor units.

    INR uses lakh grouping (``2,95,000``); other currencies use
    thousands grouping (``295,000``).
    """
    symbol = Settings.CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    whole = f"{round(value):d}"
    if currency != "INR" or len(whole) <= 3:
        return f"{symbol}{round(value):,d}"

    head, tail = whole[:-3], whole[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return f"{symbol}{','.join(groups)},{tail}"


@dataclass(frozen=True)
class Catalog:
    """Ordered products plus the closed category list they draw from."""

    products: tuple[Product, ...] = ()
    categories: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.products)

    def get_by_id(self, product_id: str) -> Product | None:
        """Return the product with *product_id*, or ``None``."""
        return next(
            (p for p in self.products if p.id == product_id), None
        )

    def by_category(self, category: str) -> list[Product]:
        """Case-insensitive category filter."""
        wanted = category.lower()
        return [
            p for p in self.products if p.category.lower() == wanted
        ]

    def featured(self) -> list[Product]:
        return [p for p in self.products if p.featured and p.in_stock]

    def bestsellers(self) -> list[Product]:
        return [p for p in self.products if p.bestseller and p.in_stock]

    def new_arrivals(self) -> list[Product]:
        return [p for p in self.products if p.new_arrival and p.in_stock]

    def for_country(self, country: str) -> list[Product]:
        """In-stock products sold in *country* (``IN``, ``AE``, ``UK``).

        Raises ``ValueError`` for a code outside ``Settings.COUNTRIES``.
        """
        if country not in Settings.COUNTRIES:
            raise ValueError(
                f"Unknown country '{country}', expected one of "
                f"{', '.join(Settings.COUNTRIES)}"
            )
        return [
            p
            for p in self.products
            if country in p.countries and p.in_stock
        ]

    def price_range(self) -> tuple[float, float] | None:
        """Return ``(min, max)`` price, or ``None`` for an empty catalog."""
        if not self.products:
            return None
        prices = [p.price for p in self.products]
        return min(prices), max(prices)

    def ai_context(self) -> str:
        """Summarise the catalog for the shopping-assistant prompt."""
        categories = list(
            dict.fromkeys(p.category for p in self.products)
        )
        currency = (
            self.products[0].currency if self.products else "INR"
        )
        bounds = self.price_range()
        if bounds is None:
            price_line = "Price range: n/a."
        else:
            price_line = (
                f"Price range: {format_amount(bounds[0], currency)}"
                f" to {format_amount(bounds[1], currency)}."
            )
        in_stock = sum(1 for p in self.products if p.in_stock)

        lines = [
            f"Available product categories: {', '.join(categories)}.",
            price_line,
            "Featured products: "
            f"{', '.join(p.name for p in self.featured())}.",
            "Bestsellers: "
            f"{', '.join(p.name for p in self.bestsellers())}.",
            "New arrivals: "
            f"{', '.join(p.name for p in self.new_arrivals())}.",
            f"Total products available: {in_stock}.",
        ]
        return "\n".join(lines)

# src/catalog/loader.py

"""Load and validate the product catalog from its JSON asset."""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from src.catalog.catalog import Catalog
from src.config.settings import Settings
from src.models.product import METAL_TYPES, Product

logger = logging.getLogger("jewel_search.catalog")


class CatalogError(ValueError):
    """Raised when the catalog document itself is unusable."""


def _as_str_tuple(value: Any, field_name: str) -> tuple[str, ...]:
    """Coerce a JSON list of strings into a de-duplicated tuple."""
    if value is None:
        return ()
    if not isinstance(value, list):
        msg = f"'{field_name}' must be a list"
        raise TypeError(msg)
    items = [str(v).strip() for v in value if str(v).strip()]
    return tuple(dict.fromkeys(items))


def _parse_product(raw: dict[str, Any]) -> Product:
    """Build a Product from one catalog entry.

    Raises ``KeyError``, ``TypeError`` or ``ValueError`` for entries
    missing required fields or carrying invalid values.
    """
    product_id = str(raw["id"]).strip()
    name = str(raw["name"]).strip()
    category = str(raw["category"]).strip()
    if not product_id or not name or not category:
        msg = "id, name and category must be non-empty"
        raise ValueError(msg)

    price = raw["price"]
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        msg = f"price must be a number, got {price!r}"
        raise TypeError(msg)
    if price < 0:
        msg = f"price must be non-negative, got {price}"
        raise ValueError(msg)

    metal_type = raw.get("metalType", "gold")
    if metal_type not in METAL_TYPES:
        msg = f"unknown metal type {metal_type!r}"
        raise ValueError(msg)

    return Product(
        id=product_id,
        name=name,
        category=category,
        price=float(price),
        slug=str(raw.get("slug", "")),
        subcategory=str(raw.get("subcategory") or "").strip(),
        description=str(raw.get("description", "")),
        currency=str(raw.get("currency", "INR")),
        weight=str(raw.get("weight", "")),
        purity=str(raw.get("purity", "")),
        metal_type=metal_type,
        in_stock=bool(raw.get("inStock", True)),
        stock_quantity=int(raw.get("stockQuantity", 0)),
        images=_as_str_tuple(raw.get("images"), "images"),
        tags=_as_str_tuple(raw.get("tags"), "tags"),
        featured=bool(raw.get("featured", False)),
        bestseller=bool(raw.get("bestseller", False)),
        new_arrival=bool(raw.get("newArrival", False)),
        countries=_as_str_tuple(raw.get("countries"), "countries"),
    )


class CatalogLoader:
    """Turn raw catalog documents into an immutable :class:`Catalog`."""

    @staticmethod
    def from_dict(data: Any) -> Catalog:
        """Validate a parsed catalog document.

        Malformed product entries and duplicate ids are skipped with a
        warning rather than failing the whole load.  Categories used by
        products but missing from the declared list are appended.
        """
        if not isinstance(data, dict) or not isinstance(
            data.get("products"), list
        ):
            msg = "Catalog document must contain a 'products' list"
            raise CatalogError(msg)

        try:
            declared = _as_str_tuple(data.get("categories"), "categories")
        except TypeError as exc:
            raise CatalogError(str(exc)) from exc

        products: list[Product] = []
        seen_ids: set[str] = set()
        skipped = 0

        for index, raw in enumerate(data["products"]):
            if not isinstance(raw, dict):
                logger.warning(
                    "Skipped catalog entry #%d: not an object", index
                )
                skipped += 1
                continue
            try:
                product = _parse_product(raw)
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning(
                    "Skipped catalog entry #%d (id=%s): %s",
                    index,
                    raw.get("id", "?"),
                    exc,
                )
                skipped += 1
                continue
            if product.id in seen_ids:
                logger.warning(
                    "Skipped catalog entry #%d: duplicate id %s",
                    index,
                    product.id,
                )
                skipped += 1
                continue
            seen_ids.add(product.id)
            products.append(product)

        categories = list(declared)
        for product in products:
            if product.category not in categories:
                logger.debug(
                    "Category '%s' not declared, adding it",
                    product.category,
                )
                categories.append(product.category)

        logger.info(
            "Loaded %d products in %d categories (%d skipped)",
            len(products),
            len(categories),
            skipped,
        )
        return Catalog(
            products=tuple(products), categories=tuple(categories)
        )

    @staticmethod
    def load(path: Path | None = None) -> Catalog:
        """Read and validate the catalog JSON at *path*.

        Defaults to ``Settings.CATALOG_PATH``.  A missing file raises
        ``FileNotFoundError``; invalid JSON raises :class:`CatalogError`.
        """
        catalog_path = path or Settings.CATALOG_PATH
        logger.debug("Loading catalog from %s", catalog_path)

        with open(catalog_path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                msg = f"Invalid catalog JSON in {catalog_path}: {exc}"
                raise CatalogError(msg) from exc

        return CatalogLoader.from_dict(data)


@lru_cache(maxsize=1)
def load_default_catalog() -> Catalog:
    """Load the configured catalog once per process."""
    return CatalogLoader.load()

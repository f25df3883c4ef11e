# src/models/product.py

"""Jewellery product record shared by the catalog and the matcher."""

from dataclasses import dataclass, field
from typing import Literal

MetalType = Literal["gold", "white_gold", "rose_gold", "platinum", "silver"]

METAL_TYPES: frozenset[str] = frozenset(
    {"gold", "white_gold", "rose_gold", "platinum", "silver"}
)


@dataclass(frozen=True)
class Product:
    """A single catalog entry.

    Frozen so the catalog stays immutable once loaded; ``tags``,
    ``images`` and ``countries`` are tuples for the same reason.
    """

    id: str
    name: str
    category: str
    price: float
    slug: str = ""
    subcategory: str = ""
    description: str = ""
    currency: str = "INR"
    weight: str = ""
    purity: str = ""
    metal_type: MetalType = "gold"
    in_stock: bool = True
    stock_quantity: int = 0
    images: tuple[str, ...] = field(default_factory=tuple)
    tags: tuple[str, ...] = field(default_factory=tuple)
    featured: bool = False
    bestseller: bool = False
    new_arrival: bool = False
    countries: tuple[str, ...] = field(default_factory=tuple)

# src/models/suggestion.py

"""Derived search results: typed suggestions and fuzzy corrections."""

from dataclasses import dataclass, field
from typing import Literal

from src.models.product import Product

SuggestionType = Literal["product", "category", "tag"]


@dataclass(frozen=True)
class SearchSuggestion:
    """A single autocomplete entry shown under the search box."""

    type: SuggestionType
    text: str
    product: Product | None = None
    category_slug: str | None = None


@dataclass(frozen=True)
class CorrectionResult:
    """A "did you mean" term and the products it matches."""

    correction: str | None = None
    results: list[Product] = field(
        default_factory=lambda: list[Product]()
    )

# src/search/suggestion_matcher.py

"""Substring autocomplete over the product catalog.

Suggestions are emitted in four passes, each in catalog order:

1. products whose name or a tag contains the query,
2. products whose description contains the query,
3. categories (declared or used by a product) and subcategories
   containing the query,
4. distinct tags containing the query.

Products therefore always rank ahead of categories, and the output is
capped so the dropdown stays usable.
"""

import logging
from collections.abc import Sequence

from src.config.settings import Settings
from src.models.product import Product
from src.models.suggestion import SearchSuggestion
from src.search.normalizer import normalize, slugify

logger = logging.getLogger("jewel_search.matcher")


def is_searchable(query: str) -> bool:
    """Return True when *query* is long enough to be matched."""
    return len(normalize(query)) >= Settings.MIN_QUERY_LENGTH


def search_products(
    query: str,
    products: Sequence[Product],
) -> list[Product]:
    """Broad catalog filter on name, description, category and tags.

    Used for result pages and to populate fuzzy-correction results.
    An empty normalised query matches nothing.
    """
    q = normalize(query)
    if not q:
        return []
    return [
        p
        for p in products
        if q in normalize(p.name)
        or q in normalize(p.description)
        or q in normalize(p.category)
        or any(q in normalize(t) for t in p.tags)
    ]


def get_suggestions(
    query: str,
    products: Sequence[Product],
    categories: Sequence[str],
    limit: int | None = None,
) -> list[SearchSuggestion]:
    """Return at most *limit* typed suggestions for *query*.

    Queries shorter than ``Settings.MIN_QUERY_LENGTH`` after
    normalisation return an empty list.
    """
    cap = Settings.SUGGESTION_LIMIT if limit is None else limit
    q = normalize(query)
    if len(q) < Settings.MIN_QUERY_LENGTH or cap <= 0:
        return []

    suggestions: list[SearchSuggestion] = []
    seen: set[str] = set()

    def add(key: str, suggestion: SearchSuggestion) -> bool:
        """Append unless already seen; return True once the cap is hit."""
        if key not in seen:
            seen.add(key)
            suggestions.append(suggestion)
        return len(suggestions) >= cap

    # 1. Name / tag matches
    for p in products:
        if q in normalize(p.name) or any(
            q in normalize(t) for t in p.tags
        ):
            if add(f"id:{p.id}", SearchSuggestion("product", p.name, product=p)):
                return suggestions

    # 2. Description matches
    for p in products:
        if q in normalize(p.description):
            if add(f"id:{p.id}", SearchSuggestion("product", p.name, product=p)):
                return suggestions

    # 3. Declared categories, then product categories and subcategories
    category_names = list(categories)
    for p in products:
        category_names.append(p.category)
        if p.subcategory:
            category_names.append(p.subcategory)
    for name in category_names:
        if q in normalize(name):
            suggestion = SearchSuggestion(
                "category", name, category_slug=slugify(name)
            )
            if add(f"cat:{normalize(name)}", suggestion):
                return suggestions

    # 4. Tags
    for p in products:
        for tag in p.tags:
            if q in normalize(tag):
                if add(f"tag:{normalize(tag)}", SearchSuggestion("tag", tag)):
                    return suggestions

    logger.debug(
        "Suggestions for '%s': %d", q, len(suggestions)
    )
    return suggestions

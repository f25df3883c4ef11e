# src/search/fuzzy_corrector.py

"""Fuzzy "did you mean" correction for queries with no direct match.

Every catalog term (category names, subcategories, product names, tags
and their individual words) is scored against the query with a
length-normalised Levenshtein similarity.  Candidates at or above
``Settings.FUZZY_MIN_SIMILARITY`` are tried best-first; the first one
that actually matches products becomes the correction.

Ordering among candidates is deterministic:
score (desc) → candidate length (asc) → normalised text (asc).
"""

import logging
from collections.abc import Sequence

from rapidfuzz.distance import Levenshtein

from src.config.settings import Settings
from src.models.product import Product
from src.models.suggestion import CorrectionResult
from src.search.normalizer import normalize, words
from src.search.suggestion_matcher import search_products

logger = logging.getLogger("jewel_search.fuzzy")


def similarity(a: str, b: str) -> float:
    """Return ``1 - distance / max(len)`` for two normalised strings."""
    return Levenshtein.normalized_similarity(a, b)


def candidate_terms(
    products: Sequence[Product],
    categories: Sequence[str],
) -> dict[str, str]:
    """Map normalised candidate → display text, first-seen wins."""
    raw_terms: list[str] = list(categories)
    for p in products:
        raw_terms.append(p.category)
        if p.subcategory:
            raw_terms.append(p.subcategory)
        raw_terms.append(p.name)
        raw_terms.extend(p.tags)

    terms: dict[str, str] = {}
    for term in raw_terms:
        key = normalize(term)
        if key:
            terms.setdefault(key, term.strip())
    for term in raw_terms:
        for word in words(term):
            if len(word) >= Settings.FUZZY_MIN_WORD_LENGTH:
                terms.setdefault(word, word)
    return terms


def fuzzy_correct(
    query: str,
    products: Sequence[Product],
    categories: Sequence[str],
) -> CorrectionResult:
    """Find the closest catalog term to *query* and the products it matches.

    Returns ``CorrectionResult(None, [])`` for short queries, an empty
    catalog, or when no candidate clears the similarity threshold.
    """
    q = normalize(query)
    if len(q) < Settings.MIN_QUERY_LENGTH or not products:
        return CorrectionResult()

    scored = [
        (similarity(q, key), key, display)
        for key, display in candidate_terms(products, categories).items()
    ]
    eligible = sorted(
        (
            item
            for item in scored
            if item[0] >= Settings.FUZZY_MIN_SIMILARITY
        ),
        key=lambda item: (-item[0], len(item[1]), item[1]),
    )

    for score, key, display in eligible:
        results = search_products(key, products)
        if results:
            logger.info(
                "Corrected '%s' → '%s' (similarity=%.2f, %d results)",
                q,
                display,
                score,
                len(results),
            )
            return CorrectionResult(correction=display, results=results)
        logger.debug(
            "Candidate '%s' (%.2f) matches no products, skipping",
            display,
            score,
        )

    logger.info("No correction found for '%s'", q)
    return CorrectionResult()


def fuzzy_search_products(
    query: str,
    products: Sequence[Product],
    categories: Sequence[str],
) -> CorrectionResult:
    """Direct search first; fall back to fuzzy correction when empty.

    ``correction`` is ``None`` whenever the direct search succeeded.
    """
    direct = search_products(query, products)
    if direct:
        return CorrectionResult(results=direct)
    return fuzzy_correct(query, products, categories)

# src/search/normalizer.py

"""Text normalisation shared by the matcher and the fuzzy corrector."""

import re

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def normalize(text: str) -> str:
    """Lowercase, trim, and collapse internal whitespace."""
    return " ".join(text.lower().split())


def words(text: str) -> list[str]:
    """Split normalised text into whitespace-separated words."""
    return normalize(text).split()


def slugify(text: str) -> str:
    """Build a URL slug from a display name (``Drop Earrings`` → ``drop-earrings``)."""
    return _NON_SLUG_RE.sub("-", normalize(text)).strip("-")

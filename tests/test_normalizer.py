# tests/test_normalizer.py

"""Tests for text normalisation helpers."""

import unittest

from src.search.normalizer import normalize, slugify, words


class TestNormalize(unittest.TestCase):
    """normalize() behaviour."""

    def test_lowercases(self) -> None:
        self.assertEqual(normalize("JHUMKA"), "jhumka")

    def test_trims(self) -> None:
        self.assertEqual(normalize("  gold  "), "gold")

    def test_collapses_internal_whitespace(self) -> None:
        """Tabs, newlines and runs of spaces become one space."""
        self.assertEqual(normalize("rose \t\n  gold"), "rose gold")

    def test_empty_string(self) -> None:
        self.assertEqual(normalize(""), "")

    def test_whitespace_only(self) -> None:
        self.assertEqual(normalize("   \t "), "")

    def test_idempotent(self) -> None:
        """Normalising twice changes nothing."""
        once = normalize("  Diamond   Studded JHUMKAS ")
        self.assertEqual(normalize(once), once)


class TestWordsAndSlug(unittest.TestCase):
    """words() and slugify() helpers."""

    def test_words_split(self) -> None:
        self.assertEqual(
            words(" Rose  Gold Heart "), ["rose", "gold", "heart"]
        )

    def test_words_empty(self) -> None:
        self.assertEqual(words(""), [])

    def test_slugify_spaces(self) -> None:
        self.assertEqual(slugify("Drop Earrings"), "drop-earrings")

    def test_slugify_punctuation(self) -> None:
        self.assertEqual(slugify("Temple & Bridal!"), "temple-bridal")


if __name__ == "__main__":
    unittest.main()

# tests/test_cli_runner.py

"""Tests for the headless CLI runner."""

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from src.catalog.loader import load_default_catalog
from src.cli.runner import cli_search, outcome_to_dict, run_ai_context
from src.services.catalog_search import SearchOutcome, SearchState


class TestCliSearch(unittest.TestCase):
    """cli_search() output and exit codes."""

    def _run(self, *args: object, **kwargs: object) -> tuple[int, str]:
        with patch("sys.stdout", new_callable=io.StringIO) as out, patch(
            "sys.stderr", new_callable=io.StringIO
        ):
            code = cli_search(*args, **kwargs)  # type: ignore[arg-type]
        return code, out.getvalue()

    def test_json_suggestions(self) -> None:
        code, output = self._run("jhumka")
        self.assertEqual(code, 0)
        data = json.loads(output)
        self.assertEqual(data["state"], "suggested")
        self.assertEqual(data["suggestions"][0]["productId"], "2")
        self.assertIsNone(data["correction"])

    def test_json_correction(self) -> None:
        code, output = self._run("braclet")
        self.assertEqual(code, 0)
        data = json.loads(output)
        self.assertEqual(data["state"], "corrected")
        self.assertEqual(data["correction"], "bracelet")
        self.assertEqual([r["id"] for r in data["results"]], ["8"])

    def test_nothing_found_exit_code(self) -> None:
        code, output = self._run("qqqqqq")
        self.assertEqual(code, 1)
        self.assertEqual(json.loads(output)["state"], "empty")

    def test_short_query_exit_code(self) -> None:
        code, output = self._run("x")
        self.assertEqual(code, 1)
        self.assertEqual(json.loads(output)["state"], "idle")

    def test_limit_respected(self) -> None:
        _, output = self._run("gold", limit=2)
        self.assertEqual(len(json.loads(output)["suggestions"]), 2)

    def test_table_format_runs(self) -> None:
        code, _ = self._run("ring", output_format="table")
        self.assertEqual(code, 0)

    def test_missing_catalog_returns_one(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            code, output = self._run(
                "ring", catalog_path=str(Path(tmp) / "missing.json")
            )
        self.assertEqual(code, 1)
        self.assertEqual(output, "")

    def test_default_catalog_loaded_once(self) -> None:
        self._run("ring")
        self._run("gold")
        info = load_default_catalog.cache_info()
        self.assertEqual(info.misses, 1)
        self.assertEqual(info.hits, 1)

    def test_explicit_path_bypasses_default_cache(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self._run("ring", catalog_path=str(Path(tmp) / "missing.json"))
        self.assertEqual(load_default_catalog.cache_info().misses, 0)

    def test_custom_catalog(self) -> None:
        doc = {
            "categories": ["Earrings"],
            "products": [
                {"id": "a", "name": "Gold Chandbalis", "category": "Earrings", "price": 1}
            ],
        }
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "catalog.json"
            path.write_text(json.dumps(doc), encoding="utf-8")
            code, output = self._run("earings", catalog_path=str(path))
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(output)["correction"], "Earrings")


class TestOutcomeToDict(unittest.TestCase):
    """Serialisation of outcomes."""

    def test_empty_outcome(self) -> None:
        data = outcome_to_dict(SearchOutcome(query="x", state=SearchState.IDLE))
        self.assertEqual(
            data,
            {
                "query": "x",
                "state": "idle",
                "suggestions": [],
                "correction": None,
                "results": [],
            },
        )


class TestRunAiContext(unittest.TestCase):
    """run_ai_context() prints the assistant summary."""

    def test_prints_summary(self) -> None:
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = run_ai_context()
        self.assertEqual(code, 0)
        self.assertIn("Available product categories:", out.getvalue())


if __name__ == "__main__":
    unittest.main()

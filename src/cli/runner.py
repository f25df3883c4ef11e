# src/cli/runner.py

"""Headless CLI search runner built on the catalog search service."""

import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from src.catalog.catalog import Catalog, format_amount
from src.catalog.loader import (
    CatalogError,
    CatalogLoader,
    load_default_catalog,
)
from src.models.product import Product
from src.models.suggestion import SearchSuggestion
from src.services.catalog_search import (
    CatalogSearch,
    SearchOutcome,
    SearchState,
)

logger = logging.getLogger("jewel_search.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _load_catalog(catalog_path: str | None) -> Catalog | None:
    """Load the catalog, reporting failures instead of raising."""
    try:
        if catalog_path:
            return CatalogLoader.load(Path(catalog_path))
        return load_default_catalog()
    except (OSError, CatalogError) as exc:
        logger.error("Catalog load failed: %s", exc, exc_info=True)
        _err.print(f"[red]Could not load catalog: {exc}[/red]")
        return None


def _product_to_dict(p: Product) -> dict[str, object]:
    """Serialise a product using the storefront's camelCase keys."""
    return {
        "id": p.id,
        "name": p.name,
        "category": p.category,
        "price": p.price,
        "currency": p.currency,
        "purity": p.purity,
        "weight": p.weight,
        "metalType": p.metal_type,
        "inStock": p.in_stock,
    }


def _suggestion_to_dict(s: SearchSuggestion) -> dict[str, object]:
    data: dict[str, object] = {"type": s.type, "text": s.text}
    if s.product is not None:
        data["productId"] = s.product.id
    if s.category_slug is not None:
        data["categorySlug"] = s.category_slug
    return data


def outcome_to_dict(outcome: SearchOutcome) -> dict[str, object]:
    """Serialise a search outcome for JSON output."""
    return {
        "query": outcome.query,
        "state": outcome.state.name.lower(),
        "suggestions": [
            _suggestion_to_dict(s) for s in outcome.suggestions
        ],
        "correction": outcome.correction,
        "results": [_product_to_dict(p) for p in outcome.results],
    }


def _print_tables(outcome: SearchOutcome) -> None:
    """Render suggestion and result tables to stdout."""
    console = Console()

    if outcome.suggestions:
        table = Table(
            title="Suggestions",
            show_lines=False,
            title_style="bold cyan",
        )
        table.add_column("#", style="dim", width=4)
        table.add_column("Type", style="magenta")
        table.add_column("Text", max_width=50)
        for idx, s in enumerate(outcome.suggestions, 1):
            table.add_row(str(idx), s.type, s.text)
        console.print(table)

    if outcome.results:
        table = Table(
            title="Products",
            show_lines=True,
            title_style="bold cyan",
        )
        table.add_column("ID", style="dim", width=4)
        table.add_column("Name", max_width=40)
        table.add_column("Category", style="magenta")
        table.add_column("Purity", justify="center")
        table.add_column("Price", justify="right", style="green")
        table.add_column("Stock", justify="center")
        for p in outcome.results:
            table.add_row(
                p.id,
                p.name,
                p.category,
                p.purity or "—",
                format_amount(p.price, p.currency),
                "✓" if p.in_stock else "✗",
            )
        console.print(table)


def cli_search(
    query: str,
    output_format: str = "json",
    catalog_path: str | None = None,
    limit: int | None = None,
) -> int:
    """Run one search and return an exit code (0=found, 1=nothing/fail)."""
    catalog = _load_catalog(catalog_path)
    if catalog is None:
        return 1

    outcome = CatalogSearch(catalog, limit=limit).search(query)
    logger.info(
        "CLI search '%s' → %s", query, outcome.state.name
    )

    if outcome.state == SearchState.IDLE:
        _err.print(
            "[yellow]Query too short, type at least "
            "two characters.[/yellow]"
        )
    elif outcome.state == SearchState.CORRECTED:
        _err.print(
            f"[bold]Did you mean:[/bold] [cyan]{outcome.correction}[/cyan]?"
        )
    elif outcome.state == SearchState.EMPTY:
        _err.print("[yellow]No products found.[/yellow]")
    else:
        _err.print(
            f"[green]✓ {len(outcome.suggestions)} suggestions, "
            f"{len(outcome.results)} products[/green]"
        )

    if output_format == "table":
        _print_tables(outcome)
    else:
        json.dump(
            outcome_to_dict(outcome),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    found = outcome.state in {SearchState.SUGGESTED, SearchState.CORRECTED}
    return 0 if found else 1


def run_ai_context(catalog_path: str | None = None) -> int:
    """Print the catalog summary used to prime the shopping assistant."""
    catalog = _load_catalog(catalog_path)
    if catalog is None:
        return 1
    sys.stdout.write(catalog.ai_context() + "\n")
    return 0

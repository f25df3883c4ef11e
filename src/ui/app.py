# src/ui/app.py

"""Terminal UI: search-as-you-type over the jewellery catalog."""

import logging
from pathlib import Path
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import DataTable, Footer, Header, Input, Static

from src.catalog.catalog import format_amount
from src.catalog.loader import CatalogLoader, load_default_catalog
from src.services.catalog_search import (
    CatalogSearch,
    SearchOutcome,
    SearchSession,
    SearchState,
)

logger = logging.getLogger("jewel_search.ui")


class JewelSearchApp(App[object]):
    """Terminal UI for the jewellery catalog search."""

    CSS = """
    #title { padding: 0 1; text-style: bold; }
    #search_bar { height: auto; }
    #search_input { width: 1fr; }
    #status { padding: 0 1; height: 1; }
    #suggestions_table { height: 12; }
    #products_table { height: 1fr; }
    """

    BINDINGS = [
        Binding("escape", "clear_search", "Clear"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        catalog_path: str | None = None,
        debounce_delay: float | None = None,
    ) -> None:
        super().__init__()
        self.catalog = (
            CatalogLoader.load(Path(catalog_path))
            if catalog_path
            else load_default_catalog()
        )
        self.search_service = CatalogSearch(self.catalog)
        self.session = SearchSession(
            self.search_service, self.show_outcome, debounce_delay
        )
        self.outcome = SearchOutcome(query="", state=SearchState.IDLE)

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        yield Header()
        yield Container(
            Static(
                f"💍 Jewellery Search ({len(self.catalog)} products)",
                id="title",
            ),
            Horizontal(
                Input(
                    placeholder="Search rings, jhumkas, 22K...",
                    id="search_input",
                ),
                id="search_bar",
            ),
            Static("Type at least two characters", id="status"),
            cast(
                DataTable[str | Text],
                DataTable(id="suggestions_table", cursor_type="row"),
            ),
            cast(
                DataTable[str | Text],
                DataTable(
                    id="products_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Configure table columns on startup."""
        self._table("#suggestions_table").add_columns("Type", "Suggestion")
        self._table("#products_table").add_columns(
            "Name", "Category", "Purity", "Price"
        )

    def on_unmount(self) -> None:
        """Drop any pending match so nothing renders after teardown."""
        self.session.close()

    def _table(self, selector: str) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one(selector, DataTable),
        )

    def on_input_changed(self, event: Input.Changed) -> None:
        """Feed every keystroke through the debounced session."""
        if event.input.id == "search_input":
            self.session.update(event.value)
            if self.session.pending:
                self.query_one("#status", Static).update("🔍 …")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter resolves immediately, skipping the debounce wait."""
        if event.input.id == "search_input":
            self.session.close()
            outcome = self.search_service.search(event.value)
            logger.info(
                "Submitted '%s' → %s", event.value, outcome.state.name
            )
            self.show_outcome(outcome)

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Picking a suggestion copies its text into the search box."""
        if event.data_table.id != "suggestions_table":
            return
        if 0 <= event.cursor_row < len(self.outcome.suggestions):
            chosen = self.outcome.suggestions[event.cursor_row]
            self.query_one("#search_input", Input).value = chosen.text

    def action_clear_search(self) -> None:
        """Empty the search box and reset the view."""
        self.query_one("#search_input", Input).value = ""
        self.session.clear()

    def show_outcome(self, outcome: SearchOutcome) -> None:
        """Render a resolved search outcome."""
        self.outcome = outcome
        status = self.query_one("#status", Static)
        suggestions = self._table("#suggestions_table")
        products = self._table("#products_table")
        suggestions.clear()
        products.clear()

        if outcome.state == SearchState.SUGGESTED:
            status.update(
                f"✅ {len(outcome.suggestions)} suggestions, "
                f"{len(outcome.results)} products"
            )
        elif outcome.state == SearchState.CORRECTED:
            status.update(f"Did you mean: {outcome.correction}?")
        elif outcome.state == SearchState.EMPTY:
            status.update(f"❌ No results for '{outcome.query}'")
        else:
            status.update("Type at least two characters")

        for s in outcome.suggestions:
            suggestions.add_row(s.type, s.text)

        for p in outcome.results:
            products.add_row(
                p.name[:40],
                p.category,
                p.purity,
                Text(
                    format_amount(p.price, p.currency),
                    style="green" if p.in_stock else "dim",
                ),
            )

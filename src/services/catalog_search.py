# src/services/catalog_search.py

"""Search-box orchestration: suggestions, fuzzy fallback and debouncing."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto

from src.catalog.catalog import Catalog
from src.config.settings import Settings
from src.models.product import Product
from src.models.suggestion import SearchSuggestion
from src.search.debouncer import Debouncer
from src.search.fuzzy_corrector import fuzzy_correct
from src.search.normalizer import normalize
from src.search.suggestion_matcher import (
    get_suggestions,
    is_searchable,
    search_products,
)

logger = logging.getLogger("jewel_search.service")


class SearchState(Enum):
    """Where the search box is in its keystroke lifecycle."""

    IDLE = auto()
    QUERYING = auto()
    SUGGESTED = auto()
    CORRECTED = auto()
    EMPTY = auto()


@dataclass
class SearchOutcome:
    """Everything the search UI needs to render one query."""

    query: str
    state: SearchState
    suggestions: list[SearchSuggestion] = field(
        default_factory=lambda: list[SearchSuggestion]()
    )
    correction: str | None = None
    results: list[Product] = field(
        default_factory=lambda: list[Product]()
    )


class CatalogSearch:
    """Resolve queries against one immutable catalog."""

    def __init__(
        self,
        catalog: Catalog,
        limit: int | None = None,
    ) -> None:
        self.catalog = catalog
        self.limit = Settings.SUGGESTION_LIMIT if limit is None else limit

    def search(self, query: str) -> SearchOutcome:
        """Resolve *query* to a leaf state synchronously.

        - Below the minimum length → ``IDLE`` (nothing is matched).
        - Direct suggestions → ``SUGGESTED`` with the broad result list.
        - Otherwise the fuzzy corrector decides between ``CORRECTED``
          and ``EMPTY``.
        """
        if not is_searchable(query):
            return SearchOutcome(query=query, state=SearchState.IDLE)
        q = normalize(query)

        suggestions = get_suggestions(
            q,
            self.catalog.products,
            self.catalog.categories,
            limit=self.limit,
        )
        if suggestions:
            return SearchOutcome(
                query=query,
                state=SearchState.SUGGESTED,
                suggestions=suggestions,
                results=search_products(q, self.catalog.products),
            )

        corrected = fuzzy_correct(
            q, self.catalog.products, self.catalog.categories
        )
        if corrected.correction is None:
            logger.info("No matches for '%s'", q)
            return SearchOutcome(query=query, state=SearchState.EMPTY)

        return SearchOutcome(
            query=query,
            state=SearchState.CORRECTED,
            correction=corrected.correction,
            results=corrected.results,
        )


class SearchSession:
    """Debounced search-as-you-type session for one search box.

    Feed raw input through :meth:`update`; the *listener* receives a
    :class:`SearchOutcome` once typing pauses.  Clearing the box or
    closing the session cancels any pending match.
    """

    def __init__(
        self,
        search: CatalogSearch,
        listener: Callable[[SearchOutcome], None],
        delay: float | None = None,
    ) -> None:
        self._search = search
        self._listener = listener
        self._debouncer: Debouncer[str] = Debouncer(self._resolve, delay)
        self.state = SearchState.IDLE
        self.invocations = 0

    @property
    def pending(self) -> bool:
        return self._debouncer.pending

    def update(self, text: str) -> None:
        """Register a keystroke.  Must be called from a running loop."""
        if not normalize(text):
            self.clear()
            return
        self.state = SearchState.QUERYING
        self._debouncer.trigger(text)

    def clear(self) -> None:
        """Reset to ``IDLE`` and drop any pending match."""
        self._debouncer.cancel()
        self.state = SearchState.IDLE
        self._listener(SearchOutcome(query="", state=SearchState.IDLE))

    def close(self) -> None:
        """Cancel pending work without notifying the listener."""
        if self._debouncer.cancel():
            logger.debug("Session closed with a pending search")
        self.state = SearchState.IDLE

    async def flush(self) -> None:
        """Wait for the pending match, if any."""
        await self._debouncer.flush()

    def _resolve(self, text: str) -> None:
        self.invocations += 1
        outcome = self._search.search(text)
        self.state = outcome.state
        logger.debug(
            "Resolved '%s' → %s (%d suggestions)",
            text,
            outcome.state.name,
            len(outcome.suggestions),
        )
        self._listener(outcome)

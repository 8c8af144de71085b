"""Application service: Catalog Viewer.

A viewing session over one catalog. Owns a single ViewState and exposes
the mutators the user interface calls; every mutator updates the state
and returns the recomputed view.

Changing the query, sort order or page size always returns to page 1.
Changing the page keeps the other parameters and clamps the page into
range, so a stale page click can never desync the view.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from catview.application.catalog_store import CatalogStore
from catview.domain.model.view_state import (
    SortKey,
    ViewState,
    validate_page_number,
    validate_page_size,
)
from catview.domain.service.view_pipeline import ViewResult, recompute

logger = logging.getLogger(__name__)


class CatalogViewer:

    def __init__(self, store: CatalogStore, state: ViewState | None = None) -> None:
        self._store = store
        self._state = state if state is not None else ViewState()

    @property
    def state(self) -> ViewState:
        """A copy of the current view state."""
        return replace(self._state)

    # --- Query ----------------------------------------------------------------

    def view(self) -> ViewResult:
        """Recompute the visible slice for the current state."""
        result = recompute(self._store.get(), self._state)
        self._state.current_page = result.meta.current_page
        return result

    # --- Mutators -------------------------------------------------------------

    def set_query(self, query: str) -> ViewResult:
        self._state.query = query
        self._state.current_page = 1
        logger.debug("Query set to %r", query)
        return self.view()

    def set_sort(self, key: SortKey | str) -> ViewResult:
        """Change the sort order. Raises ValidationError for unknown keys."""
        self._state.sort_key = SortKey.parse(key)
        self._state.current_page = 1
        logger.debug("Sort set to %s", self._state.sort_key.value)
        return self.view()

    def set_page_size(self, size: int) -> ViewResult:
        """Change the page size.

        Raises ValidationError (leaving the state untouched) unless
        *size* is a positive integer.
        """
        self._state.page_size = validate_page_size(size)
        self._state.current_page = 1
        logger.debug("Page size set to %d", size)
        return self.view()

    def set_page(self, page: int) -> ViewResult:
        """Go to *page*, clamped into ``[1, total_pages]``."""
        self._state.current_page = max(1, validate_page_number(page))
        result = self.view()
        if result.meta.current_page != page:
            logger.debug("Page %d clamped to %d", page, result.meta.current_page)
        return result

    def next_page(self) -> ViewResult:
        return self.set_page(self._state.current_page + 1)

    def previous_page(self) -> ViewResult:
        return self.set_page(self._state.current_page - 1)

    def reset(self) -> ViewResult:
        """Restore the default view parameters."""
        self._state = ViewState()
        return self.view()

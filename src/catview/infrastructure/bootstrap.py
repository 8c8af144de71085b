"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os

from catview.application.catalog_store import CatalogStore
from catview.application.catalog_viewer import CatalogViewer
from catview.infrastructure.http.http_catalog_source import HttpCatalogSource

API_URL = os.getenv("CATVIEW_API_URL", "https://api.escuelajs.co/api/v1/products")
REQUEST_TIMEOUT = float(os.getenv("CATVIEW_TIMEOUT", "30"))
RETRY_ATTEMPTS = int(os.getenv("CATVIEW_RETRY_ATTEMPTS", "3"))


def catalog_source(url: str | None = None) -> HttpCatalogSource:
    return HttpCatalogSource(
        url or API_URL,
        timeout=REQUEST_TIMEOUT,
        attempts=RETRY_ATTEMPTS,
    )


def catalog_store(url: str | None = None) -> CatalogStore:
    return CatalogStore(catalog_source(url))


def catalog_viewer(store: CatalogStore) -> CatalogViewer:
    return CatalogViewer(store)

"""Application service: Catalog Store.

Loads the catalog from a CatalogSource and keeps it read-only. A failed
load leaves the previous catalog in place (empty on first load) and
propagates the error; no partial catalog is ever exposed.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from catview.domain.exceptions import LoadError, ValidationError
from catview.domain.model.product import Catalog, Product
from catview.domain.model.value_objects import Price
from catview.domain.repository.catalog_source import CatalogSource
from catview.domain.service.image_normalizer import normalize

logger = logging.getLogger(__name__)

# Fields mapped onto Product attributes; everything else goes to ``extra``.
_KNOWN_FIELDS = frozenset({"id", "title", "price", "images", "description"})


class CatalogStore:

    def __init__(self, source: CatalogSource) -> None:
        self._source = source
        self._catalog: Catalog = ()
        self._loaded = False
        self._closed = False
        self.last_error: LoadError | None = None

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def closed(self) -> bool:
        return self._closed

    def get(self) -> Catalog:
        return self._catalog

    def load(self) -> Catalog:
        """Fetch the catalog and replace the current one wholesale.

        Raises LoadError (or DecodeError) if the source fails; the
        current catalog is kept in that case.
        """
        try:
            records = self._source.fetch_records()
        except LoadError as exc:
            self.last_error = exc
            logger.error("Catalog load failed: %s", exc)
            raise

        if self._closed:
            logger.info("Catalog store was closed during load; discarding result.")
            return self._catalog

        products = []
        for index, raw in enumerate(records):
            product = self._to_domain(index, raw)
            if product is not None:
                products.append(product)

        self._catalog = tuple(products)
        self._loaded = True
        self.last_error = None
        logger.info(
            "Loaded %d products (%d records skipped).",
            len(products), len(records) - len(products),
        )
        return self._catalog

    def close(self) -> None:
        """Discard the store; later loads no longer replace the catalog."""
        self._closed = True

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(index: int, raw: Any) -> Product | None:
        if not isinstance(raw, Mapping):
            logger.warning("Skipping record #%d: not an object (%r).", index, raw)
            return None

        title = raw.get("title")
        if not isinstance(title, str):
            logger.warning("Skipping record #%d: missing or non-text title.", index)
            return None

        try:
            price = Price.of(raw.get("price"))
        except ValidationError as exc:
            logger.warning("Skipping record #%d (%r): %s", index, title, exc)
            return None

        category = raw.get("category")
        category_name = None
        if isinstance(category, Mapping) and isinstance(category.get("name"), str):
            category_name = category["name"]

        description = raw.get("description")

        return Product(
            id=raw.get("id"),
            title=title,
            price=price,
            images=normalize(raw.get("images")),
            category_name=category_name,
            description=description if isinstance(description, str) else "",
            extra={k: v for k, v in raw.items() if k not in _KNOWN_FIELDS},
        )

"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry ready-to-display data from the application layer to the
renderers (CLI table, HTML page) without exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass

from catview.domain.model.value_objects import PageMeta


@dataclass(frozen=True)
class ProductRowDTO:
    """Output: a single table row as displayed to the user."""

    id: str
    title: str
    price: str  # formatted, e.g. "$15.00"
    category: str
    description: str  # truncated
    images: tuple[str, ...]  # renderable URLs, never empty


@dataclass(frozen=True)
class CatalogPageDTO:
    """Output: one rendered page of the catalog."""

    rows: list[ProductRowDTO]
    meta: PageMeta
    caption: str
    page_numbers: list[int]

    @property
    def empty(self) -> bool:
        return not self.rows

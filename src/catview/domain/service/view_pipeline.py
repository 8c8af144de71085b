"""View pipeline: filter, then sort, then paginate.

``recompute`` is a pure function of the catalog and a ViewState. It never
mutates either; the clamped page is reported back through ``PageMeta`` and
it is up to the owner of the state to store it.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Iterable

from catview.domain.model.product import Catalog, Product
from catview.domain.model.value_objects import PageMeta
from catview.domain.model.view_state import SortKey, ViewState
from catview.domain.service.pagination import paginate


@dataclass(frozen=True)
class ViewResult:
    """The visible slice together with its pagination metadata."""

    items: tuple[Product, ...]
    meta: PageMeta


def filter_products(products: Iterable[Product], query: str) -> list[Product]:
    """Keep products whose title contains *query*, ignoring case."""
    needle = query.casefold()
    return [p for p in products if needle in p.title.casefold()]


def collation_key(title: str) -> tuple[str, str, str]:
    """Locale-style ordering key for titles.

    Compares accent-stripped, case-folded text first, so "apple", "Apple"
    and "Äpple" sort together; case and accents only break ties.
    """
    folded = title.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base, folded, title


def sort_products(products: list[Product], key: SortKey) -> list[Product]:
    """Stable sort by *key*. ``SortKey.NONE`` keeps the input order.

    ``sorted(..., reverse=True)`` preserves the relative order of equal
    elements, so descending sorts are stable too.
    """
    if key is SortKey.PRICE_ASC:
        return sorted(products, key=lambda p: p.price.amount)
    if key is SortKey.PRICE_DESC:
        return sorted(products, key=lambda p: p.price.amount, reverse=True)
    if key is SortKey.NAME_ASC:
        return sorted(products, key=lambda p: collation_key(p.title))
    if key is SortKey.NAME_DESC:
        return sorted(products, key=lambda p: collation_key(p.title), reverse=True)
    return list(products)


def recompute(catalog: Catalog, state: ViewState) -> ViewResult:
    """Derive the visible slice and page metadata from *state*.

    Steps:
    1. Filter by the query (empty query matches everything).
    2. Sort by the sort key.
    3. Paginate the result, clamping the page into range.
    """
    visible = sort_products(filter_products(catalog, state.query), state.sort_key)
    bounds = paginate(len(visible), state.page_size, state.current_page)

    return ViewResult(
        items=tuple(visible[bounds.start:bounds.end]),
        meta=PageMeta(
            current_page=bounds.page,
            total_pages=bounds.total_pages,
            display_start=bounds.display_start,
            display_end=bounds.display_end,
            total_count=len(visible),
        ),
    )

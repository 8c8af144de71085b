"""Pagination calculator.

Maps (item count, page size, requested page) to slice bounds and the
numbers shown in "Showing X - Y of N". Knows nothing about what is being
paginated.
"""

from __future__ import annotations

import math

from catview.domain.exceptions import ValidationError
from catview.domain.model.value_objects import PageBounds


def total_pages(count: int, page_size: int) -> int:
    """Number of pages, never less than 1 so an empty list still has page 1."""
    return max(1, math.ceil(count / page_size))


def paginate(count: int, page_size: int, page: int) -> PageBounds:
    """Compute the bounds of *page* over *count* items.

    Out-of-range pages are clamped into ``[1, total_pages]``.
    """
    if count < 0:
        raise ValidationError(f"Item count cannot be negative, got {count}")
    if page_size < 1:
        raise ValidationError(f"Page size must be positive, got {page_size}")

    pages = total_pages(count, page_size)
    effective = min(max(page, 1), pages)

    start = (effective - 1) * page_size
    end = min(start + page_size, count)

    return PageBounds(
        page=effective,
        total_pages=pages,
        start=start,
        end=end,
        display_start=0 if count == 0 else start + 1,
        display_end=end,
    )

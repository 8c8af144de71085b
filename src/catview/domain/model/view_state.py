"""ViewState: the one mutable record the viewer owns.

Holds the four user-controlled view parameters. Only ``CatalogViewer``
mutates it, through its mutator methods.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from catview.domain.exceptions import ValidationError


class SortKey(Enum):
    NONE = "none"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"

    @staticmethod
    def parse(value: SortKey | str) -> SortKey:
        """Accept a SortKey or its string value."""
        if isinstance(value, SortKey):
            return value
        try:
            return SortKey(str(value).strip().lower())
        except ValueError as exc:
            choices = ", ".join(k.value for k in SortKey)
            raise ValidationError(
                f"Unknown sort key {value!r} (expected one of: {choices})"
            ) from exc


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
DEFAULT_PAGE_SIZE = 10
ALLOWED_PAGE_SIZES = (10, 20, 50)


@dataclass
class ViewState:
    """Search query, sort order, page size and current page.

    Invariants:
    - ``page_size`` is always >= 1
    - ``current_page`` is always >= 1 and, after every recomputation, no
      greater than the number of pages of the visible set
    """

    query: str = ""
    sort_key: SortKey = SortKey.NONE
    page_size: int = DEFAULT_PAGE_SIZE
    current_page: int = 1

    def __post_init__(self) -> None:
        self.sort_key = SortKey.parse(self.sort_key)
        validate_page_size(self.page_size)
        validate_page_number(self.current_page)
        self.current_page = max(1, self.current_page)


def validate_page_size(size: object) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise ValidationError(
            f"Page size must be an integer, got {type(size).__name__}"
        )
    if size < 1:
        raise ValidationError(f"Page size must be positive, got {size}")
    return size


def validate_page_number(page: object) -> int:
    if isinstance(page, bool) or not isinstance(page, int):
        raise ValidationError(
            f"Page number must be an integer, got {type(page).__name__}"
        )
    return page

"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from catview.domain.exceptions import ValidationError


@dataclass(frozen=True, order=True)
class Price:
    """Numeric product price.

    No currency semantics are enforced; the amount is kept as a Decimal so
    that ``19.99`` from the API sorts and prints exactly as received.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Price amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Price amount must be finite, got {self.amount}")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Price:
        """Convenient factory that coerces to Decimal safely."""
        # bool is an int subclass but never a price
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid price: {amount!r}")
        try:
            return Price(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid price: {amount!r}") from exc


@dataclass(frozen=True)
class PageBounds:
    """Output of the pagination calculator for one request.

    ``start``/``end`` are zero-based slice indices (end exclusive);
    ``display_start``/``display_end`` are the one-based numbers shown to
    the user in "Showing X - Y of N".
    """

    page: int
    total_pages: int
    start: int
    end: int
    display_start: int
    display_end: int


@dataclass(frozen=True)
class PageMeta:
    """Pagination metadata handed to the presentation layer."""

    current_page: int
    total_pages: int
    display_start: int
    display_end: int
    total_count: int

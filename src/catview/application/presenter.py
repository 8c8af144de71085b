"""Presentation adapter: turns a ViewResult into display-ready DTOs.

Image lists are filtered here, at render time, to URLs a browser can
actually load, capped at a few thumbnails, and replaced by a placeholder
when nothing usable is left.
"""

from __future__ import annotations

from urllib.parse import urlparse

from catview.application.dto import CatalogPageDTO, ProductRowDTO
from catview.domain.model.product import Product
from catview.domain.service.view_pipeline import ViewResult

FALLBACK_IMAGE_URL = "https://dummyimage.com/60x60/667eea/ffffff&text=No+Image"
MAX_DISPLAY_IMAGES = 3
DESCRIPTION_MAX_CHARS = 120
MISSING_CATEGORY = "N/A"


def is_renderable_url(url: str) -> bool:
    """True for absolute http(s) URLs with a host."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def display_images(images: tuple[str, ...]) -> tuple[str, ...]:
    renderable = [url for url in images if is_renderable_url(url)]
    if not renderable:
        return (FALLBACK_IMAGE_URL,)
    return tuple(renderable[:MAX_DISPLAY_IMAGES])


def truncate(text: str, max_chars: int = DESCRIPTION_MAX_CHARS) -> str:
    return text[:max_chars] + "..." if len(text) > max_chars else text


def caption(result: ViewResult) -> str:
    meta = result.meta
    return (
        f"Showing {meta.display_start} - {meta.display_end} "
        f"of {meta.total_count} products"
    )


def present(result: ViewResult) -> CatalogPageDTO:
    meta = result.meta
    return CatalogPageDTO(
        rows=[_to_row(p) for p in result.items],
        meta=meta,
        caption=caption(result),
        page_numbers=(
            list(range(1, meta.total_pages + 1)) if meta.total_pages > 1 else []
        ),
    )


# --- Mapping ------------------------------------------------------------------


def _to_row(product: Product) -> ProductRowDTO:
    return ProductRowDTO(
        id="" if product.id is None else str(product.id),
        title=product.title,
        price=str(product.price),
        category=product.category_name or MISSING_CATEGORY,
        description=truncate(product.description),
        images=display_images(product.images),
    )

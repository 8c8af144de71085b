"""Product entity.

Products are created once when the catalog is loaded and are never
modified afterwards; a reload replaces the whole catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from catview.domain.model.value_objects import Price


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    The view pipeline only looks at ``title`` and ``price``; every other
    field is carried for display. ``extra`` holds the raw fields the viewer
    has no use for, passed through untouched.
    """

    id: Any
    title: str
    price: Price
    images: tuple[str, ...] = ()
    category_name: str | None = None
    description: str = ""
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "images", tuple(self.images))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))


# The full dataset after a successful load.
Catalog = tuple[Product, ...]

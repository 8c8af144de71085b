"""HTML rendering of a catalog page."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from catview.application.dto import CatalogPageDTO
from catview.application.presenter import FALLBACK_IMAGE_URL

# Resolve template directory relative to this file
TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_html(page: CatalogPageDTO, title: str = "Product Catalog") -> str:
    template = env.get_template("catalog.html")
    return template.render(
        title=title,
        page=page,
        fallback_image=FALLBACK_IMAGE_URL,
    )

"""CLI commands for viewing the catalog."""

from __future__ import annotations

from pathlib import Path

import click

from catview.application.catalog_store import CatalogStore
from catview.application.catalog_viewer import CatalogViewer
from catview.application.dto import CatalogPageDTO
from catview.application.presenter import present
from catview.domain.exceptions import DomainException
from catview.domain.model.view_state import ALLOWED_PAGE_SIZES, SortKey
from catview.domain.service.view_pipeline import ViewResult
from catview.infrastructure import bootstrap
from catview.infrastructure.html.renderer import render_html

SORT_CHOICES = [k.value for k in SortKey]
PAGE_SIZE_CHOICES = [str(n) for n in ALLOWED_PAGE_SIZES]

SHELL_HELP = """\
Commands:
  search <text>   filter by title (empty text clears the filter)
  sort <key>      one of: {sorts}
  size <n>        items per page, one of: {sizes}
  page <n>        go to page n
  next / prev     move one page
  reset           restore defaults
  help            show this help
  quit            leave the shell""".format(
    sorts=", ".join(SORT_CHOICES), sizes=", ".join(PAGE_SIZE_CHOICES)
)


def _view_options(func):
    """Options shared by commands that render a single view."""
    func = click.option("--page", type=int, default=1, show_default=True, help="Page number.")(func)
    func = click.option(
        "--page-size",
        type=click.Choice(PAGE_SIZE_CHOICES),
        default=PAGE_SIZE_CHOICES[0],
        show_default=True,
        help="Items per page.",
    )(func)
    func = click.option(
        "--sort",
        "sort_key",
        type=click.Choice(SORT_CHOICES),
        default=SortKey.NONE.value,
        show_default=True,
        help="Sort order.",
    )(func)
    func = click.option("--query", default="", help="Case-insensitive title filter.")(func)
    return func


def _url_option(func):
    return click.option("--url", default=None, help="Catalog endpoint (overrides CATVIEW_API_URL).")(func)


def _load(url: str | None) -> CatalogStore:
    store = bootstrap.catalog_store(url)
    try:
        store.load()
    except DomainException as exc:
        raise click.ClickException(f"Could not load the catalog: {exc}")
    return store


def _build_view(
    store: CatalogStore, query: str, sort_key: str, page_size: str, page: int
) -> ViewResult:
    viewer = bootstrap.catalog_viewer(store)
    try:
        viewer.set_page_size(int(page_size))
        viewer.set_sort(sort_key)
        viewer.set_query(query.strip())
        return viewer.set_page(page)
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _shorten(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 3] + "..."


def _display_page(page: CatalogPageDTO) -> None:
    """Shared formatting for displaying one page as a text table."""
    click.echo(f"{'ID':<6} {'Title':<40} {'Price':>10}  {'Category':<16}")
    click.echo("-" * 76)
    if page.empty:
        click.echo("No data.")
    for row in page.rows:
        click.echo(
            f"{_shorten(row.id, 6):<6} {_shorten(row.title, 40):<40} "
            f"{row.price:>10}  {_shorten(row.category, 16):<16}"
        )
    click.echo("-" * 76)
    click.echo(f"{page.caption}  (page {page.meta.current_page}/{page.meta.total_pages})")


@click.command("browse")
@_view_options
@_url_option
def catalog_browse(query: str, sort_key: str, page_size: str, page: int, url: str | None) -> None:
    """Print one page of the catalog."""
    store = _load(url)
    result = _build_view(store, query, sort_key, page_size, page)
    _display_page(present(result))


@click.command("export")
@click.option(
    "--output",
    required=True,
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="HTML file to write.",
)
@_view_options
@_url_option
def catalog_export(
    output: Path, query: str, sort_key: str, page_size: str, page: int, url: str | None
) -> None:
    """Write one page of the catalog as an HTML file."""
    store = _load(url)
    result = _build_view(store, query, sort_key, page_size, page)
    dto = present(result)
    output.write_text(render_html(dto), encoding="utf-8")
    click.echo(f"Wrote {output} ({dto.caption})")


def _run_shell_command(viewer: CatalogViewer, line: str) -> ViewResult | None:
    """Execute one shell line. Returns None when the line changes nothing."""
    command, _, arg = line.strip().partition(" ")
    command = command.lower()
    arg = arg.strip()

    if command == "search":
        return viewer.set_query(arg)
    if command == "sort":
        return viewer.set_sort(arg)
    if command in ("size", "page"):
        try:
            number = int(arg)
        except ValueError:
            raise click.BadParameter(f"'{command}' expects an integer, got {arg!r}.")
        return viewer.set_page_size(number) if command == "size" else viewer.set_page(number)
    if command == "next":
        return viewer.next_page()
    if command == "prev":
        return viewer.previous_page()
    if command == "reset":
        return viewer.reset()
    if command == "help":
        click.echo(SHELL_HELP)
        return None
    raise click.BadParameter(f"Unknown command '{command}'. Type 'help'.")


@click.command("shell")
@_url_option
def catalog_shell(url: str | None) -> None:
    """Browse the catalog interactively."""
    store = _load(url)
    viewer = bootstrap.catalog_viewer(store)
    _display_page(present(viewer.view()))
    click.echo("Type 'help' for commands.")

    while True:
        try:
            line = click.prompt("catview", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            break
        if line.strip().lower() in ("quit", "exit"):
            break
        if not line.strip():
            continue
        try:
            result = _run_shell_command(viewer, line)
        except (DomainException, click.BadParameter) as exc:
            click.echo(f"Error: {exc}", err=True)
            continue
        if result is not None:
            _display_page(present(result))

    store.close()

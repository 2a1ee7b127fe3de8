"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from ..pagination.builder import build_range_and_links
from ..rendering.view import View
from ..settings import ConfigError
from ..templates.resolver import TemplateLocator
from .parsers import parse_data_items

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="hybrid-theme",
    help="Locate and render theme views and page navigation.",
)

RootsOption = Annotated[
    list[Path],
    typer.Option(
        "--root",
        help="Theme directory to search, child before parent. Repeatable (default: settings).",
        metavar="DIR",
    ),
]
ViewsPathOption = Annotated[
    str,
    typer.Option(
        "--views-path",
        help="Views directory inside each theme root (default: settings).",
        metavar="PATH",
    ),
]


@app.callback()
def configure(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


def _locator(roots: list[Path], views_path: str) -> TemplateLocator:
    return TemplateLocator(roots or None, views_path or None)


@app.command()
def render(
    name: Annotated[str, typer.Argument(help="View name.")],
    slugs: Annotated[
        list[str],
        typer.Option(
            "--slug",
            help="Slug to try before the default template, in order. Repeatable.",
            metavar="SLUG",
        ),
    ] = [],
    data: Annotated[
        list[str],
        typer.Option(
            "--data",
            help="Template variable (format: KEY=VALUE). Repeatable.",
            metavar="KEY=VALUE",
        ),
    ] = [],
    roots: RootsOption = [],
    views_path: ViewsPathOption = "",
) -> None:
    """Render a view to stdout."""
    try:
        view = View(name, slugs, parse_data_items(data), _locator(roots, views_path))
        template = view.template()
        if template is None:
            typer.echo(f"No template found for view {name!r}", err=True)
            raise typer.Exit(code=1)
        view.render(template=template)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def locate(
    templates: Annotated[list[str], typer.Argument(help="Candidate templates, in order.")],
    roots: RootsOption = [],
    views_path: ViewsPathOption = "",
) -> None:
    """Print the first existing template path."""
    try:
        located = _locator(roots, views_path).locate(templates)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if located is None:
        typer.echo("No template found", err=True)
        raise typer.Exit(code=1)
    typer.echo(str(located))


@app.command()
def paginate(
    total: Annotated[int, typer.Option("--total", help="Total number of pages.")],
    current: Annotated[int, typer.Option("--current", help="Current page.")] = 1,
    base: Annotated[
        str, typer.Option("--base", help="URL base with the %_% placeholder.")
    ] = "/%_%",
    format: Annotated[
        str, typer.Option("--format", help="Page segment with the %#% placeholder.")
    ] = "page/%#%/",
    end_size: Annotated[int, typer.Option("--end-size", help="Pages at each end.")] = 1,
    mid_size: Annotated[
        int, typer.Option("--mid-size", help="Pages around the current page.")
    ] = 3,
    show_all: Annotated[bool, typer.Option("--show-all", help="Show every page.")] = False,
) -> None:
    """Print page navigation markup."""
    try:
        output = build_range_and_links(
            {
                "base": base,
                "format": format,
                "current": current,
                "total": total,
                "end_size": end_size,
                "mid_size": mid_size,
                "show_all": show_all,
            }
        )
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    logger.debug(f"Rendered pagination for page {current} of {total}")
    typer.echo(output, nl=False)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

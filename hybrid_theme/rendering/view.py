"""View objects: a name, slug fallbacks and a data bag."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO, Any, Mapping, Sequence

from ..core.collection import Collection
from ..settings import config
from ..templates.resolver import TemplateLocator
from .engine import render_file

logger = logging.getLogger(__name__)


class View:
    """A renderable view.

    The template hierarchy is ``{name}/{slug}`` for each slug in order,
    followed by ``{name}`` and ``{name}/default``. The first file found under
    the views directory wins.
    """

    def __init__(
        self,
        name: str,
        slugs: str | Sequence[str] = (),
        data: Collection | Mapping[str, Any] | None = None,
        locator: TemplateLocator | None = None,
    ) -> None:
        self.name = name
        self.slugs = [slugs] if isinstance(slugs, str) else list(slugs)
        self.data = data if isinstance(data, Collection) else Collection(data)
        self.locator = locator or TemplateLocator()

    def __str__(self) -> str:
        return self.fetch()

    def templates(self) -> list[str]:
        ext = config("view").extension
        hierarchy = [f"{self.name}/{slug}{ext}" for slug in self.slugs if slug]
        hierarchy.append(f"{self.name}{ext}")
        hierarchy.append(f"{self.name}/default{ext}")
        return hierarchy

    def template(self) -> Path | None:
        return self.locator.locate(self.templates())

    def fetch(self, template: Path | None = None) -> str:
        """Render the view and return its output ("" when no template exists).

        Args:
            template: Already located template, skips the lookup
        """
        template = template or self.template()
        if template is None:
            logger.warning(
                f"No template for view {self.name!r} (slugs: {', '.join(self.slugs) or 'none'})"
            )
            return ""

        context = {**self.data.all(), "view": self}
        return render_file(template, context)

    def render(self, stream: IO[str] | None = None, template: Path | None = None) -> None:
        (stream or sys.stdout).write(self.fetch(template))


def view(
    name: str,
    slugs: str | Sequence[str] = (),
    data: Mapping[str, Any] | None = None,
    locator: TemplateLocator | None = None,
) -> View:
    return View(name, slugs, Collection(data), locator)


def render_view(
    name: str,
    slugs: str | Sequence[str] = (),
    data: Mapping[str, Any] | None = None,
    stream: IO[str] | None = None,
    locator: TemplateLocator | None = None,
) -> None:
    view(name, slugs, data, locator).render(stream)


def fetch_view(
    name: str,
    slugs: str | Sequence[str] = (),
    data: Mapping[str, Any] | None = None,
    locator: TemplateLocator | None = None,
) -> str:
    return view(name, slugs, data, locator).fetch()

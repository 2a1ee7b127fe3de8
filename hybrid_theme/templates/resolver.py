"""Template path filtering and lookup across theme roots."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from ..rendering.engine import render_file
from ..settings import config, get_settings

logger = logging.getLogger(__name__)


def filter_templates(
    templates: str | Sequence[str], views_path: str | None = None
) -> list[str]:
    """Prefix each template with the views directory.

    Every occurrence of the views path is removed from a template before it
    is re-prefixed, so already-prefixed names are not prefixed twice. A name
    that merely contains the views path in an unrelated segment loses that
    text as well.

    Args:
        templates: Template name or ordered list of names
        views_path: Views directory (default: ``config("view").path``)

    Returns:
        Rewritten names, in input order
    """
    if isinstance(templates, str):
        templates = [templates]

    path = views_path if views_path is not None else config("view").path

    return [f"{path}/{template.replace(path, '').lstrip('/')}" for template in templates]


class TemplateLocator:
    """Find the first existing template under an ordered list of roots."""

    def __init__(
        self, roots: Iterable[Path] | None = None, views_path: str | None = None
    ) -> None:
        self.roots = [Path(root) for root in (roots or get_settings().theme_roots)]
        self.views_path = views_path

    def candidates(self, templates: str | Sequence[str]) -> list[str]:
        return filter_templates(templates, self.views_path)

    def locate(self, templates: str | Sequence[str]) -> Path | None:
        """Return the first candidate that exists, checking each root in turn.

        Candidates are tried in order; for each candidate the roots are
        checked in order, so a child theme shadows its parent. Candidates
        that resolve outside a root's views directory are skipped.
        """
        views_path = self.views_path if self.views_path is not None else config("view").path
        for candidate in filter_templates(templates, views_path):
            for root in self.roots:
                path = root / candidate
                if not path.resolve().is_relative_to((root / views_path).resolve()):
                    logger.warning(f"Skipping template outside {root / views_path}: {candidate}")
                    continue
                if path.is_file():
                    logger.debug(f"Located template {candidate} in {root}")
                    return path

        logger.debug(f"No template found for {templates!r}")
        return None


def locate_template(
    templates: str | Sequence[str],
    roots: Iterable[Path] | None = None,
    load: bool = False,
    data: Mapping[str, Any] | None = None,
) -> Path | str | None:
    """Locate a template, optionally rendering it.

    Args:
        templates: Template name or ordered list of fallbacks
        roots: Theme directories to search (default: settings theme roots)
        load: Render the located template and return its output
        data: Template context used when ``load`` is set

    Returns:
        Located path, rendered output when ``load`` is set, or None
    """
    located = TemplateLocator(roots).locate(templates)
    if located is None or not load:
        return located

    return render_file(located, dict(data or {}))

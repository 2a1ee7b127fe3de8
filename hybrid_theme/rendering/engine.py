"""Template rendering engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, Template

logger = logging.getLogger(__name__)


class TemplateNotFoundError(FileNotFoundError):
    """Raised when a template file to render does not exist."""


def create_environment(search_path: list[Path] | None = None) -> Environment:
    """Build the Jinja2 environment used for views and pagination markup.

    Args:
        search_path: Directories for includes and extends

    Returns:
        Configured Jinja2 environment
    """
    loader = FileSystemLoader([str(path) for path in search_path]) if search_path else None
    return Environment(
        loader=loader,
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def load_template(template_path: Path) -> Template:
    """Load a Jinja2 template from a file path.

    Args:
        template_path: Path to the template file

    Returns:
        Compiled Jinja2 template
    """
    if not template_path.exists():
        raise TemplateNotFoundError(f"Template not found: {template_path}")

    # Use template's parent directory as loader search path
    env = create_environment([template_path.parent])
    return env.get_template(template_path.name)


def render_file(template_path: Path, context: dict[str, Any]) -> str:
    """Render a template file with the given context."""
    logger.debug(f"Rendering template: {template_path}")
    return load_template(template_path).render(**context)


def render_string(source: str, context: dict[str, Any]) -> str:
    """Render an inline template source with the given context."""
    return create_environment().from_string(source).render(**context)

"""Pagination markup."""

from __future__ import annotations

import logging
import sys
from typing import IO, Any, Mapping

from ..core.models import PageLink, PaginationArgs
from ..rendering.engine import render_string
from .links import paginate_links

logger = logging.getLogger(__name__)

PAGINATION_TEMPLATE = """\
<{{ args.container_tag }} class="{{ args.container_class }}" role="navigation">
{% if args.title_text %}
<{{ args.title_tag }} class="{{ args.title_class }}">{{ args.title_text }}</{{ args.title_tag }}>
{% endif %}
<{{ args.list_tag }} class="{{ args.list_class }}">
{% for item in items %}
<{{ args.item_tag }} class="{{ args.item_class }} {{ args.item_class }}--{{ item.kind }}">
{%- if item.url -%}
<a class="{{ args.anchor_class }} {{ args.anchor_class }}--{{ item.kind }}" href="{{ item.url }}">{{ item.text }}</a>
{%- elif item.kind == "current" -%}
<span class="{{ args.anchor_class }} {{ args.anchor_class }}--current" aria-current="page">{{ item.text }}</span>
{%- else -%}
<span class="{{ args.anchor_class }} {{ args.anchor_class }}--dots">{{ item.text }}</span>
{%- endif -%}
</{{ args.item_tag }}>
{% endfor %}
</{{ args.list_tag }}>
</{{ args.container_tag }}>
"""


class Pagination:
    """Page navigation for a paginated listing or document."""

    def __init__(self, args: PaginationArgs | Mapping[str, Any] | None = None) -> None:
        if isinstance(args, PaginationArgs):
            self.args = args
        else:
            self.args = PaginationArgs.model_validate(dict(args or {}))

    def items(self) -> list[PageLink]:
        return paginate_links(self.args)

    def fetch(self) -> str:
        """Return the pagination markup, or "" when there is a single page."""
        items = self.items()
        if not items:
            logger.debug(f"Skipping pagination for {self.args.total} page(s)")
            return ""
        return render_string(PAGINATION_TEMPLATE, {"args": self.args, "items": items})

    def render(self, stream: IO[str] | None = None) -> None:
        (stream or sys.stdout).write(self.fetch())


def pagination(args: PaginationArgs | Mapping[str, Any] | None = None) -> Pagination:
    return Pagination(args)


def build_range_and_links(args: PaginationArgs | Mapping[str, Any] | None = None) -> str:
    """Render page links for the given parameters and display options."""
    return pagination(args).fetch()


def posts_pagination(
    args: PaginationArgs | Mapping[str, Any] | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Write the listing pagination to a stream (stdout by default)."""
    pagination(args).render(stream)

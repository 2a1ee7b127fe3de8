"""Pagination for documents split into several pages."""

from __future__ import annotations

import html
import logging
from typing import IO, Any, Mapping

from ..core.models import PaginationArgs, PaginationParams, SingularContext
from .builder import pagination
from .links import BASE_PLACEHOLDER, NUMBER_PLACEHOLDER

logger = logging.getLogger(__name__)


def derive_singular_params(
    permalink_url: str,
    page: int,
    total_pages: int,
    is_multipage: bool,
    using_permalinks: bool,
    using_index_permalinks: bool,
    more: bool = False,
    use_trailing_slashes: bool = True,
) -> PaginationParams | None:
    """Derive base, format and page counters from a document permalink.

    Out-of-range pages are clamped to 0..total_pages.

    Args:
        permalink_url: Canonical URL of the document
        page: Page being viewed
        total_pages: Number of pages in the document
        is_multipage: Whether the document is split into pages at all
        using_permalinks: Path-segment page numbers instead of a query arg
        using_index_permalinks: Permalinks are routed through index.php
        more: Whether the full content is being shown
        use_trailing_slashes: Permalink structure ends with a slash

    Returns:
        Pagination parameters, or None when nothing should be paginated
    """
    if not is_multipage:
        return None

    path = html.unescape(permalink_url or "").split("?", 1)[0]
    base = path.rstrip("/") + "/" + BASE_PLACEHOLDER

    format = ""
    if using_index_permalinks and "index.php" not in base:
        format = "index.php/"
    if using_permalinks:
        format += NUMBER_PLACEHOLDER + ("/" if use_trailing_slashes else "")
    else:
        format += f"?page={NUMBER_PLACEHOLDER}"

    total = max(total_pages, 0)
    current = 0 if not more and page == 1 else max(page, 0)
    if total > 0:
        current = min(current, total)

    return PaginationParams(base=base, format=format, current=current, total=total)


def singular_pagination(
    context: SingularContext,
    args: Mapping[str, Any] | None = None,
    stream: IO[str] | None = None,
) -> str:
    """Render page links for a multi-page document.

    Caller-supplied ``args`` take precedence over the derived parameters.
    The markup is written to ``stream`` when given and always returned.
    """
    params = derive_singular_params(
        context.permalink_url,
        context.page,
        context.total_pages,
        context.is_multipage,
        context.using_permalinks,
        context.using_index_permalinks,
        more=context.more,
        use_trailing_slashes=context.use_trailing_slashes,
    )
    if params is None:
        logger.debug("Document is not paginated")
        return ""

    merged = PaginationArgs.model_validate({**params.model_dump(), **dict(args or {})})
    output = pagination(merged).fetch()
    if stream is not None:
        stream.write(output)
    return output

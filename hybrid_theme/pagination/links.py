"""Page-number sequences and page URLs."""

from __future__ import annotations

from typing import Literal, Mapping
from urllib.parse import unquote_plus, urlencode, urlsplit, urlunsplit

from ..core.models import PageLink, PaginationArgs

DOTS: Literal["..."] = "..."

BASE_PLACEHOLDER = "%_%"
NUMBER_PLACEHOLDER = "%#%"


def page_numbers(
    current: int,
    total: int,
    end_size: int = 1,
    mid_size: int = 3,
    show_all: bool = False,
) -> list[int | Literal["..."]]:
    """Build the visible page numbers with ellipsis markers.

    Shows the first and last ``end_size`` pages and a window of
    ``mid_size`` pages centered on ``current``. A current page of 0 has no
    window. A gap hiding a single page shows that page instead of an
    ellipsis.

    Args:
        current: Current page (0 for the unnumbered first page)
        total: Total number of pages
        end_size: Pages shown at each end (at least 1)
        mid_size: Width of the window around the current page
        show_all: Show every page

    Returns:
        Ordered page numbers and ``"..."`` markers
    """
    if total < 1:
        return []
    if show_all:
        return list(range(1, total + 1))

    end_size = max(end_size, 1)
    reach = max(mid_size, 0) // 2

    visible = set(range(1, min(end_size, total) + 1))
    visible.update(range(max(total - end_size + 1, 1), total + 1))
    if current >= 1:
        visible.update(range(max(current - reach, 1), min(current + reach, total) + 1))

    sequence: list[int | Literal["..."]] = []
    previous = 0
    for number in sorted(visible):
        gap = number - previous - 1
        if gap == 1:
            sequence.append(previous + 1)
        elif gap > 1:
            sequence.append(DOTS)
        sequence.append(number)
        previous = number

    return sequence


def _add_query_args(url: str, args: Mapping[str, str]) -> str:
    # Existing pairs keep their order, repeats and encoding; added keys replace them.
    scheme, netloc, path, query, fragment = urlsplit(url)
    kept = [
        pair
        for pair in query.split("&")
        if pair and unquote_plus(pair.split("=", 1)[0]) not in args
    ]
    kept.append(urlencode(list(args.items())))
    return urlunsplit((scheme, netloc, path, "&".join(kept), fragment))


def page_url(
    number: int,
    base: str,
    format: str,
    add_args: Mapping[str, str] | None = None,
    add_fragment: str = "",
) -> str:
    """Build the URL of a page.

    Page 1 drops the format segment entirely so it keeps the clean URL.
    """
    segment = "" if number == 1 else format
    url = base.replace(BASE_PLACEHOLDER, segment).replace(NUMBER_PLACEHOLDER, str(number))
    if add_args:
        url = _add_query_args(url, add_args)
    return url + add_fragment


def paginate_links(args: PaginationArgs) -> list[PageLink]:
    """Map pagination arguments to the ordered items to display."""
    current, total = args.current, args.total
    if total < 2:
        return []

    def url_for(number: int) -> str:
        return page_url(number, args.base, args.format, args.add_args, args.add_fragment)

    def label(number: int) -> str:
        return f"{args.before_page_number}{number}{args.after_page_number}"

    items: list[PageLink] = []
    if args.prev_next and current > 1:
        items.append(
            PageLink(kind="prev", number=current - 1, url=url_for(current - 1), text=args.prev_text)
        )

    for entry in page_numbers(current, total, args.end_size, args.mid_size, args.show_all):
        if entry == DOTS:
            items.append(PageLink(kind="dots", text="\u2026"))
        elif entry == current:
            items.append(PageLink(kind="current", number=entry, text=label(entry)))
        else:
            items.append(PageLink(kind="page", number=entry, url=url_for(entry), text=label(entry)))

    if args.prev_next and 1 <= current < total:
        items.append(
            PageLink(kind="next", number=current + 1, url=url_for(current + 1), text=args.next_text)
        )

    return items

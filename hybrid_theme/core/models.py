"""Domain models for view configuration and pagination."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator


class ViewConfig(BaseModel):
    """Where view templates live inside a theme."""

    path: str = Field(default="resources/views", description="Views directory")
    extension: str = Field(default=".html", description="Template file extension")


class PaginationParams(BaseModel):
    """Base URL, format and page counters feeding a pagination render."""

    base: str = Field(default="%_%", description="URL base containing the %_% placeholder")
    format: str = Field(default="?page=%#%", description="Page segment with the %#% placeholder")
    current: int = Field(default=0, ge=0, description="Current page, 0 for the unnumbered first page")
    total: int = Field(default=1, ge=0, description="Total number of pages")

    @model_validator(mode="after")
    def _check_current(self) -> "PaginationParams":
        if self.total > 0 and self.current > self.total:
            raise ValueError(
                f"current page {self.current} exceeds total pages {self.total}"
            )
        return self


class PaginationArgs(PaginationParams):
    """Pagination parameters plus display options."""

    show_all: bool = False
    end_size: int = Field(default=1, description="Pages shown at each end")
    mid_size: int = Field(default=3, description="Pages shown around the current page")
    prev_next: bool = True
    prev_text: str = "Previous"
    next_text: str = "Next"
    title_text: str = "Pages:"
    before_page_number: str = ""
    after_page_number: str = ""
    container_tag: str = "nav"
    container_class: str = "pagination"
    title_tag: str = "h2"
    title_class: str = "pagination__title"
    list_tag: str = "ul"
    list_class: str = "pagination__items"
    item_tag: str = "li"
    item_class: str = "pagination__item"
    anchor_class: str = "pagination__anchor"
    add_args: dict[str, str] = Field(default_factory=dict)
    add_fragment: str = ""


class SingularContext(BaseModel):
    """Document and rewrite state needed to paginate a single document."""

    permalink_url: str = ""
    page: int = 1
    total_pages: int = 1
    is_multipage: bool = False
    more: bool = False
    using_permalinks: bool = True
    using_index_permalinks: bool = False
    use_trailing_slashes: bool = True


class PageLink(BaseModel):
    """A single item of rendered page navigation."""

    kind: Literal["prev", "next", "page", "current", "dots"]
    number: int | None = None
    url: str | None = None
    text: str

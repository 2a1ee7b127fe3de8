from __future__ import annotations

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Query, status
from fastapi.responses import HTMLResponse
from pydantic import ValidationError

from ..pagination.builder import build_range_and_links
from ..rendering.view import View
from ..settings import ConfigError, Settings, get_settings
from ..templates.resolver import TemplateLocator

app = FastAPI(title="Hybrid Theme Preview", version="0.1.0")


def get_locator(settings: Settings = Depends(get_settings)) -> TemplateLocator:
    return TemplateLocator(settings.theme_roots)


@app.get("/views/{name}", response_class=HTMLResponse)
async def preview_view(
    name: str,
    slug: list[str] = Query(default=[]),
    locator: TemplateLocator = Depends(get_locator),
) -> HTMLResponse:
    try:
        view = View(name, slug, locator=locator)
        template = view.template()
        if template is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No template for view {name!r}",
            )
        return HTMLResponse(view.fetch(template))
    except ConfigError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@app.get("/pagination", response_class=HTMLResponse)
async def preview_pagination(
    total: int,
    current: int = 1,
    base: str = "/%_%",
    format: str = "page/%#%/",
    end_size: int = 1,
    mid_size: int = 3,
    show_all: bool = False,
) -> HTMLResponse:
    """
    Render page navigation for the given counters.
    """
    try:
        markup = build_range_and_links(
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
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return HTMLResponse(markup)


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "hybrid_theme.web.app:app",
        host=settings.bind_host,
        port=settings.bind_port,
        reload=False,
        workers=1,
    )


__all__ = ["app", "main"]

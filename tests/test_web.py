"""Tests for the preview web application."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from hybrid_theme.templates.resolver import TemplateLocator
from hybrid_theme.web.app import app, get_locator


@pytest.fixture()
def client(parent_theme: Path) -> Iterator[TestClient]:
    app.dependency_overrides[get_locator] = lambda: TemplateLocator([parent_theme])
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_view_preview(client: TestClient):
    response = client.get("/views/content", params={"slug": ["missing", "post"]})

    assert response.status_code == 200
    assert response.text == "Post: "
    assert response.headers["content-type"].startswith("text/html")


def test_view_preview_default_template(client: TestClient):
    response = client.get("/views/entry")

    assert response.status_code == 200
    assert response.text == "Default entry"


def test_missing_view(client: TestClient):
    response = client.get("/views/sidebar")

    assert response.status_code == 404


def test_pagination_preview(client: TestClient):
    response = client.get("/pagination", params={"total": 3, "current": 2})

    assert response.status_code == 200
    assert 'href="/page/3/"' in response.text


def test_pagination_preview_query_format(client: TestClient):
    response = client.get(
        "/pagination",
        params={"total": 3, "current": 1, "base": "/blog/%_%", "format": "?page=%#%"},
    )

    assert response.status_code == 200
    assert 'href="/blog/?page=2"' in response.text


def test_invalid_pagination(client: TestClient):
    response = client.get("/pagination", params={"total": 2, "current": 5})

    assert response.status_code == 400


def test_traversal_slug_stays_in_views(client: TestClient, tmp_path: Path):
    (tmp_path / "secret.html").write_text("SECRET")

    response = client.get("/views/entry", params={"slug": "../../../../secret"})

    assert response.status_code == 200
    assert response.text == "Default entry"


def test_view_preview_locates_once(client: TestClient, monkeypatch):
    calls: list[object] = []
    locate = TemplateLocator.locate

    def counting_locate(self, templates):
        calls.append(templates)
        return locate(self, templates)

    monkeypatch.setattr(TemplateLocator, "locate", counting_locate)

    response = client.get("/views/footer")

    assert response.text == "Parent footer"
    assert len(calls) == 1

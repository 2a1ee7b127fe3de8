"""Tests for views and the view data collection."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from hybrid_theme.core.collection import Collection, collect
from hybrid_theme.rendering.view import View, fetch_view, render_view, view
from hybrid_theme.templates.resolver import TemplateLocator

from .helpers import write_view


class TestCollection:
    def test_helpers(self):
        items = collect({"a": 1})
        items.add("b", 2)
        items.remove("a")
        items.remove("missing")

        assert items.has("b")
        assert not items.has("a")
        assert items.get("b") == 2
        assert items.get("a", "x") == "x"
        assert items.all() == {"b": 2}

    def test_mapping_protocol(self):
        items = Collection()
        items["title"] = "Hello"

        assert dict(items) == {"title": "Hello"}
        assert len(items) == 1
        del items["title"]
        assert list(items) == []

    def test_all_returns_copy(self):
        items = collect({"a": 1})
        items.all()["a"] = 2

        assert items["a"] == 1


class TestView:
    def test_hierarchy(self):
        assert View("content", ["post", "page"]).templates() == [
            "content/post.html",
            "content/page.html",
            "content.html",
            "content/default.html",
        ]

    def test_string_slug(self):
        assert View("entry", "archive").templates()[0] == "entry/archive.html"

    def test_empty_slugs_are_skipped(self):
        assert View("entry", ["", "post"]).templates()[0] == "entry/post.html"

    def test_extension_from_config(self, tmp_path: Path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "view.yaml").write_text("extension: .j2\n")

        assert View("entry").templates() == ["entry.j2", "entry/default.j2"]

    def test_slug_template_wins(self, parent_theme: Path):
        locator = TemplateLocator([parent_theme])

        assert fetch_view("content", ["post"], {"title": "Hi"}, locator) == "Post: Hi"

    def test_falls_back_to_name(self, parent_theme: Path):
        locator = TemplateLocator([parent_theme])

        assert fetch_view("content", ["page"], {"title": "Hi"}, locator) == "Content: Hi"

    def test_falls_back_to_default(self, parent_theme: Path):
        locator = TemplateLocator([parent_theme])

        assert fetch_view("entry", ["post"], locator=locator) == "Default entry"

    def test_child_theme_view(self, parent_theme: Path, child_theme: Path):
        locator = TemplateLocator([child_theme, parent_theme])

        assert fetch_view("header", locator=locator) == "Child header"

    def test_missing_template_fetches_empty(self, parent_theme: Path, caplog):
        locator = TemplateLocator([parent_theme])

        with caplog.at_level(logging.WARNING):
            assert fetch_view("sidebar", ["primary"], locator=locator) == ""

        assert "sidebar" in caplog.text

    def test_view_is_available_to_template(self, tmp_path: Path):
        write_view(tmp_path, "menu/primary.html", "{{ view.name }}:{{ view.slugs | join(',') }}")
        locator = TemplateLocator([tmp_path])

        assert fetch_view("menu", ["primary"], locator=locator) == "menu:primary"

    def test_data_is_escaped(self, parent_theme: Path):
        locator = TemplateLocator([parent_theme])

        assert fetch_view("content", data={"title": "<b>"}, locator=locator) == "Content: &lt;b&gt;"

    def test_render_writes_stream(self, parent_theme: Path):
        stream = io.StringIO()

        render_view("footer", stream=stream, locator=TemplateLocator([parent_theme]))

        assert stream.getvalue() == "Parent footer"

    def test_str_fetches(self, parent_theme: Path):
        assert str(view("footer", locator=TemplateLocator([parent_theme]))) == "Parent footer"

    def test_accepts_collection(self, parent_theme: Path):
        data = collect({"title": "Bag"})

        item = View("content", data=data, locator=TemplateLocator([parent_theme]))

        assert item.data is data
        assert item.fetch() == "Content: Bag"


class TestViewLookup:
    def test_traversal_slug_falls_back(self, tmp_path: Path, parent_theme: Path):
        (tmp_path / "secret.html").write_text("SECRET")

        output = fetch_view("entry", ["../../../../secret"], locator=TemplateLocator([parent_theme]))

        assert output == "Default entry"

    def test_fetch_uses_given_template(self, parent_theme: Path, monkeypatch):
        template = parent_theme / "resources/views/footer.html"
        item = View("sidebar", locator=TemplateLocator([parent_theme]))

        def fail_locate(self, templates):
            raise AssertionError("lookup should be skipped")

        monkeypatch.setattr(TemplateLocator, "locate", fail_locate)

        assert item.fetch(template) == "Parent footer"

    def test_render_uses_given_template(self, parent_theme: Path):
        stream = io.StringIO()
        item = View("sidebar", locator=TemplateLocator([parent_theme]))

        item.render(stream, template=parent_theme / "resources/views/header.html")

        assert stream.getvalue() == "Parent header"

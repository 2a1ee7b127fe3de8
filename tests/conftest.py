from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

import pytest

from hybrid_theme.settings import get_settings

from .helpers import write_view


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.upper().startswith("HYBRID_THEME_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def parent_theme(tmp_path: Path) -> Path:
    root = tmp_path / "parent"
    write_view(root, "header.html", "Parent header")
    write_view(root, "footer.html", "Parent footer")
    write_view(root, "content.html", "Content: {{ title }}")
    write_view(root, "content/post.html", "Post: {{ title }}")
    write_view(root, "entry/default.html", "Default entry")
    return root


@pytest.fixture()
def child_theme(tmp_path: Path) -> Path:
    root = tmp_path / "child"
    write_view(root, "header.html", "Child header")
    return root

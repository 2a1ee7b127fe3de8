from __future__ import annotations

from pathlib import Path


def write_view(root: Path, name: str, text: str) -> Path:
    path = root / "resources" / "views" / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path

"""CLI argument parsers and validators."""

from __future__ import annotations

import typer


def parse_data(value: str) -> tuple[str, str]:
    """Parse a data argument in format KEY=VALUE."""
    if "=" not in value:
        raise typer.BadParameter(f"Must be KEY=VALUE, got: {value!r}")
    key, data = value.split("=", 1)
    if not key:
        raise typer.BadParameter(f"Empty key in: {value!r}")
    return key, data


def parse_data_items(values: list[str]) -> dict[str, str]:
    return dict(map(parse_data, values))

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.models import ViewConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration section cannot be loaded."""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HYBRID_THEME_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    theme_roots: list[Path] = Field(default_factory=lambda: [Path(".")])
    config_dir: Path = Path("config")
    view: ViewConfig = Field(default_factory=ViewConfig)
    bind_host: str = "127.0.0.1"
    bind_port: int = 8080


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def _config_file(settings: Settings, name: str) -> Path:
    config_dir = settings.config_dir
    if not config_dir.is_absolute() and settings.theme_roots:
        config_dir = settings.theme_roots[0] / config_dir
    return config_dir / f"{name}.yaml"


def _read_overrides(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping")
    return data


def config(name: str, settings: Settings | None = None) -> BaseModel:
    """Return a configuration section by name.

    The section comes from the process settings and is overlaid with
    ``<config_dir>/<name>.yaml`` when that file exists. The file is read on
    every call so edits are picked up without a restart.

    Args:
        name: Section name (e.g. "view")
        settings: Settings to read from (default: process settings)

    Returns:
        The section model
    """
    settings = settings or get_settings()
    section = getattr(settings, name, None)
    if not isinstance(section, BaseModel):
        raise ConfigError(f"Unknown config section: {name!r}")

    overrides = _read_overrides(_config_file(settings, name))
    if not overrides:
        return section

    logger.debug(f"Applying {len(overrides)} override(s) to config section {name!r}")
    try:
        return section.model_validate({**section.model_dump(), **overrides})
    except ValidationError as exc:
        raise ConfigError(f"Invalid {name!r} config: {exc}") from exc

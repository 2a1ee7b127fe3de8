"""Hybrid Theme - view, template and pagination helpers for themes.

A small Pydantic/Jinja2-based layer for locating view templates under a
configured views directory and rendering page navigation.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .bootstrap.features import FeatureRegistry, register_framework_features, setup_theme
from .core.collection import Collection, collect
from .pagination.builder import (
    Pagination,
    build_range_and_links,
    pagination,
    posts_pagination,
)
from .pagination.singular import derive_singular_params, singular_pagination
from .rendering.view import View, fetch_view, render_view, view
from .settings import config
from .templates.resolver import filter_templates, locate_template

__all__ = [
    "Collection",
    "FeatureRegistry",
    "Pagination",
    "View",
    "build_range_and_links",
    "collect",
    "config",
    "derive_singular_params",
    "fetch_view",
    "filter_templates",
    "locate_template",
    "pagination",
    "posts_pagination",
    "register_framework_features",
    "render_view",
    "setup_theme",
    "singular_pagination",
    "view",
]

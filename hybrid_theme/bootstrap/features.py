"""Theme feature support and startup initializers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

logger = logging.getLogger(__name__)

# Loaders for features whose code ships with the framework, in load order:
# (feature, loader name, admin only).
FRAMEWORK_LOADERS = (
    ("hybrid-core-template-hierarchy", "template-hierarchy", False),
    ("post-formats", "formats", False),
    ("post-formats", "chat", False),
    ("theme-layouts", "layout", False),
    ("theme-layouts", "layouts", False),
    ("hybrid-core-deprecated", "deprecated", False),
    ("theme-layouts", "admin-post-layout", True),
    ("theme-layouts", "admin-term-layout", True),
)

# External projects bundled with the framework, mapped to the plugin that
# provides the same functionality when installed on its own.
EXTENSIONS = {
    "breadcrumb-trail": "breadcrumb-trail",
    "cleaner-gallery": "cleaner-gallery",
    "get-the-image": "get-the-image",
}

HTML5_FEATURES = ["caption", "comment-form", "comment-list", "gallery", "search-form"]

Initializer = Callable[["FeatureRegistry"], None]


@dataclass(frozen=True)
class _Registration:
    feature: str
    initializer: Initializer
    admin: bool = False


class FeatureRegistry:
    """Declared theme support plus the initializers keyed by feature."""

    def __init__(self) -> None:
        self._supports: dict[str, tuple[Any, ...]] = {}
        self._registrations: list[_Registration] = []
        self._loaded = False

    def add_support(self, feature: str, *args: Any) -> None:
        self._supports[feature] = args

    def remove_support(self, feature: str) -> None:
        if self._supports.pop(feature, None) is not None:
            logger.debug(f"Removed theme support: {feature}")

    def supports(self, feature: str) -> bool:
        return feature in self._supports

    def get_support(self, feature: str) -> tuple[Any, ...] | None:
        return self._supports.get(feature)

    def register(self, feature: str, initializer: Initializer, admin: bool = False) -> None:
        """Run ``initializer`` at load time if ``feature`` is supported.

        Admin initializers only run when loading for the admin screen.
        """
        self._registrations.append(_Registration(feature, initializer, admin))

    def load(self, is_admin: bool = False) -> list[str]:
        """Run the initializers of supported features, once.

        Returns:
            Features whose initializers ran, in registration order
        """
        if self._loaded:
            logger.debug("Features already loaded")
            return []
        self._loaded = True

        loaded: list[str] = []
        for registration in self._registrations:
            if not self.supports(registration.feature):
                continue
            if registration.admin and not is_admin:
                continue
            logger.debug(f"Loading feature: {registration.feature}")
            registration.initializer(self)
            if registration.feature not in loaded:
                loaded.append(registration.feature)

        logger.info(f"Loaded {len(loaded)} theme feature(s)")
        return loaded


def setup_theme(registry: FeatureRegistry, installed_plugins: Iterable[str] = ()) -> None:
    """Declare the features every theme supports.

    Extensions are dropped when a standalone plugin providing them is
    installed.
    """
    registry.add_support("title-tag")
    registry.add_support("html5", list(HTML5_FEATURES))

    installed = set(installed_plugins)
    for feature, plugin in EXTENSIONS.items():
        if plugin in installed:
            registry.remove_support(feature)


def register_framework_features(
    registry: FeatureRegistry, loaders: Mapping[str, Initializer]
) -> list[str]:
    """Register framework and extension loaders against their features.

    Args:
        registry: Registry to register with
        loaders: Initializers keyed by a loader name from ``FRAMEWORK_LOADERS``
            or by an extension name

    Returns:
        Loader names registered, in load order
    """
    registered: list[str] = []
    for feature, name, admin in FRAMEWORK_LOADERS:
        if name in loaders:
            registry.register(feature, loaders[name], admin=admin)
            registered.append(name)

    for extension in EXTENSIONS:
        if extension in loaders:
            registry.register(extension, loaders[extension])
            registered.append(extension)

    unknown = set(loaders) - set(registered)
    if unknown:
        logger.warning(f"Ignoring unknown feature loader(s): {', '.join(sorted(unknown))}")

    return registered

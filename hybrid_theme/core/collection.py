"""Key-value data bag passed to views."""

from __future__ import annotations

from typing import Any, Iterator, Mapping, MutableMapping


class Collection(MutableMapping[str, Any]):
    """Mutable mapping with the helper methods templates expect."""

    def __init__(self, items: Mapping[str, Any] | None = None) -> None:
        self._items: dict[str, Any] = dict(items or {})

    def add(self, name: str, value: Any) -> None:
        self._items[name] = value

    def remove(self, name: str) -> None:
        self._items.pop(name, None)

    def has(self, name: str) -> bool:
        return name in self._items

    def all(self) -> dict[str, Any]:
        return dict(self._items)

    def __getitem__(self, name: str) -> Any:
        return self._items[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._items[name] = value

    def __delitem__(self, name: str) -> None:
        del self._items[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Collection({self._items!r})"


def collect(items: Mapping[str, Any] | None = None) -> Collection:
    """Wrap items in a new Collection."""
    return Collection(items)

"""An ordered list of extension names."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

MAX_EXTENSION_NAME_SIZE = 256


def _checked(name: str) -> str:
    if not isinstance(name, str):
        raise TypeError(f"extension name must be str, not {type(name).__name__}")
    if len(name.encode("utf-8")) >= MAX_EXTENSION_NAME_SIZE:
        raise ValueError(
            f"extension name longer than {MAX_EXTENSION_NAME_SIZE - 1} bytes: {name!r}"
        )
    return name


class ExtensionList:
    """Extension names in insertion order; duplicates are allowed unless avoided."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: list[str] = []
        self.add(*names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"ExtensionList({self._names!r})"

    def add(self, *args: str) -> None:
        """Append each name given, without checking for duplicates.

        Raises ValueError if a name does not fit an extension name field; in
        that case nothing is added.
        """
        checked = [_checked(name) for name in args]
        self._names.extend(checked)

    def add_intersection(self, extensions: Iterable[str], subset: Iterable[str]) -> None:
        """Append the names of ``extensions`` that also appear in ``subset``."""
        wanted = list(subset)
        self.add(*(ext for ext in extensions for other in wanted if ext == other))

    def add_unique(self, name: str) -> None:
        """Append ``name`` unless the list already contains it."""
        if not self.contains(name):
            self.add(name)

    def extend(self, other: ExtensionList) -> None:
        """Append every name of ``other``."""
        self.add(*other.names())

    def names(self) -> list[str]:
        """Return a copy of the names in order."""
        return list(self._names)

    def contains(self, name: str) -> bool:
        """Return True if ``name`` is in the list."""
        return name in self._names

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def contains_all(self, other: ExtensionList) -> bool:
        """Return True if every name of ``other`` is in this list."""
        return all(self.contains(name) for name in other)

    def remove(self, name: str) -> None:
        """Remove every occurrence of ``name``; absent names are ignored."""
        self._names = [existing for existing in self._names if existing != name]
"""Merged key -> value catalog with first-writer-wins semantics.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from propl10n.localization.types import ResourceKey, ResourceValue

__all__ = ["MergedCatalog"]


class MergedCatalog(Mapping[ResourceKey, ResourceValue]):
    """Read-only mapping built by the cascade, most specific source first.

    Keys are only ever added through insert_if_absent, so a value captured
    from an earlier (more specific) file is never replaced. After freeze()
    the catalog rejects further inserts.

    Example:
        >>> catalog = MergedCatalog()
        >>> catalog.insert_if_absent("month.jan", "Jänner")
        True
        >>> catalog.insert_if_absent("month.jan", "Januar")
        False
        >>> catalog["month.jan"]
        'Jänner'
    """

    __slots__ = ("_data", "_frozen")

    def __init__(self) -> None:
        self._data: dict[ResourceKey, ResourceValue] = {}
        self._frozen = False

    def __getitem__(self, key: ResourceKey) -> ResourceValue:
        return self._data[key]

    def __iter__(self) -> Iterator[ResourceKey]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"MergedCatalog(keys={len(self._data)}, frozen={self._frozen})"

    @property
    def frozen(self) -> bool:
        """Whether the catalog still accepts inserts."""
        return self._frozen

    def insert_if_absent(self, key: ResourceKey, value: ResourceValue) -> bool:
        """Store value under key unless the key is already present.

        Returns:
            True if the value was stored, False if the key already existed

        Raises:
            TypeError: If the catalog has been frozen
        """
        if self._frozen:
            msg = "MergedCatalog is frozen; no further inserts allowed"
            raise TypeError(msg)
        if key in self._data:
            return False
        self._data[key] = value
        return True

    def merge(self, entries: Iterable[tuple[ResourceKey, ResourceValue]]) -> int:
        """Insert every absent key from entries.

        Returns:
            Number of keys actually added
        """
        return sum(1 for key, value in entries if self.insert_if_absent(key, value))

    def freeze(self) -> MergedCatalog:
        """Disallow further inserts and return self."""
        self._frozen = True
        return self

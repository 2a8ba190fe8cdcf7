"""datatable.expansion

Per-instance registry of expanded row keys.
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterator

logger = logging.getLogger(__name__)


class ExpansionRegistry:
    """Set of row keys currently showing detail content.

    Rows expand independently and without limit. Keys of rows that are no
    longer in the dataset may linger; they are simply never rendered. The
    registry lives as long as its owning table instance and is not cleared
    by data or sort changes.
    """

    def __init__(self) -> None:
        self._keys: set[Hashable] = set()

    def toggle(self, key: Hashable) -> bool:
        """Flip membership of `key` and return its new expanded state."""
        if key in self._keys:
            self._keys.discard(key)
            expanded = False
        else:
            self._keys.add(key)
            expanded = True
        logger.debug("row %r %s", key, "expanded" if expanded else "collapsed")
        return expanded

    def is_expanded(self, key: Any) -> bool:
        try:
            return key in self._keys
        except TypeError:
            # unhashable keys can never have been registered
            return False

    @property
    def expanded_keys(self) -> frozenset:
        return frozenset(self._keys)

    def __contains__(self, key: Any) -> bool:
        return self.is_expanded(key)

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._keys)

    def __repr__(self) -> str:
        return f"ExpansionRegistry({sorted(map(repr, self._keys))})"


__all__ = ["ExpansionRegistry"]

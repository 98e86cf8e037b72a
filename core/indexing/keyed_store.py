# Path: core/indexing/keyed_store.py
# Purpose: Store values under hierarchical keys with absent-tolerant lookup.
# Layer: core/indexing.
# Details: Nested dictionaries mirror key components; missing paths resolve to None instead of raising.

from __future__ import annotations

import logging
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar

from core.errors import DuplicateKey
from core.indexing.keys import DEFAULT_DELIMITER
from core.models.domain import Key

logger = logging.getLogger(__name__)

V = TypeVar("V")


class KeyedStore(Generic[V]):
    """Hierarchical mapping from a sequence of strings to a leaf value.

    Leaves and intermediate levels share one namespace: storing a value where a
    subtree (or another value) lives replaces it. With ``strict`` enabled, storing
    the same key twice raises :class:`DuplicateKey` instead.
    """

    def __init__(self, strict: bool = False, delimiter: str = DEFAULT_DELIMITER) -> None:
        self.strict = strict
        self.delimiter = delimiter
        self._root: Dict[str, Any] = _Level()
        self._keys: Dict[Key, None] = {}

    def put(self, key: Sequence[str], value: V) -> None:
        """Insert or overwrite the leaf at ``key``, creating intermediate levels."""

        key = tuple(key)
        if not key:
            raise ValueError("Cannot store a value under an empty key.")

        node = self._root
        for depth, component in enumerate(key[:-1]):
            child = node.get(component)
            if not isinstance(child, _Level):
                if child is not None:
                    self._replaced(key[: depth + 1])
                child = _Level()
                node[component] = child
            node = child

        last = key[-1]
        if last in node:
            self._replaced(key)
        node[last] = value
        self._keys[key] = None

    def get(self, key: Sequence[str]) -> Optional[V]:
        """Return the leaf at ``key`` or None when any level is missing."""

        node: Any = self._root
        for component in key:
            if not isinstance(node, _Level):
                return None
            node = node.get(component)
            if node is None:
                return None
        if isinstance(node, _Level):
            return None
        return node

    def keys(self) -> List[Key]:
        """Return every stored leaf key in insertion order."""

        return list(self._keys)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (tuple, list)):
            return False
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self.keys())

    def _replaced(self, key: Key) -> None:
        if self.strict:
            raise DuplicateKey(key, self.delimiter.join(key))
        logger.warning("Overwriting existing entry at %s", self.delimiter.join(key))
        for stored in list(self._keys):
            if stored[: len(key)] == key:
                del self._keys[stored]


class _Level(dict):
    """Intermediate level marker distinguishing subtrees from dict-valued leaves."""

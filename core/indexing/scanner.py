# Path: core/indexing/scanner.py
# Purpose: Scan a group folder and index its layer images by key.
# Layer: core/indexing.
# Details: Preserves directory-listing order; the keyed store answers paired-layer lookups.

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from core.indexing.keyed_store import KeyedStore
from core.indexing.keys import KeyCodec
from core.models.domain import Key


def list_files(directory: Path) -> List[str]:
    """Return visible file names of a folder in directory-listing order."""

    names: List[str] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.name.startswith(".") or not entry.is_file():
                continue
            names.append(entry.name)
    return names


class ImageIndex:
    """Keyed paths of every image in a group folder."""

    def __init__(self, directory: Path, store: KeyedStore[Path], keys: List[Key]) -> None:
        self.directory = directory
        self.store = store
        self.keys = keys

    @classmethod
    def from_directory(cls, directory: Path, codec: KeyCodec, strict: bool = False) -> "ImageIndex":
        """Decompose every file name of ``directory`` and store its path under the key."""

        store: KeyedStore[Path] = KeyedStore(strict=strict, delimiter=codec.delimiter)
        keys: List[Key] = []
        for name in list_files(directory):
            key = codec.decompose(name)
            if key not in store:
                keys.append(key)
            store.put(key, directory / name)
        # A later name nested under or above an earlier one replaces it in the store.
        keys = [key for key in keys if key in store]
        return cls(directory, store, keys)

    def path_for(self, key: Key) -> Optional[Path]:
        return self.store.get(key)

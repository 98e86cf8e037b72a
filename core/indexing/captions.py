# Path: core/indexing/captions.py
# Purpose: Load caption text files and index them by key.
# Layer: core/indexing.
# Details: Built once per run; images look up their caption using their own key.

from __future__ import annotations

from pathlib import Path
from typing import Optional

from core.indexing.keyed_store import KeyedStore
from core.indexing.keys import KeyCodec
from core.indexing.scanner import list_files
from core.models.domain import Key


class CaptionIndex:
    """Trimmed caption text keyed by the identity of the captioned item."""

    def __init__(self, store: KeyedStore[str]) -> None:
        self.store = store

    @classmethod
    def from_directory(cls, directory: Path, codec: KeyCodec, strict: bool = False) -> "CaptionIndex":
        """Read every caption file under ``directory``."""

        store: KeyedStore[str] = KeyedStore(strict=strict, delimiter=codec.delimiter)
        for name in list_files(directory):
            key = codec.decompose(name)
            text = (directory / name).read_text(encoding="utf-8").strip()
            store.put(key, text)
        return cls(store)

    def caption_for(self, key: Key) -> Optional[str]:
        """Return the caption stored for ``key`` if present."""

        return self.store.get(key)

    def __len__(self) -> int:
        return len(self.store)

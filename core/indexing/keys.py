# Path: core/indexing/keys.py
# Purpose: Convert flat file names into hierarchical keys and back.
# Layer: core/indexing.
# Details: Keys join images with their captions; the first component may carry a dotted sub-tag.

from __future__ import annotations

from typing import Sequence

from core.errors import MalformedName
from core.models.domain import Key

DEFAULT_DELIMITER = "__"


class KeyCodec:
    """Split ``tag.sub__category__name.ext`` style names into key components."""

    def __init__(self, delimiter: str = DEFAULT_DELIMITER) -> None:
        if not delimiter:
            raise ValueError("Key delimiter must not be empty.")
        self.delimiter = delimiter

    def decompose(self, filename: str) -> Key:
        """Strip the last extension and split the remaining stem on the delimiter."""

        dot = filename.rfind(".")
        if dot <= 0:
            raise MalformedName(filename)
        return tuple(filename[:dot].split(self.delimiter))

    def recompose(self, key: Sequence[str]) -> str:
        return self.delimiter.join(key)

    @staticmethod
    def type_tag(component: str) -> str:
        """Return the part of a component before its first dot."""

        return component.split(".", 1)[0]

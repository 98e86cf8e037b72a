# Path: core/errors.py
# Purpose: Define the error taxonomy raised while assembling and rendering datasets.
# Layer: core.
# Details: Every fatal data-integrity problem derives from DatasetError so callers can abort a run uniformly.

from __future__ import annotations

from typing import Sequence


class DatasetError(Exception):
    """Base class for fatal problems found in the source corpus."""


class MalformedName(DatasetError):
    """A filename cannot be decomposed into a key."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"Malformed file name: '{filename}'")
        self.filename = filename


class UnknownImageType(DatasetError):
    """A top-level tag has no entry in the classifier table."""

    def __init__(self, tag: str, name: str) -> None:
        super().__init__(f"Unknown image type: '{tag}' (from {name})")
        self.tag = tag
        self.name = name


class MissingCaption(DatasetError):
    """An image key has no caption entry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Caption not found for image: {name}")
        self.name = name


class MissingImage(DatasetError):
    """An expected primary image path is absent."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Image not found for image: {name}")
        self.name = name


class DuplicateKey(DatasetError):
    """A key was stored twice while strict key checking is enabled."""

    def __init__(self, key: Sequence[str], name: str) -> None:
        super().__init__(f"Duplicate key: {name}")
        self.name = name
        self.key = tuple(key)


class EmptyHairPool(DatasetError):
    """Combinations were requested from a dataset without any hairstyle."""

    def __init__(self, group: str) -> None:
        super().__init__(f"No hair images available for group '{group}'")
        self.group = group


__all__ = [
    "DatasetError",
    "DuplicateKey",
    "EmptyHairPool",
    "MalformedName",
    "MissingCaption",
    "MissingImage",
    "UnknownImageType",
]

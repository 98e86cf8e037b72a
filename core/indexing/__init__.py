# Path: core/indexing/__init__.py
# Purpose: Package initializer for indexing utilities.
# Layer: core/indexing.
# Details: Exposes key decomposition, keyed stores, caption and image indexes, and dataset building.

from .keys import KeyCodec
from .keyed_store import KeyedStore
from .scanner import ImageIndex, list_files
from .captions import CaptionIndex
from .classifier import TypeClassifier
from .dataset_builder import DatasetBuilder

__all__ = [
    "CaptionIndex",
    "DatasetBuilder",
    "ImageIndex",
    "KeyCodec",
    "KeyedStore",
    "TypeClassifier",
    "list_files",
]

# Path: core/models/__init__.py
# Purpose: Package initializer for domain model definitions.
# Layer: core/models.
# Details: Exposes dataclasses used across indexing and generation layers.

from .domain import (
    BodyImage,
    Combination,
    Dataset,
    HairImage,
    Key,
    OutfitImage,
    RenderedSample,
    Role,
    ShoesImage,
)

__all__ = [
    "BodyImage",
    "Combination",
    "Dataset",
    "HairImage",
    "Key",
    "OutfitImage",
    "RenderedSample",
    "Role",
    "ShoesImage",
]

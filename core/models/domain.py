# Path: core/models/domain.py
# Purpose: Define domain models shared across indexing and generation workflows.
# Layer: core/models.
# Details: One frozen dataclass per layer role, plus the per-group dataset and the combination tuple.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

Key = Tuple[str, ...]


class Role(str, Enum):
    """Layer category an indexed image belongs to."""

    BODY = "body"
    OUTFIT = "outfit"
    SHOES = "shoes"
    HAIR = "hair"


@dataclass(frozen=True)
class BodyImage:
    """Base body layer."""

    key: Key
    path: Path
    caption: str


@dataclass(frozen=True)
class OutfitImage:
    """Outfit layer with an optional overlay drawn above the shoes."""

    key: Key
    path: Path
    caption: str
    front_path: Optional[Path] = None


@dataclass(frozen=True)
class ShoesImage:
    """Shoes layer."""

    key: Key
    path: Path
    caption: str


@dataclass(frozen=True)
class HairImage:
    """Hairstyle indexed by its front view, with an optional back layer drawn behind the body."""

    key: Key
    front_path: Path
    caption: str
    back_path: Optional[Path] = None


@dataclass(frozen=True)
class Dataset:
    """Resolved images of a single group, each sequence kept in directory-listing order."""

    group: str
    bodies: Tuple[BodyImage, ...] = ()
    outfits: Tuple[OutfitImage, ...] = ()
    shoes: Tuple[ShoesImage, ...] = ()
    hairs: Tuple[HairImage, ...] = ()

    @property
    def combination_count(self) -> int:
        """Number of body x outfit x shoes combinations."""

        return len(self.bodies) * len(self.outfits) * len(self.shoes)


@dataclass(frozen=True)
class Combination:
    """One selected body, outfit, shoes and hair tuple with its sequential index."""

    body: BodyImage
    outfit: OutfitImage
    shoes: ShoesImage
    hair: HairImage
    index: int


@dataclass(frozen=True)
class RenderedSample:
    """Caption text and encoded image bytes produced for one combination."""

    index: int
    caption: str
    image_bytes: bytes

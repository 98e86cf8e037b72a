# Path: config/settings.py
# Purpose: Provide typed application configuration models.
# Layer: config.
# Details: Centralizes dataset paths, classifier tables, compositing parameters, and run limits.

import os
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple

from pydantic import BaseModel, Field


class GenerationSettings(BaseModel):
    """Settings describing how filenames are keyed and how combinations are rendered."""

    delimiter: str = Field(default="__", description="Separator between key components inside a file name.")
    body_tags: List[str] = Field(
        default_factory=lambda: ["OLIVE_SKINNY", "BLACK1", "CAUCASIAN"],
        description="Top-level tags identifying body images.",
    )
    outfit_tags: List[str] = Field(
        default_factory=lambda: ["daywear", "eveningwear", "partywear", "sleep"],
        description="Top-level tags identifying outfit images.",
    )
    hair_tag: str = Field(default="hair", description="Top-level tag and second component of front hair images.")
    shoes_tag: str = Field(default="shoes", description="Top-level tag identifying shoes images.")
    outfit_categories: Set[str] = Field(
        default_factory=lambda: {"outfit_curvy", "outfit_skinny"},
        description="Second key components accepted for outfit images; others are skipped.",
    )
    outfit_front_tag: str = Field(default="outfitfront", description="Reserved component of outfit front overlays.")
    hair_back_tag: str = Field(default="hairback", description="Reserved component of hair back layers.")
    background_color: str = Field(default="#B6B6B6", description="Solid color the composite is flattened onto.")
    target_size: Tuple[int, int] = Field(default=(512, 960), description="Output resolution as (width, height).")
    image_format: str = Field(default="webp", description="Encoded output image format.")
    lossless: bool = Field(default=True, description="Encode output images losslessly.")
    strict_keys: bool = Field(default=False, description="Fail on duplicate keys instead of keeping the last one.")

    def tag_roles(self) -> Dict[str, str]:
        """Return the top-level tag to role mapping used by the classifier."""

        roles = {tag: "body" for tag in self.body_tags}
        roles.update({tag: "outfit" for tag in self.outfit_tags})
        roles[self.hair_tag] = "hair"
        roles[self.shoes_tag] = "shoes"
        return roles


class AppSettings(BaseModel):
    """Top-level application settings shared across the generator and scripts."""

    dataset_root: Path = Field(default=Path("dataset"), description="Root folder containing captions and groups.")
    captions_dir: str = Field(default="captions", description="Folder under the root holding caption files.")
    output_dir: str = Field(default="generated", description="Folder under the root receiving generated samples.")
    groups: List[str] = Field(default_factory=lambda: ["skinny", "curvy"], description="Image groups to render.")
    limit: Optional[int] = Field(default=None, ge=1, description="Stop each group after this many samples.")
    log_level: str = Field(default="INFO", description="Verbosity level for application logs.")
    generation: GenerationSettings = Field(default_factory=GenerationSettings)

    @property
    def captions_path(self) -> Path:
        return self.dataset_root / self.captions_dir

    @property
    def output_path(self) -> Path:
        return self.dataset_root / self.output_dir

    def group_path(self, group: str) -> Path:
        """Return the folder holding the layer images of a group."""

        return self.dataset_root / group

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Instantiate settings, applying DATASET_* environment overrides when present."""

        overrides: Dict[str, object] = {}
        if os.environ.get("DATASET_ROOT"):
            overrides["dataset_root"] = Path(os.environ["DATASET_ROOT"])
        if os.environ.get("DATASET_LOG_LEVEL"):
            overrides["log_level"] = os.environ["DATASET_LOG_LEVEL"]
        if os.environ.get("DATASET_LIMIT"):
            overrides["limit"] = int(os.environ["DATASET_LIMIT"])
        return cls(**overrides)


__all__ = ["AppSettings", "GenerationSettings"]

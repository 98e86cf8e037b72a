# Path: core/generation/pipeline.py
# Purpose: Turn one combination into a caption and an encoded composite image.
# Layer: core/generation.
# Details: Fixes caption wording and the back-to-front layer order; absent optional layers are dropped.

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from core.generation.compositor import Compositor
from core.models.domain import Combination, RenderedSample


def build_caption(combination: Combination) -> str:
    """Assemble ``<body> with <hair> wearing <outfit>, <shoes>``."""

    return "".join(
        [
            combination.body.caption,
            " with ",
            combination.hair.caption,
            " wearing ",
            combination.outfit.caption,
            ", ",
            combination.shoes.caption,
        ]
    )


def build_layers(combination: Combination) -> List[Path]:
    """Return layer paths back to front, skipping absent optional layers."""

    layers: List[Optional[Path]] = [
        combination.hair.back_path,
        combination.body.path,
        combination.outfit.path,
        combination.shoes.path,
        combination.outfit.front_path,
        combination.hair.front_path,
    ]
    return [path for path in layers if path is not None]


class CompositingPipeline:
    """Render combinations with a :class:`Compositor` backend."""

    def __init__(
        self,
        compositor: Compositor,
        background_color: str = "#B6B6B6",
        target_size: Tuple[int, int] = (512, 960),
        image_format: str = "webp",
        lossless: bool = True,
    ) -> None:
        self.compositor = compositor
        self.background_color = background_color
        self.target_size = target_size
        self.image_format = image_format
        self.lossless = lossless

    def render(self, combination: Combination) -> RenderedSample:
        caption = build_caption(combination)
        merged = self.compositor.composite(
            combination.body.path,
            build_layers(combination),
            self.background_color,
        )
        image_bytes = self.compositor.encode(merged, self.target_size, self.image_format, self.lossless)
        return RenderedSample(index=combination.index, caption=caption, image_bytes=image_bytes)

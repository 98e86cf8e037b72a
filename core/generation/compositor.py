# Path: core/generation/compositor.py
# Purpose: Define the Compositor interface and its Pillow implementation.
# Layer: core/generation.
# Details: Layers are drawn back to front over a base image, flattened onto a solid color, resized, and encoded.

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence, Tuple

from PIL import Image, ImageColor, ImageOps

PIL_FORMATS = {"jpg": "JPEG", "tif": "TIFF"}


class Compositor(ABC):
    """Abstract raster backend used by the compositing pipeline."""

    @abstractmethod
    def composite(self, base: Path, layers: Sequence[Path], background: str) -> Image.Image:
        """Draw ``layers`` back to front over ``base`` and flatten the result onto ``background``."""

    @abstractmethod
    def encode(self, image: Image.Image, size: Tuple[int, int], image_format: str, lossless: bool) -> bytes:
        """Resize ``image`` to ``size`` and return it encoded in ``image_format``."""


class PillowCompositor(Compositor):
    """Compositor backed by Pillow.

    The base image fixes the canvas size and every layer is centred on it.
    Resizing covers the target size and crops the overflow around the centre.
    """

    def composite(self, base: Path, layers: Sequence[Path], background: str) -> Image.Image:
        canvas = self._load(base)
        for path in layers:
            canvas = self._draw(canvas, self._load(path))

        flat = Image.new("RGB", canvas.size, ImageColor.getrgb(background)[:3])
        flat.paste(canvas, mask=canvas.getchannel("A"))
        return flat

    def encode(self, image: Image.Image, size: Tuple[int, int], image_format: str, lossless: bool) -> bytes:
        resized = ImageOps.fit(image, size, method=Image.Resampling.LANCZOS)
        name = image_format.lower()
        options = {}
        if name == "webp":
            options["lossless"] = lossless
        buffer = io.BytesIO()
        resized.save(buffer, format=PIL_FORMATS.get(name, name.upper()), **options)
        return buffer.getvalue()

    @staticmethod
    def _load(path: Path) -> Image.Image:
        with Image.open(path) as img:
            return img.convert("RGBA")

    @staticmethod
    def _draw(canvas: Image.Image, layer: Image.Image) -> Image.Image:
        """Alpha-composite ``layer`` centred on ``canvas``."""

        if layer.size == canvas.size:
            return Image.alpha_composite(canvas, layer)
        sheet = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        offset = ((canvas.width - layer.width) // 2, (canvas.height - layer.height) // 2)
        sheet.paste(layer, offset)
        return Image.alpha_composite(canvas, sheet)

# Path: core/generation/writer.py
# Purpose: Persist rendered samples as numbered caption and image files.
# Layer: core/generation.
# Details: Writes <index>.txt then <index>.<format>; a failed image write leaves the caption in place.

from __future__ import annotations

from pathlib import Path
from typing import Tuple


class OutputWriter:
    """Write samples of one group under ``output_root/group``."""

    def __init__(self, output_root: Path, group: str, image_format: str = "webp") -> None:
        self.directory = output_root / group
        self.image_format = image_format.lower()

    @staticmethod
    def stem(index: int) -> str:
        return f"{index:04d}"

    def write(self, index: int, caption: str, image_bytes: bytes) -> Tuple[Path, Path]:
        """Write both artifacts for ``index`` and return (caption_path, image_path)."""

        self.directory.mkdir(parents=True, exist_ok=True)
        stem = self.stem(index)
        caption_path = self.directory / f"{stem}.txt"
        image_path = self.directory / f"{stem}.{self.image_format}"
        caption_path.write_text(caption, encoding="utf-8")
        image_path.write_bytes(image_bytes)
        return caption_path, image_path

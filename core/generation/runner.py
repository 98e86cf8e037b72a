# Path: core/generation/runner.py
# Purpose: Drive dataset generation for each configured group.
# Layer: core/generation.
# Details: Builds the dataset, enumerates combinations, renders and writes each sample with progress reporting.

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from tqdm import tqdm

from config import AppSettings
from core.generation.compositor import Compositor, PillowCompositor
from core.generation.enumerator import CombinationEnumerator
from core.generation.pipeline import CompositingPipeline
from core.generation.writer import OutputWriter
from core.indexing.captions import CaptionIndex
from core.indexing.classifier import TypeClassifier
from core.indexing.dataset_builder import DatasetBuilder
from core.indexing.keys import KeyCodec
from core.models.domain import BodyImage, Combination, Dataset, HairImage, OutfitImage, ShoesImage

logger = logging.getLogger(__name__)


class DatasetGenerator:
    """Generate composited samples and captions for every group."""

    def __init__(self, settings: AppSettings, compositor: Optional[Compositor] = None) -> None:
        self.settings = settings
        generation = settings.generation
        self.codec = KeyCodec(generation.delimiter)
        self.classifier = TypeClassifier.from_settings(generation, codec=self.codec)
        self.pipeline = CompositingPipeline(
            compositor or PillowCompositor(),
            background_color=generation.background_color,
            target_size=generation.target_size,
            image_format=generation.image_format,
            lossless=generation.lossless,
        )
        self._captions: Optional[CaptionIndex] = None

    def load_captions(self) -> CaptionIndex:
        """Read the caption folder once per generator."""

        if self._captions is None:
            self._captions = CaptionIndex.from_directory(
                self.settings.captions_path,
                self.codec,
                strict=self.settings.generation.strict_keys,
            )
            logger.info("Loaded %d captions from %s", len(self._captions), self.settings.captions_path)
        return self._captions

    def build_dataset(self, group: str) -> Dataset:
        generation = self.settings.generation
        builder = DatasetBuilder(
            self.codec,
            self.classifier,
            self.load_captions(),
            outfit_front_tag=generation.outfit_front_tag,
            hair_back_tag=generation.hair_back_tag,
            strict=generation.strict_keys,
        )
        return builder.build(group, self.settings.group_path(group))

    def generate_group(self, group: str, limit: Optional[int] = None) -> int:
        """
        Render every combination of ``group`` and return the number of samples written.

        External calls:
        - core/generation/pipeline.py::CompositingPipeline.render - caption and composite per combination.
        - core/generation/writer.py::OutputWriter.write - persist the two artifacts.
        """

        dataset = self.build_dataset(group)
        writer = OutputWriter(self.settings.output_path, group, self.settings.generation.image_format)
        total = dataset.combination_count if limit is None else min(limit, dataset.combination_count)

        with tqdm(total=total, desc=f"Generating {group}", unit="img") as progress:

            def handle(body: BodyImage, outfit: OutfitImage, shoes: ShoesImage, hair: HairImage, index: int) -> bool:
                logger.debug("START %d", index)
                sample = self.pipeline.render(Combination(body, outfit, shoes, hair, index))
                writer.write(index, sample.caption, sample.image_bytes)
                progress.update(1)
                logger.debug("COMPLETE %d", index)
                return limit is not None and index + 1 >= limit

            produced = CombinationEnumerator(dataset).run(handle)

        logger.info("Group %s: wrote %d samples to %s", group, produced, writer.directory)
        return produced

    def generate(self, groups: Optional[Iterable[str]] = None) -> Dict[str, int]:
        """Generate each group in turn, returning the sample count per group."""

        counts: Dict[str, int] = {}
        for group in groups or self.settings.groups:
            counts[group] = self.generate_group(group, limit=self.settings.limit)
        return counts

# Path: core/indexing/dataset_builder.py
# Purpose: Resolve a group's images into typed layer descriptors with captions.
# Layer: core/indexing.
# Details: Combines the image index, caption index, and classifier; optional paired layers resolve to None.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Tuple

from core.errors import MissingCaption, MissingImage
from core.indexing.captions import CaptionIndex
from core.indexing.classifier import TypeClassifier
from core.indexing.keys import KeyCodec
from core.indexing.scanner import ImageIndex
from core.models.domain import BodyImage, Dataset, HairImage, Key, OutfitImage, Role, ShoesImage

logger = logging.getLogger(__name__)


class DatasetBuilder:
    """Build an immutable :class:`Dataset` for one group folder.

    Every key of the listing is classified first, so an unknown tag aborts the
    build before any caption is consulted. Each accepted key then needs both a
    caption and a primary path; the outfit front overlay and the hair back layer
    are looked up under derived keys and left as None when absent.
    """

    def __init__(
        self,
        codec: KeyCodec,
        classifier: TypeClassifier,
        captions: CaptionIndex,
        outfit_front_tag: str = "outfitfront",
        hair_back_tag: str = "hairback",
        strict: bool = False,
    ) -> None:
        self.codec = codec
        self.classifier = classifier
        self.captions = captions
        self.outfit_front_tag = outfit_front_tag
        self.hair_back_tag = hair_back_tag
        self.strict = strict

    def build(self, group: str, directory: Path) -> Dataset:
        """Index ``directory`` and resolve its images into a dataset."""

        index = ImageIndex.from_directory(directory, self.codec, strict=self.strict)
        return self.build_from_index(group, index)

    def build_from_index(self, group: str, index: ImageIndex) -> Dataset:
        classified: List[Tuple[Key, Role]] = []
        for key in index.keys:
            role = self.classifier.classify(key)
            if role is not None:
                classified.append((key, role))

        resolved: Dict[Role, list] = {role: [] for role in Role}
        for key, role in classified:
            caption = self._caption(key)
            path = self._path(index, key)
            if role is Role.BODY:
                resolved[role].append(BodyImage(key=key, path=path, caption=caption))
            elif role is Role.OUTFIT:
                front = index.path_for(self.outfit_front_key(key))
                resolved[role].append(OutfitImage(key=key, path=path, caption=caption, front_path=front))
            elif role is Role.SHOES:
                resolved[role].append(ShoesImage(key=key, path=path, caption=caption))
            else:
                back = index.path_for(self.hair_back_key(key))
                resolved[role].append(HairImage(key=key, front_path=path, caption=caption, back_path=back))

        dataset = Dataset(
            group=group,
            bodies=tuple(resolved[Role.BODY]),
            outfits=tuple(resolved[Role.OUTFIT]),
            shoes=tuple(resolved[Role.SHOES]),
            hairs=tuple(resolved[Role.HAIR]),
        )
        logger.info(
            "Group %s: %d bodies, %d outfits, %d shoes, %d hairs",
            group,
            len(dataset.bodies),
            len(dataset.outfits),
            len(dataset.shoes),
            len(dataset.hairs),
        )
        return dataset

    def outfit_front_key(self, key: Key) -> Key:
        """``tag__category__name`` -> ``tag__outfitfront__category__name``."""

        return (key[0], self.outfit_front_tag) + key[1:]

    def hair_back_key(self, key: Key) -> Key:
        """``tag__hair__name`` -> ``tag__hairback__name``."""

        return (key[0], self.hair_back_tag) + key[2:]

    def _caption(self, key: Key) -> str:
        caption = self.captions.caption_for(key)
        if caption is None:
            raise MissingCaption(self.codec.recompose(key))
        return caption

    def _path(self, index: ImageIndex, key: Key) -> Path:
        path = index.path_for(key)
        if path is None:
            raise MissingImage(self.codec.recompose(key))
        return path

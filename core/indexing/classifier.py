# Path: core/indexing/classifier.py
# Purpose: Map decomposed keys to layer roles.
# Layer: core/indexing.
# Details: Unknown top-level tags are fatal; paired layers and unsupported outfit categories are skipped.

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

from core.errors import UnknownImageType
from core.indexing.keys import KeyCodec
from core.models.domain import Key, Role

logger = logging.getLogger(__name__)


class TypeClassifier:
    """Classify keys using a fixed tag table and per-role acceptance rules."""

    def __init__(
        self,
        tag_roles: Mapping[str, str],
        outfit_categories: Iterable[str],
        hair_tag: str = "hair",
        codec: Optional[KeyCodec] = None,
    ) -> None:
        self.tag_roles = {tag: Role(role) for tag, role in tag_roles.items()}
        self.outfit_categories = frozenset(outfit_categories)
        self.hair_tag = hair_tag
        self.codec = codec or KeyCodec()

    @classmethod
    def from_settings(cls, settings, codec: Optional[KeyCodec] = None) -> "TypeClassifier":
        return cls(
            tag_roles=settings.tag_roles(),
            outfit_categories=settings.outfit_categories,
            hair_tag=settings.hair_tag,
            codec=codec,
        )

    def classify(self, key: Key) -> Optional[Role]:
        """Return the role for ``key``, or None when the entry should be skipped.

        Raises UnknownImageType when the top-level tag is not in the table.
        """

        tag = self.codec.type_tag(key[0])
        role = self.tag_roles.get(tag)
        if role is None:
            raise UnknownImageType(tag, self.codec.recompose(key))

        second = key[1] if len(key) > 1 else None
        if role is Role.OUTFIT and second not in self.outfit_categories:
            logger.info("Skip image %s", self.codec.recompose(key))
            return None
        if role is Role.HAIR and second != self.hair_tag:
            logger.info("Skip image %s", self.codec.recompose(key))
            return None
        return role

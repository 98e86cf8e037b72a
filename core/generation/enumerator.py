# Path: core/generation/enumerator.py
# Purpose: Enumerate body x outfit x shoes combinations with round-robin hair assignment.
# Layer: core/generation.
# Details: Visits combinations sequentially and stops as soon as the handler asks to.

from __future__ import annotations

from typing import Callable, Iterator

from core.errors import EmptyHairPool
from core.models.domain import BodyImage, Combination, Dataset, HairImage, OutfitImage, ShoesImage

CombinationHandler = Callable[[BodyImage, OutfitImage, ShoesImage, HairImage, int], bool]


class CombinationEnumerator:
    """Nested iteration over a dataset: body outermost, shoes innermost."""

    def __init__(self, dataset: Dataset) -> None:
        self.dataset = dataset

    def combinations(self) -> Iterator[Combination]:
        """Yield every combination in order; hair ``i`` is ``hairs[i % len(hairs)]``."""

        hairs = self.dataset.hairs
        if self.dataset.combination_count and not hairs:
            raise EmptyHairPool(self.dataset.group)

        index = 0
        for body in self.dataset.bodies:
            for outfit in self.dataset.outfits:
                for shoes in self.dataset.shoes:
                    yield Combination(body, outfit, shoes, hairs[index % len(hairs)], index)
                    index += 1

    def run(self, handler: CombinationHandler) -> int:
        """Invoke ``handler`` per combination until it returns True.

        Returns the number of visited combinations.
        """

        visited = 0
        for combo in self.combinations():
            visited += 1
            if handler(combo.body, combo.outfit, combo.shoes, combo.hair, combo.index):
                break
        return visited

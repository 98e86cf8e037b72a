from __future__ import annotations

from pathlib import Path
import sys
from typing import Dict, Iterable, Tuple

import pytest
from PIL import Image

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.models.domain import BodyImage, Dataset, HairImage, OutfitImage, ShoesImage


def write_layer(path: Path, color: Tuple[int, int, int, int], size: Tuple[int, int] = (8, 12)) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", size, color).save(path, format="PNG")
    return path


def write_captions(directory: Path, captions: Dict[str, str]) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    for stem, text in captions.items():
        (directory / f"{stem}.txt").write_text(text, encoding="utf-8")


@pytest.fixture()
def corpus(tmp_path: Path) -> Path:
    """A dataset root with one 'skinny' group: 2 bodies, 2 outfits, 1 shoes, 2 hairs."""

    root = tmp_path / "dataset"
    group = root / "skinny"
    write_layer(group / "CAUCASIAN.a__body.png", (200, 160, 140, 255))
    write_layer(group / "BLACK1__body.png", (90, 60, 40, 255))
    write_layer(group / "daywear.1__outfit_skinny__dress.png", (255, 0, 0, 128))
    write_layer(group / "daywear.1__outfitfront__outfit_skinny__dress.png", (255, 0, 0, 255), size=(4, 4))
    write_layer(group / "sleep__outfit_skinny__pyjama.png", (0, 0, 255, 128))
    write_layer(group / "sleep__outfit_kids__robe.png", (0, 0, 255, 128))
    write_layer(group / "shoes__heels.png", (0, 0, 0, 255), size=(8, 2))
    write_layer(group / "hair.1__hair__long.png", (120, 60, 20, 200))
    write_layer(group / "hair.1__hairback__long.png", (120, 60, 20, 255))
    write_layer(group / "hair.2__hair__short.png", (240, 220, 120, 200))

    write_captions(
        root / "captions",
        {
            "CAUCASIAN.a__body": "a woman\n",
            "BLACK1__body": "  a black woman",
            "daywear.1__outfit_skinny__dress": "a red dress",
            "sleep__outfit_skinny__pyjama": "blue pyjamas",
            "shoes__heels": "black heels",
            "hair.1__hair__long": "long brown hair",
            "hair.2__hair__short": "short blonde hair",
        },
    )
    return root


def _make_dataset(
    bodies: Iterable[str] = ("body",),
    outfits: Iterable[str] = ("outfit",),
    shoes: Iterable[str] = ("shoes",),
    hairs: Iterable[str] = ("hair",),
    group: str = "skinny",
) -> Dataset:
    """Build an in-memory dataset whose captions equal the given names."""

    return Dataset(
        group=group,
        bodies=tuple(BodyImage(key=(name,), path=Path(f"{name}.png"), caption=name) for name in bodies),
        outfits=tuple(OutfitImage(key=(name,), path=Path(f"{name}.png"), caption=name) for name in outfits),
        shoes=tuple(ShoesImage(key=(name,), path=Path(f"{name}.png"), caption=name) for name in shoes),
        hairs=tuple(HairImage(key=(name,), front_path=Path(f"{name}.png"), caption=name) for name in hairs),
    )


@pytest.fixture()
def make_dataset():
    return _make_dataset

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from config import GenerationSettings
from core.errors import MalformedName, MissingCaption, MissingImage, UnknownImageType
from core.indexing.captions import CaptionIndex
from core.indexing.classifier import TypeClassifier
from core.indexing.dataset_builder import DatasetBuilder
from core.indexing.keys import KeyCodec
from core.indexing.scanner import ImageIndex, list_files


def _builder(root: Path) -> DatasetBuilder:
    codec = KeyCodec()
    captions = CaptionIndex.from_directory(root / "captions", codec)
    classifier = TypeClassifier.from_settings(GenerationSettings(), codec=codec)
    return DatasetBuilder(codec, classifier, captions)


def test_caption_index_trims_text(corpus: Path) -> None:
    captions = CaptionIndex.from_directory(corpus / "captions", KeyCodec())

    assert captions.caption_for(("CAUCASIAN.a", "body")) == "a woman"
    assert captions.caption_for(("BLACK1", "body")) == "a black woman"
    assert captions.caption_for(("BLACK1", "face")) is None


def test_list_files_skips_hidden_files_and_folders(tmp_path: Path) -> None:
    (tmp_path / ".DS_Store").write_text("", encoding="utf-8")
    (tmp_path / "nested").mkdir()
    (tmp_path / "shoes__heels.png").write_bytes(b"")

    assert list_files(tmp_path) == ["shoes__heels.png"]


def test_image_index_keeps_listing_order(corpus: Path) -> None:
    index = ImageIndex.from_directory(corpus / "skinny", KeyCodec())

    assert [KeyCodec().recompose(key) + ".png" for key in index.keys] == list_files(corpus / "skinny")
    assert index.path_for(("shoes", "heels")) == corpus / "skinny" / "shoes__heels.png"


def test_build_resolves_roles_and_paired_layers(corpus: Path) -> None:
    dataset = _builder(corpus).build("skinny", corpus / "skinny")
    group = corpus / "skinny"

    assert {body.caption for body in dataset.bodies} == {"a woman", "a black woman"}
    assert [shoes.caption for shoes in dataset.shoes] == ["black heels"]

    outfits = {outfit.key[-1]: outfit for outfit in dataset.outfits}
    assert set(outfits) == {"dress", "pyjama"}
    assert outfits["dress"].front_path == group / "daywear.1__outfitfront__outfit_skinny__dress.png"
    assert outfits["pyjama"].front_path is None

    hairs = {hair.key[-1]: hair for hair in dataset.hairs}
    assert set(hairs) == {"long", "short"}
    assert hairs["long"].front_path == group / "hair.1__hair__long.png"
    assert hairs["long"].back_path == group / "hair.1__hairback__long.png"
    assert hairs["short"].back_path is None
    assert dataset.combination_count == 4


def test_build_preserves_listing_order(corpus: Path) -> None:
    dataset = _builder(corpus).build("skinny", corpus / "skinny")
    listing = list_files(corpus / "skinny")

    positions = [listing.index(body.path.name) for body in dataset.bodies]
    assert positions == sorted(positions)


def test_missing_caption_is_fatal(corpus: Path) -> None:
    (corpus / "captions" / "shoes__heels.txt").unlink()

    with pytest.raises(MissingCaption) as info:
        _builder(corpus).build("skinny", corpus / "skinny")

    assert info.value.name == "shoes__heels"


def test_unknown_type_is_fatal_before_captions_are_checked(corpus: Path) -> None:
    (corpus / "skinny" / "hat__fedora.png").write_bytes(b"")
    (corpus / "captions" / "shoes__heels.txt").unlink()

    with pytest.raises(UnknownImageType):
        _builder(corpus).build("skinny", corpus / "skinny")


def test_file_without_extension_is_fatal(corpus: Path) -> None:
    (corpus / "skinny" / "shoes__boots").write_bytes(b"")

    with pytest.raises(MalformedName):
        _builder(corpus).build("skinny", corpus / "skinny")


def test_nested_names_keep_index_consistent_with_store(corpus: Path) -> None:
    Image.new("RGBA", (8, 2), (200, 0, 0, 255)).save(corpus / "skinny" / "shoes__heels__red.png")
    (corpus / "captions" / "shoes__heels__red.txt").write_text("red heels", encoding="utf-8")
    index = ImageIndex.from_directory(corpus / "skinny", KeyCodec())

    assert all(index.path_for(key) is not None for key in index.keys)

    dataset = _builder(corpus).build_from_index("skinny", index)

    assert len(dataset.shoes) == 1
    assert dataset.shoes[0].path.exists()


def test_missing_primary_path_is_fatal(corpus: Path) -> None:
    index = ImageIndex.from_directory(corpus / "skinny", KeyCodec())
    index.keys.append(("shoes", "boots"))
    (corpus / "captions" / "shoes__boots.txt").write_text("brown boots", encoding="utf-8")
    builder = _builder(corpus)

    with pytest.raises(MissingImage) as info:
        builder.build_from_index("skinny", index)

    assert info.value.name == "shoes__boots"

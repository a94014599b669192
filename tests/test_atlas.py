from __future__ import annotations

from dataclasses import dataclass

import pytest

from texture_atlas.atlas import Atlas
from texture_atlas.errors import EmptyItemError, InvalidBinSizeError, InvalidItemError, PackingError
from texture_atlas.models import Size
from texture_atlas.packing.binary_tree import BinaryTreePacker
from texture_atlas.packing.passthrough import PassthroughPacker


@dataclass(frozen=True)
class Texture:
    path: str
    width: int
    height: int


def make_atlas() -> Atlas:
    items = [Size(width=10, height=20), Size(width=30, height=5)]
    return Atlas(items, 100, 100)


def test_read_access() -> None:
    atlas = make_atlas()

    assert atlas.item_count == 2
    assert atlas.item(1) == Size(width=30, height=5)
    assert atlas.item_size(0) == Size(width=10, height=20)
    assert atlas.item_size(0, rotated=True) == Size(width=20, height=10)
    assert atlas.bin_count == 0
    assert atlas.bins == ()


def test_add_bin_and_add_to_bin_grow_bounds() -> None:
    atlas = make_atlas()

    bin_index = atlas.add_bin(0)
    atlas.add_to_bin(bin_index, 1, 10, 0, rotated=True)

    atlas_bin = atlas.bin(bin_index)
    assert bin_index == 0
    assert atlas_bin.bounds == Size(width=15, height=30)
    assert [p.item_index for p in atlas_bin.placements] == [0, 1]
    assert atlas.placement_of(1) == (0, atlas_bin.placements[1])


def test_placement_of_unplaced_item() -> None:
    atlas = make_atlas()

    assert atlas.placement_of(0) is None


def test_item_index_misuse_raises() -> None:
    atlas = make_atlas()

    with pytest.raises(IndexError):
        atlas.item(2)
    with pytest.raises(IndexError):
        atlas.item(-1)
    with pytest.raises(IndexError):
        atlas.add_bin(5)
    with pytest.raises(IndexError):
        atlas.add_bin(-1)


def test_bin_index_misuse_raises() -> None:
    atlas = make_atlas()

    with pytest.raises(IndexError):
        atlas.add_to_bin(0, 0, 0, 0)

    atlas.add_bin(0)
    with pytest.raises(IndexError):
        atlas.bin(1)
    with pytest.raises(IndexError):
        atlas.add_to_bin(-1, 1, 0, 0)


def test_build_and_generate() -> None:
    textures = [Texture("a.png", 64, 64), Texture("b.png", 64, 64)]

    atlas = Atlas.build(textures, 128, 64).generate(BinaryTreePacker())

    assert atlas.bin_count == 1
    assert atlas.item(0).path == "a.png"


def test_generate_twice_is_refused() -> None:
    atlas = make_atlas().generate(PassthroughPacker())

    with pytest.raises(PackingError):
        atlas.generate(PassthroughPacker())


def test_bad_construction() -> None:
    with pytest.raises(InvalidBinSizeError):
        Atlas([Size(width=1, height=1)], 0, 10)

    with pytest.raises(EmptyItemError):
        Atlas([Size(width=0, height=0)], 10, 10)

    with pytest.raises(InvalidItemError):
        Atlas(["not an item"], 10, 10)


def test_independent_atlases_share_items() -> None:
    items = [Size(width=64, height=64) for _ in range(4)]

    tree = Atlas(items, 128, 128).generate(BinaryTreePacker())
    passthrough = Atlas(items, 128, 128).generate(PassthroughPacker())

    assert tree.bin_count == 1
    assert passthrough.bin_count == 4

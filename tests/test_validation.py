from __future__ import annotations

import pytest

from texture_atlas.atlas import Atlas
from texture_atlas.errors import AtlasInvariantError
from texture_atlas.models import Size
from texture_atlas.packing.binary_tree import pack
from texture_atlas.validation import verify_atlas

ITEMS = [Size(width=10, height=10), Size(width=10, height=10)]


def test_valid_atlas_passes() -> None:
    atlas = pack(ITEMS, 20, 20)

    assert verify_atlas(atlas) is None


def test_overlap_detected() -> None:
    atlas = Atlas(ITEMS, 20, 20)
    atlas.add_bin(0)
    atlas.add_to_bin(0, 1, 5, 5)

    with pytest.raises(AtlasInvariantError, match="overlap"):
        verify_atlas(atlas)


def test_missing_item_detected() -> None:
    atlas = Atlas(ITEMS, 20, 20)
    atlas.add_bin(0)

    with pytest.raises(AtlasInvariantError, match="not placed"):
        verify_atlas(atlas)


def test_duplicate_item_detected() -> None:
    atlas = Atlas(ITEMS, 20, 20)
    atlas.add_bin(0)
    atlas.add_to_bin(0, 0, 10, 0)

    with pytest.raises(AtlasInvariantError, match="more than once"):
        verify_atlas(atlas)


def test_too_many_bins_detected() -> None:
    atlas = Atlas(ITEMS[:1], 20, 20)
    atlas.add_bin(0)
    atlas.add_bin(0)

    with pytest.raises(AtlasInvariantError, match="bins for"):
        verify_atlas(atlas)


def test_loose_bounds_detected() -> None:
    atlas = Atlas(ITEMS[:1], 20, 20)
    atlas.add_bin(0)
    atlas.bin(0).bounds = Size(width=20, height=10)

    with pytest.raises(AtlasInvariantError, match="bounds"):
        verify_atlas(atlas)

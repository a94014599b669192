from __future__ import annotations

from typing import Sequence

from texture_atlas.atlas import Atlas
from texture_atlas.geometry import AtlasRect


class PassthroughPacker:
    """A packer that creates a separate bin for each item."""

    def generate(self, atlas: Atlas, rotate_allowed: bool = False) -> None:
        # Never rotates and ignores the maximum bin size.
        for item_index in range(atlas.item_count):
            atlas.add_bin(item_index)


def pack(items: Sequence[AtlasRect], max_width: int, max_height: int, rotate_allowed: bool = False) -> Atlas:
    """One bin per item, in input order. `rotate_allowed` is accepted for interface parity only."""
    return Atlas(items, max_width, max_height).generate(PassthroughPacker(), rotate_allowed)

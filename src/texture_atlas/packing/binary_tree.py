# src/texture_atlas/packing/binary_tree.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from texture_atlas.atlas import Atlas
from texture_atlas.errors import ItemTooLargeError
from texture_atlas.geometry import AtlasRect, dimensions_longest
from texture_atlas.models import OrientedSize

logger = logging.getLogger(__name__)


@dataclass
class Leaf:
    """A free rectangle inside a bin's packing capacity."""

    bin_index: int
    x: int
    y: int
    width: int
    height: int

    @property
    def empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def fits(self, size: OrientedSize) -> bool:
        return size.width <= self.width and size.height <= self.height


def orient_for_bin(item: AtlasRect, rotate_allowed: bool, max_width: int, max_height: int) -> OrientedSize:
    """
    Pick the orientation an item is packed with.

    Longest side becomes the width when rotation is allowed. If that orientation
    cannot fit the bin capacity but the other one can, the other one is used.
    """
    oriented = dimensions_longest(item, rotate_allowed)
    if not rotate_allowed:
        return oriented

    fits = oriented.width <= max_width and oriented.height <= max_height
    swapped_fits = oriented.height <= max_width and oriented.width <= max_height
    if not fits and swapped_fits:
        return OrientedSize(size=oriented.size.rotated(), rotated=not oriented.rotated)
    return oriented


def sort_by_longest_side(
    items: Sequence[AtlasRect],
    rotate_allowed: bool,
    max_width: int | None = None,
    max_height: int | None = None,
) -> list[tuple[int, OrientedSize]]:
    """
    Order items for packing: descending height, then descending width.

    The sort is stable so equal items keep their input order, which keeps the
    output reproducible. When a bin size is given, orientation also accounts
    for what fits in it (see `orient_for_bin`).
    """
    if max_width is None or max_height is None:
        oriented = [(index, dimensions_longest(item, rotate_allowed)) for index, item in enumerate(items)]
    else:
        oriented = [
            (index, orient_for_bin(item, rotate_allowed, max_width, max_height))
            for index, item in enumerate(items)
        ]
    return sorted(oriented, key=lambda entry: (-entry[1].height, -entry[1].width))


def subdivide(leaves: list[Leaf], leaf_index: int, width: int, height: int) -> None:
    """
    Split a leaf after an item of (width, height) was placed at its origin.

    right:  strip beside the item, no taller than the item
    bottom: strip below the item, spanning the leaf's full width

    The right strip stays at the leaf's position and the bottom strip is
    inserted right after it, so right is scanned first.
    """
    leaf = leaves[leaf_index]

    right = Leaf(leaf.bin_index, leaf.x + width, leaf.y, leaf.width - width, height)
    bottom = Leaf(leaf.bin_index, leaf.x, leaf.y + height, leaf.width, leaf.height - height)

    if not right.empty and not bottom.empty:
        leaves[leaf_index] = right
        leaves.insert(leaf_index + 1, bottom)
    elif not right.empty:
        # Item takes the full height.
        leaves[leaf_index] = right
    elif not bottom.empty:
        # Item takes the full width.
        leaves[leaf_index] = bottom
    else:
        del leaves[leaf_index]


class BinaryTreePacker:
    """
    A packer that subdivides free space like a binary tree.

    Useful when decent results are needed at good speed. Works well when items
    are uniformly sized; otherwise it leaves gaps. Only the leaves of the tree
    matter, so no actual tree is built: a flat list of free rectangles is
    scanned first-fit.
    """

    def generate(self, atlas: Atlas, rotate_allowed: bool = False) -> None:
        # Sizes captured when the atlas was built, the same ones add_bin/add_to_bin use.
        sizes = [atlas.item_size(index) for index in range(atlas.item_count)]
        ordered = sort_by_longest_side(sizes, rotate_allowed, atlas.max_width, atlas.max_height)

        # Reject items that can never fit before placing anything.
        for item_index, size in ordered:
            if size.width > atlas.max_width or size.height > atlas.max_height:
                raise ItemTooLargeError(
                    item_index, size.width, size.height, atlas.max_width, atlas.max_height
                )

        leaves: list[Leaf] = []
        max_leaves = 0

        for item_index, size in ordered:
            placed = False
            for leaf_index, leaf in enumerate(leaves):
                if not leaf.fits(size):
                    continue

                atlas.add_to_bin(leaf.bin_index, item_index, leaf.x, leaf.y, size.rotated)
                subdivide(leaves, leaf_index, size.width, size.height)
                placed = True
                break

            if not placed:
                # New bin: its capacity is the full maximum size, not the item's own size.
                bin_index = atlas.add_bin(item_index, size.rotated)
                leaves.append(Leaf(bin_index, 0, 0, atlas.max_width, atlas.max_height))
                subdivide(leaves, len(leaves) - 1, size.width, size.height)
                logger.debug(f"Opened bin {bin_index} for item {item_index} ({size.width}x{size.height})")

            max_leaves = max(max_leaves, len(leaves))

        logger.debug(f"Binary tree pass done: {atlas.bin_count} bins, peak {max_leaves} leaves")


def pack(items: Sequence[AtlasRect], max_width: int, max_height: int, rotate_allowed: bool = False) -> Atlas:
    """
    Pack items into as few bins of at most max_width x max_height as this heuristic finds.

    - Tallest items first, first-fit into free leaves
    - Opens a new bin when no leaf fits
    - Deterministic; items are never moved once placed

    Raises:
        InvalidBinSizeError: max size is not positive
        EmptyItemError: an item has zero area
        ItemTooLargeError: an item does not fit the max size in any permitted orientation
    """
    return Atlas(items, max_width, max_height).generate(BinaryTreePacker(), rotate_allowed)

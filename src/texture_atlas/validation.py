"""Structural checks for a packed atlas."""

from __future__ import annotations

from texture_atlas.atlas import Atlas
from texture_atlas.errors import AtlasInvariantError
from texture_atlas.geometry import placement_bounds, rects_overlap


def verify_atlas(atlas: Atlas) -> None:
    """
    Check that a packed atlas is well formed:
    - never more bins than items, and no bins without items
    - every item placed exactly once
    - placements in a bin are disjoint and inside the bin bounds
    - bin bounds are the tight bounding box of their placements

    Raises:
        AtlasInvariantError: describing the first violation found
    """
    # If the packer generates more bins than items, something is wrong.
    if atlas.bin_count > atlas.item_count:
        raise AtlasInvariantError(f"{atlas.bin_count} bins for {atlas.item_count} items")
    if atlas.item_count > 0 and atlas.bin_count == 0:
        raise AtlasInvariantError(f"No bins for {atlas.item_count} items")

    seen = [False] * atlas.item_count
    for bin_index, atlas_bin in enumerate(atlas.bins):
        if not atlas_bin.placements:
            raise AtlasInvariantError(f"Bin {bin_index} is empty")

        bounds: list[tuple[int, int, int, int]] = []
        for placement in atlas_bin.placements:
            item_index = placement.item_index
            if item_index >= atlas.item_count:
                raise AtlasInvariantError(f"Bin {bin_index} references unknown item {item_index}")
            if seen[item_index]:
                raise AtlasInvariantError(f"Item {item_index} is placed more than once")
            seen[item_index] = True

            bounds.append(placement_bounds(placement, atlas.item_size(item_index)))

        for i in range(len(bounds)):
            for j in range(i + 1, len(bounds)):
                if rects_overlap(bounds[i], bounds[j]):
                    raise AtlasInvariantError(
                        f"Bin {bin_index}: items {atlas_bin.placements[i].item_index} and "
                        f"{atlas_bin.placements[j].item_index} overlap"
                    )

        tight_width = max(b[2] for b in bounds)
        tight_height = max(b[3] for b in bounds)
        if (atlas_bin.width, atlas_bin.height) != (tight_width, tight_height):
            raise AtlasInvariantError(
                f"Bin {bin_index} bounds {atlas_bin.width}x{atlas_bin.height} "
                f"but placements span {tight_width}x{tight_height}"
            )

    missing = [index for index, placed in enumerate(seen) if not placed]
    if missing:
        raise AtlasInvariantError(f"Items not placed: {missing}")

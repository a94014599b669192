from __future__ import annotations

from texture_atlas.atlas import Atlas


def bin_used_area(atlas: Atlas, bin_index: int) -> int:
    """Area covered by the items in one bin."""
    atlas_bin = atlas.bin(bin_index)
    return sum(atlas.item_size(p.item_index).area for p in atlas_bin.placements)


def compute_metrics(atlas: Atlas) -> tuple[int, int, float]:
    used_area = sum(bin_used_area(atlas, i) for i in range(atlas.bin_count))
    bin_area = sum(atlas_bin.bounds.area for atlas_bin in atlas.bins)
    fill_rate = 0.0 if bin_area == 0 else used_area / bin_area
    return used_area, bin_area, fill_rate

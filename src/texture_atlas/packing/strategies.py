"""Packer selection by name, and running several packers to keep the best result."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from texture_atlas.atlas import Atlas, AtlasGenerator
from texture_atlas.config import get_settings
from texture_atlas.errors import PackingError, UnknownPackerError
from texture_atlas.geometry import AtlasRect
from texture_atlas.packing.binary_tree import BinaryTreePacker
from texture_atlas.packing.passthrough import PassthroughPacker

logger = logging.getLogger(__name__)

PACKERS: dict[str, type] = {
    "binary_tree": BinaryTreePacker,
    "passthrough": PassthroughPacker,
}


def get_packer(packer_type: str) -> AtlasGenerator:
    key = packer_type.strip().lower()
    if key not in PACKERS:
        raise UnknownPackerError(f"Unknown packer '{packer_type}'. Valid: {sorted(PACKERS.keys())}")
    return PACKERS[key]()


def pack(
    items: Sequence[AtlasRect],
    max_width: int,
    max_height: int,
    rotate_allowed: bool = False,
    packer_type: Optional[str] = None,
) -> Atlas:
    """
    Pack items with the named packer.

    Args:
        items: Anything with integer width/height
        max_width: Maximum bin width
        max_height: Maximum bin height
        rotate_allowed: Allow 90 degree rotation where the packer supports it
        packer_type: Key of PACKERS; defaults to TEXTURE_ATLAS_PACKER

    Returns:
        The packed Atlas
    """
    if packer_type is None:
        packer_type = get_settings().packer
    packer = get_packer(packer_type)
    return Atlas(items, max_width, max_height).generate(packer, rotate_allowed)


def _total_bin_area(atlas: Atlas) -> int:
    return sum(atlas_bin.bounds.area for atlas_bin in atlas.bins)


def pack_best(
    items: Sequence[AtlasRect],
    max_width: int,
    max_height: int,
    rotate_allowed: bool = False,
    packer_types: Optional[Iterable[str]] = None,
) -> tuple[str, Atlas]:
    """
    Run each packer on its own atlas and keep the one with the fewest bins.

    Ties go to the smaller total bin area, then to the earlier packer.
    """
    names = list(packer_types) if packer_types is not None else list(PACKERS.keys())
    if not names:
        logger.warning("pack_best called without any packer")
        raise PackingError("No packers to compare")

    best: Optional[tuple[str, Atlas]] = None
    for name in names:
        atlas = pack(items, max_width, max_height, rotate_allowed, packer_type=name)
        logger.debug(f"Packer {name}: {atlas.bin_count} bins, area {_total_bin_area(atlas)}")

        if best is None:
            best = (name, atlas)
            continue

        best_atlas = best[1]
        if (atlas.bin_count, _total_bin_area(atlas)) < (best_atlas.bin_count, _total_bin_area(best_atlas)):
            best = (name, atlas)

    logger.info(f"Best packer: {best[0]} with {best[1].bin_count} bins")
    return best

from __future__ import annotations

import pytest

from texture_atlas.models import Size
from texture_atlas.metrics import bin_used_area, compute_metrics
from texture_atlas.packing.binary_tree import pack


def test_full_bin_metrics() -> None:
    atlas = pack([Size(width=64, height=64) for _ in range(4)], 128, 128)

    used_area, bin_area, fill_rate = compute_metrics(atlas)

    assert used_area == 4 * 64 * 64
    assert bin_area == 128 * 128
    assert fill_rate == 1.0


def test_partial_bin_metrics() -> None:
    atlas = pack([Size(width=60, height=60), Size(width=30, height=30)], 100, 100)

    assert bin_used_area(atlas, 0) == 3600 + 900

    used_area, bin_area, fill_rate = compute_metrics(atlas)
    assert used_area == 4500
    assert bin_area == 90 * 60
    assert fill_rate == pytest.approx(4500 / 5400)


def test_no_bins() -> None:
    assert compute_metrics(pack([], 10, 10)) == (0, 0, 0.0)

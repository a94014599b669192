"""Atlas: a read-only item sequence plus the bins a packer produced for it."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Iterator, Optional, Protocol, Sequence, TypeVar

from texture_atlas.errors import EmptyItemError, InvalidBinSizeError, PackingError
from texture_atlas.geometry import AtlasRect, dimensions
from texture_atlas.models import AtlasBin, Placement

if TYPE_CHECKING:
    from texture_atlas.models import Size

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=AtlasRect)


class AtlasGenerator(Protocol):
    """A packing strategy that fills an empty atlas with bins."""

    def generate(self, atlas: "Atlas", rotate_allowed: bool) -> None: ...


class Atlas(Generic[T]):
    """
    Encapsulates the items to pack, the maximum bin size and the resulting bins.

    The item sequence is borrowed, never copied or reordered; bins refer to
    items by index. Bins are created only through `add_bin` / `add_to_bin`,
    which is what the packers call during `generate`.
    """

    def __init__(self, items: Sequence[T], max_width: int, max_height: int):
        if max_width <= 0 or max_height <= 0:
            raise InvalidBinSizeError(
                f"Maximum bin size must be positive, got {max_width}x{max_height}"
            )

        self._items = items
        self._sizes = [dimensions(item) for item in items]
        for index, size in enumerate(self._sizes):
            if size.empty:
                raise EmptyItemError(f"Item {index} has zero area ({size.width}x{size.height})")

        self.max_width = max_width
        self.max_height = max_height
        self._bins: list[AtlasBin] = []

    @classmethod
    def build(cls, items: Sequence[T], max_width: int, max_height: int) -> "Atlas[T]":
        return cls(items, max_width, max_height)

    # Items

    @property
    def items(self) -> Sequence[T]:
        return self._items

    @property
    def item_count(self) -> int:
        return len(self._items)

    def item(self, index: int) -> T:
        self._check_item_index(index)
        return self._items[index]

    def item_size(self, index: int, rotated: bool = False) -> "Size":
        """Dimensions of an item, swapped if `rotated`."""
        self._check_item_index(index)
        size = self._sizes[index]
        return size.rotated() if rotated else size

    # Bins

    @property
    def bins(self) -> tuple[AtlasBin, ...]:
        return tuple(self._bins)

    @property
    def bin_count(self) -> int:
        return len(self._bins)

    def bin(self, index: int) -> AtlasBin:
        self._check_bin_index(index)
        return self._bins[index]

    def placements(self) -> Iterator[tuple[int, Placement]]:
        """Yield (bin_index, placement) for every placement, bin by bin."""
        for bin_index, atlas_bin in enumerate(self._bins):
            for placement in atlas_bin.placements:
                yield bin_index, placement

    def placement_of(self, item_index: int) -> Optional[tuple[int, Placement]]:
        """Find where an item was placed, or None if it has not been placed yet."""
        self._check_item_index(item_index)
        for bin_index, placement in self.placements():
            if placement.item_index == item_index:
                return bin_index, placement
        return None

    def add_bin(self, item_index: int, rotated: bool = False) -> int:
        """Open a new bin holding only the given item at (0, 0). Returns the bin index."""
        size = self.item_size(item_index, rotated)
        atlas_bin = AtlasBin(bounds=size)
        atlas_bin.placements.append(Placement(item_index=item_index, x=0, y=0, rotated=rotated))
        self._bins.append(atlas_bin)
        return len(self._bins) - 1

    def add_to_bin(self, bin_index: int, item_index: int, x: int, y: int, rotated: bool = False) -> None:
        """Place an item into an existing bin; the bin bounds grow if required."""
        self._check_bin_index(bin_index)
        size = self.item_size(item_index, rotated)
        self._bins[bin_index].add_placement(
            Placement(item_index=item_index, x=x, y=y, rotated=rotated),
            size.width,
            size.height,
        )

    # Packing

    def generate(self, generator: AtlasGenerator, rotate_allowed: bool = False) -> "Atlas[T]":
        """Run a packer over this atlas. An atlas can only be packed once."""
        if self._bins:
            raise PackingError("Atlas has already been packed; build a new one to repack")

        generator.generate(self, rotate_allowed)

        logger.info(
            f"{type(generator).__name__} packed {self.item_count} items into {self.bin_count} bins "
            f"(max {self.max_width}x{self.max_height}, rotate={rotate_allowed})"
        )
        return self

    def _check_item_index(self, index: int) -> None:
        # negative indices would silently wrap on a list
        if not 0 <= index < len(self._items):
            raise IndexError(f"Item index {index} out of range for {len(self._items)} items")

    def _check_bin_index(self, index: int) -> None:
        if not 0 <= index < len(self._bins):
            raise IndexError(f"Bin index {index} out of range for {len(self._bins)} bins")

"""Geometry utilities and the item capability used by the packers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from texture_atlas.errors import InvalidItemError
from texture_atlas.models import OrientedSize, Size

if TYPE_CHECKING:
    from texture_atlas.models import Placement


@runtime_checkable
class AtlasRect(Protocol):
    """
    Anything with integer `width` and `height`.

    Pydantic models, dataclasses and PIL images all qualify. The packers never
    need more than this.
    """

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...


def dimensions(item: AtlasRect) -> Size:
    """Read an item's dimensions into a Size, rejecting unusable values."""
    try:
        width, height = item.width, item.height
    except AttributeError as e:
        raise InvalidItemError(f"Item {item!r} has no width/height: {e}") from e

    # bool is an int subclass but never a dimension
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidItemError(
                f"Item {item!r} has invalid dimensions ({width!r}x{height!r})"
            )
    return Size(width=width, height=height)


def area(item: AtlasRect) -> int:
    return dimensions(item).area


def is_empty(item: AtlasRect) -> bool:
    return dimensions(item).empty


def dimensions_rotated(item: AtlasRect, rotate: bool) -> Size:
    """Dimensions with width and height swapped iff `rotate`."""
    size = dimensions(item)
    return size.rotated() if rotate else size


def dimensions_longest(item: AtlasRect, rotate_allowed: bool) -> OrientedSize:
    """
    Report the longer side as width when rotation is allowed.

    Square items and items already wider than tall keep their orientation.
    """
    size = dimensions(item)
    if rotate_allowed and size.height > size.width:
        return OrientedSize(size=size.rotated(), rotated=True)
    return OrientedSize(size=size, rotated=False)


def rects_overlap(a: tuple[int, int, int, int], b: tuple[int, int, int, int]) -> bool:
    """
    Axis-aligned rectangle overlap test.

    a, b are bounds: (x1, y1, x2, y2)

    Touching edges (ax2 == bx1) is NOT considered overlap.
    """
    ax1, ay1, ax2, ay2 = a
    bx1, by1, bx2, by2 = b

    return (ax1 < bx2 and ax2 > bx1) and (ay1 < by2 and ay2 > by1)


def placement_bounds(placement: "Placement", item: AtlasRect) -> tuple[int, int, int, int]:
    """Bounds (x1, y1, x2, y2) covered by a placed item, rotation applied."""
    size = dimensions_rotated(item, placement.rotated)
    return (placement.x, placement.y, placement.x + size.width, placement.y + size.height)

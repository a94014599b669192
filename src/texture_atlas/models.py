from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Size(BaseModel):
    """Width/height value type (in pixels)."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(ge=0, description="Width of the rectangle")
    height: int = Field(ge=0, description="Height of the rectangle")

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def rotated(self) -> "Size":
        return Size(width=self.height, height=self.width)


class OrientedSize(BaseModel):
    """Size after the longest-side normalization, with the swap recorded."""

    model_config = ConfigDict(frozen=True)

    size: Size
    rotated: bool = Field(default=False, description="True if width/height were swapped")

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height


class Placement(BaseModel):
    """Position of one item inside a bin."""

    item_index: int = Field(ge=0, description="Index into the atlas item sequence")
    x: int = Field(ge=0, description="X offset of the item in the bin")
    y: int = Field(ge=0, description="Y offset of the item in the bin")
    rotated: bool = Field(default=False, description="True if the item is placed rotated 90 degrees")


class AtlasBin(BaseModel):
    """
    A packed bin containing one or more placements.

    `bounds` is the minimum bounding size enclosing every placement. It is NOT
    the packing capacity of the bin, which only the packer knows about.
    """

    bounds: Size = Field(description="Tight bounding size of all placements")
    placements: list[Placement] = Field(default_factory=list)

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    def add_placement(self, placement: Placement, width: int, height: int) -> None:
        """
        Append a placement and grow the bounds if required.

        width/height are the post-rotation dimensions of the placed item.
        """
        self.bounds = Size(
            width=max(self.bounds.width, placement.x + width),
            height=max(self.bounds.height, placement.y + height),
        )
        self.placements.append(placement)

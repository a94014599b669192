"""Data schemas for input/output operations."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from texture_atlas.atlas import Atlas
from texture_atlas.metrics import compute_metrics
from texture_atlas.packing.strategies import pack


class ItemSchema(BaseModel):
    """Schema for an item to pack."""
    name: Optional[str] = Field(default=None, description="Optional label, e.g. a texture file name")
    width: int = Field(gt=0, description="Width of the item")
    height: int = Field(gt=0, description="Height of the item")


class PackingRequestSchema(BaseModel):
    """Schema for a packing request."""
    max_width: int = Field(gt=0, description="Maximum bin width")
    max_height: int = Field(gt=0, description="Maximum bin height")
    rotate: bool = Field(default=False, description="Allow 90 degree rotation")
    packer: str = Field(default="binary_tree", description="Packer name")
    items: List[ItemSchema] = Field(default_factory=list, description="Items to pack, in order")


class PlacementSchema(BaseModel):
    """Schema for one placed item."""
    item_index: int = Field(ge=0)
    name: Optional[str] = None
    x: int = Field(ge=0)
    y: int = Field(ge=0)
    width: int = Field(gt=0, description="Placed width, rotation applied")
    height: int = Field(gt=0, description="Placed height, rotation applied")
    rotated: bool = False


class BinSchema(BaseModel):
    """Schema for one bin."""
    width: int = Field(ge=0)
    height: int = Field(ge=0)
    placements: List[PlacementSchema] = Field(default_factory=list)


class AtlasSchema(BaseModel):
    """Schema for a packing result."""
    packer: str
    max_width: int = Field(gt=0)
    max_height: int = Field(gt=0)
    item_count: int = Field(ge=0)
    bin_count: int = Field(ge=0)
    bins: List[BinSchema] = Field(default_factory=list)
    used_area: int = Field(ge=0)
    bin_area: int = Field(ge=0)
    fill_rate: float = Field(ge=0, le=1, description="used_area / bin_area")

    @classmethod
    def from_atlas(cls, atlas: Atlas, packer: str) -> "AtlasSchema":
        bins = []
        for atlas_bin in atlas.bins:
            placements = []
            for p in atlas_bin.placements:
                size = atlas.item_size(p.item_index, p.rotated)
                placements.append(
                    PlacementSchema(
                        item_index=p.item_index,
                        name=getattr(atlas.item(p.item_index), "name", None),
                        x=p.x,
                        y=p.y,
                        width=size.width,
                        height=size.height,
                        rotated=p.rotated,
                    )
                )
            bins.append(BinSchema(width=atlas_bin.width, height=atlas_bin.height, placements=placements))

        used_area, bin_area, fill_rate = compute_metrics(atlas)
        return cls(
            packer=packer,
            max_width=atlas.max_width,
            max_height=atlas.max_height,
            item_count=atlas.item_count,
            bin_count=atlas.bin_count,
            bins=bins,
            used_area=used_area,
            bin_area=bin_area,
            fill_rate=fill_rate,
        )


def run_request(request: PackingRequestSchema) -> AtlasSchema:
    """Pack the request's items and describe the result."""
    atlas = pack(
        request.items,
        request.max_width,
        request.max_height,
        rotate_allowed=request.rotate,
        packer_type=request.packer,
    )
    return AtlasSchema.from_atlas(atlas, request.packer)

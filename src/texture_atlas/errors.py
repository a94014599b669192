"""Errors raised while building or packing an atlas."""

from __future__ import annotations


class PackingError(Exception):
    """Base class for every packing failure."""


class InvalidBinSizeError(PackingError, ValueError):
    """The maximum bin width or height is not positive."""


class InvalidItemError(PackingError, ValueError):
    """An item does not expose usable integer width/height."""


class EmptyItemError(InvalidItemError):
    """An item has zero area and cannot be placed."""


class ItemTooLargeError(PackingError, ValueError):
    """An item can never fit in a bin of the maximum size, in any permitted orientation."""

    def __init__(self, item_index: int, width: int, height: int, max_width: int, max_height: int):
        self.item_index = item_index
        self.width = width
        self.height = height
        self.max_width = max_width
        self.max_height = max_height
        super().__init__(
            f"Item {item_index} ({width}x{height}) does not fit in a {max_width}x{max_height} bin"
        )


class UnknownPackerError(PackingError, KeyError):
    """No packer is registered under the requested name."""

    def __str__(self) -> str:
        # KeyError repr-quotes its message otherwise
        return str(self.args[0]) if self.args else ""


class AtlasInvariantError(PackingError):
    """A packed atlas breaks one of its structural guarantees."""

"""Physical measurements derived from block dimensions."""

from __future__ import annotations

from dataclasses import dataclass

from ..value_objects import BLOCK_SIZE_INCHES, Dimensions

__all__ = ["DimensionsDetails", "get_dimensions_details"]

POUNDS_PER_SQUARE_INCH = 1.0
KILOGRAMS_PER_POUND = 0.453592


@dataclass(frozen=True)
class DimensionsDetails:
    """A panel's size expressed in blocks, inches, feet and weight."""

    width_blocks: int
    height_blocks: int
    width_inches: float
    height_inches: float
    square_inches: float
    weight_pounds: float

    @property
    def total_blocks(self) -> int:
        return self.width_blocks * self.height_blocks

    @property
    def width_feet(self) -> float:
        return self.width_inches / 12

    @property
    def height_feet(self) -> float:
        return self.height_inches / 12

    @property
    def square_feet(self) -> float:
        return self.square_inches / 144

    @property
    def weight_kilograms(self) -> float:
        return self.weight_pounds * KILOGRAMS_PER_POUND


def get_dimensions_details(dimensions: Dimensions | None) -> DimensionsDetails | None:
    """Describe a panel's physical size, or None when no size is chosen."""
    if dimensions is None:
        return None
    width_inches = dimensions.width * BLOCK_SIZE_INCHES
    height_inches = dimensions.height * BLOCK_SIZE_INCHES
    square_inches = width_inches * height_inches
    return DimensionsDetails(
        width_blocks=dimensions.width,
        height_blocks=dimensions.height,
        width_inches=width_inches,
        height_inches=height_inches,
        square_inches=square_inches,
        weight_pounds=square_inches * POUNDS_PER_SQUARE_INCH,
    )

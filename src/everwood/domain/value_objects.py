"""Value objects for the panel design domain."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

__all__ = [
    "BLOCK_SIZE_INCHES",
    "ColorPattern",
    "CustomColor",
    "Dimensions",
    "HSL",
    "Orientation",
    "PALETTE_HEX_PATTERN",
    "PatternStyle",
    "STANDARD_SIZES",
    "ShippingSpeed",
    "StyleType",
]

# Each block is a square of this many inches per side.
BLOCK_SIZE_INCHES = 3

# Palette entries are always stored as #RRGGBB.
PALETTE_HEX_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


class ShippingSpeed(str, Enum):
    """Shipping tiers offered at checkout."""

    STANDARD = "standard"
    EXPEDITED = "expedited"
    RUSHED = "rushed"


class ColorPattern(str, Enum):
    """How palette colors are laid out across the panel."""

    STRIPED = "striped"
    GRADIENT = "gradient"
    CHECKERBOARD = "checkerboard"
    RANDOM = "random"
    FADE = "fade"
    CENTER_FADE = "center-fade"


class Orientation(str, Enum):
    """Direction the pattern runs across the panel."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class PatternStyle(str, Enum):
    """Block pattern style."""

    TILED = "tiled"
    GEOMETRIC = "geometric"


class StyleType(str, Enum):
    """Overall panel style."""

    GEOMETRIC = "geometric"
    TILED = "tiled"
    STRIPED = "striped"


@dataclass(frozen=True)
class Dimensions:
    """Immutable panel dimensions in blocks."""

    width: int
    height: int

    def __post_init__(self) -> None:
        for value in (self.width, self.height):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError("Dimensions must be whole block counts")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("All dimensions must be positive")

    @property
    def total_blocks(self) -> int:
        """Number of blocks making up the panel."""
        return self.width * self.height

    @classmethod
    def from_size_string(cls, size: str) -> "Dimensions":
        """Parse a catalogue size string such as ``"14 x 7"``."""
        try:
            width, height = (int(part) for part in size.lower().split("x"))
        except ValueError as e:
            raise ValueError(f"Invalid size string: {size!r}") from e
        return cls(width=width, height=height)

    def to_dict(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class CustomColor:
    """One entry of a custom palette.

    Palette order is meaningful: it determines the pattern layout.
    """

    hex: str
    name: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", None)

    def to_dict(self) -> dict[str, str]:
        data = {"hex": self.hex}
        if self.name:
            data["name"] = self.name
        return data


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in percent."""

    h: float
    s: float
    l: float  # noqa: E741


# Catalogue sizes (width x height in blocks) with their display labels.
STANDARD_SIZES: dict[str, str] = {
    "14 x 7": '18" x 3 Feet',
    "16 x 6": '18" x 4 Feet',
    "16 x 10": '30" x 4 Feet',
    "20 x 10": '30" x 5 Feet',
    "24 x 10": '30" x 6 Feet',
    "20 x 12": '36" x 6 Feet',
    "24 x 12": '36" x 7 Feet',
    "28 x 12": '36" x 8 Feet',
    "28 x 16": '48" x 7 Feet',
    "32 x 16": '48" x 8 Feet',
    "36 x 16": '48" x 9 Feet',
}

"""Domain entities for panel design."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from .designs import ItemDesign
from .exceptions import IncompleteConfigurationError, InvalidColorError
from .value_objects import (
    PALETTE_HEX_PATTERN,
    ColorPattern,
    CustomColor,
    Dimensions,
    Orientation,
    PatternStyle,
    ShippingSpeed,
    StyleType,
)

__all__ = ["DesignConfiguration", "SHARE_STATE_FIELDS", "SavedPalette"]

# Wire keys of the share state, in serialization order.
SHARE_STATE_FIELDS: tuple[str, ...] = (
    "dimensions",
    "selectedDesign",
    "shippingSpeed",
    "colorPattern",
    "orientation",
    "isReversed",
    "customPalette",
    "isRotated",
    "patternStyle",
    "style",
    "useMini",
)


@dataclass
class DesignConfiguration:
    """The complete set of user choices describing one custom panel.

    Attributes:
        dimensions: Panel size in blocks, or None before a size is chosen.
        selected_design: Official design, or ItemDesign.CUSTOM for a custom palette.
        shipping_speed: Shipping tier.
        color_pattern: How palette colors are laid out.
        orientation: Direction the pattern runs.
        custom_palette: Ordered custom colors; order drives the pattern layout.
        is_reversed: Pattern runs in reverse palette order.
        is_rotated: Panel is rotated a quarter turn.
        pattern_style: Block pattern style.
        style: Overall panel style.
        use_mini: Preview the panel as a mini sample.
    """

    dimensions: Dimensions | None = field(
        default_factory=lambda: Dimensions(width=16, height=10)
    )
    selected_design: ItemDesign = ItemDesign.COASTAL
    shipping_speed: ShippingSpeed = ShippingSpeed.STANDARD
    color_pattern: ColorPattern = ColorPattern.FADE
    orientation: Orientation = Orientation.HORIZONTAL
    custom_palette: list[CustomColor] = field(default_factory=list)
    is_reversed: bool = False
    is_rotated: bool = False
    pattern_style: PatternStyle = PatternStyle.TILED
    style: StyleType = StyleType.GEOMETRIC
    use_mini: bool = False

    def to_share_state(self) -> dict[str, Any]:
        """Plain share state using the storefront's camelCase wire keys."""
        return {
            "dimensions": self.dimensions.to_dict() if self.dimensions else None,
            "selectedDesign": int(self.selected_design),
            "shippingSpeed": self.shipping_speed.value,
            "colorPattern": self.color_pattern.value,
            "orientation": self.orientation.value,
            "isReversed": self.is_reversed,
            "customPalette": [color.to_dict() for color in self.custom_palette],
            "isRotated": self.is_rotated,
            "patternStyle": self.pattern_style.value,
            "style": self.style.value,
            "useMini": self.use_mini,
        }

    @classmethod
    def from_share_state(cls, data: Mapping[str, Any]) -> "DesignConfiguration":
        """Rebuild a configuration from decoded share state.

        Every field except ``useMini`` is required. Missing or unrecognised
        values are collected and reported together.

        Raises:
            IncompleteConfigurationError: If any required field is missing or
                invalid. No partial configuration is ever returned.
        """
        problems: list[str] = []

        def parse(key: str, parser: Any) -> Any:
            if data.get(key) is None:
                problems.append(key)
                return None
            try:
                return parser(data[key])
            except (AttributeError, KeyError, TypeError, ValueError):
                problems.append(key)
                return None

        values = {
            "dimensions": parse("dimensions", _parse_dimensions),
            "selected_design": parse("selectedDesign", _parse_design),
            "shipping_speed": parse("shippingSpeed", ShippingSpeed),
            "color_pattern": parse("colorPattern", ColorPattern),
            "orientation": parse("orientation", Orientation),
            "is_reversed": parse("isReversed", _parse_bool),
            "custom_palette": parse("customPalette", _parse_palette),
            "is_rotated": parse("isRotated", _parse_bool),
            "pattern_style": parse("patternStyle", PatternStyle),
            "style": parse("style", StyleType),
        }
        use_mini = False
        if data.get("useMini") is not None:
            use_mini = parse("useMini", _parse_bool)

        if problems:
            raise IncompleteConfigurationError(problems)
        return cls(**values, use_mini=use_mini)

    def copy(self) -> "DesignConfiguration":
        return replace(self, custom_palette=list(self.custom_palette))


@dataclass(frozen=True)
class SavedPalette:
    """A named custom palette kept for later reuse.

    Attributes:
        id: Identifier assigned when the palette is saved.
        name: Display name.
        colors: Palette entries in order.
        created_at: When the palette was saved.
        updated_at: When it was last renamed or recolored, if ever.
    """

    id: str
    name: str
    colors: tuple[CustomColor, ...]
    created_at: datetime
    updated_at: datetime | None = None


def _parse_dimensions(value: Mapping[str, Any]) -> Dimensions:
    return Dimensions(width=value["width"], height=value["height"])


def _parse_design(value: Any) -> ItemDesign:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("selectedDesign must be an integer")
    return ItemDesign(value)


def _parse_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError("expected a boolean")
    return value


def _parse_palette(value: Any) -> list[CustomColor]:
    """Rebuild palette entries, adding a missing '#' to hex values.

    Every entry must end up as ``#RRGGBB``; a single bad entry rejects the
    whole palette.
    """
    if not isinstance(value, list):
        raise TypeError("customPalette must be a list")
    palette = []
    for entry in value:
        hex_value = entry["hex"]
        name = entry.get("name")
        if not isinstance(hex_value, str) or (name is not None and not isinstance(name, str)):
            raise TypeError("palette entries need a string hex and optional string name")
        if not hex_value.startswith("#"):
            hex_value = f"#{hex_value}"
        if not PALETTE_HEX_PATTERN.match(hex_value):
            raise InvalidColorError(entry["hex"])
        palette.append(CustomColor(hex=hex_value, name=name))
    return palette

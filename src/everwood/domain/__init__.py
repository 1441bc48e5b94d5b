"""Domain layer: value objects, the design catalogue and design configuration."""

from .designs import ItemDesign
from .entities import SHARE_STATE_FIELDS, DesignConfiguration, SavedPalette
from .exceptions import IncompleteConfigurationError, InvalidColorError
from .services import PriceBreakdown, calculate_price
from .value_objects import (
    BLOCK_SIZE_INCHES,
    HSL,
    PALETTE_HEX_PATTERN,
    STANDARD_SIZES,
    ColorPattern,
    CustomColor,
    Dimensions,
    Orientation,
    PatternStyle,
    ShippingSpeed,
    StyleType,
)

__all__ = [
    "BLOCK_SIZE_INCHES",
    "ColorPattern",
    "CustomColor",
    "DesignConfiguration",
    "Dimensions",
    "HSL",
    "IncompleteConfigurationError",
    "InvalidColorError",
    "ItemDesign",
    "Orientation",
    "PALETTE_HEX_PATTERN",
    "PatternStyle",
    "PriceBreakdown",
    "SHARE_STATE_FIELDS",
    "STANDARD_SIZES",
    "SavedPalette",
    "ShippingSpeed",
    "StyleType",
    "calculate_price",
]

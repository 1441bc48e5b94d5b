"""Domain services: color theory, pricing and dimension details."""

from .color_theory import (
    HarmonyType,
    blend_colors,
    generate_harmony,
    get_analogous_colors,
    get_complementary_color,
    get_contrast_text_color,
    get_monochromatic_colors,
    get_shade_colors,
    get_split_complementary_colors,
    get_tetradic_colors,
    get_triadic_colors,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    mix_paint_colors,
    rgb_to_hex,
)
from .dimensions import DimensionsDetails, get_dimensions_details
from .pricing import (
    PRICE_TABLE,
    PriceBreakdown,
    PriceDebug,
    ShippingBreakdown,
    calculate_price,
    interpolate_price,
)

__all__ = [
    "DimensionsDetails",
    "HarmonyType",
    "PRICE_TABLE",
    "PriceBreakdown",
    "PriceDebug",
    "ShippingBreakdown",
    "blend_colors",
    "calculate_price",
    "generate_harmony",
    "get_analogous_colors",
    "get_complementary_color",
    "get_contrast_text_color",
    "get_dimensions_details",
    "get_monochromatic_colors",
    "get_shade_colors",
    "get_split_complementary_colors",
    "get_tetradic_colors",
    "get_triadic_colors",
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_to_hex",
    "interpolate_price",
    "mix_paint_colors",
    "rgb_to_hex",
]

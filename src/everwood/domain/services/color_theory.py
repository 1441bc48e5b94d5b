"""Color conversion and harmony palette generation.

All functions are pure. Hex input may be ``#RRGGBB``, ``RRGGBB`` or the
three digit shorthand ``#RGB``; anything else raises InvalidColorError.
Generated colors are always returned as uppercase ``#RRGGBB``.

Conversions pass through 8-bit RGB, so a hex -> HSL -> hex round trip can
differ by one unit per channel.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence
from enum import Enum

from ..exceptions import InvalidColorError
from ..value_objects import HSL

__all__ = [
    "HarmonyType",
    "blend_colors",
    "generate_harmony",
    "get_analogous_colors",
    "get_complementary_color",
    "get_contrast_text_color",
    "get_monochromatic_colors",
    "get_shade_colors",
    "get_split_complementary_colors",
    "get_tetradic_colors",
    "get_triadic_colors",
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_to_hex",
    "mix_paint_colors",
    "rgb_to_hex",
]

_HEX_PATTERN = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

ANALOGOUS_STEP_DEGREES = 30.0
MIN_LIGHTNESS = 10.0
MAX_LIGHTNESS = 90.0


class HarmonyType(str, Enum):
    """Palette generators offered by the harmony tool."""

    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    SPLIT_COMPLEMENTARY = "split-complementary"
    MONOCHROMATIC = "monochromatic"
    SHADES = "shades"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Parse a hex color into 8-bit RGB channels."""
    if not isinstance(hex_color, str) or not _HEX_PATTERN.match(hex_color):
        raise InvalidColorError(hex_color)
    digits = hex_color.lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format 8-bit channels as ``#RRGGBB``, clamping out-of-range values."""
    channels = (max(0, min(255, int(c))) for c in (r, g, b))
    return "#" + "".join(f"{c:02X}" for c in channels)


def hex_to_hsl(hex_color: str) -> HSL:
    """Convert a hex color to HSL (degrees, percent, percent)."""
    r, g, b = (c / 255 for c in hex_to_rgb(hex_color))
    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2

    if high == low:
        return HSL(0.0, 0.0, lightness * 100)

    delta = high - low
    if lightness > 0.5:
        saturation = delta / (2 - high - low)
    else:
        saturation = delta / (high + low)

    if high == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif high == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4

    return HSL((hue / 6) * 360, saturation * 100, lightness * 100)


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    """Convert HSL (degrees, percent, percent) to ``#RRGGBB``.

    Hue wraps around the color wheel, so negative or >360 values are fine.
    """
    h = h % 360
    s /= 100
    l /= 100

    chroma = (1 - abs(2 * l - 1)) * s
    x = chroma * (1 - abs((h / 60) % 2 - 1))
    m = l - chroma / 2

    if h < 60:
        r, g, b = chroma, x, 0.0
    elif h < 120:
        r, g, b = x, chroma, 0.0
    elif h < 180:
        r, g, b = 0.0, chroma, x
    elif h < 240:
        r, g, b = 0.0, x, chroma
    elif h < 300:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return rgb_to_hex(*(_round_half_up((c + m) * 255) for c in (r, g, b)))


def _rotate(hsl: HSL, degrees: float) -> str:
    return hsl_to_hex(hsl.h + degrees, hsl.s, hsl.l)


def get_complementary_color(hex_color: str) -> str:
    """Color opposite the input on the color wheel."""
    return _rotate(hex_to_hsl(hex_color), 180)


def get_analogous_colors(hex_color: str, count: int = 3) -> list[str]:
    """``count`` hues 30 degrees apart, centered on the input.

    The input sits unchanged at index ``count // 2``.
    """
    if count < 1:
        raise ValueError("count must be at least 1")
    hsl = hex_to_hsl(hex_color)
    center = count // 2
    return [
        hex_color if i == center else _rotate(hsl, (i - center) * ANALOGOUS_STEP_DEGREES)
        for i in range(count)
    ]


def _with_offsets(hex_color: str, offsets: Iterable[float]) -> list[str]:
    hsl = hex_to_hsl(hex_color)
    return [hex_color, *(_rotate(hsl, offset) for offset in offsets)]


def get_triadic_colors(hex_color: str) -> list[str]:
    return _with_offsets(hex_color, (120, 240))


def get_tetradic_colors(hex_color: str) -> list[str]:
    """Rectangle tetrad: the input plus hues at +60, +180 and +240 degrees."""
    return _with_offsets(hex_color, (60, 180, 240))


def get_split_complementary_colors(hex_color: str) -> list[str]:
    return _with_offsets(hex_color, (150, 210))


def get_monochromatic_colors(hex_color: str, count: int = 5) -> list[str]:
    """Same hue and saturation, lightness spread evenly from 10 to 90.

    A single-color request returns the input itself.
    """
    if count < 1:
        raise ValueError("count must be at least 1")
    if count == 1:
        return [hex_color]
    hsl = hex_to_hsl(hex_color)
    step = (MAX_LIGHTNESS - MIN_LIGHTNESS) / (count - 1)
    return [hsl_to_hex(hsl.h, hsl.s, MIN_LIGHTNESS + step * i) for i in range(count)]


def get_shade_colors(hex_color: str, count: int = 5) -> list[str]:
    """Dark-to-light variations with saturation easing off as lightness rises.

    Saturation never drops below half of the input's.
    """
    if count < 1:
        raise ValueError("count must be at least 1")
    if count == 1:
        return [hex_color]
    hsl = hex_to_hsl(hex_color)
    lightness_step = (MAX_LIGHTNESS - MIN_LIGHTNESS) / (count - 1)
    saturation_step = hsl.s / (count - 1)
    colors = []
    for i in range(count):
        lightness = min(max(MIN_LIGHTNESS + lightness_step * i, MIN_LIGHTNESS), MAX_LIGHTNESS)
        saturation = max(hsl.s - saturation_step * i * 0.5, hsl.s * 0.5)
        colors.append(hsl_to_hex(hsl.h, saturation, lightness))
    return colors


def _mix_weighted(weighted: Sequence[tuple[str, int]]) -> str:
    total = sum(weight for _, weight in weighted)
    if total == 0:
        return "#000000"
    sums = [0, 0, 0]
    for hex_color, weight in weighted:
        for i, channel in enumerate(hex_to_rgb(hex_color)):
            sums[i] += channel * weight
    return rgb_to_hex(*(_round_half_up(s / total) for s in sums))


def mix_paint_colors(hex_colors: Sequence[str]) -> str:
    """Average the R, G and B channels of all colors independently.

    An empty sequence mixes to black.
    """
    return _mix_weighted([(c, 1) for c in hex_colors])


def blend_colors(start: str, end: str, count: int) -> list[str]:
    """Intermediate colors stepping from ``start`` toward ``end``.

    Blend ``i`` of ``count`` is a paint mix of one part start, plus
    ``floor(ratio * 100)`` parts end and ``floor((1 - ratio) * 100)`` parts
    start, where ``ratio = i / (count + 1)``.
    """
    blends = []
    for i in range(1, count + 1):
        ratio = i / (count + 1)
        end_parts = math.floor(ratio * 100)
        start_parts = 1 + math.floor((1 - ratio) * 100)
        blends.append(_mix_weighted([(start, start_parts), (end, end_parts)]))
    return blends


def get_contrast_text_color(hex_color: str) -> str:
    """``"dark"`` if dark text reads best on this background, else ``"light"``."""
    r, g, b = hex_to_rgb(hex_color)
    yiq = (r * 299 + g * 587 + b * 114) / 1000
    return "dark" if yiq >= 128 else "light"


def generate_harmony(
    hex_color: str, harmony: HarmonyType | str, count: int = 5
) -> list[str]:
    """Generate a harmony palette; ``count`` applies to the sized harmonies only."""
    harmony = HarmonyType(harmony)
    if harmony is HarmonyType.COMPLEMENTARY:
        return [hex_color, get_complementary_color(hex_color)]
    if harmony is HarmonyType.ANALOGOUS:
        return get_analogous_colors(hex_color, count)
    if harmony is HarmonyType.TRIADIC:
        return get_triadic_colors(hex_color)
    if harmony is HarmonyType.TETRADIC:
        return get_tetradic_colors(hex_color)
    if harmony is HarmonyType.SPLIT_COMPLEMENTARY:
        return get_split_complementary_colors(hex_color)
    if harmony is HarmonyType.MONOCHROMATIC:
        return get_monochromatic_colors(hex_color, count)
    return get_shade_colors(hex_color, count)

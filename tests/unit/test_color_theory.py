"""Unit tests for the color theory service.

These tests verify:
- Hex parsing and formatting, including shorthand and missing '#'
- HSL conversion and hue wrap-around
- Harmony generators (complementary, analogous, triadic, tetradic,
  split-complementary, monochromatic, shades)
- Paint mixing, blending and contrast hints
"""

import pytest

from everwood.domain import InvalidColorError
from everwood.domain.services import (
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


class TestHexConversion:
    """Tests for hex <-> RGB conversion."""

    def test_six_digit_hex(self) -> None:
        assert hex_to_rgb("#2A9D8F") == (42, 157, 143)

    def test_hash_is_optional(self) -> None:
        assert hex_to_rgb("2a9d8f") == (42, 157, 143)

    def test_three_digit_shorthand_expands(self) -> None:
        assert hex_to_rgb("#abc") == (170, 187, 204)

    @pytest.mark.parametrize("value", ["", "#12", "#GGGGGG", "#1234567", "red"])
    def test_invalid_hex_raises(self, value: str) -> None:
        with pytest.raises(InvalidColorError) as exc_info:
            hex_to_rgb(value)
        assert exc_info.value.value == value

    def test_invalid_color_error_is_value_error(self) -> None:
        """Callers catching ValueError also catch bad colors."""
        with pytest.raises(ValueError):
            hex_to_rgb("nope")

    def test_rgb_to_hex_is_uppercase(self) -> None:
        assert rgb_to_hex(42, 157, 143) == "#2A9D8F"

    def test_rgb_to_hex_clamps_channels(self) -> None:
        assert rgb_to_hex(300, -5, 16) == "#FF0010"


class TestHslConversion:
    """Tests for hex <-> HSL conversion."""

    def test_pure_red(self) -> None:
        hsl = hex_to_hsl("#FF0000")
        assert hsl.h == pytest.approx(0.0)
        assert hsl.s == pytest.approx(100.0)
        assert hsl.l == pytest.approx(50.0)

    def test_gray_has_no_saturation(self) -> None:
        hsl = hex_to_hsl("#808080")
        assert hsl.h == 0.0
        assert hsl.s == 0.0

    def test_hsl_to_hex_primary_colors(self) -> None:
        assert hsl_to_hex(0, 100, 50) == "#FF0000"
        assert hsl_to_hex(120, 100, 50) == "#00FF00"
        assert hsl_to_hex(240, 100, 50) == "#0000FF"

    def test_hue_wraps_around(self) -> None:
        assert hsl_to_hex(360, 100, 50) == "#FF0000"
        assert hsl_to_hex(-120, 100, 50) == "#0000FF"
        assert hsl_to_hex(480, 100, 50) == "#00FF00"

    def test_round_trip_within_one_unit(self) -> None:
        """hex -> HSL -> hex may drift by at most one unit per channel."""
        for color in ("#2A9D8F", "#E9C46A", "#264653", "#F4A261", "#6D28D9"):
            hsl = hex_to_hsl(color)
            back = hex_to_rgb(hsl_to_hex(hsl.h, hsl.s, hsl.l))
            for original, converted in zip(hex_to_rgb(color), back):
                assert abs(original - converted) <= 1


class TestHarmonies:
    """Tests for the harmony palette generators."""

    def test_complementary(self) -> None:
        assert get_complementary_color("#FF0000") == "#00FFFF"

    def test_complement_of_complement_within_one_unit(self) -> None:
        for color in ("#2A9D8F", "#E9C46A", "#6D28D9", "#FF0000"):
            twice = get_complementary_color(get_complementary_color(color))
            for original, converted in zip(hex_to_rgb(color), hex_to_rgb(twice)):
                assert abs(original - converted) <= 1

    def test_analogous_centered_on_input(self) -> None:
        colors = get_analogous_colors("#FF0000", 3)
        assert colors == ["#FF0080", "#FF0000", "#FF8000"]

    def test_analogous_keeps_input_unchanged(self) -> None:
        """The input is returned as given, even in lowercase."""
        colors = get_analogous_colors("#2a9d8f", 5)
        assert len(colors) == 5
        assert colors[2] == "#2a9d8f"

    def test_analogous_rejects_zero_count(self) -> None:
        with pytest.raises(ValueError):
            get_analogous_colors("#FF0000", 0)

    def test_triadic(self) -> None:
        assert get_triadic_colors("#FF0000") == ["#FF0000", "#00FF00", "#0000FF"]

    def test_tetradic_rectangle_offsets(self) -> None:
        """Tetrad uses +60, +180 and +240 degrees."""
        assert get_tetradic_colors("#FF0000") == [
            "#FF0000",
            "#FFFF00",
            "#00FFFF",
            "#0000FF",
        ]

    def test_split_complementary(self) -> None:
        assert get_split_complementary_colors("#FF0000") == [
            "#FF0000",
            "#00FF80",
            "#0080FF",
        ]

    def test_monochromatic_lightness_spread(self) -> None:
        colors = get_monochromatic_colors("#FF0000", 5)
        assert len(colors) == 5
        assert colors[0] == "#330000"
        assert colors[2] == "#FF0000"
        assert colors[-1] == "#FFCCCC"

    def test_monochromatic_single_color_returns_input(self) -> None:
        assert get_monochromatic_colors("#2A9D8F", 1) == ["#2A9D8F"]

    def test_monochromatic_rejects_zero_count(self) -> None:
        with pytest.raises(ValueError):
            get_monochromatic_colors("#2A9D8F", 0)

    def test_shades_dark_to_light(self) -> None:
        colors = get_shade_colors("#2A9D8F", 5)
        assert len(colors) == 5
        lightness = [hex_to_hsl(c).l for c in colors]
        assert lightness == sorted(lightness)

    def test_shades_single_color_returns_input(self) -> None:
        assert get_shade_colors("#2A9D8F", 1) == ["#2A9D8F"]

    def test_invalid_base_color_raises(self) -> None:
        with pytest.raises(InvalidColorError):
            get_triadic_colors("not-a-color")


class TestGenerateHarmony:
    """Tests for the generate_harmony dispatcher."""

    def test_complementary_includes_base(self) -> None:
        assert generate_harmony("#FF0000", HarmonyType.COMPLEMENTARY) == [
            "#FF0000",
            "#00FFFF",
        ]

    def test_accepts_string_harmony(self) -> None:
        assert generate_harmony("#FF0000", "triadic") == get_triadic_colors("#FF0000")

    def test_count_applies_to_sized_harmonies(self) -> None:
        assert len(generate_harmony("#FF0000", "monochromatic", 7)) == 7
        assert len(generate_harmony("#FF0000", "analogous", 4)) == 4
        assert len(generate_harmony("#FF0000", "tetradic", 9)) == 4

    def test_unknown_harmony_raises(self) -> None:
        with pytest.raises(ValueError):
            generate_harmony("#FF0000", "pentadic")


class TestMixing:
    """Tests for paint mixing and blending."""

    def test_mix_red_and_blue(self) -> None:
        """127.5 rounds half up to 128."""
        assert mix_paint_colors(["#FF0000", "#0000FF"]) == "#800080"

    def test_mix_single_color_normalizes(self) -> None:
        assert mix_paint_colors(["#abc"]) == "#AABBCC"

    def test_mix_empty_is_black(self) -> None:
        assert mix_paint_colors([]) == "#000000"

    def test_mix_invalid_color_raises(self) -> None:
        with pytest.raises(InvalidColorError):
            mix_paint_colors(["#FF0000", "blue"])

    def test_blend_midpoint(self) -> None:
        """One blend mixes 51 parts start with 50 parts end."""
        assert blend_colors("#000000", "#FFFFFF", 1) == ["#7E7E7E"]

    def test_blend_count_and_direction(self) -> None:
        blends = blend_colors("#000000", "#FFFFFF", 4)
        assert len(blends) == 4
        values = [hex_to_rgb(c)[0] for c in blends]
        assert values == sorted(values)

    def test_blend_zero_count_is_empty(self) -> None:
        assert blend_colors("#000000", "#FFFFFF", 0) == []


class TestContrast:
    """Tests for text contrast hints."""

    def test_light_background_wants_dark_text(self) -> None:
        assert get_contrast_text_color("#FFFFFF") == "dark"
        assert get_contrast_text_color("#E9C46A") == "dark"

    def test_dark_background_wants_light_text(self) -> None:
        assert get_contrast_text_color("#000000") == "light"
        assert get_contrast_text_color("#264653") == "light"

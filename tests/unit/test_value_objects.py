"""Unit tests for domain value objects and the design catalogue.

These tests verify:
- Dimensions validation, block totals and size string parsing
- CustomColor name normalization and serialization
- ItemDesign wrap-around navigation
- Physical dimension details
"""

import pytest

from everwood.domain import STANDARD_SIZES, CustomColor, Dimensions, ItemDesign
from everwood.domain.services import get_dimensions_details


class TestDimensions:
    """Tests for Dimensions value object."""

    def test_total_blocks(self) -> None:
        assert Dimensions(width=16, height=10).total_blocks == 160

    @pytest.mark.parametrize("width,height", [(0, 10), (16, 0), (-1, 10), (16, -4)])
    def test_non_positive_rejected(self, width: int, height: int) -> None:
        with pytest.raises(ValueError, match="positive"):
            Dimensions(width=width, height=height)

    @pytest.mark.parametrize("width", [1.5, "16", True, None])
    def test_non_integer_rejected(self, width: object) -> None:
        with pytest.raises(ValueError, match="whole block"):
            Dimensions(width=width, height=10)  # type: ignore[arg-type]

    def test_is_immutable(self) -> None:
        dims = Dimensions(width=16, height=10)
        with pytest.raises(AttributeError):
            dims.width = 20  # type: ignore[misc]

    def test_from_size_string(self) -> None:
        assert Dimensions.from_size_string("14 x 7") == Dimensions(width=14, height=7)
        assert Dimensions.from_size_string("36X16") == Dimensions(width=36, height=16)

    def test_from_invalid_size_string(self) -> None:
        with pytest.raises(ValueError, match="Invalid size string"):
            Dimensions.from_size_string("fourteen by seven")

    def test_all_standard_sizes_parse(self) -> None:
        for size in STANDARD_SIZES:
            assert Dimensions.from_size_string(size).total_blocks > 0

    def test_to_dict(self) -> None:
        assert Dimensions(width=20, height=12).to_dict() == {"width": 20, "height": 12}


class TestCustomColor:
    """Tests for CustomColor value object."""

    def test_name_optional(self) -> None:
        assert CustomColor(hex="#2A9D8F").name is None

    def test_empty_name_becomes_none(self) -> None:
        assert CustomColor(hex="#2A9D8F", name="").name is None

    def test_to_dict_omits_missing_name(self) -> None:
        assert CustomColor(hex="#2A9D8F").to_dict() == {"hex": "#2A9D8F"}
        assert CustomColor(hex="#2A9D8F", name="Teal").to_dict() == {
            "hex": "#2A9D8F",
            "name": "Teal",
        }


class TestItemDesign:
    """Tests for the design catalogue."""

    def test_custom_is_zero(self) -> None:
        assert int(ItemDesign.CUSTOM) == 0

    def test_catalogue_order(self) -> None:
        assert ItemDesign(4) is ItemDesign.TIMBERLINE
        assert ItemDesign(14) is ItemDesign.MIRAGE

    def test_next_wraps_to_first(self) -> None:
        assert ItemDesign.COASTAL.next() is ItemDesign.TIDAL
        assert ItemDesign.MIRAGE.next() is ItemDesign.CUSTOM

    def test_previous_wraps_to_last(self) -> None:
        assert ItemDesign.TIDAL.previous() is ItemDesign.COASTAL
        assert ItemDesign.CUSTOM.previous() is ItemDesign.MIRAGE

    def test_display_name(self) -> None:
        assert ItemDesign.OCEANIC_HARMONY.display_name == "Oceanic Harmony"


class TestDimensionsDetails:
    """Tests for get_dimensions_details."""

    def test_details_for_standard_size(self) -> None:
        details = get_dimensions_details(Dimensions(width=16, height=10))
        assert details is not None
        assert details.width_inches == 48
        assert details.height_inches == 30
        assert details.width_feet == pytest.approx(4.0)
        assert details.height_feet == pytest.approx(2.5)
        assert details.square_inches == 1440
        assert details.square_feet == pytest.approx(10.0)
        assert details.total_blocks == 160
        assert details.weight_kilograms == pytest.approx(1440 * 0.453592)

    def test_no_dimensions(self) -> None:
        assert get_dimensions_details(None) is None

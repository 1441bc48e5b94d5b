"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field

from everwood.domain import (
    ColorPattern,
    CustomColor,
    DesignConfiguration,
    Dimensions,
    ItemDesign,
    Orientation,
    PatternStyle,
    ShippingSpeed,
    StyleType,
)


class DimensionsSchema(BaseModel):
    """Panel dimensions in blocks (3 inches per block)."""

    width: int = Field(..., gt=0, description="Width in blocks")
    height: int = Field(..., gt=0, description="Height in blocks")

    def to_domain(self) -> Dimensions:
        return Dimensions(width=self.width, height=self.height)


class CustomColorSchema(BaseModel):
    """One custom palette entry."""

    hex: str = Field(..., description="Hex color, e.g. '#2A9D8F'")
    name: str | None = Field(default=None, description="Optional display name")


class DesignConfigurationSchema(BaseModel):
    """Complete design configuration - mirrors domain DesignConfiguration."""

    dimensions: DimensionsSchema | None = Field(
        default=None, description="Panel size; omit when no size is chosen"
    )
    selected_design: ItemDesign = Field(
        default=ItemDesign.COASTAL, description="Design catalogue index (0 = custom)"
    )
    shipping_speed: ShippingSpeed = ShippingSpeed.STANDARD
    color_pattern: ColorPattern = ColorPattern.FADE
    orientation: Orientation = Orientation.HORIZONTAL
    custom_palette: list[CustomColorSchema] = Field(default_factory=list)
    is_reversed: bool = False
    is_rotated: bool = False
    pattern_style: PatternStyle = PatternStyle.TILED
    style: StyleType = StyleType.GEOMETRIC
    use_mini: bool = False

    def to_domain(self) -> DesignConfiguration:
        return DesignConfiguration(
            dimensions=self.dimensions.to_domain() if self.dimensions else None,
            selected_design=self.selected_design,
            shipping_speed=self.shipping_speed,
            color_pattern=self.color_pattern,
            orientation=self.orientation,
            custom_palette=[CustomColor(hex=c.hex, name=c.name) for c in self.custom_palette],
            is_reversed=self.is_reversed,
            is_rotated=self.is_rotated,
            pattern_style=self.pattern_style,
            style=self.style,
            use_mini=self.use_mini,
        )

    @classmethod
    def from_domain(cls, config: DesignConfiguration) -> "DesignConfigurationSchema":
        return cls(
            dimensions=(
                DimensionsSchema(width=config.dimensions.width, height=config.dimensions.height)
                if config.dimensions
                else None
            ),
            selected_design=config.selected_design,
            shipping_speed=config.shipping_speed,
            color_pattern=config.color_pattern,
            orientation=config.orientation,
            custom_palette=[
                CustomColorSchema(hex=c.hex, name=c.name) for c in config.custom_palette
            ],
            is_reversed=config.is_reversed,
            is_rotated=config.is_rotated,
            pattern_style=config.pattern_style,
            style=config.style,
            use_mini=config.use_mini,
        )

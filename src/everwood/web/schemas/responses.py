"""Response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from everwood.domain import PriceBreakdown
from everwood.web.schemas.common import DesignConfigurationSchema


class ShippingBreakdownSchema(BaseModel):
    base: float
    additional_height: float
    expedited: float
    total: float


class PriceBreakdownSchema(BaseModel):
    """Price of one configuration."""

    base_price: float
    shipping: ShippingBreakdownSchema
    tax: float
    total: float
    custom_fee: float
    total_blocks: int = Field(..., description="Blocks the price was computed for")

    @classmethod
    def from_domain(cls, breakdown: PriceBreakdown) -> "PriceBreakdownSchema":
        return cls(
            base_price=breakdown.base_price,
            shipping=ShippingBreakdownSchema(
                base=breakdown.shipping.base,
                additional_height=breakdown.shipping.additional_height,
                expedited=breakdown.shipping.expedited,
                total=breakdown.shipping.total,
            ),
            tax=breakdown.tax,
            total=breakdown.total,
            custom_fee=breakdown.custom_fee,
            total_blocks=breakdown.debug.total_blocks,
        )


class PaletteSchema(BaseModel):
    """Generated palette."""

    harmony: str
    base_color: str
    colors: list[str]


class MixResultSchema(BaseModel):
    color: str


class ShareLinksSchema(BaseModel):
    """Both share link formats for one design."""

    url: str = Field(..., description="Verbose link (?share=)")
    short_url: str = Field(..., description="Short link (?s=)")


class DecodedShareSchema(BaseModel):
    """Design reconstructed from a share link, with its price."""

    configuration: DesignConfigurationSchema
    pricing: PriceBreakdownSchema


class ErrorResponseSchema(BaseModel):
    """Error payload returned by exception handlers."""

    error: str
    error_type: str
    details: Any = None

"""Request schemas for the REST API."""

from pydantic import BaseModel, Field

from everwood.domain import ShippingSpeed
from everwood.web.schemas.common import DesignConfigurationSchema, DimensionsSchema


class PriceRequest(BaseModel):
    """Request to price a panel."""

    dimensions: DimensionsSchema | None = Field(
        default=None, description="Panel size; omit to get an all-zero breakdown"
    )
    shipping_speed: ShippingSpeed = Field(
        default=ShippingSpeed.STANDARD, description="Shipping tier"
    )


class MixRequest(BaseModel):
    """Colors to mix."""

    colors: list[str] = Field(default_factory=list, description="Hex colors to average")


class ShareRequest(BaseModel):
    """Design to turn into share links."""

    configuration: DesignConfigurationSchema


class ShareDecodeRequest(BaseModel):
    """Share link, query string or bare token to decode."""

    link: str = Field(..., min_length=1, description="Share link or token")
    short: bool = Field(
        default=False, description="Treat a bare token as the short format"
    )

"""Pydantic schemas for the REST API."""

from everwood.web.schemas.common import (
    CustomColorSchema,
    DesignConfigurationSchema,
    DimensionsSchema,
)
from everwood.web.schemas.requests import (
    MixRequest,
    PriceRequest,
    ShareDecodeRequest,
    ShareRequest,
)
from everwood.web.schemas.responses import (
    DecodedShareSchema,
    ErrorResponseSchema,
    MixResultSchema,
    PaletteSchema,
    PriceBreakdownSchema,
    ShareLinksSchema,
    ShippingBreakdownSchema,
)

__all__ = [
    # Common
    "CustomColorSchema",
    "DesignConfigurationSchema",
    "DimensionsSchema",
    # Requests
    "MixRequest",
    "PriceRequest",
    "ShareDecodeRequest",
    "ShareRequest",
    # Responses
    "DecodedShareSchema",
    "ErrorResponseSchema",
    "MixResultSchema",
    "PaletteSchema",
    "PriceBreakdownSchema",
    "ShareLinksSchema",
    "ShippingBreakdownSchema",
]

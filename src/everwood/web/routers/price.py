"""Pricing endpoint."""

from fastapi import APIRouter

from everwood.domain import calculate_price
from everwood.web.schemas.requests import PriceRequest
from everwood.web.schemas.responses import PriceBreakdownSchema

router = APIRouter(prefix="/price", tags=["price"])


@router.post("", response_model=PriceBreakdownSchema)
async def price_panel(request: PriceRequest) -> PriceBreakdownSchema:
    """Price a panel from its block dimensions and shipping speed.

    Omitting dimensions returns an all-zero breakdown.
    """
    dimensions = request.dimensions.to_domain() if request.dimensions else None
    breakdown = calculate_price(dimensions, request.shipping_speed)
    return PriceBreakdownSchema.from_domain(breakdown)

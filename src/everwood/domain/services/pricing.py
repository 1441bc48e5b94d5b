"""Panel pricing service.

Prices come from a fixed table of (blocks, price) points, linearly
interpolated between points and clamped at the top of the table. Shipping
adds a height surcharge and a per-tier fee; tax applies to both.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any

from ..value_objects import Dimensions, ShippingSpeed

__all__ = [
    "HEIGHT_SURCHARGE_THRESHOLD",
    "PRICE_TABLE",
    "PriceBreakdown",
    "PriceDebug",
    "ShippingBreakdown",
    "TAX_RATE",
    "calculate_price",
    "interpolate_price",
]

logger = logging.getLogger(__name__)

# (total blocks, price) sorted by block count
PRICE_TABLE: tuple[tuple[int, float], ...] = (
    (67, 385.0),
    (98, 485.0),
    (160, 720.0),
    (200, 850.0),
    (240, 950.0),
    (288, 1125.0),
    (336, 1225.0),
    (448, 1625.0),
    (512, 1825.0),
    (576, 2025.0),
)

TAX_RATE = 0.10

# Compared against the height in blocks.
HEIGHT_SURCHARGE_THRESHOLD = 65
HEIGHT_SURCHARGE_STEP = 16
HEIGHT_SURCHARGE_AMOUNT = 100.0

SHIPPING_SPEED_SURCHARGE: dict[ShippingSpeed, float] = {
    ShippingSpeed.STANDARD: 0.0,
    ShippingSpeed.EXPEDITED: 75.0,
    ShippingSpeed.RUSHED: 150.0,
}


@dataclass(frozen=True)
class ShippingBreakdown:
    base: float = 0.0
    additional_height: float = 0.0
    expedited: float = 0.0
    total: float = 0.0


@dataclass(frozen=True)
class PriceDebug:
    """Inputs the price was computed from."""

    width: int = 0
    height: int = 0
    total_blocks: int = 0


@dataclass(frozen=True)
class PriceBreakdown:
    """Full price of one configuration.

    ``total == base_price + shipping.total + tax``. ``custom_fee`` is
    reserved and always zero.
    """

    base_price: float = 0.0
    shipping: ShippingBreakdown = field(default_factory=ShippingBreakdown)
    tax: float = 0.0
    total: float = 0.0
    custom_fee: float = 0.0
    debug: PriceDebug = field(default_factory=PriceDebug)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the storefront's camelCase field names."""
        return {
            "basePrice": self.base_price,
            "shipping": {
                "base": self.shipping.base,
                "additionalHeight": self.shipping.additional_height,
                "expedited": self.shipping.expedited,
                "total": self.shipping.total,
            },
            "tax": self.tax,
            "total": self.total,
            "customFee": self.custom_fee,
            "debug": {
                "dimensions": {"width": self.debug.width, "height": self.debug.height},
                "blocks": {
                    "width": self.debug.width,
                    "height": self.debug.height,
                    "total": self.debug.total_blocks,
                },
            },
        }


def interpolate_price(squares: int) -> float:
    """Base price for a panel of ``squares`` blocks.

    Counts between table points are interpolated linearly. Counts below the
    first point extrapolate along the first segment; counts beyond the last
    point clamp to the last price.
    """
    for points, price in PRICE_TABLE:
        if points == squares:
            return price

    for (lower_squares, lower_price), (upper_squares, upper_price) in zip(
        PRICE_TABLE, PRICE_TABLE[1:]
    ):
        if squares < upper_squares:
            proportion = (squares - lower_squares) / (upper_squares - lower_squares)
            return lower_price + proportion * (upper_price - lower_price)

    return PRICE_TABLE[-1][1] if PRICE_TABLE else 0.0


def _height_surcharge(height: int) -> float:
    if height <= HEIGHT_SURCHARGE_THRESHOLD:
        return 0.0
    extra = height - HEIGHT_SURCHARGE_THRESHOLD
    return math.ceil(extra / HEIGHT_SURCHARGE_STEP) * HEIGHT_SURCHARGE_AMOUNT


def calculate_price(
    dimensions: Dimensions | None,
    shipping_speed: ShippingSpeed | str = ShippingSpeed.STANDARD,
) -> PriceBreakdown:
    """Price a panel of the given size shipped at the given speed.

    Absent dimensions (no size chosen yet) price as an all-zero breakdown.
    """
    if dimensions is None:
        return PriceBreakdown()

    speed = ShippingSpeed(shipping_speed)
    total_blocks = dimensions.total_blocks
    base_price = interpolate_price(total_blocks)

    base_shipping = 0.0
    additional_height = _height_surcharge(dimensions.height)
    speed_charge = SHIPPING_SPEED_SURCHARGE[speed]
    total_shipping = base_shipping + additional_height + speed_charge

    tax = (base_price + total_shipping) * TAX_RATE
    total = base_price + total_shipping + tax

    logger.debug(
        f"Priced {dimensions.width}x{dimensions.height} ({total_blocks} blocks, "
        f"{speed.value}): {total:.2f}"
    )

    return PriceBreakdown(
        base_price=base_price,
        shipping=ShippingBreakdown(
            base=base_shipping,
            additional_height=additional_height,
            expedited=speed_charge,
            total=total_shipping,
        ),
        tax=tax,
        total=total,
        custom_fee=0.0,
        debug=PriceDebug(
            width=dimensions.width,
            height=dimensions.height,
            total_blocks=total_blocks,
        ),
    )

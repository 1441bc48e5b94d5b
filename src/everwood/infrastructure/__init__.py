"""Infrastructure: share-link codec, text formatters and logging setup."""

from everwood.infrastructure.formatters import (
    DesignSummaryFormatter,
    PaletteFormatter,
    PriceBreakdownFormatter,
)
from everwood.infrastructure.share_codec import (
    ShareTokenError,
    extract_state_from_short_url,
    extract_state_from_url,
    generate_shareable_url,
    generate_short_shareable_url,
    parse_share_link,
)

__all__ = [
    "DesignSummaryFormatter",
    "PaletteFormatter",
    "PriceBreakdownFormatter",
    "ShareTokenError",
    "extract_state_from_short_url",
    "extract_state_from_url",
    "generate_shareable_url",
    "generate_short_shareable_url",
    "parse_share_link",
]

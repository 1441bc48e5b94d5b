"""Share link endpoints."""

from fastapi import APIRouter

from everwood.application import DesignConfigurationStore
from everwood.domain import DesignConfiguration
from everwood.infrastructure import extract_state_from_short_url, parse_share_link
from everwood.web.dependencies import ShareConfigDep
from everwood.web.schemas.common import DesignConfigurationSchema
from everwood.web.schemas.requests import ShareDecodeRequest, ShareRequest
from everwood.web.schemas.responses import (
    DecodedShareSchema,
    PriceBreakdownSchema,
    ShareLinksSchema,
)

router = APIRouter(prefix="/share", tags=["share"])


@router.post("", response_model=ShareLinksSchema)
async def create_share_links(
    request: ShareRequest,
    share_config: ShareConfigDep,
) -> ShareLinksSchema:
    """Generate verbose and short share links for a design."""
    store = DesignConfigurationStore(request.configuration.to_domain(), share_config)
    return ShareLinksSchema(
        url=store.generate_shareable_link(),
        short_url=store.generate_short_shareable_link(),
    )


@router.post("/decode", response_model=DecodedShareSchema)
async def decode_share_link(request: ShareDecodeRequest) -> DecodedShareSchema:
    """Decode a share link into a complete design and its price.

    Raises:
        ShareTokenError: Corrupt token (handled by exception handler, 400).
        IncompleteConfigurationError: Missing fields (handled by exception handler, 422).
    """
    link = request.link.strip()
    if request.short and "=" not in link:
        state = extract_state_from_short_url(link)
    else:
        state = parse_share_link(link)
    configuration = DesignConfiguration.from_share_state(state)
    store = DesignConfigurationStore(configuration)
    return DecodedShareSchema(
        configuration=DesignConfigurationSchema.from_domain(configuration),
        pricing=PriceBreakdownSchema.from_domain(store.pricing),
    )

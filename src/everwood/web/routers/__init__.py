"""API routers for the REST API."""

from everwood.web.routers.palette import router as palette_router
from everwood.web.routers.price import router as price_router
from everwood.web.routers.share import router as share_router

__all__ = [
    "palette_router",
    "price_router",
    "share_router",
]

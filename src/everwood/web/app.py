"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from everwood import __version__
from everwood.web.exceptions import register_exception_handlers
from everwood.web.routers import palette_router, price_router, share_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Everwood Panel API",
        description="Pricing, color harmony and share links for custom wooden art panels",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # The storefront front end calls this API from the browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(price_router, prefix="/api/v1")
    app.include_router(palette_router, prefix="/api/v1")
    app.include_router(share_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()

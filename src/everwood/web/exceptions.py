"""Exception handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from everwood.application import ConfigError
from everwood.domain import IncompleteConfigurationError, InvalidColorError
from everwood.infrastructure import ShareTokenError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ShareTokenError)
    async def share_token_error_handler(
        request: Request, exc: ShareTokenError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "share_token",
                "details": {"stage": exc.stage},
            },
        )

    @app.exception_handler(IncompleteConfigurationError)
    async def incomplete_configuration_handler(
        request: Request, exc: IncompleteConfigurationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Shared design is incomplete",
                "error_type": "incomplete_configuration",
                "details": [{"field": f} for f in exc.fields],
            },
        )

    @app.exception_handler(InvalidColorError)
    async def invalid_color_handler(
        request: Request, exc: InvalidColorError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "invalid_color",
                "details": {"value": str(exc.value)},
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={
                "error": exc.message,
                "error_type": "config",
                "details": {
                    "config_error_type": exc.error_type,
                    "path": str(exc.path) if exc.path else None,
                    "errors": exc.details,
                },
            },
        )

"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from truckpack.application.config import ConfigError
from truckpack.application.presets import PresetNotFoundError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(PresetNotFoundError)
    async def preset_not_found_handler(
        request: Request, exc: PresetNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Preset not found: {exc.name}",
                "error_type": "not_found",
                "details": None,
            },
        )

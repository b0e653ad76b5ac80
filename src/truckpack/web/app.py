"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from truckpack.web.exceptions import register_exception_handlers
from truckpack.web.routers import analyze_router, presets_router, zones_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Truckpack API",
        description="REST API for validating cargo placements and load metrics",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(analyze_router, prefix="/api/v1")
    app.include_router(zones_router, prefix="/api/v1")
    app.include_router(presets_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()

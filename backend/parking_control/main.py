"""Parking Control API - Main Application.

CRUD backend for parking spot records with uniqueness guarantees on
license plate, spot number and apartment/block.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.endpoints import metrics as metrics_endpoint
from .api.router import api_router
from .core.config import settings
from .core.constants import ApiEndpoints, Cors, HttpHeaders
from .core.error_handlers import register_exception_handlers
from .core.logging import get_logger, setup_logging
from .core.startup import create_lifespan
from .middleware import PrometheusMiddleware, RequestIDMiddleware

# Setup logging
setup_logging()
logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Parking spot registry: create, list, read, update and delete parking spots",
        lifespan=create_lifespan(),
        docs_url=ApiEndpoints.DOCS,
        redoc_url=ApiEndpoints.REDOC,
        openapi_url=ApiEndpoints.OPENAPI
    )

    register_exception_handlers(app)

    # Middleware added last runs first: CORS wraps request-id wraps metrics
    app.add_middleware(PrometheusMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=Cors.ALLOWED_METHODS,
        allow_headers=["*"],
        expose_headers=[HttpHeaders.REQUEST_ID, HttpHeaders.PROCESS_TIME],
        max_age=settings.CORS_MAX_AGE,
    )

    app.include_router(api_router, prefix=settings.API_PREFIX)
    app.include_router(metrics_endpoint.router, tags=["Metrics"])

    @app.get(ApiEndpoints.HEALTH, tags=["Health"])
    async def health_check():
        """Health check endpoint for readiness/liveness probes."""
        return {
            "status": "healthy",
            "application": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT
        }

    @app.get(ApiEndpoints.ROOT, tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "application": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": ApiEndpoints.DOCS,
            "health": ApiEndpoints.HEALTH,
            "api": settings.API_PREFIX + ApiEndpoints.PARKING_SPOT
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "parking_control.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )

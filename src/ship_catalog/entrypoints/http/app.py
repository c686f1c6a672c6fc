from fastapi import FastAPI

from ship_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from ship_catalog.entrypoints.http.routes.health import router as health_router
from ship_catalog.entrypoints.http.routes.ships import router as ships_router
from ship_catalog.infra.logging_config import configure_logging


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Ship Catalog API",
        description="""
        Catalog of space ships with filtering, sorting and pagination.

        ## Features
        - List and count ships with optional filters
        - Create, edit and delete ships
        - Ratings derived from speed, production year and usage

        ## Authentication
        No authentication required.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(ships_router, prefix="/rest")

    return app


app = build_app()

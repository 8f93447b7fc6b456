"""
Main FastAPI application for the Shoe Store backend
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database import init_database
from ..database.connection import dispose_database
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Shoe Store API...")
    init_database()

    from ..validation import (
        ValidationError,
        get_startup_recommendations,
        validate_startup_configuration,
    )

    try:
        validation_results = await validate_startup_configuration()

        if not validation_results["overall_valid"]:
            logger.error(
                "Application configuration validation failed - some features may not work",
                database_errors=validation_results["database"].get("errors", []),
            )

            if settings.environment.lower() in ("production", "prod"):
                raise ValidationError("Critical configuration validation failed in production")

        recommendations = get_startup_recommendations(validation_results)
        if recommendations:
            logger.info("Configuration recommendations", recommendations=recommendations)

    except ValidationError:
        raise
    except Exception as e:
        logger.error(
            "Unexpected error during startup validation",
            error=str(e),
            note="Application will continue but may have configuration issues",
        )

    yield

    logger.info("Shutting down Shoe Store API...")
    await dispose_database()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Shoe Store API",
        description="GraphQL API for a small shoe inventory",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # GraphQL endpoint (allow disabling for tests)
    if not os.getenv("SHOESTORE_DISABLE_GRAPHQL"):
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "shoestore.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )

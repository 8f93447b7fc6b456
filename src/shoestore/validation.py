"""
Configuration validation for the Shoe Store application.

This module provides validation functions to ensure the application
is properly configured before startup.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import inspect

from .config import get_database_url, settings
from .database.connection import get_async_engine, test_database_connection
from .dbmodels import Shoes
from .logging import get_logger

logger = get_logger(__name__)


class ValidationError(Exception):
    """Raised when application validation fails."""

    pass


async def validate_database_connection() -> dict[str, Any]:
    """
    Validate that the database is accessible and the schema is migrated.

    Returns a dictionary with validation results and connection details.
    """
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
        "connection_info": None,
    }

    success, error_message = await test_database_connection()

    if not success:
        results["valid"] = False
        results["errors"].append(error_message)
        logger.error("Database connection validation failed", error=error_message)
        return results

    results["connection_info"] = {
        "status": "connected",
        "message": "Database connection successful",
    }
    logger.info("Database connection validation successful")

    async with get_async_engine().connect() as conn:
        has_table = await conn.run_sync(
            lambda sync_conn: inspect(sync_conn).has_table(Shoes.__tablename__)
        )

    if not has_table:
        results["warnings"].append(
            f"Table '{Shoes.__tablename__}' is missing; run `shoestore db upgrade`"
        )

    return results


async def validate_startup_configuration() -> dict[str, Any]:
    """
    Comprehensive startup validation.

    This function should be called during application startup to ensure
    all critical configuration is valid.
    """
    logger.info("Starting application configuration validation")

    db_results = await validate_database_connection()

    combined_results = {
        "overall_valid": db_results["valid"],
        "database": db_results,
        "environment": {
            "environment": settings.environment,
            "debug": settings.debug,
            "database_backend": get_database_url().split(":", 1)[0],
        },
    }

    if combined_results["overall_valid"]:
        logger.info("Application configuration validation completed successfully")
    else:
        logger.error(
            "Application configuration validation failed",
            errors=db_results.get("errors", []),
        )

    if db_results.get("warnings"):
        logger.warning("Configuration warnings detected", warnings=db_results["warnings"])

    return combined_results


def get_startup_recommendations(validation_results: dict[str, Any]) -> list[str]:
    """
    Generate startup recommendations based on validation results.
    """
    recommendations = []

    database = validation_results.get("database", {})
    if not database.get("valid", False):
        recommendations.append(
            "Database connection failed - check SHOESTORE_DATABASE_URL and that the server is up"
        )
        return recommendations

    if database.get("warnings"):
        recommendations.append("Apply pending migrations with `shoestore db upgrade`")

    environment = validation_results.get("environment", {})
    if environment.get("database_backend") == "sqlite" and settings.environment.lower() in (
        "production",
        "prod",
    ):
        recommendations.append("Consider PostgreSQL instead of SQLite for production deployments")

    if settings.debug and settings.environment.lower() in ("production", "prod"):
        recommendations.append("Disable SHOESTORE_DEBUG in production")

    return recommendations

"""
Shared GraphQL context: the persistence handle injected into every resolver
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

import strawberry
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.connection import get_async_session
from ..logging import get_logger

logger = get_logger(__name__)

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


async def get_context(request: Request) -> dict[str, Any]:
    """Get the context for GraphQL resolvers."""
    return {
        "request": request,
        "get_session": get_async_session,
    }


def get_session_from_info(info: strawberry.Info) -> SessionFactory:
    """
    Extract the session factory from the GraphQL info object.

    Falls back to the process-wide factory when the context does not carry one.
    """
    factory = info.context.get("get_session")
    if factory is None:
        logger.warning("Session factory not found in GraphQL context, using shared pool")
        return get_async_session
    return factory

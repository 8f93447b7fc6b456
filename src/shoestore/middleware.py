"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import bind_request_context, clear_request_context, get_logger

logger = get_logger(__name__)

SENSITIVE_KEYS = {
    "password",
    "token",
    "api_key",
    "secret",
    "auth",
    "authorization",
    "access_token",
    "key",
    "session",
    "cookie",
    "credentials",
}

_OPERATION_PATTERN = re.compile(r"\b(query|mutation)\s+(\w+)")


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Remove sensitive query parameters from logging.

    Args:
        params: Dictionary of query parameters

    Returns:
        Dictionary with sensitive parameters redacted
    """
    sanitized = {}
    for key, value in params.items():
        if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
            sanitized[key] = "[REDACTED]"
        else:
            sanitized[key] = value

    return sanitized


def operation_name_from_payload(payload: dict[str, Any]) -> str | None:
    """Derive a loggable operation name from a GraphQL payload.

    Prefers an explicit operationName, then the name in the document.
    Mutations are prefixed with ``mutation:``.
    """
    op = payload.get("operationName")
    if isinstance(op, str) and op:
        return op

    q = payload.get("query", "")
    if not isinstance(q, str) or not q:
        return None
    if "__schema" in q or "IntrospectionQuery" in q:
        return "__introspection"

    match = _OPERATION_PATTERN.search(q)
    if match:
        kind = "mutation:" if match.group(1) == "mutation" else ""
        return f"{kind}{match.group(2)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != "/graphql":
        return None

    if request.method == "GET":
        return operation_name_from_payload(dict(request.query_params))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
            if not isinstance(data, dict):
                return None
            return operation_name_from_payload(data)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Bind a request id and GraphQL operation name to every log event.

    The request id is echoed back in the X-Request-ID response header.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        graphql_operation = await extract_graphql_operation_name(request)
        request_id = bind_request_context(operation=graphql_operation)

        try:
            sanitized_params = None
            if request.query_params:
                sanitized_params = sanitize_query_params(dict(request.query_params))
                # Never log raw GraphQL documents passed in the query string
                if request.url.path == "/graphql":
                    for k in ("query", "variables", "extensions"):
                        if k in sanitized_params:
                            sanitized_params[k] = "[REDACTED]"

            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=sanitized_params,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
            )

            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()

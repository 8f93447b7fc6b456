"""
structlog setup and per-request log context
"""

import logging
import secrets
import sys
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars


def _renderer(debug: bool) -> Any:
    if debug:
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.processors.JSONRenderer()


def configure_logging(debug: bool = False) -> None:
    """Route structlog events through the stdlib root logger on stdout.

    Debug mode renders coloured console lines and lowers the level to DEBUG;
    otherwise each event is written as one JSON object. Values bound with
    `bind_request_context` are merged into every event.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            _renderer(debug),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def new_request_id() -> str:
    """Short url-safe id used to correlate the log lines of one request."""
    return secrets.token_urlsafe(9)


def bind_request_context(operation: str | None = None) -> str:
    """Start a fresh log context for the current request.

    Returns the generated request id. The GraphQL operation name is only
    bound when the request carried one.
    """
    request_id = new_request_id()
    clear_contextvars()
    if operation:
        bind_contextvars(request_id=request_id, operation=operation)
    else:
        bind_contextvars(request_id=request_id)
    return request_id


def clear_request_context() -> None:
    clear_contextvars()

"""
Structured logging for the Bookshelf API.

Every event carries the request id and, for ``/graphql`` requests, the
GraphQL operation name, so resolver misses can be traced back to the query
that caused them.
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any, TextIO

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
graphql_operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)


def add_request_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor injecting the request id and GraphQL operation."""
    _ = logger, method_name

    request_id = request_id_ctx.get()
    if request_id:
        event_dict["request_id"] = request_id

    operation = graphql_operation_ctx.get()
    if operation:
        event_dict.setdefault("graphql_operation", operation)

    return event_dict


def resolve_log_level(debug: bool, log_level: str | None) -> int:
    """Map the debug flag and a level name such as ``"warning"`` to a stdlib level."""
    if debug:
        return logging.DEBUG
    level = logging.getLevelName((log_level or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    debug: bool = False,
    log_level: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        debug: Console output at DEBUG when True, JSON lines otherwise.
        log_level: Level name used when ``debug`` is False (default INFO).
        stream: Where log lines go (default stdout). CLI commands whose stdout
            is machine-readable pass ``sys.stderr``.
    """
    logging.basicConfig(
        level=resolve_log_level(debug, log_level),
        stream=stream if stream is not None else sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_request_context,
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Return a 14-character URL-safe id: microsecond timestamp plus two random bytes."""
    timestamp_us = int(time.time() * 1_000_000)
    raw = timestamp_us.to_bytes(8, byteorder="big") + secrets.token_bytes(2)
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def set_request_context(
    request_id: str | None = None, graphql_operation: str | None = None
) -> str:
    """Bind the request id (generated when missing) and operation name; return the id."""
    if request_id is None:
        request_id = generate_request_id()

    request_id_ctx.set(request_id)
    graphql_operation_ctx.set(graphql_operation)
    return request_id


def set_graphql_operation(graphql_operation: str | None) -> None:
    graphql_operation_ctx.set(graphql_operation)


def clear_request_context() -> None:
    request_id_ctx.set(None)
    graphql_operation_ctx.set(None)


def get_request_id() -> str | None:
    return request_id_ctx.get()

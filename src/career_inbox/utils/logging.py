"""Structured logging configuration using structlog."""

import logging
from typing import Any, Dict

import structlog
from rich.console import Console
from rich.logging import RichHandler

from career_inbox.config import settings


def configure_logging() -> None:
    """Configure structured logging with rich output."""
    
    # Configure standard library logging; stdout is reserved for command output
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, settings.log_level.upper()),
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, markup=False)],
    )
    
    # Configure structlog
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.dev.ConsoleRenderer() if settings.debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level.upper())
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def log_email_context(email: Any) -> Dict[str, Any]:
    """Create a log context for an inbound email without logging its body."""
    return {
        "message_id": getattr(email, "message_id", None),
        "sender": getattr(email, "sender", ""),
        "subject_length": len(getattr(email, "subject", "") or ""),
        "body_length": len(getattr(email, "body", "") or ""),
    }

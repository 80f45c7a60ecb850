"""
Structured logging via structlog.

The library only asks for loggers; it never configures handlers on import.
Applications (and the dymo-check CLI) call setup_logging() once.

    from .logging import get_logger
    logger = get_logger(__name__)
    logger.info("tokens_validated", root=True, private=True)
"""

from __future__ import annotations

import logging
from typing import Optional

import structlog


def setup_logging(level: str = "info", fmt: str = "console") -> None:
    """Configure structlog + stdlib logging for JSON or console output."""
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if fmt.lower() == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # requests/urllib3 are chatty at debug level
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None):
    """Return a bound structlog logger backed by a stdlib logger.

    Until setup_logging() runs, output goes through stdlib logging's
    defaults, so an embedding application sees nothing below WARNING.
    """
    return structlog.wrap_logger(logging.getLogger(name or "dymoapi"))

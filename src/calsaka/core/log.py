from __future__ import annotations

import logging
import sys

import structlog
from structlog.stdlib import BoundLogger


def _processors() -> list:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer(colors=False),
    ]


def configure_logging(level: str = "WARNING") -> None:
    """Configure log output on stderr for the CLI."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
    )
    logging.getLogger("calsaka").setLevel(getattr(logging, level.upper()))


def get_logger(name: str) -> BoundLogger:
    """
    Get a logger bound to ``name``.

    The logger wraps the stdlib logger of the same name with its own processor
    chain; the global structlog configuration is left to the host application.
    """
    bound_logger: BoundLogger = structlog.wrap_logger(
        logging.getLogger(name),
        processors=_processors(),
        wrapper_class=BoundLogger,
        context_class=dict,
    )
    return bound_logger

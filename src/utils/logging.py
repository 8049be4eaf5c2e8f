"""structlog configuration shared by every module.

Usage::

    from src.utils.logging import get_logger

    logger = get_logger(__name__)
    logger.info("topic_start", topic="AboutHashes", koans=7)
"""

from __future__ import annotations

import logging
import sys

import structlog


def setup_logging(debug: bool = False, json_logs: bool = False) -> None:
    """Route structlog events through the stdlib ``logging`` module to stderr.

    The default level is WARNING so that log lines never interleave with the
    learner-facing report on stdout; ``debug`` lowers it to DEBUG.
    """
    level = logging.DEBUG if debug else logging.WARNING

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    logging.getLogger().setLevel(level)

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_logs:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Return a structlog logger bound to *name*."""
    return structlog.get_logger(name)

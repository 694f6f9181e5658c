"""
Logging configuration.

Structured logging via ``structlog`` on top of the standard library
``logging`` module.  The engine itself never logs; services do.

``LOG_LEVEL`` and ``LOG_FORMAT`` from :mod:`trizones.core.config` drive
:func:`setup_logging`, which :func:`get_logger` applies on first use
unless the host application has already configured ``structlog``.
"""

import logging
import sys

import structlog

from trizones.core.config import Settings, settings


def configure_logging(log_level: str = "INFO", log_format: str = "json", stream=None) -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_format: ``'json'`` or ``'console'``.
        stream: Output stream (defaults to stdout).
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=level,
    )
    # basicConfig is a no-op when the root logger already has handlers
    logging.getLogger().setLevel(level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging(config: Settings = settings, stream=None) -> structlog.stdlib.BoundLogger:
    """
    Configure logging from *config* (the global settings by default).

    Returns:
        The package logger
    """
    configure_logging(log_level=config.LOG_LEVEL, log_format=config.LOG_FORMAT, stream=stream)
    return structlog.get_logger("trizones")


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger (usually called with ``__name__``)."""
    if not structlog.is_configured():
        setup_logging()
    return structlog.get_logger(name)

"""Structlog configuration for the service."""

import logging

import structlog
from structlog.typing import Processor


def configure_logging(log_level: str = "INFO", log_format: str = "console") -> None:
    """Configure structlog once at process start.
    
    Args:
        log_level: Minimum level name to emit (e.g. "INFO", "DEBUG").
        log_format: "json" for one JSON object per line, anything else for
            human-readable console output.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if log_format.lower() == "json":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(),
        ]
    
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )

"""
Structured logging for the fake server, built from Settings.

structlog renders through the standard ``logging`` module so uvicorn's
own records and ours share one set of handlers. Request-scoped fields
(request id, method, path) come from ``structlog.contextvars``, bound by
the request logging middleware.
"""
import logging
import sys
from typing import List

import structlog
from structlog.types import Processor

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _add_service(service: str) -> Processor:
    """Processor stamping every entry with the configured server name."""

    def add_service(logger, method_name, event_dict):
        event_dict.setdefault("service", service)
        return event_dict

    return add_service


def build_processors(settings) -> List[Processor]:
    """Processors shared by structlog loggers and foreign (uvicorn) records."""
    return [
        structlog.contextvars.merge_contextvars,
        _add_service(settings.server_name),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def build_handlers(settings, formatter: logging.Formatter) -> List[logging.Handler]:
    """stderr always; ``<log_dir>/<server_name>.log`` when a log directory is set."""
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers = [console_handler]

    if settings.log_dir is not None:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.log_dir / f"{settings.server_name}.log")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    return handlers


def configure_logging(settings) -> None:
    """
    Configure structlog and the root logger from settings.

    Args:
        settings: Settings providing log_level, log_json, log_dir and server_name
    """
    shared_processors = build_processors(settings)

    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

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
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    for handler in build_handlers(settings, formatter):
        root_logger.addHandler(handler)
    root_logger.setLevel(settings.log_level)

    # uvicorn runs with log_config=None; its records reach the root handlers
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
        uvicorn_logger.setLevel(settings.log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)

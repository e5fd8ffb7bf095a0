"""Structured Logging for tagvalidator

structlog-based logging with:
- Colored console output or JSON lines
- A validation id bound through contextvars for every line of one call
- Long field values shortened before they reach a log line

The library never configures logging on import; host applications call
configure_logging() (or wire structlog themselves). Level and format
default to the TAGVALIDATOR_LOG_LEVEL / TAGVALIDATOR_LOG_JSON settings.
"""
import logging
import sys
from contextlib import contextmanager
from typing import IO, Iterator
from uuid import uuid4

import structlog
from structlog.types import EventDict, Processor

MAX_LOGGED_VALUE = 120

logging.getLogger("tagvalidator").addHandler(logging.NullHandler())


def _add_library_info(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("library", "tagvalidator")
    return event_dict


def _shorten_values(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Cap long string entries; validated values can be arbitrarily large."""
    for key, value in event_dict.items():
        if key != "event" and isinstance(value, str) and len(value) > MAX_LOGGED_VALUE:
            event_dict[key] = f"{value[:MAX_LOGGED_VALUE]}... ({len(value)} chars)"
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors used by both renderers."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _shorten_values,
        _add_library_info,
    ]


def configure_logging(level: str | None = None, json_logs: bool | None = None, stream: IO | None = None) -> None:
    """Route tagvalidator's loggers through structlog.

    Args:
        level: Log level name, defaults to settings.LOG_LEVEL
        json_logs: JSON lines instead of console output, defaults to settings.LOG_JSON
        stream: Output stream, defaults to stdout
    """
    from tagvalidator.core.config import get_settings

    settings = get_settings()
    level = level or settings.LOG_LEVEL
    json_logs = settings.LOG_JSON if json_logs is None else json_logs

    shared_processors = get_shared_processors()
    renderer = (structlog.processors.JSONRenderer() if json_logs
                else structlog.dev.ConsoleRenderer(colors=stream is None and sys.stdout.isatty()))

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )
    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)

    library_logger = logging.getLogger("tagvalidator")
    library_logger.handlers = [handler]
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    library_logger.propagate = False


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """structlog logger over the stdlib logger of the same name.

    Output follows stdlib logging, so nothing is emitted until the host
    attaches a handler or calls configure_logging().
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


def generate_correlation_id() -> str:
    """Short id for one validation run."""
    return uuid4().hex[:8]


@contextmanager
def validation_scope(**kwargs) -> Iterator[str]:
    """Bind a validation id (plus kwargs) to every log line inside the block."""
    validation_id = generate_correlation_id()
    with structlog.contextvars.bound_contextvars(validation_id=validation_id, **kwargs):
        yield validation_id


class LoggerRegistry:
    """One named logger per library component."""

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, name: str) -> structlog.stdlib.BoundLogger:
        if name not in cls._loggers:
            cls._loggers[name] = get_logger(f"tagvalidator.{name}")
        return cls._loggers[name]


def engine_logger() -> structlog.stdlib.BoundLogger:
    """Walker and engine events."""
    return LoggerRegistry.get("engine")


def registry_logger() -> structlog.stdlib.BoundLogger:
    """Custom validator registration."""
    return LoggerRegistry.get("registry")


def parser_logger() -> structlog.stdlib.BoundLogger:
    """Rejected rule declarations."""
    return LoggerRegistry.get("parser")

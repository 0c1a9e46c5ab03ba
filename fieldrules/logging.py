"""Structured Logging for fieldrules

- Colored, human-readable dev output
- JSON structured output for log shippers
- Context propagation via contextvars
"""
import logging
import sys

import structlog
from structlog.types import EventDict, Processor


def _add_library_info(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that adds library metadata."""
    event_dict.setdefault("library", "fieldrules")
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors used in both console and JSON configurations."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_library_info,
    ]


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Configure the logging system.
    
    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON format. If False, colored console output.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    
    shared_processors = get_shared_processors()
    
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )
    
    # Formatter for stdlib logger (handles logs from third-party libs)
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
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
    
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)


def configure_from_settings() -> None:
    """Configure logging from the FIELDRULES_* settings."""
    from fieldrules.config import get_settings
    
    settings = get_settings()
    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.
    
    Args:
        name: Logger name (typically __name__ from the calling module)
    
    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """Bind key-value pairs to the current logging context.
    
    These will appear in all subsequent log messages within this context.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


class LoggerRegistry:
    """Registry of pre-configured loggers for library domains."""
    
    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}
    
    @classmethod
    def get(cls, name: str) -> structlog.stdlib.BoundLogger:
        """Get or create a logger for the given domain."""
        if name not in cls._loggers:
            cls._loggers[name] = get_logger(f"fieldrules.{name}")
        return cls._loggers[name]


def validation_logger() -> structlog.stdlib.BoundLogger:
    """Logger for validator evaluation events."""
    return LoggerRegistry.get("validation")


def config_logger() -> structlog.stdlib.BoundLogger:
    """Logger for validator construction/configuration events."""
    return LoggerRegistry.get("config")

"""
Centralized Logging Configuration.

notestore is a library, so importing it and using a repository prints
nothing. Records are routed through stdlib logging, where the "notestore"
logger carries a NullHandler and anything below the root level is dropped.
An application that wants the records calls setup_logging(), which installs
console and/or rotating JSONL file handlers from config/settings/logging.yaml.

Structured fields in every rendered record:
    timestamp   - ISO 8601 timestamp
    level       - Log level (debug, info, warning, error, critical)
    logger      - Module path (e.g., notestore.repositories.note)
    event       - Log message
    func_name   - Function that emitted the log
    lineno      - Line number in source file
    source      - Origin context, one of VALID_SOURCES
    app         - application.name (after setup_logging)
    environment - application.environment (after setup_logging)

Usage:
    from notestore.core.logging import get_logger, setup_logging

    # Opt in at application start (loads application.yaml and logging.yaml)
    setup_logging()

    # Override config values if needed
    setup_logging(level="DEBUG", format_type="console")

    # Get logger in modules
    logger = get_logger(__name__)
    logger.info("Message", extra={"key": "value"})
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from notestore.core.config import AppConfig, find_project_root, get_app_config
from notestore.core.config_schema import ApplicationSchema

LIBRARY_LOGGER_NAME = "notestore"

VALID_SOURCES = frozenset({
    "repository",
    "internal",
})
"""
Recognized log source values. Source is always set explicitly by the caller
and checked by log_with_source. Never guessed from logger names.
"""

logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(logging.NullHandler())


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]


def add_app_context(application: ApplicationSchema) -> Processor:
    """
    Build a processor that stamps the application identity on each record.

    Args:
        application: Validated application.yaml section

    Returns:
        structlog processor adding 'app' and 'environment' fields
    """

    def processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("app", application.name)
        event_dict.setdefault("environment", application.environment)
        return event_dict

    return processor


def _ensure_stdlib_routing() -> None:
    """
    Route structlog through stdlib logging if nobody has configured it.

    Left at its defaults structlog prints every event to stdout. Routing
    through stdlib instead hands the decision to the host application's
    handlers and levels.
    """
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[structlog.stdlib.filter_by_level]
        + _shared_processors()
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _resolve_log_path(configured_path: str) -> Path:
    """Resolve a log file path relative to project root."""
    return find_project_root() / configured_path


def setup_logging(
    config: AppConfig | None = None,
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    enable_file_logging: bool | None = None,
) -> None:
    """
    Configure structured logging for an application using notestore.

    Settings come from the validated AppConfig. Parameters passed to this
    function override it.

    Args:
        config: Application configuration. Defaults to get_app_config().
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Overrides config.
        format_type: Output format ('json' or 'console'). Overrides config.
        enable_console: Whether to enable console output. Overrides config.
        enable_file_logging: Whether to write to JSONL file. Overrides config.
    """
    config = config or get_app_config()
    logging_config = config.logging
    file_config = logging_config.handlers.file

    effective_level = level if level is not None else logging_config.level
    effective_format = format_type if format_type is not None else logging_config.format
    effective_console_enabled = (
        enable_console if enable_console is not None
        else logging_config.handlers.console.enabled
    )
    effective_file_enabled = (
        enable_file_logging if enable_file_logging is not None
        else file_config.enabled
    )

    log_level = getattr(logging, effective_level.upper())

    shared_processors = _shared_processors() + [add_app_context(config.application)]

    json_formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(),
        foreign_pre_chain=shared_processors,
    )

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if effective_format == "console":
        console_formatter = structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=True),
            foreign_pre_chain=shared_processors,
        )
    else:
        console_formatter = json_formatter

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if effective_console_enabled:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if effective_file_enabled:
        log_path = _resolve_log_path(file_config.path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=str(log_path),
            maxBytes=file_config.max_bytes,
            backupCount=file_config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(json_formatter)
        root_logger.addHandler(file_handler)

    log_with_source(
        get_logger(__name__),
        "internal",
        "debug",
        "Logging configured",
        level=effective_level,
        format=effective_format,
    )


def get_logger(name: str) -> Any:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name, typically __name__

    Returns:
        structlog logger bound to the stdlib logger of that name
    """
    _ensure_stdlib_routing()
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log a message with an explicit source.

    Args:
        logger: The logger instance
        source: Log source, one of VALID_SOURCES
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **kwargs: Additional context fields

    Raises:
        ValueError: If source is not in VALID_SOURCES
        AttributeError: If level is not a valid log level

    Example:
        log_with_source(logger, "repository", "info", "Note created", note_id=3)
    """
    if source not in VALID_SOURCES:
        raise ValueError(f"Unknown log source: {source!r}")
    log_method = getattr(logger, level.lower())
    log_method(message, source=source, **kwargs)

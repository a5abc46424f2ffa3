"""Logging configuration module for the SVG icon sprite compiler.

Module loggers are plain ``logging`` loggers; their records are rendered by
structlog, as JSON or console lines. Build context bound with
``structlog.contextvars`` (source group, directory, output area) is merged
into every record, so the lines of the two concurrently built catalogs can
be told apart.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

import structlog
from structlog.stdlib import ProcessorFormatter

from svg_icon_sprite.models.config import LoggingConfig
from svg_icon_sprite.utils.early_error_handler import handle_startup_error
from svg_icon_sprite.utils.path_utils import path_resolver

BYTES_PER_MEGABYTE = 1024 * 1024


def build_formatter(log_format: str) -> ProcessorFormatter:
    """Create the formatter shared by every handler.

    Args:
        log_format: ``json`` for JSON lines, anything else for console output.

    Returns:
        Formatter rendering stdlib records through structlog.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if log_format.lower() == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    return ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
    )


def _console_handler(formatter: logging.Formatter, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler


def setup_logging(config: LoggingConfig, name: str) -> logging.Logger:
    """Set up logging with the specified configuration.

    Module loggers created with ``logging.getLogger(__name__)`` below ``name``
    propagate to the handlers installed here.

    Args:
        config: Logging configuration.
        name: Logger name.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    # Clear existing handlers
    logger.handlers = []

    level = getattr(logging, config.level.upper(), logging.INFO)
    logger.setLevel(level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    formatter = build_formatter(config.format)

    if not config.file:
        logger.addHandler(_console_handler(formatter, level))
        return logger

    try:
        from svg_icon_sprite.utils import file_utils

        log_path = path_resolver.normalize_path(config.file)
        file_utils.ensure_dir_exists(log_path.parent)

        file_handler = RotatingFileHandler(
            config.file,
            maxBytes=config.max_size_mb * BYTES_PER_MEGABYTE,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        error_msg = f"Failed to set up file logging: {e}"
        handle_startup_error("LOGGING_FILE_ERROR", error_msg, {"log_file": str(config.file)})

        # Fall back to console logging if file logging fails
        logger.addHandler(_console_handler(formatter, level))
        logger.error(error_msg)
        return logger

    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)
    logger.addHandler(file_handler)
    return logger

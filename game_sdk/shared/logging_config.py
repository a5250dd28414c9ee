"""
Logging Configuration

Provides centralized logging configuration for applications using the SDK.
"""

import json
import logging
import logging.handlers
import os
import sys
from typing import List, Optional

from .config import SDKConfig
from .constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_MAX_SIZE,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LogLevel
)


SDK_LOGGER_NAME = "game_sdk"

# Marks handlers installed by setup_logging so a reconfiguration only
# replaces its own handlers
_SDK_HANDLER_ATTR = "_game_sdk_handler"


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds colors to log levels."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with a colored level name."""
        original = record.levelname
        level_color = self.COLORS.get(original, self.COLORS['RESET'])
        record.levelname = f"{level_color}{original}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            # Other handlers share the record
            record.levelname = original


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    RESERVED_ATTRS = frozenset((
        'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
        'filename', 'module', 'lineno', 'funcName', 'created',
        'msecs', 'relativeCreated', 'thread', 'threadName',
        'processName', 'process', 'exc_info', 'exc_text',
        'stack_info', 'taskName', 'message', 'asctime'
    ))

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_entry = {
            'timestamp': self.formatTime(record, self.datefmt or LOG_DATE_FORMAT),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_entry['stack_info'] = record.stack_info

        # Add extra fields
        for key, value in record.__dict__.items():
            if key not in self.RESERVED_ATTRS and not key.startswith('_'):
                log_entry[key] = value

        return json.dumps(log_entry, default=str, ensure_ascii=False)


def _resolve_level(level: str) -> int:
    try:
        return getattr(logging, LogLevel(level.upper()).value)
    except ValueError:
        return logging.INFO


def _build_formatter(json_format: bool, colored: bool) -> logging.Formatter:
    if json_format:
        return JsonFormatter()
    if colored:
        return ColoredFormatter(LOG_FORMAT, LOG_DATE_FORMAT)
    return logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)


def _build_handlers(
    numeric_level: int,
    log_file: Optional[str],
    enable_colors: bool,
    json_format: bool,
    max_file_size: int,
    backup_count: int
) -> List[logging.Handler]:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        _build_formatter(json_format, enable_colors and sys.stdout.isatty())
    )
    handlers: List[logging.Handler] = [console_handler]

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_file_size,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(_build_formatter(json_format, False))
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(numeric_level)
        setattr(handler, _SDK_HANDLER_ATTR, True)
    return handlers


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    enable_colors: bool = True,
    json_format: bool = False,
    max_file_size: int = DEFAULT_LOG_MAX_SIZE,
    backup_count: int = DEFAULT_LOG_BACKUP_COUNT,
    logger_name: Optional[str] = SDK_LOGGER_NAME
) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to a logger.

    By default only the ``game_sdk`` logger is touched: its records stop
    propagating to the root logger, and handlers the host application put
    anywhere are left alone. Pass ``logger_name=None`` from a process
    entry point to configure the root logger instead.

    Calling this again replaces the handlers a previous call installed,
    never foreign ones.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to INFO.
        log_file: Path to log file. If None, logs only to console.
        enable_colors: Whether to color level names on a TTY console.
        json_format: Whether to use JSON format for structured logging.
        max_file_size: Maximum size of log file before rotation.
        backup_count: Number of backup files to keep.
        logger_name: Logger to configure; None means the root logger.

    Returns:
        The configured logger.
    """
    numeric_level = _resolve_level(level)
    logger = logging.getLogger(logger_name)
    logger.setLevel(numeric_level)

    for handler in logger.handlers[:]:
        if getattr(handler, _SDK_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            handler.close()

    for handler in _build_handlers(
        numeric_level, log_file, enable_colors, json_format, max_file_size, backup_count
    ):
        logger.addHandler(handler)

    if logger_name:
        logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__). Defaults to the package logger.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name or SDK_LOGGER_NAME)


def configure_from_config(config: SDKConfig) -> logging.Logger:
    """
    Configure the ``game_sdk`` logger from an SDKConfig.

    Args:
        config: Validated SDK configuration.

    Returns:
        The ``game_sdk`` logger.
    """
    return setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        enable_colors=config.log_colors,
        json_format=config.log_json,
        max_file_size=config.log_max_size,
        backup_count=config.log_backup_count
    )


def configure_from_env() -> logging.Logger:
    """
    Configure the ``game_sdk`` logger from environment variables.

    Environment variables:
        GAME_SDK_LOG_LEVEL: Logging level (default: INFO)
        GAME_SDK_LOG_FILE: Log file path (optional)
        GAME_SDK_LOG_COLORS: Enable colors (default: true)
        GAME_SDK_LOG_JSON: Use JSON format (default: false)
        GAME_SDK_LOG_MAX_SIZE: Max file size in bytes (default: 10MB)
        GAME_SDK_LOG_BACKUP_COUNT: Number of backup files (default: 5)

    Returns:
        The ``game_sdk`` logger.
    """
    return configure_from_config(SDKConfig.from_env())

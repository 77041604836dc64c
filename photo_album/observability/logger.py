"""
Structured JSON logging for photo-album

This module provides consistent structured logging across the application
using python-json-logger. Logs go to stderr so that rendered names on
stdout stay clean.
"""
import logging
import os
import sys
import time

from pythonjsonlogger import jsonlogger

DEFAULT_LOGGER_NAME = "photo-album"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

JSON_FORMAT = "%(timestamp)s %(level)s %(logger)s %(message)s"
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter stamping timestamp, level and logger name on every record"""

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)
        if not log_record.get("timestamp"):
            log_record["timestamp"] = self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    format_type: str | None = None,
) -> logging.Logger:
    """
    Attach a single stderr handler to the named logger.

    Args:
        name: Logger name
        level: Level name; falls back to LOG_LEVEL, then WARNING
        format_type: "json" or "text"; falls back to LOG_FORMAT, then json

    Returns:
        The configured logger, detached from the root logger
    """
    log_level = LOG_LEVELS.get((level or os.getenv("LOG_LEVEL", "WARNING")).upper(), logging.WARNING)
    format_type = (format_type or os.getenv("LOG_FORMAT", "json")).lower()

    if format_type == "json":
        formatter = CustomJsonFormatter(fmt=JSON_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")
    else:
        formatter = logging.Formatter(fmt=TEXT_FORMAT, datefmt="%H:%M:%S")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(log_level)
    logger.propagate = False
    return logger


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Return the named logger, setting it up on first use"""
    logger = logging.getLogger(name)
    if not logger.handlers:
        return setup_logger(name)
    return logger


def configure_package_loggers(level: str | None = None, format_type: str | None = None) -> None:
    """
    Re-apply level and format to every logger already created by the package.

    Module loggers are set up at import time, before a CLI has parsed its
    options; this brings them in line afterwards.
    """
    for name in list(logging.Logger.manager.loggerDict):
        if name == DEFAULT_LOGGER_NAME or name.startswith("photo_album"):
            setup_logger(name, level=level, format_type=format_type)


class log_operation:
    """
    Time a block and log its outcome on exit.

    Usage:
        with log_operation("Rendering album", logger=logger, lines=12):
            ...

    Exceptions are logged with their type and re-raised.
    """

    def __init__(self, operation_name: str, logger: logging.Logger | None = None, **extra_fields):
        self.operation_name = operation_name
        self.logger = logger or get_logger()
        self.extra_fields = {"operation": operation_name, **extra_fields}
        self.start_time = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.debug(f"Starting: {self.operation_name}", extra=self.extra_fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        extra = {**self.extra_fields, "duration_seconds": round(time.perf_counter() - self.start_time, 3)}

        if exc_type is None:
            self.logger.info(f"Completed: {self.operation_name}", extra={**extra, "status": "success"})
        else:
            extra.update(status="error", error_type=exc_type.__name__, error_message=str(exc_val))
            self.logger.error(f"Failed: {self.operation_name}", extra=extra, exc_info=True)
        return False

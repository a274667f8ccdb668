"""
Logging setup for the AppMarket SDK tooling.

Library modules only call logging.getLogger(__name__); configuring handlers
is left to the application, or to setup_logging() for the bundled CLI.
"""

import json
import logging
import logging.config

from appmarket_sdk.core.settings import LOG_LEVELS, get_settings, normalize_log_level

LOG_FORMATS = {
    "simple": "%(asctime)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
}

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """One JSON object per record: time, level, module and message."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "module": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """
    Configure root logging from settings.

    Args:
        level: Log level override (defaults to APPMARKET_LOG_LEVEL)
        log_format: simple, detailed or json (defaults to APPMARKET_LOG_FORMAT)

    Raises:
        ValueError: for an unknown level or format
    """
    settings = get_settings()
    effective_level = normalize_log_level(level or settings.log_level)
    format_name = log_format or settings.log_format

    if effective_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {effective_level}")

    if format_name == "json":
        formatter = {"()": JsonFormatter, "datefmt": DATE_FORMAT}
    elif format_name in LOG_FORMATS:
        formatter = {"format": LOG_FORMATS[format_name], "datefmt": DATE_FORMAT}
    else:
        raise ValueError(f"Unknown log format: {format_name}")

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": formatter,
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": effective_level,
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "level": effective_level,
            "handlers": ["console"],
        },
    })

    logging.getLogger(__name__).debug(
        "Logging configured",
        extra={"level": effective_level, "format": format_name},
    )

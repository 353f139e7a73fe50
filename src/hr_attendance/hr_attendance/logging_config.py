"""Logging setup shared by the app factory and the scripts."""

from __future__ import annotations

import logging
import logging.config

from pythonjsonlogger.json import JsonFormatter

# "hr_attendance" when installed, the full dotted prefix when imported from a checkout
PACKAGE_LOGGER = __name__.rpartition(".")[0]


class ServiceJsonFormatter(JsonFormatter):
    """JSON lines with level and logger name as explicit fields."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def build_logging_config(level: str = "INFO", fmt: str = "text") -> dict:
    formatter = "json" if fmt == "json" else "standard"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
            "json": {"()": ServiceJsonFormatter, "format": "%(asctime)s %(levelname)s %(name)s %(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            PACKAGE_LOGGER: {"level": level.upper(), "handlers": ["console"], "propagate": False},
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }


def configure_logging(level: str = "INFO", fmt: str = "text") -> None:
    logging.config.dictConfig(build_logging_config(level, fmt))

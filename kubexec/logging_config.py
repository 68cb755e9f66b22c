"""
Logging configuration for kubexec, with response body truncation.
"""

import logging
import logging.config
from typing import Any, Dict

MAX_MESSAGE_LENGTH = 2000


class BodyTruncationFilter(logging.Filter):
    """Filter to shorten oversized transport log messages."""

    def __init__(self, max_length: int = MAX_MESSAGE_LENGTH):
        super().__init__()
        self.max_length = max_length

    def filter(self, record: logging.LogRecord) -> bool:
        """Truncate request/response bodies logged by the transport."""
        if record.name.startswith("kubexec.transport"):
            message = record.getMessage()
            if len(message) > self.max_length:
                omitted = len(message) - self.max_length
                record.msg = f"{message[:self.max_length]}... [{omitted} more characters]"
                record.args = ()
        return True  # Never drop a record, only shorten it


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with body truncation on transport logs."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "body_truncation_filter": {
                "()": BodyTruncationFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout"
            },
            "transport": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
                "filters": ["body_truncation_filter"]
            }
        },
        "loggers": {
            "kubexec": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            },
            "kubexec.transport": {
                "handlers": ["transport"],
                "level": level,
                "propagate": False
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(get_logging_config(level.upper()))

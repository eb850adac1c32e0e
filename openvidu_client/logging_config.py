"""
Logging configuration with credential redaction
"""

import logging
import logging.config
import re
from typing import Dict, Any

_BASIC_CREDENTIAL = re.compile(r"Basic\s+[A-Za-z0-9+/=]+")


class CredentialRedactionFilter(logging.Filter):
    """Filter that masks Basic credentials in log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Rewrite the record if it carries a Basic credential."""
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Left for the handler to report through handleError
            return True
        if "Basic" in message:
            record.msg = _BASIC_CREDENTIAL.sub("Basic ***", message)
            record.args = None
        return True  # Never drop records, only rewrite them


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with credential redaction."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "credential_filter": {
                "()": CredentialRedactionFilter
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
                "stream": "ext://sys.stdout",
                "filters": ["credential_filter"]
            }
        },
        "loggers": {
            "openvidu_client": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            },
            # httpx logs every request line at INFO
            "httpx": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False
            }
        },
        "root": {
            "level": level,
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the package logging configuration."""
    logging.config.dictConfig(get_logging_config(level.upper()))

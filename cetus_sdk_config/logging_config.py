"""
Logging setup for the configuration registry and its CLI.
"""

import json
import logging
import sys
from datetime import datetime, timezone

PACKAGE_LOGGER = "cetus_sdk_config"


class StructuredFormatter(logging.Formatter):
    """
    Formats records as one JSON object per line.
    """

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "context"):
            log_entry["context"] = record.context

        return json.dumps(log_entry)


def setup_logging(log_level: str = "INFO", structured: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger, replacing any previous one."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if structured:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger

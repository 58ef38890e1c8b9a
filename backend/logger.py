"""Logging configuration for the document analytics service."""
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields if present
        if hasattr(record, "extra"):
            log_data.update(record.extra)

        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(log_level: str = "INFO", json_format: bool = False) -> None:
    """
    Set up application logging on the root logger.

    Replaces any handler installed by a previous call, so it is safe to call
    on every application startup.

    Args:
        log_level: Level name such as "INFO" or "DEBUG"
        json_format: Emit one JSON object per line instead of plain text
    """
    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    handler._docanalytics = True  # marks handlers owned by setup_logging

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if getattr(existing, "_docanalytics", False):
            root_logger.removeHandler(existing)

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.addHandler(handler)

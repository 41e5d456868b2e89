"""
Structured logging configuration.

Provides JSON-formatted logging for gateway requests and results workflow
events. ``main.py`` switches the package loggers to it when
``TRIP_PLANNER_JSON_LOGS`` is set.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional


SERVICE_NAME = "westair-trip-planner"


class StructuredFormatter(logging.Formatter):
    """
    Custom formatter that outputs log records as JSON lines.

    Each log entry includes:
    - timestamp: ISO format datetime (UTC)
    - service: Service name, so collectors can split gateway and consumer logs
    - level: Log level name
    - logger: Logger name
    - message: Log message
    - extra: Event payload attached by log_planning_event
    """

    def __init__(self, service: str = SERVICE_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": self.service,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Event payload from log_planning_event
        if hasattr(record, "extra"):
            log_entry["extra"] = record.extra

        # Stack trace from logger.exception at the API boundary
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # default=str: dates and Decimals in event payloads
        return json.dumps(log_entry, default=str)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    logger_name: str = "tripplanner",
    service: str = SERVICE_NAME,
) -> logging.Logger:
    """
    Configure structured JSON logging for the package loggers.

    Args:
        level: Logging level (default: INFO)
        log_file: Optional path to log file. If not provided, logs to stdout only.
        logger_name: Name for the logger instance.
        service: Value of the ``service`` field on every entry.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers = []
    # JSON replaces the root's pipe format instead of duplicating each line
    logger.propagate = False

    # Create formatter
    formatter = StructuredFormatter(service=service)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler if path provided
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def log_planning_event(
    event: str,
    state: Dict[str, Any],
    extra: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Log a results workflow event with a summary of the current state.

    Args:
        event: Name of the event (e.g., "request_loaded", "results_normalized")
        state: Current results state dictionary (key fields are extracted)
        extra: Additional context to include in the log
        logger: Logger instance to use. If not provided, uses default.
    """
    if logger is None:
        logger = logging.getLogger("tripplanner")

    destinations = state.get("destinations") or state.get("raw_destinations") or []
    state_summary = {
        "current_step": state.get("current_step"),
        "has_trip_request": state.get("trip_request") is not None,
        "destination_count": len(destinations),
        "error": state.get("error_message"),
    }

    log_data: Dict[str, Any] = {
        "event": event,
        "state_summary": state_summary,
    }
    if extra:
        log_data["extra"] = extra

    record = logger.makeRecord(
        logger.name,
        logging.INFO,
        "",
        0,
        f"Results event: {event}",
        args=(),
        exc_info=None,
    )
    record.extra = log_data

    logger.handle(record)

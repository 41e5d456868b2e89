"""Logging configuration and utilities."""

from tripplanner.shared.logging.config import (
    setup_logging,
    log_planning_event,
    StructuredFormatter,
)

__all__ = ["setup_logging", "log_planning_event", "StructuredFormatter"]

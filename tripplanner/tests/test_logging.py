"""
Tests for structured logging helpers.
"""

import json
import logging
from datetime import date

from tripplanner.shared.logging.config import (
    StructuredFormatter,
    log_planning_event,
    setup_logging,
)


class _CaptureHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def test_formatter_emits_json():
    record = logging.LogRecord("tripplanner.test", logging.INFO, "", 0, "hello %s", ("Goa",), None)

    entry = json.loads(StructuredFormatter().format(record))

    assert entry["level"] == "INFO"
    assert entry["logger"] == "tripplanner.test"
    assert entry["message"] == "hello Goa"
    assert entry["service"] == "westair-trip-planner"


def test_formatter_serializes_dates_in_payload():
    record = logging.LogRecord("tripplanner.test", logging.INFO, "", 0, "saved", (), None)
    record.extra = {"start_date": date(2025, 9, 1)}

    entry = json.loads(StructuredFormatter(service="results").format(record))

    assert entry["service"] == "results"
    assert entry["extra"] == {"start_date": "2025-09-01"}


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "planner.log"
    logger = setup_logging(log_file=str(log_file), logger_name="tripplanner.filetest")
    assert logger.propagate is False

    logger.info("gateway ready")
    for handler in logger.handlers:
        handler.flush()

    entry = json.loads(log_file.read_text().strip().splitlines()[-1])
    assert entry["message"] == "gateway ready"
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.propagate = True


def test_planning_event_summarizes_state():
    logger = logging.getLogger("tripplanner.eventtest")
    logger.setLevel(logging.INFO)
    handler = _CaptureHandler()
    logger.addHandler(handler)

    state = {
        "current_step": "normalized",
        "trip_request": {"startDate": "2025-09-01"},
        "destinations": [{"name": "Goa"}, {"name": "Kochi"}],
        "error_message": None,
    }
    log_planning_event("results_normalized", state, extra={"warnings": 0}, logger=logger)

    record = handler.records[-1]
    assert record.extra["event"] == "results_normalized"
    assert record.extra["state_summary"] == {
        "current_step": "normalized",
        "has_trip_request": True,
        "destination_count": 2,
        "error": None,
    }
    assert record.extra["extra"] == {"warnings": 0}
    logger.removeHandler(handler)

"""
Intake adapter.

Validates trip form input, derives default dates and persists the
canonical TripRequest for the results view.
"""

from tripplanner.intake.form_state import (
    DateNotSelectableError,
    TripFormState,
    is_departure_selectable,
    is_return_selectable,
    derive_end_date,
    select_return_date,
)
from tripplanner.intake.schemas import TripFormValidationError, validate_trip_form
from tripplanner.intake.storage import (
    TRIP_FORM_DATA_KEY,
    TripStore,
    TripStoreCorruptError,
    read_trip_request,
    save_trip_request,
)

__all__ = [
    "DateNotSelectableError",
    "TripFormState",
    "is_departure_selectable",
    "is_return_selectable",
    "derive_end_date",
    "select_return_date",
    "TripFormValidationError",
    "validate_trip_form",
    "TRIP_FORM_DATA_KEY",
    "TripStore",
    "TripStoreCorruptError",
    "read_trip_request",
    "save_trip_request",
]

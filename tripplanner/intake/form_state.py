"""
Trip form state.

Holds the in-progress form values and applies the date-window rules
synchronously whenever a date changes. The date rules are plain functions
so they can be used without a form instance.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Dict, Optional

from tripplanner.intake.schemas import (
    END_DATE_ORDER_MESSAGE,
    FIELD_MESSAGES,
    TripFormValidationError,
    validate_trip_form,
)
from tripplanner.intake.storage import TRIP_FORM_DATA_KEY, TripStore, save_trip_request
from tripplanner.shared.contracts.trip_request import TripRequest


logger = logging.getLogger(__name__)

# A new departure date defaults the trip to one week (start + 6 days)
DEFAULT_TRIP_DAYS = 6


def derive_end_date(start_date: date, end_date: Optional[date]) -> date:
    """
    Return the end date to use after the start date changes.

    Keeps ``end_date`` when it is strictly after ``start_date``; otherwise
    defaults to ``start_date + 6 days``.
    """
    if end_date is None or end_date <= start_date:
        return start_date + timedelta(days=DEFAULT_TRIP_DAYS)
    return end_date


def select_return_date(departure: Optional[date], selected: Optional[date]) -> Optional[date]:
    """A return date picked on the departure day is moved to the next day."""
    if departure is not None and selected is not None and selected == departure:
        return selected + timedelta(days=1)
    return selected


class DateNotSelectableError(ValueError):
    """Raised when a date the calendar disables is picked."""

    def __init__(self, field_name: str, value: date, earliest: date):
        self.field_name = field_name
        self.value = value
        self.earliest = earliest
        super().__init__(f"{field_name} {value} is before the earliest selectable day {earliest}")


def is_departure_selectable(day: date, today: date) -> bool:
    """Departure days before today are disabled."""
    return day >= today


def is_return_selectable(day: date, departure: Optional[date], today: date) -> bool:
    """Return days before the departure (or today, without one) are disabled."""
    return day >= (departure or today)


@dataclass
class TripFormState:
    """
    In-progress trip form.

    Defaults match the form's initial values. ``errors`` maps camelCase
    field names to the message currently shown for that field. ``today``
    pins the calendar's current day; None means the real date.
    """

    destination: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    number_of_people: str = "2"
    vacation_type: str = "Beach"
    budget: str = "50000"
    errors: Dict[str, str] = field(default_factory=dict)
    today: Optional[date] = None

    def _today(self) -> date:
        return self.today or date.today()

    def set_start_date(self, value: Optional[date]) -> None:
        """
        Pick the departure day and re-derive the return day.

        Raises:
            DateNotSelectableError: If ``value`` is before today. Nothing changes.
        """
        if value is not None and not is_departure_selectable(value, self._today()):
            raise DateNotSelectableError("startDate", value, self._today())
        self.start_date = value
        if value is None:
            return
        new_end = derive_end_date(value, self.end_date)
        if new_end != self.end_date:
            logger.debug(f"Return date defaulted | start={value}, end={new_end}")
            self.end_date = new_end
            self._revalidate_end_date()

    def select_end_date(self, value: Optional[date]) -> None:
        if value is not None and not is_return_selectable(value, self.start_date, self._today()):
            raise DateNotSelectableError("endDate", value, self.start_date or self._today())
        self.end_date = select_return_date(self.start_date, value)
        self._revalidate_end_date()

    def _revalidate_end_date(self) -> None:
        if self.end_date is None:
            self.errors["endDate"] = FIELD_MESSAGES["endDate"]
        elif self.start_date is not None and self.end_date <= self.start_date:
            self.errors["endDate"] = END_DATE_ORDER_MESSAGE
        else:
            self.errors.pop("endDate", None)

    def values(self) -> Dict[str, Any]:
        """Current values keyed by camelCase field name."""
        return {
            "destination": self.destination,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "numberOfPeople": self.number_of_people,
            "vacationType": self.vacation_type,
            "budget": self.budget,
        }

    def validate(self) -> Optional[TripRequest]:
        """Validate all fields, refreshing ``errors``. Returns None if invalid."""
        try:
            trip_request = validate_trip_form(self.values())
        except TripFormValidationError as e:
            self.errors = e.errors
            return None
        self.errors = {}
        return trip_request

    def submit(self, store: TripStore, key: str = TRIP_FORM_DATA_KEY) -> TripRequest:
        """
        Validate and persist the form.

        Raises:
            TripFormValidationError: If any field is invalid. Nothing is written.
        """
        trip_request = self.validate()
        if trip_request is None:
            logger.info(f"Trip form submission blocked | fields={sorted(self.errors)}")
            raise TripFormValidationError(self.errors)

        save_trip_request(store, trip_request, key=key)
        return trip_request

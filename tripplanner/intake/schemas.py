"""
Trip form validation schema.

Mirrors the trip planner form: every rule reports a message scoped to the
camelCase field it belongs to, and the cross-field date rule is attached
to ``endDate``.
"""

from datetime import date
from typing import Any, Dict, Mapping, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from tripplanner.shared.contracts.trip_request import TripRequest


# Messages used when a field is missing or unparseable
FIELD_MESSAGES: Dict[str, str] = {
    "destination": "Destination must be at least 2 characters.",
    "startDate": "Please select a departure date.",
    "endDate": "Please select a return date.",
    "numberOfPeople": "Please select number of travelers.",
    "vacationType": "Please select a vacation type.",
    "budget": "Budget is required.",
}

END_DATE_ORDER_MESSAGE = "Return date must be after departure date"
BUDGET_NOT_POSITIVE_MESSAGE = "Budget must be a positive whole number."

# Custom error types whose message is used verbatim
_CUSTOM_ERROR_TYPES = {
    "trip_form",
    "end_date_order",
}


class TripFormValidationError(ValueError):
    """Raised when the trip form fails validation. Carries per-field messages."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        summary = ", ".join(f"{field}: {msg}" for field, msg in self.errors.items())
        super().__init__(f"Trip form is invalid ({summary})")


def _parse_positive_int(value: str) -> Optional[int]:
    try:
        number = int(value.strip())
    except ValueError:
        return None
    return number if number > 0 else None


class TripForm(BaseModel):
    """Raw trip form values, as entered by the user."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    destination: Optional[str] = None
    start_date: Optional[date] = Field(default=None, validate_default=True)
    end_date: Optional[date] = Field(default=None, validate_default=True)
    number_of_people: str = Field(default="", validate_default=True)
    vacation_type: str = Field(default="", validate_default=True)
    budget: str = Field(default="", validate_default=True)

    @field_validator("number_of_people", "vacation_type", "budget", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> Any:
        # Select widgets hand back strings, API callers may send numbers
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("destination")
    @classmethod
    def _check_destination(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        value = value.strip()
        if len(value) < 2:
            raise PydanticCustomError("trip_form", FIELD_MESSAGES["destination"])
        return value

    @field_validator("start_date")
    @classmethod
    def _check_start_date(cls, value: Optional[date]) -> date:
        if value is None:
            raise PydanticCustomError("trip_form", FIELD_MESSAGES["startDate"])
        return value

    @field_validator("end_date")
    @classmethod
    def _check_end_date(cls, value: Optional[date]) -> date:
        if value is None:
            raise PydanticCustomError("trip_form", FIELD_MESSAGES["endDate"])
        return value

    @field_validator("number_of_people")
    @classmethod
    def _check_number_of_people(cls, value: str) -> str:
        if _parse_positive_int(value) is None:
            raise PydanticCustomError("trip_form", FIELD_MESSAGES["numberOfPeople"])
        return value.strip()

    @field_validator("vacation_type")
    @classmethod
    def _check_vacation_type(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("trip_form", FIELD_MESSAGES["vacationType"])
        return value.strip()

    @field_validator("budget")
    @classmethod
    def _check_budget(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("trip_form", FIELD_MESSAGES["budget"])
        if _parse_positive_int(value) is None:
            raise PydanticCustomError("trip_form", BUDGET_NOT_POSITIVE_MESSAGE)
        return value.strip()

    @model_validator(mode="after")
    def _check_date_order(self) -> "TripForm":
        if self.end_date <= self.start_date:
            raise PydanticCustomError("end_date_order", END_DATE_ORDER_MESSAGE)
        return self

    def to_trip_request(self) -> TripRequest:
        """Format the validated form into the canonical request."""
        return TripRequest(
            start_date=self.start_date,
            end_date=self.end_date,
            budget=int(self.budget),
            vacation_type=self.vacation_type,
            number_of_people=int(self.number_of_people),
            destination=self.destination,
        )


def _field_alias(loc_item: Any) -> str:
    # Error locations may carry either the attribute name or its alias
    name = str(loc_item)
    info = TripForm.model_fields.get(name)
    if info is not None and info.alias:
        return info.alias
    return name


def collect_field_errors(exc: ValidationError) -> Dict[str, str]:
    """
    Flatten a pydantic ValidationError into {camelCaseField: message}.

    The first message per field wins. Errors raised by the cross-field
    date rule have no location and are attached to ``endDate``.
    """
    errors: Dict[str, str] = {}
    for error in exc.errors():
        if error["type"] == "end_date_order":
            field = "endDate"
        elif error["loc"]:
            field = _field_alias(error["loc"][0])
        else:
            continue

        if error["type"] in _CUSTOM_ERROR_TYPES:
            message = error["msg"]
        else:
            message = FIELD_MESSAGES.get(field, error["msg"])
        errors.setdefault(field, message)
    return errors


def validate_trip_form(values: Mapping[str, Any]) -> TripRequest:
    """
    Validate raw form values and produce a canonical TripRequest.

    Args:
        values: Form values keyed by camelCase or snake_case field names.
            Dates may be ``date`` objects or ISO strings.

    Returns:
        The validated TripRequest with integer budget and party size.

    Raises:
        TripFormValidationError: With field-scoped messages on any failure.
    """
    try:
        form = TripForm.model_validate(dict(values))
    except ValidationError as e:
        raise TripFormValidationError(collect_field_errors(e)) from e
    return form.to_trip_request()

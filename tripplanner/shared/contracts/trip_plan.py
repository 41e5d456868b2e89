"""
Trip plan contract.

Defines the destinations the external model returns. Everything in here is
produced by an LLM, so every field is optional and extra keys are kept:
consumers must apply their own fallbacks rather than trust the shape.

Field values the model gets wrong are coerced instead of rejected, so one
bad destination never sinks the others:
- prices that are not plain numbers ("4,500 INR", {}) become None
- ``activities: null`` becomes an empty list
- a nested record that is not an object becomes None
"""

import logging
import math
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


logger = logging.getLogger(__name__)

Price = Optional[Union[int, float]]


def _price_or_none(value: Any) -> Any:
    """Keep numbers and numeric strings; anything else is an unknown price."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def _text_or_none(value: Any) -> Any:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _record_or_none(value: Any) -> Any:
    return value if isinstance(value, dict) else None


class _ModelOutput(BaseModel):
    """Base for model-produced records: camelCase aliases, extras preserved."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict:
        # Only keys the model (or a fallback) actually set; explicit nulls survive
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class Flight(_ModelOutput):
    """Outbound flight for a destination package."""

    airline: Optional[str] = None
    departure: Optional[str] = Field(default=None, description="ISO datetime")
    arrival: Optional[str] = Field(default=None, description="ISO datetime")
    price_per_person: Price = None

    coerce_prices = field_validator("price_per_person", mode="before")(_price_or_none)
    coerce_texts = field_validator("airline", "departure", "arrival", mode="before")(_text_or_none)


class Hotel(_ModelOutput):
    """Hotel stay for a destination package."""

    name: Optional[str] = None
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    price_per_night: Price = None

    coerce_prices = field_validator("price_per_night", mode="before")(_price_or_none)
    coerce_texts = field_validator("name", "check_in", "check_out", mode="before")(_text_or_none)


class Activity(_ModelOutput):
    """A single paid activity."""

    name: Optional[str] = None
    price_per_person: Price = None

    coerce_prices = field_validator("price_per_person", mode="before")(_price_or_none)
    coerce_texts = field_validator("name", mode="before")(_text_or_none)


class Destination(_ModelOutput):
    """One candidate trip package (flight + hotel + activities + costs)."""

    name: Optional[str] = None
    flight: Optional[Flight] = None
    hotel: Optional[Hotel] = None
    activities: List[Activity] = Field(default_factory=list)
    total_cost: Price = None
    per_person_cost: Price = None
    image: Optional[str] = None
    description: Optional[str] = None

    coerce_prices = field_validator("total_cost", "per_person_cost", mode="before")(_price_or_none)
    coerce_texts = field_validator("name", "image", "description", mode="before")(_text_or_none)
    coerce_records = field_validator("flight", "hotel", mode="before")(_record_or_none)

    @field_validator("activities", mode="before")
    @classmethod
    def coerce_activities(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        # A bare string is taken as an activity name with no price
        return [
            {"name": item} if isinstance(item, str) else item
            for item in value
            if isinstance(item, (dict, str))
        ]


class TripPlannerResponse(_ModelOutput):
    """
    Contract for the planning gateway's success response.

    Example:
        {"destinations": [{"name": "Goa", "totalCost": 48000, ...}]}
    """

    destinations: List[Destination] = Field(default_factory=list)

    @field_validator("destinations", mode="before")
    @classmethod
    def drop_non_object_destinations(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        records = [item for item in value if isinstance(item, dict)]
        if len(records) != len(value):
            logger.warning(f"Dropped {len(value) - len(records)} non-object destinations")
        return records

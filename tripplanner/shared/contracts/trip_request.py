"""
Trip request contract.

Defines the canonical trip parameters handed from the intake layer to the
planning gateway. Serialized on the wire as camelCase JSON.
"""

from datetime import date
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Vacation types offered by the trip form. The gateway does not enforce them.
VACATION_TYPES = ("Beach", "City", "Mountain", "Cultural", "Adventure")


class TripRequest(BaseModel):
    """
    Canonical, validated trip parameters.

    Range checks (end after start, positive numbers) belong to the intake
    layer; this contract only fixes field names and types so the gateway
    can relay whatever the client sends.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    start_date: date = Field(description="Departure date (YYYY-MM-DD)")
    end_date: date = Field(description="Return date (YYYY-MM-DD)")
    budget: int = Field(description="Total trip budget for all travelers (INR)")
    vacation_type: str = Field(description="Vacation type, e.g. 'Beach'")
    number_of_people: int = Field(description="Number of travelers")
    destination: Optional[str] = Field(
        default=None,
        description="Optional destination hint; absent lets the planner choose",
    )

    @property
    def nights(self) -> int:
        """Number of nights between departure and return."""
        return (self.end_date - self.start_date).days

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to the camelCase JSON shape used on the wire."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

"""Data contracts shared by the intake, gateway and results layers."""

from tripplanner.shared.contracts.trip_request import TripRequest, VACATION_TYPES
from tripplanner.shared.contracts.trip_plan import (
    Activity,
    Destination,
    Flight,
    Hotel,
    TripPlannerResponse,
)

__all__ = [
    "TripRequest",
    "VACATION_TYPES",
    "Activity",
    "Destination",
    "Flight",
    "Hotel",
    "TripPlannerResponse",
]

"""
Post-validation of gateway destinations.

Model output is untrusted. Missing presentation fields get fallbacks;
costs are checked against the requested arithmetic and reported, never
rewritten.
"""

import math
from datetime import datetime
from typing import List, Optional

from tripplanner.shared.contracts.trip_plan import Destination
from tripplanner.shared.contracts.trip_request import TripRequest


FALLBACK_IMAGE_URL = (
    "https://images.unsplash.com/photo-1488085061387-422e29b40080"
    "?q=80&w=2531&auto=format&fit=crop&ixlib=rb-4.0.3"
    "&ixid=M3wxMjA3fDB8MHxwaG90by1wYWdlfHx8fGVufDB8fHx8fA%3D%3D"
)


def default_description(name: Optional[str]) -> str:
    return f"Explore the beauty of {name or 'this destination'} with our exclusive travel package."


def normalize_destination(
    destination: Destination,
    fallback_image: str = FALLBACK_IMAGE_URL,
) -> Destination:
    """Fill a missing image or description. Every other field is kept as is."""
    update = {}
    if not destination.image:
        update["image"] = fallback_image
    if not destination.description:
        update["description"] = default_description(destination.name)
    if not update:
        return destination
    return destination.model_copy(update=update)


def normalize_destinations(
    destinations: List[Destination],
    fallback_image: str = FALLBACK_IMAGE_URL,
) -> List[Destination]:
    return [normalize_destination(d, fallback_image) for d in destinations]


def expected_total_cost(destination: Destination, trip_request: TripRequest) -> Optional[float]:
    """
    Recompute the total from its parts, or None when a part is missing.

    total = flight * n + hotel_night * nights + sum(activity) * n
    """
    flight = destination.flight
    hotel = destination.hotel
    if flight is None or flight.price_per_person is None:
        return None
    if hotel is None or hotel.price_per_night is None:
        return None
    if any(a.price_per_person is None for a in destination.activities):
        return None

    people = trip_request.number_of_people
    activities = sum(a.price_per_person for a in destination.activities)
    return (
        flight.price_per_person * people
        + hotel.price_per_night * trip_request.nights
        + activities * people
    )


def check_destination_costs(
    destination: Destination,
    trip_request: TripRequest,
    tolerance: float = 0.05,
) -> List[str]:
    """
    Compare the model's cost fields with the requested arithmetic.

    Returns:
        Human-readable warnings; empty when the costs are consistent.
    """
    name = destination.name or "Unnamed destination"
    warnings: List[str] = []

    if destination.total_cost is None:
        warnings.append(f"{name}: totalCost is missing")
    else:
        expected = expected_total_cost(destination, trip_request)
        if expected is None:
            warnings.append(f"{name}: cost breakdown is incomplete")
        elif not math.isclose(destination.total_cost, expected, rel_tol=tolerance, abs_tol=1.0):
            warnings.append(
                f"{name}: totalCost {destination.total_cost:.0f} "
                f"differs from breakdown {expected:.0f}"
            )

        people = trip_request.number_of_people
        if destination.per_person_cost is None:
            warnings.append(f"{name}: perPersonCost is missing")
        elif people > 0 and not math.isclose(
            destination.per_person_cost,
            destination.total_cost / people,
            rel_tol=tolerance,
            abs_tol=1.0,
        ):
            warnings.append(
                f"{name}: perPersonCost {destination.per_person_cost:.0f} "
                f"is not totalCost / {people}"
            )

    if destination.total_cost is not None and destination.total_cost > trip_request.budget:
        warnings.append(
            f"{name}: totalCost {destination.total_cost:.0f} "
            f"exceeds budget {trip_request.budget}"
        )

    if not destination.activities:
        warnings.append(f"{name}: no activities listed")

    return warnings


def format_date_time(value: str) -> str:
    """Format an ISO datetime as 'Sep 1, 2025 9:30 AM'; unparseable input is returned unchanged."""
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return value
    hour = parsed.hour % 12 or 12
    return f"{parsed:%b} {parsed.day}, {parsed.year} {hour}:{parsed:%M %p}"

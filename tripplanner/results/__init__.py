"""
Results consumer.

Reads the stored trip request, calls the planning gateway and normalizes
the returned destinations for rendering.
"""

from tripplanner.results.client import (
    GatewayClient,
    MissingTripDataError,
    RequestFailedError,
    load_trip_request,
)
from tripplanner.results.normalize import (
    FALLBACK_IMAGE_URL,
    check_destination_costs,
    format_date_time,
    normalize_destination,
    normalize_destinations,
)

__all__ = [
    "GatewayClient",
    "MissingTripDataError",
    "RequestFailedError",
    "load_trip_request",
    "FALLBACK_IMAGE_URL",
    "check_destination_costs",
    "format_date_time",
    "normalize_destination",
    "normalize_destinations",
]

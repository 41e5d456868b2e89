"""
Graph configuration for the results workflow.
"""

import os
from dataclasses import dataclass, field

from tripplanner.intake.storage import TRIP_FORM_DATA_KEY
from tripplanner.results.normalize import FALLBACK_IMAGE_URL


@dataclass
class ResultsGraphConfig:
    """
    Configuration for the results graph.

    Attributes:
        gateway_url: Base URL of the service exposing /api/trip-planner
        request_timeout: Timeout in seconds for the gateway call
        storage_key: Key the trip form is stored under
        fallback_image: Image used when a destination has none
        cost_tolerance: Relative tolerance for the cost consistency check
    """

    gateway_url: str = field(
        default_factory=lambda: os.environ.get(
            "TRIP_PLANNER_GATEWAY_URL", "http://localhost:8000"
        )
    )
    request_timeout: float = 120.0
    storage_key: str = TRIP_FORM_DATA_KEY
    fallback_image: str = FALLBACK_IMAGE_URL
    cost_tolerance: float = 0.05


# Default configuration instance
DEFAULT_CONFIG = ResultsGraphConfig()

"""
HTTP client for the planning gateway, plus the consumer-side errors.
"""

import logging
from typing import Optional

import httpx

from tripplanner.intake.storage import TRIP_FORM_DATA_KEY, TripStore, read_trip_request
from tripplanner.shared.contracts.trip_plan import TripPlannerResponse
from tripplanner.shared.contracts.trip_request import TripRequest


logger = logging.getLogger(__name__)

TRIP_PLANNER_PATH = "/api/trip-planner"


class MissingTripDataError(LookupError):
    """Raised when no trip request has been stored yet."""

    def __init__(self, message: str = "No trip data found. Please fill the form again."):
        super().__init__(message)


class RequestFailedError(Exception):
    """Raised when the gateway answers with a non-2xx status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"API request failed with status {status_code}")


def load_trip_request(store: TripStore, key: str = TRIP_FORM_DATA_KEY) -> TripRequest:
    """
    Read the submitted trip request.

    Raises:
        MissingTripDataError: If nothing is stored under ``key``.
    """
    trip_request = read_trip_request(store, key=key)
    if trip_request is None:
        raise MissingTripDataError()
    return trip_request


class GatewayClient:
    """
    Calls ``POST /api/trip-planner``.

    Pass ``http_client`` to reuse an existing httpx.Client (for example a
    FastAPI TestClient); otherwise a client is opened per call.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 120.0,
        http_client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._http_client = http_client

    def _post(self, payload: dict) -> httpx.Response:
        if self._http_client is not None:
            return self._http_client.post(TRIP_PLANNER_PATH, json=payload)
        with httpx.Client(base_url=self.base_url, timeout=self.timeout) as client:
            return client.post(TRIP_PLANNER_PATH, json=payload)

    def plan(self, trip_request: TripRequest) -> TripPlannerResponse:
        """
        Request destinations for ``trip_request``.

        Raises:
            RequestFailedError: On any non-2xx response.
            httpx.HTTPError: On transport failures.
        """
        response = self._post(trip_request.to_wire())
        if not response.is_success:
            logger.warning(
                f"Gateway call failed | status={response.status_code}, "
                f"body={response.text[:200]}"
            )
            raise RequestFailedError(response.status_code)
        return TripPlannerResponse.model_validate(response.json())

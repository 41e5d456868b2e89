"""
Nodes for the results workflow.

Each node takes its collaborators explicitly (store, gateway client) so
the graph builder can bind them. Failures become a user-facing
``error_message`` plus an ``errors`` entry; nothing is retried.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict

from pydantic import ValidationError

from tripplanner.intake.storage import TripStore, TripStoreCorruptError
from tripplanner.results.client import (
    GatewayClient,
    MissingTripDataError,
    RequestFailedError,
    load_trip_request,
)
from tripplanner.results.normalize import check_destination_costs, normalize_destinations
from tripplanner.results.schemas import ResultsState
from tripplanner.shared.contracts.trip_plan import Destination
from tripplanner.shared.contracts.trip_request import TripRequest
from tripplanner.shared.logging.config import log_planning_event

if TYPE_CHECKING:
    from tripplanner.results.graph.config import ResultsGraphConfig


logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch destination suggestions. Please try again."


def load_request_node(
    state: ResultsState,
    store: TripStore,
    config: "ResultsGraphConfig",
) -> Dict[str, Any]:
    """Read the stored TripRequest. A missing or unreadable entry ends the workflow."""
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=results] [node=load_request] "

    try:
        trip_request = load_trip_request(store, key=config.storage_key)
    except MissingTripDataError as e:
        logger.info(f"{_log}No stored trip request | key={config.storage_key}")
        return {
            "current_step": "load_failed",
            "error_message": str(e),
            "errors": [f"Missing trip data under '{config.storage_key}'"],
        }
    except (TripStoreCorruptError, ValidationError) as e:
        logger.error(f"{_log}Stored trip request is unreadable | key={config.storage_key}, error={e}")
        return {
            "current_step": "load_failed",
            "error_message": FETCH_FAILED_MESSAGE,
            "errors": [f"Unreadable trip data under '{config.storage_key}'"],
        }

    update = {
        "trip_request": trip_request.to_wire(),
        "current_step": "request_loaded",
        "messages": [
            {
                "role": "system",
                "agent": "results",
                "content": (
                    f"Loaded trip request: {trip_request.start_date} to "
                    f"{trip_request.end_date}, {trip_request.number_of_people} travelers"
                ),
            }
        ],
    }
    log_planning_event("request_loaded", {**state, **update})
    return update


def fetch_destinations_node(
    state: ResultsState,
    gateway: GatewayClient,
) -> Dict[str, Any]:
    """Call the planning gateway once with the loaded request."""
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=results] [node=fetch_destinations] "

    trip_request = TripRequest.model_validate(state["trip_request"])
    logger.info(f"{_log}Calling gateway | url={gateway.base_url}")

    try:
        response = gateway.plan(trip_request)
    except RequestFailedError as e:
        logger.error(f"{_log}{e}")
        return {
            "current_step": "fetch_failed",
            "error_message": FETCH_FAILED_MESSAGE,
            "errors": [str(e)],
        }
    except Exception as e:
        logger.exception(f"{_log}Error fetching destinations: {e}")
        return {
            "current_step": "fetch_failed",
            "error_message": FETCH_FAILED_MESSAGE,
            "errors": [f"Gateway call error: {e}"],
        }

    logger.info(f"{_log}Gateway replied | destinations={len(response.destinations)}")
    return {
        "raw_destinations": [d.to_wire() for d in response.destinations],
        "current_step": "destinations_fetched",
        "messages": [
            {
                "role": "system",
                "agent": "results",
                "content": f"Received {len(response.destinations)} destinations",
            }
        ],
    }


def normalize_node(
    state: ResultsState,
    config: "ResultsGraphConfig",
) -> Dict[str, Any]:
    """Apply fallbacks and collect cost consistency warnings."""
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=results] [node=normalize] "

    trip_request = TripRequest.model_validate(state["trip_request"])
    raw = [Destination.model_validate(d) for d in state.get("raw_destinations") or []]
    normalized = normalize_destinations(raw, fallback_image=config.fallback_image)

    warnings = []
    for destination in normalized:
        warnings.extend(
            check_destination_costs(destination, trip_request, tolerance=config.cost_tolerance)
        )
    if warnings:
        logger.warning(f"{_log}Cost check flagged {len(warnings)} issues")

    update = {
        "destinations": [d.to_wire() for d in normalized],
        "warnings": warnings,
        "current_step": "normalized",
    }
    log_planning_event("results_normalized", {**state, **update}, extra={"warnings": len(warnings)})
    return update


def complete_node(state: ResultsState) -> Dict[str, Any]:
    """Mark the workflow finished."""
    session_id = state.get("session_id", "unknown")
    failed = state.get("error_message") is not None
    logger.info(
        f"[session={session_id}] [graph=results] [node=complete] "
        f"Workflow finished | failed={failed}, "
        f"destinations={len(state.get('destinations') or [])}"
    )
    return {
        "current_step": "failed" if failed else "complete",
        "messages": [
            {
                "role": "system",
                "agent": "results",
                "content": state["error_message"] if failed else "Results ready",
            }
        ],
    }

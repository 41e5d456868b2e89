"""
Results graph construction.

Builds the workflow behind the results view: load the stored request,
call the planning gateway once, normalize the destinations.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from langgraph.graph import StateGraph, END
from pydantic import BaseModel, Field

from tripplanner.intake.storage import TripStore
from tripplanner.results.client import GatewayClient
from tripplanner.results.graph.config import DEFAULT_CONFIG, ResultsGraphConfig
from tripplanner.results.graph.router import route_next_step
from tripplanner.results.nodes.results import (
    complete_node,
    fetch_destinations_node,
    load_request_node,
    normalize_node,
)
from tripplanner.results.schemas import ResultsState
from tripplanner.shared.contracts.trip_plan import Destination
from tripplanner.shared.contracts.trip_request import TripRequest


logger = logging.getLogger(__name__)

_ROUTES = {
    "load_request": "load_request",
    "fetch_destinations": "fetch_destinations",
    "normalize": "normalize",
    "complete": "complete",
}


class TripResults(BaseModel):
    """What the results view renders."""

    trip_request: Optional[TripRequest] = None
    destinations: List[Destination] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    error: Optional[str] = Field(
        default=None, description="User-facing error message, if the workflow failed"
    )


def create_results_graph(
    store: TripStore,
    gateway: GatewayClient,
    config: Optional[ResultsGraphConfig] = None,
):
    """
    Create and compile the results graph.

    The graph structure is:
        Entry -> route_next_step
          -> "load_request"       -> route_next_step
          -> "fetch_destinations" -> route_next_step
          -> "normalize"          -> route_next_step
          -> "complete"           -> END

    Args:
        store: Store holding the submitted trip request
        gateway: Client for the planning gateway
        config: Optional configuration. Uses DEFAULT_CONFIG if not provided.

    Returns:
        Compiled LangGraph application ready for execution.
    """
    if config is None:
        config = DEFAULT_CONFIG

    def _load_request(state: ResultsState) -> Dict[str, Any]:
        return load_request_node(state, store, config)

    def _fetch_destinations(state: ResultsState) -> Dict[str, Any]:
        return fetch_destinations_node(state, gateway)

    def _normalize(state: ResultsState) -> Dict[str, Any]:
        return normalize_node(state, config)

    graph = StateGraph(ResultsState)

    graph.add_node("load_request", _load_request)
    graph.add_node("fetch_destinations", _fetch_destinations)
    graph.add_node("normalize", _normalize)
    graph.add_node("complete", complete_node)

    graph.set_conditional_entry_point(route_next_step, _ROUTES)
    for node in ("load_request", "fetch_destinations", "normalize"):
        graph.add_conditional_edges(node, route_next_step, _ROUTES)
    graph.add_edge("complete", END)

    return graph.compile()


def make_initial_state(session_id: Optional[str] = None) -> ResultsState:
    return {
        "trip_request": None,
        "raw_destinations": None,
        "destinations": None,
        "current_step": "starting",
        "error_message": None,
        "warnings": [],
        "errors": [],
        "messages": [],
        "session_id": session_id or str(uuid.uuid4()),
    }


def run_trip_results(
    store: TripStore,
    gateway: Optional[GatewayClient] = None,
    config: Optional[ResultsGraphConfig] = None,
    session_id: Optional[str] = None,
) -> TripResults:
    """
    Run the results workflow end to end.

    Args:
        store: Store holding the submitted trip request
        gateway: Gateway client. Built from config if not provided.
        config: Optional configuration. Uses DEFAULT_CONFIG if not provided.
        session_id: Optional identifier for log lines

    Returns:
        TripResults with normalized destinations, or ``error`` set.
    """
    if config is None:
        config = DEFAULT_CONFIG
    if gateway is None:
        gateway = GatewayClient(base_url=config.gateway_url, timeout=config.request_timeout)

    graph = create_results_graph(store, gateway, config)
    final_state = graph.invoke(make_initial_state(session_id))

    trip_request = final_state.get("trip_request")
    return TripResults(
        trip_request=TripRequest.model_validate(trip_request) if trip_request else None,
        destinations=[
            Destination.model_validate(d) for d in final_state.get("destinations") or []
        ],
        warnings=final_state.get("warnings", []),
        error=final_state.get("error_message"),
    )

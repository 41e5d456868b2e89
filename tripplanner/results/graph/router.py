"""
Routing logic for the results graph.

Determines the next step based on which state slots are populated.
"""

import logging
from typing import Literal

from tripplanner.results.schemas import ResultsState


logger = logging.getLogger(__name__)


def route_next_step(
    state: ResultsState,
) -> Literal["load_request", "fetch_destinations", "normalize", "complete"]:
    """
    Determine the next node to execute.

    Routing logic:
    1. If an error was recorded -> complete
    2. If trip_request is missing -> load_request
    3. If raw_destinations is missing -> fetch_destinations
    4. If destinations is missing -> normalize
    5. Otherwise -> complete
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=results] [router=route_next_step] "

    if state.get("error_message"):
        next_step = "complete"
    elif state.get("trip_request") is None:
        next_step = "load_request"
    elif state.get("raw_destinations") is None:
        next_step = "fetch_destinations"
    elif state.get("destinations") is None:
        next_step = "normalize"
    else:
        next_step = "complete"

    logger.info(f"{_log}Routing to '{next_step}' | step={state.get('current_step')}")
    return next_step

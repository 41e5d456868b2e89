"""
Prompt builders for the planning gateway.
"""

import json
from typing import Dict, List

from tripplanner.gateway.prompts.templates import PLANNER_SYSTEM_PROMPT
from tripplanner.shared.contracts.trip_request import TripRequest


def build_user_prompt(trip_request: TripRequest) -> str:
    """Serialize the request as pretty-printed camelCase JSON."""
    return json.dumps(trip_request.to_wire(), indent=2)


def build_planner_messages(trip_request: TripRequest) -> List[Dict[str, str]]:
    """
    Build the two-message exchange sent to the model.

    Returns:
        [system instruction, user message carrying the request JSON]
    """
    return [
        {"role": "system", "content": PLANNER_SYSTEM_PROMPT},
        {"role": "user", "content": build_user_prompt(trip_request)},
    ]

"""
State schema for the results workflow.
"""

from typing import TypedDict, List, Optional, Annotated
import operator


class ResultsState(TypedDict):
    """
    State flowing through the results graph.

    Slots are filled in order: trip_request, raw_destinations, destinations.
    ``error_message`` is the user-facing message once any step fails.
    """

    # Loaded from the store (TripRequest wire dict)
    trip_request: Optional[dict]

    # Gateway reply, before and after normalization (wire dicts)
    raw_destinations: Optional[List[dict]]
    destinations: Optional[List[dict]]

    # Outcome tracking
    current_step: str
    error_message: Optional[str]
    warnings: Annotated[List[str], operator.add]
    errors: Annotated[List[str], operator.add]
    messages: Annotated[List[dict], operator.add]

    # Session tracking
    session_id: Optional[str]

"""Node functions for the results workflow."""

from tripplanner.results.nodes.results import (
    load_request_node,
    fetch_destinations_node,
    normalize_node,
    complete_node,
)

__all__ = [
    "load_request_node",
    "fetch_destinations_node",
    "normalize_node",
    "complete_node",
]

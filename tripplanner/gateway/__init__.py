"""
Planning gateway.

Single-shot proxy from a TripRequest to the external model, exposed as
``POST /api/trip-planner``.
"""

from tripplanner.gateway.config import GatewayConfig, DEFAULT_CONFIG
from tripplanner.gateway.planner import plan_trip
from tripplanner.gateway.response_parser import UpstreamContractError, parse_planner_response

__all__ = [
    "GatewayConfig",
    "DEFAULT_CONFIG",
    "plan_trip",
    "UpstreamContractError",
    "parse_planner_response",
]

"""
Shared infrastructure for the trip planner.

Modules:
- llm: Groq (OpenAI-compatible) client, single-shot JSON mode call
- logging: Structured JSON logging
- contracts: TripRequest and destination contracts
"""

from tripplanner.shared.llm.client import get_cached_client, call_llm_json
from tripplanner.shared.logging.config import setup_logging, log_planning_event

__all__ = [
    "get_cached_client",
    "call_llm_json",
    "setup_logging",
    "log_planning_event",
]

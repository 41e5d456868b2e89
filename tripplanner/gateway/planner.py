"""
Single-shot trip planning call.

Sends a TripRequest to the external model and parses the reply. Each call
is independent; nothing is cached between requests.
"""

import logging
import time
from typing import Any, Optional

from tripplanner.gateway.config import DEFAULT_CONFIG, GatewayConfig
from tripplanner.gateway.prompts.builders import build_planner_messages
from tripplanner.gateway.response_parser import parse_planner_response
from tripplanner.shared.contracts.trip_plan import TripPlannerResponse
from tripplanner.shared.contracts.trip_request import TripRequest
from tripplanner.shared.llm.client import call_llm_json


logger = logging.getLogger(__name__)


def plan_trip(
    trip_request: TripRequest,
    client: Any,
    config: Optional[GatewayConfig] = None,
    request_id: str = "unknown",
) -> TripPlannerResponse:
    """
    Ask the model for destination packages matching the request.

    Args:
        trip_request: Canonical trip parameters
        client: OpenAI-compatible client
        config: Model parameters. Uses DEFAULT_CONFIG if not provided.
        request_id: Identifier used in log lines

    Returns:
        Parsed TripPlannerResponse (possibly with no destinations)

    Raises:
        UpstreamContractError: If the model output is malformed.
        Exception: Any transport error from the client propagates.
    """
    if config is None:
        config = DEFAULT_CONFIG
    _log = f"[request={request_id}] [gateway=planner] "

    messages = build_planner_messages(trip_request)

    logger.info(
        f"{_log}Calling model | model={config.model}, "
        f"dates={trip_request.start_date}..{trip_request.end_date}, "
        f"people={trip_request.number_of_people}, budget={trip_request.budget}"
    )
    started = time.perf_counter()
    content, usage = call_llm_json(
        messages,
        client=client,
        model=config.model,
        temperature=config.temperature,
        top_p=config.top_p,
        max_completion_tokens=config.max_completion_tokens,
        reasoning_effort=config.reasoning_effort,
    )
    duration_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{_log}Model replied | duration_ms={duration_ms:.0f}, "
        f"chars={len(content)}, tokens={usage.get('total_tokens', 'n/a')}"
    )

    if not content.strip():
        logger.warning(f"{_log}Model returned empty content; relaying no destinations")

    result = parse_planner_response(content)
    logger.info(f"{_log}Parsed response | destinations={len(result.destinations)}")
    return result

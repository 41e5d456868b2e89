"""
FastAPI endpoint for the planning gateway.

Accepts a TripRequest, forwards it to the external model and relays the
destinations. Every failure is converted to a fixed ``{"error": ...}``
body; no exception details reach the caller.
"""

import logging
import uuid
from typing import Any, Callable

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from tripplanner.gateway.config import DEFAULT_CONFIG, GatewayConfig
from tripplanner.gateway.planner import plan_trip
from tripplanner.gateway.response_parser import UpstreamContractError
from tripplanner.shared.contracts.trip_request import TripRequest
from tripplanner.shared.llm.client import get_cached_client


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["trip-planner"])

PLANNING_FAILED_MESSAGE = "Failed to process trip planning request"
INVALID_UPSTREAM_MESSAGE = "Trip planner returned an invalid response"


def get_gateway_config() -> GatewayConfig:
    return DEFAULT_CONFIG


def get_client_factory(
    config: GatewayConfig = Depends(get_gateway_config),
) -> Callable[[], Any]:
    """
    Dependency returning a callable that builds the LLM client.

    The client is built inside the handler so a missing credential is
    reported through the handler's error shape.
    """

    def _factory() -> Any:
        return get_cached_client(
            api_key_env=config.api_key_env,
            base_url=config.base_url,
            timeout=config.timeout_seconds,
        )

    return _factory


@router.post("/trip-planner")
async def trip_planner(
    request: Request,
    config: GatewayConfig = Depends(get_gateway_config),
    client_factory: Callable[[], Any] = Depends(get_client_factory),
):
    """
    Plan destinations for a trip request.

    Returns 200 ``{"destinations": [...]}``, 502 when the model output
    breaks the contract, and 500 for every other failure.
    """
    request_id = str(uuid.uuid4())[:8]
    _log = f"[request={request_id}] [api=trip-planner] "

    try:
        body = await request.body()
        if not body.strip():
            raise ValueError("Request body is empty")
        trip_request = TripRequest.model_validate_json(body)

        logger.info(
            f"{_log}Planning request received | type={trip_request.vacation_type}, "
            f"destination={trip_request.destination or 'any'}"
        )

        client = client_factory()
        result = await run_in_threadpool(
            plan_trip, trip_request, client, config, request_id
        )
        return JSONResponse(content=result.to_wire())

    except UpstreamContractError as e:
        logger.error(f"{_log}Upstream contract violation: {e}")
        return JSONResponse(
            status_code=502,
            content={"error": INVALID_UPSTREAM_MESSAGE},
        )
    except Exception as e:
        logger.exception(f"{_log}Error processing trip planning request: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": PLANNING_FAILED_MESSAGE},
        )

"""
Response parser for the planning gateway.

Turns the model's completion content into a TripPlannerResponse. Empty
content is a valid "no destinations" answer. Non-empty content that is not
a JSON object with a ``destinations`` list is an upstream contract
violation; bad values inside a destination are coerced by the contract
models and reported later by the results cost checks.
"""

import json
import logging
import re
from typing import Optional

from pydantic import ValidationError

from tripplanner.shared.contracts.trip_plan import TripPlannerResponse


logger = logging.getLogger(__name__)

_CODE_BLOCK_PATTERN = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


class UpstreamContractError(Exception):
    """Raised when the model's output does not match the response contract."""

    pass


def extract_json_from_response(raw_response: str) -> str:
    """
    Strip whitespace and an optional markdown code fence around the JSON.

    Args:
        raw_response: Raw completion content

    Returns:
        The JSON text to parse
    """
    content = raw_response.strip()
    match = _CODE_BLOCK_PATTERN.search(content)
    if match:
        content = match.group(1).strip()
    return content


def parse_planner_response(content: Optional[str]) -> TripPlannerResponse:
    """
    Parse completion content into a TripPlannerResponse.

    Args:
        content: First choice content from the model (may be None or empty)

    Returns:
        Parsed response; ``destinations`` is empty when content is empty.

    Raises:
        UpstreamContractError: If content is not a JSON object with a
            ``destinations`` list.
    """
    if not content or not content.strip():
        return TripPlannerResponse(destinations=[])

    json_str = extract_json_from_response(content)

    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise UpstreamContractError(
            f"Model returned malformed JSON: {e} (content length={len(content)})"
        ) from e

    if not isinstance(data, dict):
        raise UpstreamContractError(
            f"Model returned {type(data).__name__}, expected a JSON object"
        )

    destinations = data.get("destinations")
    if not isinstance(destinations, list):
        raise UpstreamContractError(
            f"Model response has no 'destinations' list (keys={sorted(data)})"
        )

    try:
        return TripPlannerResponse.model_validate(data)
    except ValidationError as e:
        raise UpstreamContractError(
            f"Model destinations do not match the contract: {e.error_count()} errors"
        ) from e

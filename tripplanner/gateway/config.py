"""
Configuration for the planning gateway.

Centralizes the fixed model parameters for the outbound completion call.
None of these are user controllable.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from tripplanner.shared.llm.client import DEFAULT_BASE_URL


@dataclass
class GatewayConfig:
    """
    Configuration for the trip planner gateway.

    Attributes:
        model: Model identifier on the Groq endpoint
        temperature: Sampling temperature (1 = high variability)
        top_p: Nucleus sampling mass
        max_completion_tokens: Output token budget
        reasoning_effort: Reasoning effort hint for reasoning models
        timeout_seconds: Outbound request timeout
        api_key_env: Environment variable holding the API key
        base_url: OpenAI-compatible endpoint base URL
    """

    model: str = "openai/gpt-oss-20b"
    temperature: float = 1.0
    top_p: float = 1.0
    max_completion_tokens: int = 8192
    reasoning_effort: Optional[str] = "medium"
    timeout_seconds: float = 60.0
    api_key_env: str = "GROQ_API_KEY"
    base_url: str = field(
        default_factory=lambda: os.environ.get("GROQ_BASE_URL", DEFAULT_BASE_URL)
    )


# Default configuration instance
DEFAULT_CONFIG = GatewayConfig()

"""
OpenAI-compatible client for the Groq chat completions API.

Provides a cached client instance and a single-shot JSON-mode completion
call. Retries are disabled: every planning request is exactly one billable
round trip to the external service.
"""

import os
from typing import Any, Dict, List, Optional, Tuple

from openai import OpenAI
from dotenv import load_dotenv
load_dotenv()

DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"

# Module-level cache, rebuilt whenever the credential or endpoint changes
_client: Optional[OpenAI] = None
_client_key: Optional[Tuple[str, str, float]] = None


def get_cached_client(
    api_key_env: str = "GROQ_API_KEY",
    base_url: Optional[str] = None,
    timeout: float = 60.0,
) -> OpenAI:
    """
    Returns a cached OpenAI client pointed at the Groq endpoint.

    The credential is read from the environment on every call so that a
    rotated or removed key takes effect without a restart.

    Raises:
        ValueError: If the API key environment variable is not set.
    """
    global _client, _client_key
    api_key = os.environ.get(api_key_env)
    if not api_key:
        raise ValueError(
            f"{api_key_env} environment variable is not set. "
            "Please set it to your Groq API key."
        )
    base_url = base_url or DEFAULT_BASE_URL
    key = (api_key, base_url, timeout)
    if _client is None or _client_key != key:
        _client = OpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )
        _client_key = key
    return _client


def reset_client_cache() -> None:
    """Drop the cached client (used by tests and after key rotation)."""
    global _client, _client_key
    _client = None
    _client_key = None


def call_llm_json(
    messages: List[Dict[str, str]],
    client: Any,
    model: str,
    temperature: float = 1.0,
    top_p: float = 1.0,
    max_completion_tokens: int = 8192,
    reasoning_effort: Optional[str] = "medium",
) -> Tuple[str, Dict[str, int]]:
    """
    Call the chat completion API in JSON mode and return content with usage.

    Args:
        messages: List of message dicts with 'role' and 'content' keys
        client: OpenAI-compatible client instance
        model: Model identifier to use
        temperature: Sampling temperature
        top_p: Nucleus sampling mass
        max_completion_tokens: Output token budget
        reasoning_effort: Reasoning effort hint, omitted when None

    Returns:
        Tuple of (first choice content or "" when empty, usage dict)
    """
    params: Dict[str, Any] = {
        "model": model,
        "messages": messages,
        "temperature": temperature,
        "top_p": top_p,
        "max_completion_tokens": max_completion_tokens,
        "stream": False,
        "response_format": {"type": "json_object"},
    }
    if reasoning_effort:
        params["reasoning_effort"] = reasoning_effort

    response = client.chat.completions.create(**params)

    content = response.choices[0].message.content or ""
    usage: Dict[str, int] = {}
    if getattr(response, "usage", None) is not None:
        usage = {
            "input_tokens": response.usage.prompt_tokens,
            "output_tokens": response.usage.completion_tokens,
            "total_tokens": response.usage.total_tokens,
        }

    return content, usage

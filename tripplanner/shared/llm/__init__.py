"""LLM client utilities."""

from tripplanner.shared.llm.client import (
    get_cached_client,
    call_llm_json,
    reset_client_cache,
)

__all__ = ["get_cached_client", "call_llm_json", "reset_client_cache"]

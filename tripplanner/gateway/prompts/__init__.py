"""Prompt templates and builders for the planning gateway."""

from tripplanner.gateway.prompts.templates import PLANNER_SYSTEM_PROMPT
from tripplanner.gateway.prompts.builders import build_planner_messages, build_user_prompt

__all__ = ["PLANNER_SYSTEM_PROMPT", "build_planner_messages", "build_user_prompt"]

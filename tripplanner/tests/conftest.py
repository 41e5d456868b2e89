"""
Shared fixtures: a stub OpenAI-compatible client and sample payloads.
"""

import json
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from tripplanner.gateway.planner_api import get_client_factory
from tripplanner.main import app


class StubCompletions:
    """Records create() calls and returns a canned completion."""

    def __init__(self, content: Optional[str] = None, error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(
            choices=[SimpleNamespace(message=message)],
            usage=SimpleNamespace(prompt_tokens=812, completion_tokens=1530, total_tokens=2342),
        )


class StubLLMClient:
    """Minimal stand-in for openai.OpenAI exposing chat.completions.create."""

    def __init__(self, content: Optional[str] = None, error: Optional[Exception] = None):
        self.completions = StubCompletions(content=content, error=error)
        self.chat = SimpleNamespace(completions=self.completions)


def make_trip_request_payload(**overrides) -> Dict[str, Any]:
    payload = {
        "startDate": "2025-09-01",
        "endDate": "2025-09-07",
        "budget": 50000,
        "vacationType": "Beach",
        "numberOfPeople": 2,
    }
    payload.update(overrides)
    return payload


def make_destination(name: str, flight: float, night: float, activities: List[float],
                     people: int = 2, nights: int = 6, **extra) -> Dict[str, Any]:
    """Build a destination whose costs follow the requested arithmetic."""
    total = flight * people + night * nights + sum(activities) * people
    destination = {
        "name": name,
        "flight": {
            "airline": "West Airlines",
            "departure": "2025-09-01T06:30:00",
            "arrival": "2025-09-01T09:05:00",
            "pricePerPerson": flight,
        },
        "hotel": {
            "name": f"{name} Bay Resort",
            "checkIn": "2025-09-01",
            "checkOut": "2025-09-07",
            "pricePerNight": night,
        },
        "activities": [
            {"name": f"{name} activity {i + 1}", "pricePerPerson": price}
            for i, price in enumerate(activities)
        ],
        "totalCost": total,
        "perPersonCost": total / people,
    }
    destination.update(extra)
    return destination


def make_model_content() -> str:
    return json.dumps(
        {
            "destinations": [
                make_destination(
                    "Goa", 6500, 3200, [1500, 800],
                    image="https://images.unsplash.com/photo-goa",
                    description="Sun, sand and seafood.",
                ),
                make_destination("Port Blair", 9000, 2500, [2200]),
                make_destination("Kochi", 5200, 2800, [1200, 600, 400], image=""),
            ]
        }
    )


@pytest.fixture
def stub_llm():
    return StubLLMClient(content=make_model_content())


@pytest.fixture
def api_client():
    """TestClient whose gateway uses whatever stub is installed via install_llm."""
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def install_llm():
    """Route the gateway's LLM client factory to the given stub."""

    def _install(stub: StubLLMClient) -> StubLLMClient:
        app.dependency_overrides[get_client_factory] = lambda: (lambda: stub)
        return stub

    yield _install
    app.dependency_overrides.clear()

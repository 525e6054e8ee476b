"""Shared pytest fixtures for the SiteGen test suite.

Provides reusable fixtures for:
- Business fixtures for each industry library
- A small preset catalogue covering every routing branch
- Recording collaborators that capture backend payloads
- Run stores and routers wired to those collaborators
"""

from __future__ import annotations

from typing import Any

import pytest

from sitegen.backends import Collaborators
from sitegen.models import BusinessFixture, GenerationPreset
from sitegen.router import GenerationRouter
from sitegen.tracker import RunStore


# ---------------------------------------------------------------------------
# Business fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def healthcare_fixture() -> BusinessFixture:
    return BusinessFixture.model_validate(
        {
            "business": {
                "name": "Riverside Family Clinic",
                "industry": "healthcare",
                "tagline": "Care close to home",
                "description": "Family medicine for every generation.",
                "phone": "555-010-2000",
                "email": "hello@riverside.example",
                "address": "12 River Rd, Springfield",
                "hours": {"Mon-Fri": "8am-6pm", "Sat": "9am-1pm"},
            },
        }
    )


@pytest.fixture
def restaurant_fixture() -> BusinessFixture:
    return BusinessFixture.model_validate(
        {
            "business": {
                "name": "Mario's Pizza",
                "industry": "pizza",
                "tagline": "Wood-fired since 1985",
                "phone": "555-222-0101",
                "address": "4 Main St, Brooklyn",
            },
            "pages": {
                "home": {
                    "hero": {
                        "headline": "Authentic Neapolitan Pizza",
                        "cta": "Order Now",
                        "ctaLink": "/menu",
                    }
                }
            },
            "menu": [
                {
                    "name": "Pizzas",
                    "items": [
                        {"name": "Margherita", "price": "$14", "description": "San Marzano, basil"},
                        {"name": "Diavola", "price": "$16", "description": "Spicy salami"},
                    ],
                },
                {
                    "name": "Drinks",
                    "items": [{"name": "Lemonade", "price": "$4"}],
                },
            ],
        }
    )


@pytest.fixture
def tech_fixture() -> BusinessFixture:
    return BusinessFixture.model_validate(
        {
            "business": {"name": "CloudSync", "industry": "saas", "tagline": "Sync everything"},
            "theme": {"colors": {"primary": "#111827", "secondary": "#374151"}},
        }
    )


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

def _preset(preset_id: str, mode: str, tier: str | None, **data: Any) -> GenerationPreset:
    body = {"businessName": data.pop("business_name", "Test Biz"), "industry": "pizza", **data}
    return GenerationPreset.model_validate(
        {"id": preset_id, "name": preset_id.title(), "mode": mode, "tier": tier, "data": body}
    )


@pytest.fixture
def sample_presets() -> dict[str, GenerationPreset]:
    """One preset per routing branch, keyed by id."""
    presets = [
        _preset("quick", "quickstart", "L1", pages=["home"], tagline="Best slice"),
        _preset("instant-pages", "instant", "L2", pages=["home", "about", "menu"]),
        _preset("instant", "instant", None, location="Brooklyn, NY", tagline="Hot and fresh"),
        _preset("ai-test", "orchestrate-test", "L2", pages=["home", "menu"]),
        _preset(
            "custom",
            "custom",
            None,
            description="Family owned.",
            visualStyle="Rustic",
            aiInstructions="Show the oven.",
        ),
        _preset("inspired", "inspired", None, referenceUrl="https://example.com"),
        _preset("rebuild", "rebuild", None, existingUrl="https://old.example.com"),
        _preset("odd-mode", "teleport", None),
    ]
    return {preset.id: preset for preset in presets}


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

class RecordingBackend:
    """Async assemble/orchestrate stand-in that records every payload."""

    def __init__(self, response: dict[str, Any] | None = None) -> None:
        self.response = response if response is not None else {
            "projectPath": "/tmp/generated/test-biz",
            "pages": ["home", "about"],
            "modules": ["auth"],
            "cost": 0.0125,
            "tokens": {"input": 1200, "output": 800},
        }
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def assemble(self, payload: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("assemble", payload))
        return self.response

    async def orchestrate(self, payload: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("orchestrate", payload))
        return self.response


@pytest.fixture
def recording_backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def collaborators(recording_backend: RecordingBackend) -> Collaborators:
    return Collaborators(
        assemble_project=recording_backend.assemble,
        orchestrate_project=recording_backend.orchestrate,
    )


@pytest.fixture
def router(collaborators: Collaborators) -> GenerationRouter:
    return GenerationRouter(collaborators)


@pytest.fixture
def run_store() -> RunStore:
    return RunStore()

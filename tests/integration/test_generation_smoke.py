"""Generation smoke tests for SiteGen.

These tests drive the real router, tracker, and HTTP backend against the
bundled preset catalogue.  The generation service is replaced at the HTTP
boundary with ``httpx.MockTransport`` so the tests run without a network.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from sitegen.backends import Collaborators, HttpGenerationBackend
from sitegen.models import RunStatus
from sitegen.router import GenerationRouter
from sitegen.tracker import RunStore, RunTracker, get_test_summary


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class FakeGenerationService:
    """Answers /api/assemble and /api/orchestrate like the real service."""

    def __init__(self, fail_paths: tuple[str, ...] = ()) -> None:
        self.fail_paths = fail_paths
        self.requests: list[tuple[str, dict[str, Any]]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.requests.append((request.url.path, payload))
        if request.url.path in self.fail_paths:
            return httpx.Response(500, json={"error": "model quota exceeded"})
        return httpx.Response(
            200,
            json={
                "projectPath": "/srv/generated/site",
                "pages": ["home", "menu", "about"],
                "modules": ["auth", "orders"],
                "cost": 0.02,
                "tokens": {"input": 1000, "output": 500},
            },
        )


def _tracker(service: FakeGenerationService, store: RunStore) -> RunTracker:
    backend = HttpGenerationBackend("http://generation.test", transport=httpx.MockTransport(service))
    router = GenerationRouter(Collaborators.http(backend), backend=backend)
    return RunTracker(router, store)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


@pytest.mark.integration
class TestGenerationSmoke:
    """Run bundled presets end to end through the HTTP backend."""

    async def test_mixed_batch(self) -> None:
        service = FakeGenerationService()
        store = RunStore()
        runs = await _tracker(service, store).run_batch(["pizza-L1", "orchestrate-saas"])

        assert [run.preset_id for run in runs] == ["pizza-L1", "orchestrate-saas"]
        assert all(run.success for run in runs)
        assert all(run.status is RunStatus.TERMINAL for run in runs)
        assert {run.path for run in runs} == {"assemble", "orchestrate"}

        by_path = dict(service.requests)
        assemble = by_path["/api/assemble"]
        assert assemble["name"] == runs[0].artifact_name
        assert assemble["name"].startswith("QuickSlice-")
        assert assemble["testMode"] is True
        assert set(by_path["/api/orchestrate"]) == {"input", "autoDeploy"}

        summary = get_test_summary(store)
        assert summary.total == 2
        assert summary.passed == 2
        assert summary.pass_rate == "100.0%"
        assert summary.total_cost == "$0.0400"

    async def test_backend_error_is_recorded(self) -> None:
        service = FakeGenerationService(fail_paths=("/api/assemble",))
        store = RunStore()
        run = await _tracker(service, store).run_test_generation("pizza-L1")

        assert run.success is False
        assert run.status is RunStatus.TERMINAL
        assert run.error == "model quota exceeded"
        assert "BackendError" in run.error_stack
        assert run.result is None
        assert get_test_summary(store).failed == 1

    async def test_every_bundled_preset_routes(self) -> None:
        from sitegen.presets import PRESETS

        service = FakeGenerationService()
        store = RunStore()
        runs = await _tracker(service, store).run_batch(list(PRESETS))

        failures = {run.preset_id: run.error for run in runs if not run.success}
        assert failures == {}
        assert len(store) == len(PRESETS)
        assert len(service.requests) == len(PRESETS)

"""Unit tests for the run tracker and run store (sitegen.tracker).

Tests cover:
- RunStore add/list/clear and summary aggregation (empty and populated)
- run_test_generation: tagging, result normalisation, failure capture
- Deploy and cleanup isolation, optional collaborator timeout
- Status transitions, durations, run_batch
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from sitegen.backends import Collaborators
from sitegen.config import Config
from sitegen.errors import BackendError, PresetValidationError
from sitegen.models import GenerationRun, RunResult, RunStatus, RunSummary
from sitegen.router import GenerationRouter
from sitegen.tracker import (
    RunStore,
    RunTracker,
    clear_test_results,
    get_test_results,
    get_test_summary,
)


def _finished_run(run_id: str, success: bool, duration: float, cost: float = 0.0) -> GenerationRun:
    return GenerationRun(
        id=run_id,
        preset_id="p",
        start_time=datetime(2026, 1, 1, tzinfo=timezone.utc),
        duration=duration,
        success=success,
        result=RunResult(cost=cost) if success else None,
        error=None if success else "boom",
    )


@pytest.fixture
def tracker(router, run_store, sample_presets) -> RunTracker:
    return RunTracker(router, run_store, presets=sample_presets)


# ---------------------------------------------------------------------------
# RunStore
# ---------------------------------------------------------------------------


class TestRunStore:
    @pytest.mark.unit
    def test_empty_summary(self, run_store):
        summary = run_store.summary()
        assert summary == RunSummary()
        assert summary.total == 0
        assert summary.passed == 0
        assert summary.failed == 0
        assert summary.pass_rate == "0%"
        assert summary.total_duration == "0.0s"
        assert summary.average_duration == "0s"
        assert summary.total_cost == "$0.0000"

    @pytest.mark.unit
    def test_summary_two_passed_one_failed(self, run_store):
        run_store.add(_finished_run("a", True, 1.5, 0.005))
        run_store.add(_finished_run("b", True, 1.0, 0.015))
        run_store.add(_finished_run("c", False, 0.5))

        summary = run_store.summary()
        assert summary.total == 3
        assert summary.passed == 2
        assert summary.failed == 1
        assert summary.pass_rate == "66.7%"
        assert summary.total_duration == "3.0s"
        assert summary.average_duration == "1.0s"
        assert summary.total_cost == "$0.0200"

    @pytest.mark.unit
    def test_list_returns_copies(self, run_store):
        run_store.add(_finished_run("a", True, 1.0))
        listed = run_store.list()
        listed[0].success = False
        assert run_store.list()[0].success is True

    @pytest.mark.unit
    def test_clear(self, run_store):
        run_store.add(_finished_run("a", True, 1.0))
        clear_test_results(run_store)
        assert get_test_results(run_store) == []
        assert get_test_summary(run_store).total == 0
        assert len(run_store) == 0


# ---------------------------------------------------------------------------
# run_test_generation
# ---------------------------------------------------------------------------


class TestRunTestGeneration:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unknown_preset_raises_before_recording(self, tracker, run_store, recording_backend):
        with pytest.raises(PresetValidationError, match="Unknown preset: nope"):
            await tracker.run_test_generation("nope")
        assert run_store.list() == []
        assert recording_backend.calls == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_successful_run(self, tracker, run_store):
        run = await tracker.run_test_generation("quick")

        assert run.success is True
        assert run.error is None
        assert run.path == "assemble"
        assert run.result.page_count == 2
        assert run.result.module_count == 1
        assert run.result.cost == pytest.approx(0.0125)
        assert run.result.tokens.output == 800
        assert run.status is RunStatus.TERMINAL
        assert [r.id for r in run_store.list()] == [run.id]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_artifact_name_and_tags_reach_backend(self, tracker, recording_backend):
        run = await tracker.run_test_generation("quick")
        _, payload = recording_backend.calls[0]

        assert run.artifact_name.startswith("Test Biz-")
        assert payload["name"] == run.artifact_name

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_tags_applied_to_routed_data(self, sample_presets, run_store):
        router = MagicMock(spec=GenerationRouter)
        router.collaborators = Collaborators()
        router.plan.return_value = GenerationRouter().plan(sample_presets["quick"])
        router.route = AsyncMock(side_effect=RuntimeError("stop here"))
        tracker = RunTracker(router, run_store, presets=sample_presets)

        run = await tracker.run_test_generation("quick")

        data = router.route.await_args.args[1]
        assert data.is_test is True
        assert data.test_id == run.id
        assert data.preset_id == "quick"
        assert data.business_name == run.artifact_name
        # The catalogue preset itself is untouched.
        assert sample_presets["quick"].data.is_test is False

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_failure_is_recorded_not_raised(self, sample_presets, run_store):
        assemble = AsyncMock(side_effect=BackendError("Industry not supported", status_code=400))
        tracker = RunTracker(
            GenerationRouter(Collaborators(assemble_project=assemble)), run_store, presets=sample_presets
        )

        run = await tracker.run_test_generation("quick")

        assert run.success is False
        assert run.error == "Industry not supported"
        assert "BackendError" in run.error_stack
        assert run.result is None
        assert run.cost == 0.0
        assert run.status is RunStatus.TERMINAL
        assert len(run_store) == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_empty_exception_message_falls_back_to_class_name(self, sample_presets, run_store):
        tracker = RunTracker(
            GenerationRouter(Collaborators(assemble_project=AsyncMock(side_effect=KeyError()))),
            run_store,
            presets=sample_presets,
        )
        run = await tracker.run_test_generation("quick")
        assert run.error == "KeyError"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_durations_and_timestamps(self, tracker):
        run = await tracker.run_test_generation("instant")
        assert run.duration >= 0
        assert run.end_time is not None
        assert run.end_time >= run.start_time

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_consecutive_runs_get_distinct_names(self, tracker):
        first = await tracker.run_test_generation("quick")
        second = await tracker.run_test_generation("quick")
        assert first.artifact_name != second.artifact_name
        assert first.id != second.id


# ---------------------------------------------------------------------------
# Deploy and cleanup
# ---------------------------------------------------------------------------


class TestDeployAndCleanup:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_deploy_success(self, router, run_store, sample_presets):
        deploy = AsyncMock(return_value={"url": "https://demo.example"})
        tracker = RunTracker(
            router, run_store, Collaborators(deploy_project=deploy), presets=sample_presets
        )
        run = await tracker.run_test_generation("quick", deploy=True)

        deploy.assert_awaited_once_with(run.artifact_name)
        assert run.deployed is True
        assert run.deploy_result == {"url": "https://demo.example"}
        assert run.deploy_error is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_deploy_failure_keeps_success(self, router, run_store, sample_presets):
        deploy = AsyncMock(side_effect=RuntimeError("registry unavailable"))
        tracker = RunTracker(
            router, run_store, Collaborators(deploy_project=deploy), presets=sample_presets
        )
        run = await tracker.run_test_generation("quick", deploy=True)

        assert run.success is True
        assert run.deployed is False
        assert run.deploy_error == "registry unavailable"
        assert run.error is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_deploy_skipped_when_generation_failed(self, sample_presets, run_store):
        deploy = AsyncMock()
        router = GenerationRouter(Collaborators(assemble_project=AsyncMock(side_effect=RuntimeError("x"))))
        tracker = RunTracker(router, run_store, Collaborators(deploy_project=deploy), presets=sample_presets)

        run = await tracker.run_test_generation("quick", deploy=True)

        deploy.assert_not_awaited()
        assert run.deployed is False
        assert run.deploy_error is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_deploy_not_requested(self, router, run_store, sample_presets):
        deploy = AsyncMock()
        tracker = RunTracker(router, run_store, Collaborators(deploy_project=deploy), presets=sample_presets)
        await tracker.run_test_generation("quick")
        deploy.assert_not_awaited()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cleanup_runs_after_failure(self, sample_presets, run_store):
        delete = MagicMock()
        router = GenerationRouter(Collaborators(assemble_project=AsyncMock(side_effect=RuntimeError("x"))))
        tracker = RunTracker(router, run_store, Collaborators(delete_project=delete), presets=sample_presets)

        run = await tracker.run_test_generation("quick", cleanup=True)

        delete.assert_called_once_with(run.artifact_name, local_only=True)
        assert run.cleaned_up is True

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cleanup_after_deploy_is_not_local_only(self, router, run_store, sample_presets):
        delete = AsyncMock()
        collaborators = Collaborators(deploy_project=AsyncMock(return_value={}), delete_project=delete)
        tracker = RunTracker(router, run_store, collaborators, presets=sample_presets)

        run = await tracker.run_test_generation("quick", deploy=True, cleanup=True)

        delete.assert_awaited_once_with(run.artifact_name, local_only=False)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cleanup_failure_isolated(self, router, run_store, sample_presets):
        delete = AsyncMock(side_effect=OSError("directory busy"))
        tracker = RunTracker(router, run_store, Collaborators(delete_project=delete), presets=sample_presets)

        run = await tracker.run_test_generation("quick", cleanup=True)

        assert run.success is True
        assert run.cleaned_up is False
        assert run.cleanup_error == "directory busy"
        assert len(run_store) == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_deploy_timeout_recorded(self, router, run_store, sample_presets):
        async def hang(name):
            await asyncio.sleep(1)

        tracker = RunTracker(
            router,
            run_store,
            Collaborators(deploy_project=hang),
            presets=sample_presets,
            config=Config(collaborator_timeout=0.01),
        )
        run = await tracker.run_test_generation("quick", deploy=True)

        assert run.success is True
        assert run.deployed is False
        assert run.deploy_error == "Deploy timed out after 0.01s"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_tracker_defaults_to_router_collaborators(self, sample_presets, run_store, recording_backend):
        delete = AsyncMock()
        router = GenerationRouter(
            Collaborators(assemble_project=recording_backend.assemble, delete_project=delete)
        )
        tracker = RunTracker(router, run_store, presets=sample_presets)
        await tracker.run_test_generation("quick", cleanup=True)
        delete.assert_awaited_once()


# ---------------------------------------------------------------------------
# Batches and status
# ---------------------------------------------------------------------------


class TestRunBatch:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_batch_records_every_run(self, tracker, run_store):
        runs = await tracker.run_batch(["quick", "instant", "ai-test"])

        assert [run.preset_id for run in runs] == ["quick", "instant", "ai-test"]
        assert len({run.artifact_name for run in runs}) == 3
        assert run_store.summary().total == 3

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_batch_validates_ids_first(self, tracker, run_store, recording_backend):
        with pytest.raises(PresetValidationError):
            await tracker.run_batch(["quick", "missing"])
        assert recording_backend.calls == []
        assert len(run_store) == 0


class TestRunStatus:
    @pytest.mark.unit
    def test_forward_transitions(self):
        run = _finished_run("a", True, 0.0)
        for status in (
            RunStatus.RUNNING,
            RunStatus.SUCCESS,
            RunStatus.DEPLOY_ATTEMPTED,
            RunStatus.CLEANUP_ATTEMPTED,
            RunStatus.TERMINAL,
        ):
            run.advance(status)
        assert run.status is RunStatus.TERMINAL

    @pytest.mark.unit
    def test_backward_transition_rejected(self):
        run = _finished_run("a", True, 0.0)
        run.advance(RunStatus.RUNNING)
        run.advance(RunStatus.SUCCESS)
        with pytest.raises(ValueError):
            run.advance(RunStatus.FAILED)
        with pytest.raises(ValueError):
            run.advance(RunStatus.RUNNING)


class TestReportedFailures:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_deploy_reporting_failure_in_band(self, router, run_store, sample_presets):
        deploy = AsyncMock(return_value={"success": False, "error": "quota exceeded"})
        tracker = RunTracker(router, run_store, Collaborators(deploy_project=deploy), presets=sample_presets)

        run = await tracker.run_test_generation("quick", deploy=True)

        assert run.deployed is False
        assert run.deploy_result is None
        assert run.deploy_error == "quota exceeded"
        assert run.success is True

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cleanup_reporting_failure_without_message(self, router, run_store, sample_presets):
        delete = AsyncMock(return_value={"success": False})
        tracker = RunTracker(router, run_store, Collaborators(delete_project=delete), presets=sample_presets)

        run = await tracker.run_test_generation("quick", cleanup=True)

        assert run.cleaned_up is False
        assert run.cleanup_error == "CleanupError reported by collaborator"

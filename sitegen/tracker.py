"""Run tracker: executes presets end to end and keeps a history of runs.

One run is *generate -> deploy -> cleanup*, strictly in that order.  Failures
in any phase are recorded on the :class:`~sitegen.models.GenerationRun`
instead of being raised, so a batch of runs always yields one record per
preset.  The only exception that escapes is
:class:`~sitegen.errors.PresetValidationError` for an unknown preset id,
raised before anything is recorded.
"""

from __future__ import annotations

import asyncio
import threading
import time
import traceback
import uuid
from datetime import datetime, timedelta, timezone

from rich.markup import escape

from sitegen.backends import Collaborators, call_collaborator
from sitegen.config import Config
from sitegen.errors import CleanupError, DeployError
from sitegen.models import GenerationPreset, GenerationRun, RunResult, RunStatus, RunSummary
from sitegen.presets import PRESETS, generate_test_name, get_preset
from sitegen.router import GenerationRouter
from sitegen.utils import (
    console,
    format_duration,
    print_error,
    print_run_header,
    print_success,
    print_warning,
)


class RunStore:
    """Caller-owned, append-only history of generation runs."""

    def __init__(self) -> None:
        self._runs: list[GenerationRun] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._runs)

    def add(self, run: GenerationRun) -> None:
        with self._lock:
            self._runs.append(run)

    def list(self) -> list[GenerationRun]:
        """Return copies of the recorded runs in completion order."""
        with self._lock:
            return [run.model_copy(deep=True) for run in self._runs]

    def clear(self) -> None:
        with self._lock:
            self._runs.clear()

    def summary(self) -> RunSummary:
        """Aggregate pass rate, durations and cost over the recorded runs."""
        runs = self.list()
        total = len(runs)
        if total == 0:
            return RunSummary()

        passed = sum(1 for run in runs if run.success)
        total_duration = sum(run.duration for run in runs)
        total_cost = sum(run.cost for run in runs)
        return RunSummary(
            total=total,
            passed=passed,
            failed=total - passed,
            pass_rate=f"{passed / total * 100:.1f}%",
            total_duration=f"{total_duration:.1f}s",
            average_duration=f"{total_duration / total:.1f}s",
            total_cost=f"${total_cost:.4f}",
        )


def get_test_results(store: RunStore) -> list[GenerationRun]:
    return store.list()


def get_test_summary(store: RunStore) -> RunSummary:
    return store.summary()


def clear_test_results(store: RunStore) -> None:
    store.clear()


def _new_run_id() -> str:
    return f"test-{time.time_ns() // 1_000_000}-{uuid.uuid4().hex[:6]}"


def _error_message(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


def _timeout_message(phase: str, timeout: float | None, exc: BaseException) -> str:
    if timeout is None:
        return _error_message(exc)
    return f"{phase} timed out after {timeout:g}s"


def _raise_if_reported_failure(result: object, error_cls: type[Exception]) -> None:
    """Collaborators may report failure in-band as ``{"success": False, "error": ...}``."""
    if isinstance(result, dict) and result.get("success") is False:
        raise error_cls(result.get("error") or f"{error_cls.__name__} reported by collaborator")


class RunTracker:
    """Runs presets through a :class:`GenerationRouter` and records the outcome.

    Args:
        router: Performs the generation call.
        store: Where finished runs are appended.  A fresh store is created
            when omitted.
        collaborators: Supplies ``deploy_project`` and ``delete_project``.
            Defaults to the router's collaborators.
        presets: Preset catalogue to resolve ids against.
        config: Supplies the optional deploy/cleanup timeout.
    """

    def __init__(
        self,
        router: GenerationRouter,
        store: RunStore | None = None,
        collaborators: Collaborators | None = None,
        presets: dict[str, GenerationPreset] | None = None,
        config: Config | None = None,
    ) -> None:
        self.router = router
        self.store = store if store is not None else RunStore()
        self.collaborators = collaborators or router.collaborators
        self.presets = PRESETS if presets is None else presets
        self.config = config or Config()

    async def run_test_generation(
        self,
        preset_id: str,
        deploy: bool = False,
        cleanup: bool = False,
    ) -> GenerationRun:
        """Execute one preset and return its completed record.

        Raises:
            PresetValidationError: If *preset_id* is unknown.
        """
        preset = get_preset(preset_id, self.presets)

        artifact_name = generate_test_name(preset.data.business_name)
        run = GenerationRun(
            id=_new_run_id(),
            preset_id=preset.id,
            preset_name=preset.name,
            mode=preset.mode,
            tier=preset.tier,
            industry=preset.industry,
            artifact_name=artifact_name,
            start_time=datetime.now(timezone.utc),
        )
        data = preset.data.model_copy(
            update={
                "business_name": artifact_name,
                "is_test": True,
                "test_id": run.id,
                "preset_id": preset.id,
            }
        )

        print_run_header(
            f"TEST: {preset.name}",
            {"Preset": preset.id, "Mode": preset.mode, "Tier": preset.tier, "Artifact": artifact_name},
        )

        run.advance(RunStatus.RUNNING)
        started = time.monotonic()
        try:
            plan = self.router.plan(preset, data)
            run.path = plan.path.value
            console.print(f"   Path: [cyan]{plan.path.value}[/cyan] ({escape(plan.reason)})")

            response = await self.router.route(preset, data)
            run.result = RunResult.from_response(response)
            run.success = True
        except Exception as exc:
            run.error = _error_message(exc)
            run.error_stack = traceback.format_exc()
        finally:
            run.duration = time.monotonic() - started
            run.end_time = run.start_time + timedelta(seconds=run.duration)

        if run.success and run.result is not None:
            run.advance(RunStatus.SUCCESS)
            print_success(
                f"Generated {escape(artifact_name)} in {format_duration(run.duration)}: "
                f"{run.result.page_count} pages, {run.result.module_count} modules, "
                f"${run.result.cost:.4f}"
            )
        else:
            run.advance(RunStatus.FAILED)
            print_error(f"Generation failed after {format_duration(run.duration)}: {escape(run.error or '')}")

        if deploy and run.success and self.collaborators.deploy_project is not None:
            await self._deploy(run, artifact_name)

        if cleanup and self.collaborators.delete_project is not None:
            await self._cleanup(run, artifact_name, local_only=not deploy)

        run.advance(RunStatus.TERMINAL)
        self.store.add(run)
        return run

    async def run_batch(
        self,
        preset_ids: list[str],
        deploy: bool = False,
        cleanup: bool = False,
    ) -> list[GenerationRun]:
        """Run several presets concurrently; results follow *preset_ids* order.

        Every id is validated before any run starts.

        Raises:
            PresetValidationError: If any id is unknown.
        """
        for preset_id in preset_ids:
            get_preset(preset_id, self.presets)
        return list(
            await asyncio.gather(
                *(self.run_test_generation(pid, deploy=deploy, cleanup=cleanup) for pid in preset_ids)
            )
        )

    # ------------------------------------------------------------------
    # Post-generation phases
    # ------------------------------------------------------------------

    async def _deploy(self, run: GenerationRun, artifact_name: str) -> None:
        run.advance(RunStatus.DEPLOY_ATTEMPTED)
        timeout = self.config.collaborator_timeout
        try:
            result = await call_collaborator(
                self.collaborators.deploy_project, artifact_name, timeout=timeout
            )
            _raise_if_reported_failure(result, DeployError)
            run.deploy_result = result
            run.deployed = True
            print_success(f"Deployed {escape(artifact_name)}")
        except asyncio.TimeoutError as exc:
            run.deploy_error = _timeout_message("Deploy", timeout, exc)
            print_warning(run.deploy_error)
        except Exception as exc:
            run.deploy_error = _error_message(exc)
            print_warning(f"Deploy failed: {escape(run.deploy_error)}")

    async def _cleanup(self, run: GenerationRun, artifact_name: str, local_only: bool) -> None:
        run.advance(RunStatus.CLEANUP_ATTEMPTED)
        timeout = self.config.collaborator_timeout
        try:
            result = await call_collaborator(
                self.collaborators.delete_project, artifact_name, local_only=local_only, timeout=timeout
            )
            _raise_if_reported_failure(result, CleanupError)
            run.cleaned_up = True
            console.print(f"   [dim]Cleaned up {escape(artifact_name)}[/dim]")
        except asyncio.TimeoutError as exc:
            run.cleanup_error = _timeout_message("Cleanup", timeout, exc)
            print_warning(run.cleanup_error)
        except Exception as exc:
            run.cleanup_error = _error_message(exc)
            print_warning(f"Cleanup failed: {escape(run.cleanup_error)}")

"""Exception hierarchy for the SiteGen engine.

Library code raises these and lets them propagate.  The only place that turns
an exception into data is :class:`sitegen.tracker.RunTracker`, which records
the failure on a ``GenerationRun`` instead of re-raising.
"""

from __future__ import annotations


class SiteGenError(Exception):
    """Base class for every error raised by SiteGen."""


class PresetValidationError(SiteGenError):
    """Raised when a run is requested for a preset id that does not exist.

    Raised before any run record is created, so there is no run to mark failed.
    """

    def __init__(self, preset_id: str) -> None:
        self.preset_id = preset_id
        super().__init__(f"Unknown preset: {preset_id}")


class TransportError(SiteGenError):
    """Network, HTTP, or timeout failure while calling a generation backend."""


class BackendError(TransportError):
    """The backend answered with an error status and a structured ``error`` field."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class DeployError(SiteGenError):
    """The deploy collaborator failed.  Never affects a run's ``success`` flag."""


class CleanupError(SiteGenError):
    """The cleanup collaborator failed.  Never affects a run's ``success`` flag."""


class TemplateNotFoundError(SiteGenError):
    """No industry page-template library serves the requested industry."""

    def __init__(self, industry: str) -> None:
        self.industry = industry
        super().__init__(f"No page-template library for industry: {industry!r}")

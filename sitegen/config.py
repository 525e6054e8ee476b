"""SiteGen configuration.

Centralised, typed configuration for the generation engine.  All settings use
Pydantic v2 models so they can be validated at construction time and serialised
to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

# Fixed upper bound on a single generation call (5 minutes).
GENERATION_TIMEOUT_SECONDS = 300


class BackendConfig(BaseModel):
    """Where the assembly / orchestration HTTP endpoints live."""

    url: str = Field(default="http://localhost:3001")
    assemble_path: str = Field(default="/api/assemble")
    orchestrate_path: str = Field(default="/api/orchestrate")
    timeout: int = Field(
        default=GENERATION_TIMEOUT_SECONDS,
        ge=1,
        description="Per-request timeout in seconds",
    )


class Config(BaseModel):
    """Global SiteGen configuration.

    Instances are typically created once by the CLI entry point (or a test
    harness) and then passed to the router and tracker.
    """

    backend: BackendConfig = Field(default_factory=BackendConfig)
    output_dir: Path = Field(default=Path("./generated"))

    # Assembly requests skip paid AI calls when this is set.
    test_mode: bool = Field(default=True)

    collaborator_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds allowed for deploy/cleanup collaborators; None means unbounded",
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``<output_dir>/sitegen.json``.

        Returns:
            The resolved path where the file was written.
        """
        target = path or (self.output_dir / "sitegen.json")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            SITEGEN_BACKEND_URL, SITEGEN_BACKEND_TIMEOUT, SITEGEN_OUTPUT_DIR,
            SITEGEN_TEST_MODE, SITEGEN_COLLABORATOR_TIMEOUT.
        """
        backend_kwargs: dict[str, Any] = {}
        if os.environ.get("SITEGEN_BACKEND_URL"):
            backend_kwargs["url"] = os.environ["SITEGEN_BACKEND_URL"]
        if os.environ.get("SITEGEN_BACKEND_TIMEOUT"):
            backend_kwargs["timeout"] = int(os.environ["SITEGEN_BACKEND_TIMEOUT"])

        collaborator_timeout: float | None = None
        if os.environ.get("SITEGEN_COLLABORATOR_TIMEOUT"):
            collaborator_timeout = float(os.environ["SITEGEN_COLLABORATOR_TIMEOUT"])

        test_mode_raw = os.environ.get("SITEGEN_TEST_MODE", "true").strip().lower()

        return cls(
            backend=BackendConfig(**backend_kwargs),
            output_dir=Path(os.environ.get("SITEGEN_OUTPUT_DIR", "./generated")),
            test_mode=test_mode_raw not in ("0", "false", "no", "off"),
            collaborator_timeout=collaborator_timeout,
        )

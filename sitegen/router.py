"""Generation router.

Turns one :class:`~sitegen.models.GenerationPreset` into exactly one backend
call.  The decision order is fixed and the first match wins:

1. ``orchestrate-test`` mode always goes to orchestration, whatever pages or
   tier the preset carries;
2. explicit pages plus a recognised tier (L1-L4) go to deterministic assembly;
3. otherwise the declared mode decides (see :data:`MODE_ROUTES`);
4. any other mode falls back to quickstart assembly.

Prompt building and payload building are plain functions so they can be
tested without a router instance.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from sitegen.backends import Collaborator, Collaborators, HttpGenerationBackend, call_collaborator
from sitegen.config import GENERATION_TIMEOUT_SECONDS
from sitegen.errors import TransportError
from sitegen.models import (
    RECOGNIZED_TIERS,
    GenerationMode,
    GenerationPreset,
    GenerationResponse,
    PresetData,
)


class GenerationPath(str, Enum):
    ASSEMBLE = "assemble"
    ORCHESTRATE = "orchestrate"
    REBUILD = "rebuild"


class PromptStyle(str, Enum):
    SHORT = "short"
    DETAILED = "detailed"
    INSPIRED = "inspired"


@dataclass(frozen=True)
class RoutePlan:
    """Which backend a preset goes to, and why."""

    path: GenerationPath
    prompt_style: Optional[PromptStyle] = None
    reason: str = ""


# Mode -> (path, prompt style) for step 3 of the decision order.
MODE_ROUTES: dict[str, tuple[GenerationPath, Optional[PromptStyle]]] = {
    GenerationMode.QUICKSTART.value: (GenerationPath.ASSEMBLE, None),
    GenerationMode.INSTANT.value: (GenerationPath.ORCHESTRATE, PromptStyle.SHORT),
    GenerationMode.ORCHESTRATOR.value: (GenerationPath.ORCHESTRATE, PromptStyle.SHORT),
    GenerationMode.CUSTOM.value: (GenerationPath.ORCHESTRATE, PromptStyle.DETAILED),
    GenerationMode.FULL_CONTROL.value: (GenerationPath.ORCHESTRATE, PromptStyle.DETAILED),
    GenerationMode.INSPIRED.value: (GenerationPath.ORCHESTRATE, PromptStyle.INSPIRED),
    GenerationMode.REFERENCE.value: (GenerationPath.ORCHESTRATE, PromptStyle.INSPIRED),
    GenerationMode.REBUILD.value: (GenerationPath.REBUILD, None),
}

# Presentation hints forwarded inside the assembly description when set.
_DESCRIPTION_HINTS: tuple[tuple[str, str], ...] = (
    ("communication_style", "communicationStyle"),
    ("layout", "layout"),
    ("cta", "cta"),
    ("team_size", "teamSize"),
    ("price_range", "priceRange"),
    ("customers", "customers"),
    ("video_hero", "videoHero"),
)


# ---------------------------------------------------------------------------
# Payload and prompt builders
# ---------------------------------------------------------------------------


def build_description(data: PresetData) -> dict[str, Any]:
    """Build the structured description object sent to the assembly backend.

    ``pages`` is always present (empty when the preset has none); unset
    presentation hints are left out.
    """
    description: dict[str, Any] = {
        "pages": list(data.pages or []),
        "visualStyle": data.visual_style or "",
        "aiInstructions": data.ai_instructions or "",
        "tagline": data.tagline or "",
        "location": data.location or "",
    }
    for attr, key in _DESCRIPTION_HINTS:
        value = getattr(data, attr)
        if value is not None:
            description[key] = value
    description["text"] = data.description or ""
    return description


def build_assemble_payload(data: PresetData, test_mode: bool = True) -> dict[str, Any]:
    return {
        "name": data.business_name,
        "industry": data.industry,
        "description": build_description(data),
        "theme": data.theme,
        "references": data.references,
        "autoDeploy": data.auto_deploy,
        "adminTier": data.admin_tier,
        "adminModules": data.admin_modules,
        "testMode": test_mode,
    }


def build_prompt(data: PresetData) -> str:
    """``Create a website for {name}[, a {industry} business][ in {location}][. {tagline}]``."""
    prompt = f"Create a website for {data.business_name}"
    if data.industry:
        prompt += f", a {data.industry} business"
    if data.location:
        prompt += f" in {data.location}"
    if data.tagline:
        prompt += f". {data.tagline}"
    return prompt


def build_detailed_prompt(data: PresetData) -> str:
    """Short prompt followed by description, visual style and instructions blocks.

    Blocks are separated by a blank line, always in that order, and empty
    blocks are omitted.
    """
    blocks = [build_prompt(data)]
    if data.description:
        blocks.append(data.description)
    if data.visual_style:
        blocks.append(f"Visual style: {data.visual_style}")
    if data.ai_instructions:
        blocks.append(f"Additional instructions: {data.ai_instructions}")
    return "\n\n".join(blocks)


def build_inspired_prompt(data: PresetData) -> str:
    location = f" in {data.location}" if data.location else ""
    return (
        f"Create a {data.industry or 'business'} website for {data.business_name}{location}, "
        f"inspired by the design of {data.reference_url or 'modern premium websites'}"
    )


def build_orchestrate_payload(prompt: str, data: PresetData) -> dict[str, Any]:
    return {"input": prompt, "autoDeploy": data.auto_deploy}


def build_rebuild_data(data: PresetData) -> dict[str, Any]:
    payload = data.model_dump(by_alias=True, exclude_none=True)
    payload["existingUrl"] = data.existing_url
    payload["businessName"] = data.business_name
    return payload


_PROMPT_BUILDERS = {
    PromptStyle.SHORT: build_prompt,
    PromptStyle.DETAILED: build_detailed_prompt,
    PromptStyle.INSPIRED: build_inspired_prompt,
}


# ---------------------------------------------------------------------------
# Router
# ---------------------------------------------------------------------------


class GenerationRouter:
    """Selects a generation path for a preset and performs the single backend call.

    Args:
        collaborators: Injected assemble/orchestrate/rebuild callables.  A
            missing assemble or orchestrate collaborator is served by
            *backend* over HTTP.
        backend: HTTP backend used when a collaborator is absent.
        timeout: Upper bound in seconds on the backend call.
        test_mode: Value of ``testMode`` in assembly requests.
    """

    def __init__(
        self,
        collaborators: Collaborators | None = None,
        backend: HttpGenerationBackend | None = None,
        timeout: float = GENERATION_TIMEOUT_SECONDS,
        test_mode: bool = True,
    ) -> None:
        self.collaborators = collaborators or Collaborators()
        self.backend = backend or HttpGenerationBackend(timeout=timeout)
        self.timeout = timeout
        self.test_mode = test_mode

    def plan(self, preset: GenerationPreset, data: PresetData | None = None) -> RoutePlan:
        """Decide the generation path without calling anything."""
        data = data or preset.data
        mode = preset.mode

        if mode == GenerationMode.ORCHESTRATE_TEST.value:
            return RoutePlan(GenerationPath.ORCHESTRATE, PromptStyle.SHORT, "AI detection test")

        if data.pages and preset.tier in RECOGNIZED_TIERS:
            return RoutePlan(
                GenerationPath.ASSEMBLE,
                reason=f"explicit pages [{', '.join(data.pages)}] with tier {preset.tier}",
            )

        if mode not in MODE_ROUTES:
            return RoutePlan(GenerationPath.ASSEMBLE, reason=f"unrecognised mode {mode!r}, using quickstart")

        path, style = MODE_ROUTES[mode]
        if path is GenerationPath.REBUILD and self.collaborators.rebuild_project is None:
            return RoutePlan(GenerationPath.ORCHESTRATE, PromptStyle.SHORT, "no rebuild collaborator, using instant")
        return RoutePlan(path, style, f"mode {mode}")

    async def route(self, preset: GenerationPreset, data: PresetData | None = None) -> GenerationResponse:
        """Run the planned backend call and normalise its response.

        Raises:
            TransportError: Network/HTTP failure or timeout.
            BackendError: The backend returned a structured error.
        """
        data = data or preset.data
        plan = self.plan(preset, data)

        if plan.path is GenerationPath.ASSEMBLE:
            func = self.collaborators.assemble_project or self.backend.assemble
            payload: dict[str, Any] = build_assemble_payload(data, test_mode=self.test_mode)
        elif plan.path is GenerationPath.REBUILD:
            func = self.collaborators.rebuild_project
            payload = build_rebuild_data(data)
        else:
            func = self.collaborators.orchestrate_project or self.backend.orchestrate
            prompt = _PROMPT_BUILDERS[plan.prompt_style or PromptStyle.SHORT](data)
            payload = build_orchestrate_payload(prompt, data)

        raw = await self._call(func, payload)
        return _normalise(raw)

    async def _call(self, func: Collaborator, payload: dict[str, Any]) -> Any:
        try:
            return await call_collaborator(func, payload, timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            raise TransportError(f"Generation timed out after {self.timeout:g}s") from exc


def _normalise(raw: Any) -> GenerationResponse:
    if isinstance(raw, GenerationResponse):
        return raw
    if raw is None:
        raise TransportError("Backend returned an empty response")
    return GenerationResponse.model_validate(raw)

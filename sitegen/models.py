"""Pydantic v2 models for the SiteGen data model.

Defines the business fixtures consumed by page generators, the layout
configuration types, the structured page representation produced by the
template library, the generation presets consumed by the router, and the
run records kept by the tracker.

Wire-facing models accept both snake_case attribute names and the camelCase
keys used by the generation backends (``businessName``, ``projectPath``...).
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for models exchanged with backends, presets, and fixtures."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Tier(str, Enum):
    """Site-complexity level.  L1 = landing page ... L4 = full platform."""

    L1 = "L1"
    L2 = "L2"
    L3 = "L3"
    L4 = "L4"


RECOGNIZED_TIERS: frozenset[str] = frozenset(t.value for t in Tier)


class GenerationMode(str, Enum):
    """Declared mode of a generation preset."""

    QUICKSTART = "quickstart"
    INSTANT = "instant"
    ORCHESTRATOR = "orchestrator"
    CUSTOM = "custom"
    FULL_CONTROL = "full-control"
    INSPIRED = "inspired"
    REFERENCE = "reference"
    REBUILD = "rebuild"
    ORCHESTRATE_TEST = "orchestrate-test"


class PageType(str, Enum):
    """Page types a layout may declare a section order for."""

    HOME = "home"
    SERVICES = "services"
    ABOUT = "about"
    CONTACT = "contact"
    MENU = "menu"
    PRICING = "pricing"
    FEATURES = "features"
    PROGRAMS = "programs"
    TEAM = "team"
    GALLERY = "gallery"


# ---------------------------------------------------------------------------
# Business fixtures
# ---------------------------------------------------------------------------


class ColorTokens(WireModel):
    """Colour tokens applied across every generated page."""

    model_config = ConfigDict(frozen=True)

    primary: str = Field(..., description="Brand colour")
    secondary: Optional[str] = Field(default=None)
    accent: Optional[str] = Field(default=None)
    background: str = Field(default="#FFFFFF")
    text: str = Field(default="#1F2937")

    @property
    def gradient_end(self) -> str:
        """Second stop for brand gradients (secondary, falling back to primary)."""
        return self.secondary or self.primary


class BusinessInfo(WireModel):
    """Identity and contact details of the business a site is generated for."""

    model_config = ConfigDict(frozen=True)

    name: str
    industry: str = Field(default="")
    tagline: str = Field(default="")
    description: str = Field(default="")
    phone: str = Field(default="")
    email: str = Field(default="")
    address: str = Field(default="")
    hours: dict[str, str] = Field(default_factory=dict)


class Theme(WireModel):
    model_config = ConfigDict(frozen=True)

    colors: Optional[ColorTokens] = None


class BusinessFixture(WireModel):
    """Structured business input consumed by the page generators.

    ``pages`` holds per-page content keyed by page id (``{"home": {"hero":
    {...}}}``).  The collection fields (``menu``, ``team``...) are optional
    shared content that several pages can draw from.
    """

    model_config = ConfigDict(frozen=True)

    business: BusinessInfo
    theme: Theme = Field(default_factory=Theme)
    pages: dict[str, dict[str, Any]] = Field(default_factory=dict)
    menu: list[dict[str, Any]] = Field(default_factory=list)
    services: list[dict[str, Any]] = Field(default_factory=list)
    team: list[dict[str, Any]] = Field(default_factory=list)
    testimonials: list[dict[str, Any]] = Field(default_factory=list)

    def page_content(self, page_id: str) -> dict[str, Any]:
        """Return the content dict for *page_id* (empty when absent)."""
        return self.pages.get(page_id) or {}


# ---------------------------------------------------------------------------
# Layouts
# ---------------------------------------------------------------------------


class LayoutStyle(WireModel):
    """Style enum values shared by every page rendered with a layout."""

    model_config = ConfigDict(frozen=True)

    border_radius: str = Field(default="8px")
    shadows: str = Field(default="soft", description="soft | minimal | dramatic | none")
    spacing: str = Field(default="comfortable", description="compact | structured | comfortable | spacious")
    hero_style: str = Field(default="centered", description="centered | split | minimal")
    card_style: str = Field(default="rounded", description="rounded | bordered | flat | angular")


class LayoutConfig(WireModel):
    """A named bundle of style tokens and per-page section ordering."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = Field(default="")
    style: LayoutStyle = Field(default_factory=LayoutStyle)
    section_order: dict[PageType, tuple[str, ...]] = Field(default_factory=dict)
    emphasis: tuple[str, ...] = Field(default=())

    def sections_for(self, page_type: PageType | str) -> tuple[str, ...]:
        """Return the declared section order for *page_type* (empty when undeclared)."""
        try:
            key = PageType(page_type)
        except ValueError:
            return ()
        return self.section_order.get(key, ())


# ---------------------------------------------------------------------------
# Structured page representation
# ---------------------------------------------------------------------------


class Section(BaseModel):
    """One typed section of a page.  ``props`` carries JSON-safe content only."""

    model_config = ConfigDict(frozen=True)

    type: str
    variant: str = Field(default="default")
    props: dict[str, Any] = Field(default_factory=dict)


class Page(BaseModel):
    """An ordered list of sections plus routing metadata."""

    page_id: str
    name: str = Field(..., description="Component-style name, e.g. 'MenuPage'")
    title: str
    path: str
    sections: list[Section] = Field(default_factory=list)

    def section_types(self) -> list[str]:
        return [section.type for section in self.sections]


class NavLink(BaseModel):
    label: str
    path: str
    page: str
    highlight: bool = False


class RouteEntry(BaseModel):
    path: str
    page: str


class SiteShell(BaseModel):
    """Top-level composition artifact: navigation plus page wiring."""

    business_name: str
    tagline: str = ""
    colors: ColorTokens
    navigation: list[NavLink] = Field(default_factory=list)
    routes: list[RouteEntry] = Field(default_factory=list)
    footer: dict[str, Any] = Field(default_factory=dict)


class GeneratedSite(BaseModel):
    """Ephemeral result of one template-library run."""

    industry: str
    layout: Optional[LayoutConfig] = None
    colors: ColorTokens
    pages: dict[str, Page] = Field(default_factory=dict)
    app: SiteShell
    css: dict[str, str] = Field(default_factory=dict)

    @computed_field  # type: ignore[misc]
    @property
    def page_names(self) -> list[str]:
        return list(self.pages)


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------


class PresetData(WireModel):
    """Business data carried by a preset.  Unknown keys are preserved."""

    model_config = ConfigDict(extra="allow")

    business_name: str = Field(default="")
    industry: Optional[str] = None
    location: Optional[str] = None
    tagline: Optional[str] = None
    description: Optional[str] = None
    pages: Optional[list[str]] = None
    admin_tier: Optional[str] = None
    admin_modules: Optional[list[str]] = None
    visual_style: Optional[str] = None
    ai_instructions: Optional[str] = None
    communication_style: Optional[float] = None
    layout: Optional[str] = None
    cta: Optional[str] = None
    team_size: Optional[str] = None
    price_range: Optional[str] = None
    customers: Optional[Any] = None
    video_hero: Optional[bool] = None
    theme: Optional[dict[str, Any]] = None
    references: Optional[list[Any]] = None
    auto_deploy: bool = False
    reference_url: Optional[str] = None
    existing_url: Optional[str] = None

    # Run tags set by the tracker.
    is_test: bool = False
    test_id: Optional[str] = None
    preset_id: Optional[str] = None


class GenerationPreset(WireModel):
    """A named, pre-configured generation request used for repeatable runs."""

    id: str = Field(default="")
    name: str = Field(default="")
    mode: str = Field(default=GenerationMode.QUICKSTART.value)
    tier: Optional[str] = None
    industry: Optional[str] = None
    description: str = Field(default="")
    data: PresetData = Field(default_factory=PresetData)


# ---------------------------------------------------------------------------
# Backend responses and run records
# ---------------------------------------------------------------------------


class TokenUsage(WireModel):
    input: int = Field(default=0, ge=0)
    output: int = Field(default=0, ge=0)

    @field_validator("input", "output", mode="before")
    @classmethod
    def _none_to_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class GenerationResponse(WireModel):
    """Response shape shared by the assembly, orchestration and rebuild backends."""

    model_config = ConfigDict(extra="allow")

    project_path: Optional[str] = None
    pages: list[str] = Field(default_factory=list)
    modules: list[str] = Field(default_factory=list)
    cost: float = Field(default=0.0)
    tokens: TokenUsage = Field(default_factory=TokenUsage)

    @field_validator("pages", "modules", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("cost", mode="before")
    @classmethod
    def _cost_none_to_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    @field_validator("tokens", mode="before")
    @classmethod
    def _tokens_none_to_default(cls, value: Any) -> Any:
        return {} if value is None else value


class RunResult(WireModel):
    """Normalised outcome of a successful generation."""

    project_path: Optional[str] = None
    pages: list[str] = Field(default_factory=list)
    page_count: int = Field(default=0, ge=0)
    module_count: int = Field(default=0, ge=0)
    cost: float = Field(default=0.0, ge=0.0)
    tokens: TokenUsage = Field(default_factory=TokenUsage)

    @classmethod
    def from_response(cls, response: GenerationResponse) -> "RunResult":
        return cls(
            project_path=response.project_path,
            pages=list(response.pages),
            page_count=len(response.pages),
            module_count=len(response.modules),
            cost=response.cost,
            tokens=response.tokens.model_copy(),
        )


class RunStatus(str, Enum):
    """Lifecycle of one run.  Transitions only move forward."""

    PENDING = "pending"
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"
    DEPLOY_ATTEMPTED = "deploy_attempted"
    CLEANUP_ATTEMPTED = "cleanup_attempted"
    TERMINAL = "terminal"


_STATUS_RANK: dict[RunStatus, int] = {
    RunStatus.PENDING: 0,
    RunStatus.RUNNING: 1,
    RunStatus.SUCCESS: 2,
    RunStatus.FAILED: 2,
    RunStatus.DEPLOY_ATTEMPTED: 3,
    RunStatus.CLEANUP_ATTEMPTED: 4,
    RunStatus.TERMINAL: 5,
}


class GenerationRun(WireModel):
    """Record of one generation attempt and its optional deploy/cleanup phases."""

    id: str
    preset_id: str
    preset_name: str = Field(default="")
    mode: Optional[str] = None
    tier: Optional[str] = None
    industry: Optional[str] = None
    artifact_name: Optional[str] = None
    path: Optional[str] = Field(default=None, description="'assemble', 'orchestrate' or 'rebuild'")
    start_time: datetime
    end_time: Optional[datetime] = None
    duration: float = Field(default=0.0, ge=0.0)
    success: bool = False
    result: Optional[RunResult] = None
    error: Optional[str] = None
    error_stack: Optional[str] = None
    deployed: bool = False
    deploy_result: Optional[Any] = None
    deploy_error: Optional[str] = None
    cleaned_up: bool = False
    cleanup_error: Optional[str] = None
    status: RunStatus = RunStatus.PENDING

    def advance(self, status: RunStatus) -> None:
        """Move the run to *status*.

        Raises:
            ValueError: If the transition would move backwards or sideways
                (e.g. SUCCESS -> FAILED).
        """
        if _STATUS_RANK[status] <= _STATUS_RANK[self.status]:
            raise ValueError(
                f"Illegal run transition {self.status.value} -> {status.value}"
            )
        self.status = status

    @property
    def cost(self) -> float:
        """Cost of the run; failed runs cost nothing."""
        return self.result.cost if self.result is not None else 0.0


class RunSummary(WireModel):
    """Aggregate view over a run history."""

    total: int = 0
    passed: int = 0
    failed: int = 0
    pass_rate: str = "0%"
    total_duration: str = "0.0s"
    average_duration: str = "0s"
    total_cost: str = "$0.0000"

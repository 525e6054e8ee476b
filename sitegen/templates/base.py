"""Industry page-template library core.

An :class:`IndustryLibrary` owns a registry ``{page_id -> PageTemplate}``.
Adding a page to an industry is one registration; nothing else in the engine
knows page ids.  ``generate_site`` resolves colours and the layout once,
runs every registered generator, and wires the results into a ``SiteShell``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

from sitegen.layouts.industry import normalize_industry
from sitegen.layouts.registry import get_layout, get_layout_css, get_recommended_layout
from sitegen.models import (
    BusinessFixture,
    ColorTokens,
    GeneratedSite,
    LayoutConfig,
    NavLink,
    Page,
    RouteEntry,
    Section,
    SiteShell,
)
from sitegen.sections.blocks import apply_section_order
from sitegen.sections.hero import HeroContent, get_hero_variant
from sitegen.utils import page_component_name, page_route_path


@dataclass
class SiteOptions:
    """Caller overrides for one ``generate_site`` call.

    Attributes:
        colors: Explicit colour tokens; beat the fixture theme and the
            industry defaults.
        layout: Layout id (or a ready ``LayoutConfig``).  ``None`` uses the
            industry's recommended layout.
        pages: Restrict generation to these page ids.  Unknown ids are
            ignored; ``None`` generates every registered page.
    """

    colors: Optional[ColorTokens] = None
    layout: str | LayoutConfig | None = None
    pages: Optional[Sequence[str]] = None


@dataclass(frozen=True)
class PageContext:
    """Resolved values handed to every page generator."""

    industry: str
    colors: ColorTokens
    layout: LayoutConfig


PageGenerator = Callable[[BusinessFixture, PageContext], Page]


@dataclass(frozen=True)
class PageTemplate:
    """A registered page.  ``industries`` limits it to those canonical industries; empty means all."""

    display_name: str
    generate: PageGenerator
    industries: frozenset[str] = frozenset()

    def applies_to(self, industry: str) -> bool:
        return not self.industries or industry in self.industries


def make_page(page_id: str, title: str, sections: Sequence[Section]) -> Page:
    """Build a ``Page`` with the component name and route derived from *page_id*."""
    return Page(
        page_id=page_id,
        name=page_component_name(page_id),
        title=title,
        path=page_route_path(page_id),
        sections=list(sections),
    )


def layout_hero(fixture: BusinessFixture, ctx: PageContext, defaults: dict[str, Any]) -> Section:
    """Render the home hero in the layout's hero style.

    Fixture ``pages.home.hero`` values win over *defaults* field by field.
    """
    base = HeroContent.from_dict(defaults)
    override = HeroContent.from_dict(fixture.page_content("home").get("hero"))
    content = HeroContent.model_validate(
        {**base.model_dump(), **override.model_dump(exclude_defaults=True)}
    )
    variant = get_hero_variant(ctx.layout.style.hero_style)
    return variant(content, ctx.colors, fixture.business)


class IndustryLibrary:
    """Registry of page templates for one family of industries.

    Args:
        name: Library key (``"restaurant"``, ``"tech"``...).
        default_colors: Colour tokens per canonical industry served.
        fallback_industry: Key of ``default_colors`` used for industries the
            table does not list.
        aliases: Extra industry names (after normalisation) mapped onto keys
            of ``default_colors``.
        highlight_pages: Page ids whose navigation link is drawn as a button.
    """

    def __init__(
        self,
        name: str,
        default_colors: dict[str, ColorTokens],
        fallback_industry: str,
        aliases: dict[str, str] | None = None,
        highlight_pages: Sequence[str] = (),
    ) -> None:
        if fallback_industry not in default_colors:
            raise ValueError(f"fallback industry {fallback_industry!r} has no default colours")
        self.name = name
        self.default_colors_table = dict(default_colors)
        self.fallback_industry = fallback_industry
        self.aliases = dict(aliases or {})
        self.highlight_pages = tuple(highlight_pages)
        self.pages: dict[str, PageTemplate] = {}

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def page(
        self,
        page_id: str,
        display_name: str,
        industries: Sequence[str] = (),
    ) -> Callable[[PageGenerator], PageGenerator]:
        """Decorator registering a page generator under *page_id*."""

        def decorator(func: PageGenerator) -> PageGenerator:
            self.register(page_id, display_name, func, industries)
            return func

        return decorator

    def register(
        self,
        page_id: str,
        display_name: str,
        generate: PageGenerator,
        industries: Sequence[str] = (),
    ) -> None:
        if page_id in self.pages:
            raise ValueError(f"page {page_id!r} already registered in {self.name} library")
        self.pages[page_id] = PageTemplate(
            display_name=display_name, generate=generate, industries=frozenset(industries)
        )

    def page_ids(self, industry: str | None = None) -> list[str]:
        """Registered page ids; with *industry*, only the pages that apply to it."""
        if industry is None:
            return list(self.pages)
        canonical = self._canonical(industry)
        return [page_id for page_id, template in self.pages.items() if template.applies_to(canonical)]

    def serves(self, industry: str | None) -> bool:
        """Return True when *industry* has an entry in this library's colour table."""
        return self._canonical(industry) in self.default_colors_table

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _canonical(self, industry: str | None) -> str:
        key = normalize_industry(industry)
        return self.aliases.get(key, key)

    def default_colors(self, industry: str | None) -> ColorTokens:
        """Industry default colours, falling back to the library's base palette."""
        return self.default_colors_table.get(
            self._canonical(industry), self.default_colors_table[self.fallback_industry]
        )

    def resolve_colors(self, fixture: BusinessFixture, options: SiteOptions) -> ColorTokens:
        """Explicit options beat the fixture theme, which beats industry defaults."""
        if options.colors is not None:
            return options.colors
        if fixture.theme.colors is not None:
            return fixture.theme.colors
        return self.default_colors(fixture.business.industry or self.fallback_industry)

    def resolve_layout(self, fixture: BusinessFixture, options: SiteOptions) -> LayoutConfig:
        if isinstance(options.layout, LayoutConfig):
            return options.layout
        if options.layout:
            return get_layout(options.layout)
        return get_layout(get_recommended_layout(fixture.business.industry or self.fallback_industry))

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate_site(self, fixture: BusinessFixture, options: SiteOptions | None = None) -> GeneratedSite:
        """Generate every registered (or requested) page and the site shell."""
        options = options or SiteOptions()
        industry = fixture.business.industry or self.fallback_industry
        ctx = PageContext(
            industry=industry,
            colors=self.resolve_colors(fixture, options),
            layout=self.resolve_layout(fixture, options),
        )

        selected = self.page_ids(industry)
        if options.pages is not None:
            wanted = set(options.pages)
            selected = [page_id for page_id in selected if page_id in wanted]

        pages: dict[str, Page] = {}
        nav_labels: dict[str, str] = {}
        for page_id in selected:
            template = self.pages[page_id]
            page = template.generate(fixture, ctx)
            page.sections = apply_section_order(page.sections, ctx.layout.sections_for(page_id))
            pages[page.name] = page
            nav_labels[page.name] = template.display_name

        css = {**_color_css(ctx.colors), **get_layout_css(ctx.layout)}
        return GeneratedSite(
            industry=industry,
            layout=ctx.layout,
            colors=ctx.colors,
            pages=pages,
            app=self._build_shell(fixture, ctx.colors, pages, nav_labels),
            css=css,
        )

    def _build_shell(
        self,
        fixture: BusinessFixture,
        colors: ColorTokens,
        pages: dict[str, Page],
        nav_labels: dict[str, str],
    ) -> SiteShell:
        business = fixture.business
        navigation = [
            NavLink(
                label=nav_labels[name],
                path=page.path,
                page=name,
                highlight=page.page_id in self.highlight_pages,
            )
            for name, page in pages.items()
        ]
        routes = [RouteEntry(path=page.path, page=name) for name, page in pages.items()]
        footer = {
            "business_name": business.name,
            "tagline": business.tagline,
            "phone": business.phone,
            "email": business.email,
            "address": business.address,
            "hours": dict(business.hours),
            "links": [{"label": link.label, "path": link.path} for link in navigation],
        }
        return SiteShell(
            business_name=business.name,
            tagline=business.tagline,
            colors=colors,
            navigation=navigation,
            routes=routes,
            footer=footer,
        )


def _color_css(colors: ColorTokens) -> dict[str, str]:
    return {
        "--color-primary": colors.primary,
        "--color-secondary": colors.gradient_end,
        "--color-accent": colors.accent or colors.primary,
        "--color-background": colors.background,
        "--color-text": colors.text,
    }

"""Industry dispatch over the page-template libraries."""

from __future__ import annotations

from typing import Optional

from sitegen.errors import TemplateNotFoundError
from sitegen.layouts.industry import (
    INDUSTRY_LAYOUTS,
    get_available_industry_layouts,
    get_industry_layout,
    get_industry_layouts,
    get_industry_palette,
    normalize_industry,
)
from sitegen.layouts.registry import LAYOUTS
from sitegen.models import BusinessFixture, ColorTokens, GeneratedSite
from sitegen.templates import education, healthcare, restaurant, tech, universal
from sitegen.templates.base import IndustryLibrary, SiteOptions

LIBRARIES: tuple[IndustryLibrary, ...] = (
    healthcare.library,
    restaurant.library,
    tech.library,
    education.library,
)

# Serves any catalogue industry the dedicated libraries do not list.
FALLBACK_LIBRARY: IndustryLibrary = universal.library


def get_library(industry: str | None) -> IndustryLibrary:
    """Return the library serving *industry*.

    Dedicated libraries are tried first, then the universal library.

    Raises:
        TemplateNotFoundError: If neither a library nor the industry
            catalogue lists the industry.
    """
    for library in LIBRARIES:
        if library.serves(industry):
            return library
    if FALLBACK_LIBRARY.serves(industry):
        return FALLBACK_LIBRARY
    raise TemplateNotFoundError(industry or "")


def generate_site(fixture: BusinessFixture, options: SiteOptions | None = None) -> GeneratedSite:
    """Generate a full site for the fixture's industry."""
    return get_library(fixture.business.industry).generate_site(fixture, options)


def _variant_colors(
    fixture: BusinessFixture, layout_id: str, options: SiteOptions
) -> Optional[ColorTokens]:
    """Explicit or theme colours, else the catalogue palette of variant *layout_id*.

    ``None`` when the fixture industry has no catalogue variant of that id, so
    the library falls back to its own defaults.
    """
    if options.colors is not None:
        return options.colors
    if fixture.theme.colors is not None:
        return fixture.theme.colors
    industry = fixture.business.industry
    if normalize_industry(industry) not in INDUSTRY_LAYOUTS:
        return None
    if layout_id not in get_industry_layouts(industry).palettes:
        return None
    return get_industry_palette(industry, layout_id)


def generate_site_with_layout(
    fixture: BusinessFixture,
    layout_id: str,
    options: SiteOptions | None = None,
) -> GeneratedSite:
    """Generate a site with an explicit layout.

    *layout_id* is looked up in the canonical registry first, then among the
    fixture industry's catalogue variants (whose default wins for unknown ids).
    A catalogue variant brings its palette unless options or the fixture
    theme set colours.
    """
    industry = fixture.business.industry
    layout = LAYOUTS.get(layout_id) or get_industry_layout(industry, layout_id)
    base = options or SiteOptions()
    return generate_site(
        fixture,
        SiteOptions(colors=_variant_colors(fixture, layout.id, base), layout=layout, pages=base.pages),
    )


def generate_all_layout_variants(fixture: BusinessFixture) -> dict[str, GeneratedSite]:
    """Generate one site per catalogue variant of the fixture's industry, keyed by layout id."""
    library = get_library(fixture.business.industry)
    sites: dict[str, GeneratedSite] = {}
    for layout, _is_default in get_available_industry_layouts(fixture.business.industry):
        colors = _variant_colors(fixture, layout.id, SiteOptions())
        sites[layout.id] = library.generate_site(fixture, SiteOptions(colors=colors, layout=layout))
    return sites

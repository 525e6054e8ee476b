"""Universal page templates for catalogue industries without a dedicated library.

Salons, gyms, yoga studios and law firms get the four core pages (home,
services, about, contact) plus the pages their industry calls for.  Layouts
and palettes come straight from the industry catalogue, so every catalogue
variant renders in its own colours.
"""

from __future__ import annotations

from typing import Any, Iterable

from sitegen.layouts.industry import (
    INDUSTRY_LAYOUTS,
    get_industry_layout,
    get_industry_layouts,
    get_industry_palette,
)
from sitegen.layouts.registry import LAYOUTS
from sitegen.models import BusinessFixture, ColorTokens, LayoutConfig, Page
from sitegen.sections import (
    card_grid,
    contact_section,
    cta_section,
    gallery_section,
    page_header,
    pricing_section,
    stats_section,
    team_section,
    testimonials_section,
    text_section,
)
from sitegen.templates.base import IndustryLibrary, PageContext, SiteOptions, layout_hero, make_page

SALON_INDUSTRIES = ("salon-spa",)
FITNESS_INDUSTRIES = ("fitness-gym", "yoga")


class UniversalLibrary(IndustryLibrary):
    """Library whose layouts and colours come from the industry catalogue.

    A layout id is looked up among the industry's catalogue variants first,
    then in the canonical registry.  Without explicit or theme colours the
    palette of the selected variant is used.
    """

    def resolve_layout(self, fixture: BusinessFixture, options: SiteOptions) -> LayoutConfig:
        if isinstance(options.layout, LayoutConfig):
            return options.layout
        industry = fixture.business.industry
        if options.layout and options.layout not in get_industry_layouts(industry).layouts:
            registered = LAYOUTS.get(options.layout)
            if registered is not None:
                return registered
        return get_industry_layout(industry, options.layout)

    def resolve_colors(self, fixture: BusinessFixture, options: SiteOptions) -> ColorTokens:
        if options.colors is not None or fixture.theme.colors is not None:
            return super().resolve_colors(fixture, options)
        layout = self.resolve_layout(fixture, options)
        return get_industry_palette(fixture.business.industry, layout.id)


library = UniversalLibrary(
    "universal",
    {industry: catalogue.palettes[catalogue.default_layout] for industry, catalogue in INDUSTRY_LAYOUTS.items()},
    fallback_industry="healthcare",
    highlight_pages=("contact",),
)

_DEFAULT_SERVICES = [
    {"title": "Consultation", "description": "A conversation about what you need"},
    {"title": "Signature Service", "description": "Our most requested offering"},
    {"title": "Packages", "description": "Bundled services at a better price"},
    {"title": "Ongoing Support", "description": "We stay with you after the first visit"},
]

_DEFAULT_STATS = [
    {"value": "10+", "label": "Years Experience"},
    {"value": "1000+", "label": "Happy Customers"},
    {"value": "50+", "label": "Services"},
    {"value": "4.9", "label": "Rating"},
]

_DEFAULT_TESTIMONIALS = [
    {"quote": "Friendly, professional, and worth every visit.", "author": "Customer"},
]

_DEFAULT_STYLISTS = [
    {"name": "Senior Stylist", "role": "Cuts and color"},
    {"name": "Spa Therapist", "role": "Massage and skincare"},
    {"name": "Nail Artist", "role": "Manicures and pedicures"},
]

_DEFAULT_CLASSES = [
    {"title": "Strength", "description": "Build power with guided lifting"},
    {"title": "Cardio", "description": "High-energy sessions for endurance"},
    {"title": "Mobility", "description": "Stretch, recover, and move better"},
]

_DEFAULT_MEMBERSHIPS = [
    {"name": "Drop-in", "price": "$20", "period": "class", "features": ["Any single class"]},
    {
        "name": "Monthly",
        "price": "$89",
        "period": "month",
        "features": ["Unlimited classes", "Member events"],
        "highlight": True,
    },
    {"name": "Annual", "price": "$890", "period": "year", "features": ["Two months free", "Guest passes"]},
]


def _cards(items: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    # Fixtures name services with either "title" or "name".
    return [{**item, "title": item.get("title") or item.get("name", "")} for item in items]


def _services(fixture: BusinessFixture) -> list[dict[str, Any]]:
    return _cards(fixture.services or fixture.page_content("services").get("items") or _DEFAULT_SERVICES)


@library.page("home", "Home")
def home_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    business = fixture.business
    content = fixture.page_content("home")
    hero = {
        "headline": business.tagline or f"Welcome to {business.name}",
        "subheadline": business.description or None,
        "primary_cta": {"label": "Contact Us", "href": "/contact"},
        "secondary_cta": {"label": "Our Services", "href": "/services"},
    }
    sections = [
        layout_hero(fixture, ctx, hero),
        card_grid(
            "services-preview",
            "Our Services",
            _services(fixture)[:6],
            ctx.colors,
            link={"label": "View All Services", "href": "/services"},
        ),
        stats_section(content.get("stats") or _DEFAULT_STATS, ctx.colors),
    ]
    if fixture.team:
        sections.append(team_section(fixture.team[:3]))
    sections += [
        testimonials_section((fixture.testimonials or _DEFAULT_TESTIMONIALS)[:3]),
        cta_section(
            "Ready to Get Started?",
            "Contact us today to learn more about our services",
            {"label": "Contact Us", "href": "/contact"},
            ctx.colors,
            secondary={"label": "Call Us", "href": f"tel:{business.phone}" if business.phone else "/contact"},
        ),
    ]
    return make_page("home", business.name, sections)


@library.page("services", "Services")
def services_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    sections = [
        page_header("Our Services", fixture.business.tagline or "What we offer", ctx.colors),
        card_grid("service-grid", "What We Offer", _services(fixture), ctx.colors),
        cta_section(
            "Have a question?",
            "We're happy to help you choose.",
            {"label": "Contact Us", "href": "/contact"},
            ctx.colors,
        ),
    ]
    return make_page("services", "Services", sections)


@library.page("about", "About")
def about_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    business = fixture.business
    content = fixture.page_content("about")
    sections = [
        page_header(f"About {business.name}", business.tagline or "Our story and mission", ctx.colors),
        text_section(
            "story",
            "Our Story",
            content.get("story") or business.description
            or f"{business.name} is proud to serve our community.",
        ),
        card_grid(
            "values",
            "Our Values",
            content.get("values") or [
                {"title": "Customer First", "description": "Your satisfaction is our priority"},
                {"title": "Trust & Integrity", "description": "Honest and transparent service"},
                {"title": "Excellence", "description": "Committed to the highest standards"},
                {"title": "Community", "description": "Proud to serve our neighbors"},
            ],
            ctx.colors,
            columns=4,
        ),
    ]
    if fixture.team:
        sections.append(team_section(fixture.team))
    return make_page("about", "About Us", sections)


@library.page("contact", "Contact")
def contact_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    sections = [
        page_header("Contact Us", "We'd love to hear from you", ctx.colors),
        contact_section(fixture.business),
    ]
    return make_page("contact", "Contact", sections)


@library.page("team", "Team", industries=SALON_INDUSTRIES)
def team_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    members = fixture.team or fixture.page_content("team").get("members") or _DEFAULT_STYLISTS
    sections = [
        page_header("Our Team", "The people behind every appointment", ctx.colors),
        team_section(members),
    ]
    return make_page("team", "Our Team", sections)


@library.page("gallery", "Gallery", industries=SALON_INDUSTRIES)
def gallery_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    content = fixture.page_content("gallery")
    sections = [
        page_header("Gallery", "Recent work from our team", ctx.colors),
        gallery_section(
            content.get("images") or [
                {"src": "/images/styling.jpg", "alt": "Styling station"},
                {"src": "/images/treatment-room.jpg", "alt": "Treatment room"},
                {"src": "/images/lounge.jpg", "alt": "Client lounge"},
            ]
        ),
    ]
    return make_page("gallery", "Gallery", sections)


@library.page("classes", "Classes", industries=FITNESS_INDUSTRIES)
def classes_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    content = fixture.page_content("classes")
    sections = [
        page_header("Classes", "Find the session that fits your schedule", ctx.colors),
        card_grid("classes", "Class Schedule", _cards(content.get("items") or _DEFAULT_CLASSES), ctx.colors),
        cta_section(
            "Try a class on us",
            "Your first visit is free.",
            {"label": "Book a Class", "href": "/contact"},
            ctx.colors,
        ),
    ]
    return make_page("classes", "Classes", sections)


@library.page("membership", "Membership", industries=FITNESS_INDUSTRIES)
def membership_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    content = fixture.page_content("membership")
    sections = [
        page_header("Membership", "Simple plans, no hidden fees", ctx.colors),
        pricing_section(content.get("plans") or _DEFAULT_MEMBERSHIPS, ctx.colors, title="Membership Options"),
    ]
    return make_page("membership", "Membership", sections)

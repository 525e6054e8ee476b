"""Tech page templates (SaaS products and online stores)."""

from __future__ import annotations

from sitegen.models import BusinessFixture, ColorTokens, Page
from sitegen.sections import (
    card_grid,
    contact_section,
    cta_section,
    form_section,
    list_section,
    page_header,
    pricing_section,
    stats_section,
    team_section,
    testimonials_section,
    text_section,
)
from sitegen.templates.base import IndustryLibrary, PageContext, layout_hero, make_page

DEFAULT_COLORS: dict[str, ColorTokens] = {
    "saas": ColorTokens(
        primary="#6366F1", secondary="#8B5CF6", accent="#EC4899", background="#F8FAFC", text="#1E293B"
    ),
    "ecommerce": ColorTokens(
        primary="#0EA5E9", secondary="#06B6D4", accent="#F59E0B", background="#FFFFFF", text="#1E293B"
    ),
}

library = IndustryLibrary(
    "tech",
    DEFAULT_COLORS,
    fallback_industry="saas",
    aliases={
        "startup": "saas",
        "technology": "saas",
        "software-company": "saas",
        "app": "saas",
        "online-store": "ecommerce",
        "e-commerce": "ecommerce",
    },
    highlight_pages=("demo",),
)

_DEFAULT_FEATURES = [
    {"title": "Lightning Fast", "description": "Built for speed from the ground up", "icon": "zap"},
    {"title": "Secure by Default", "description": "Encryption at rest and in transit", "icon": "shield"},
    {"title": "Works Everywhere", "description": "Web, mobile, and API access", "icon": "globe"},
    {"title": "Real-time Analytics", "description": "Know what is happening as it happens", "icon": "chart"},
    {"title": "Integrations", "description": "Connect the tools you already use", "icon": "plug"},
    {"title": "24/7 Support", "description": "Humans ready to help around the clock", "icon": "headset"},
]

_DEFAULT_PLANS = [
    {"name": "Starter", "price": "$0", "period": "month", "features": ["1 project", "Community support"]},
    {
        "name": "Pro",
        "price": "$29",
        "period": "month",
        "features": ["Unlimited projects", "Priority support", "Advanced analytics"],
        "highlight": True,
    },
    {"name": "Enterprise", "price": "Custom", "period": "", "features": ["SSO", "Dedicated manager", "SLA"]},
]

_DEFAULT_FAQ = [
    {"label": "Is there a free trial?", "value": "Yes, every paid plan starts with 14 days free."},
    {"label": "Can I cancel anytime?", "value": "Yes, plans are month to month."},
    {"label": "Do you offer discounts?", "value": "Annual billing saves two months."},
]


def _features(fixture: BusinessFixture) -> list[dict]:
    return fixture.services or fixture.page_content("features").get("items") or _DEFAULT_FEATURES


def _plans(fixture: BusinessFixture) -> list[dict]:
    return fixture.page_content("pricing").get("plans") or _DEFAULT_PLANS


@library.page("home", "Home")
def home_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    business = fixture.business
    content = fixture.page_content("home")
    hero = layout_hero(
        fixture,
        ctx,
        {
            "headline": business.tagline or f"{business.name} helps teams move faster",
            "subheadline": business.description or "Everything you need in one simple platform",
            "primary_cta": {"label": "Start Free Trial", "href": "/pricing"},
            "secondary_cta": {"label": "Book a Demo", "href": "/demo"},
            "highlights": [
                {"value": "10k+", "label": "Teams"},
                {"value": "99.9%", "label": "Uptime"},
                {"value": "4.9", "label": "Rating"},
            ],
        },
    )
    sections = [
        hero,
        card_grid("features", "Why Teams Choose Us", _features(fixture)[:6], ctx.colors),
        stats_section(
            content.get("stats") or [
                {"value": "10k+", "label": "Active Teams"},
                {"value": "2M", "label": "Tasks Automated"},
                {"value": "35%", "label": "Time Saved"},
            ],
            ctx.colors,
        ),
        testimonials_section(fixture.testimonials or [
            {"quote": "We shipped twice as fast in our first month.", "author": "Engineering Lead"},
        ]),
        pricing_section(_plans(fixture), ctx.colors, title="Simple, Transparent Pricing"),
        cta_section(
            "Ready to get started?",
            "Join thousands of teams already on board.",
            {"label": "Start Free Trial", "href": "/pricing"},
            ctx.colors,
        ),
    ]
    return make_page("home", business.name, sections)


@library.page("features", "Features")
def features_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    sections = [
        page_header("Features", "Powerful tools, simple to use", ctx.colors),
        card_grid("features", "Everything Included", _features(fixture), ctx.colors),
        cta_section(
            "See it in action",
            "A 20-minute walkthrough tailored to your team.",
            {"label": "Book a Demo", "href": "/demo"},
            ctx.colors,
        ),
    ]
    return make_page("features", "Features", sections)


@library.page("pricing", "Pricing")
def pricing_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    content = fixture.page_content("pricing")
    sections = [
        page_header("Pricing", "Plans that grow with you", ctx.colors),
        pricing_section(_plans(fixture), ctx.colors),
        list_section("faq", "Frequently Asked Questions", content.get("faq") or _DEFAULT_FAQ),
    ]
    return make_page("pricing", "Pricing", sections)


@library.page("about", "About")
def about_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    business = fixture.business
    content = fixture.page_content("about")
    sections = [
        page_header(f"About {business.name}", business.tagline or "Our mission", ctx.colors),
        text_section(
            "story",
            "Our Mission",
            content.get("mission") or business.description or f"{business.name} builds tools people love.",
        ),
        team_section(fixture.team or content.get("team") or [
            {"name": "Alex Rivera", "role": "Co-founder & CEO"},
            {"name": "Sam Chen", "role": "Co-founder & CTO"},
        ], title="Leadership"),
    ]
    return make_page("about", "About", sections)


@library.page("demo", "Book a Demo")
def demo_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    sections = [
        page_header("Book a Demo", "See how it fits your workflow", ctx.colors),
        form_section(
            "demo-form",
            "Request Your Demo",
            [
                {"name": "name", "label": "Full Name", "type": "text", "required": True},
                {"name": "email", "label": "Work Email", "type": "email", "required": True},
                {"name": "company", "label": "Company", "type": "text"},
                {"name": "team_size", "label": "Team Size", "type": "select",
                 "options": ["1-10", "11-50", "51-200", "200+"]},
            ],
            "Schedule Demo",
            ctx.colors,
        ),
    ]
    return make_page("demo", "Book a Demo", sections)


@library.page("blog", "Blog")
def blog_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    content = fixture.page_content("blog")
    sections = [
        page_header("Blog", "Product news, guides, and stories", ctx.colors),
        card_grid(
            "posts",
            "Latest Posts",
            content.get("posts") or [
                {"title": "Introducing Our New Dashboard", "description": "A faster way to see everything."},
                {"title": "5 Workflows to Automate Today", "description": "Save hours every week."},
                {"title": "Security at Scale", "description": "How we protect your data."},
            ],
            ctx.colors,
        ),
    ]
    return make_page("blog", "Blog", sections)


@library.page("contact", "Contact")
def contact_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    sections = [
        page_header("Contact", "Questions? We're here to help", ctx.colors),
        contact_section(fixture.business),
    ]
    return make_page("contact", "Contact", sections)

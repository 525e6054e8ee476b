"""Education page templates (schools, training centres, tutoring)."""

from __future__ import annotations

from sitegen.models import BusinessFixture, ColorTokens, Page
from sitegen.sections import (
    card_grid,
    contact_section,
    cta_section,
    form_section,
    gallery_section,
    list_section,
    page_header,
    stats_section,
    team_section,
    testimonials_section,
    text_section,
)
from sitegen.templates.base import IndustryLibrary, PageContext, layout_hero, make_page

DEFAULT_COLORS: dict[str, ColorTokens] = {
    "school": ColorTokens(
        primary="#1E40AF", secondary="#3B82F6", accent="#F59E0B", background="#F8FAFC", text="#1E293B"
    ),
    "training": ColorTokens(
        primary="#059669", secondary="#10B981", accent="#F59E0B", background="#F0FDF4", text="#1E293B"
    ),
    "tutoring": ColorTokens(
        primary="#7C3AED", secondary="#8B5CF6", accent="#EC4899", background="#FAF5FF", text="#1E293B"
    ),
}

library = IndustryLibrary(
    "education",
    DEFAULT_COLORS,
    fallback_industry="school",
    aliases={
        "university": "school",
        "college": "school",
        "high-school": "school",
        "bootcamp": "training",
        "training-center": "training",
        "tutor": "tutoring",
        "learning-center": "tutoring",
    },
    highlight_pages=("admissions",),
)

_DEFAULT_PROGRAMS = [
    {"title": "Early Years", "description": "Play-based learning for ages 3-5"},
    {"title": "Primary", "description": "Strong foundations in reading, math, and science"},
    {"title": "Secondary", "description": "Rigorous academics and university preparation"},
]


def _programs(fixture: BusinessFixture) -> list[dict]:
    return fixture.services or fixture.page_content("programs").get("items") or _DEFAULT_PROGRAMS


@library.page("home", "Home")
def home_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    business = fixture.business
    content = fixture.page_content("home")
    hero = layout_hero(
        fixture,
        ctx,
        {
            "headline": business.tagline or f"Welcome to {business.name}",
            "subheadline": business.description or "Inspiring curious minds to reach their potential",
            "primary_cta": {"label": "Apply Now", "href": "/admissions"},
            "secondary_cta": {"label": "Explore Programs", "href": "/programs"},
            "highlights": [
                {"value": "98%", "label": "Graduation Rate"},
                {"value": "12:1", "label": "Student Ratio"},
                {"value": "40+", "label": "Clubs"},
            ],
        },
    )
    sections = [
        hero,
        stats_section(
            content.get("stats") or [
                {"value": "1,200", "label": "Students"},
                {"value": "98%", "label": "Graduation Rate"},
                {"value": "85", "label": "Faculty"},
            ],
            ctx.colors,
        ),
        card_grid("programs", "Our Programs", _programs(fixture), ctx.colors,
                  link={"label": "All Programs", "href": "/programs"}),
        team_section(fixture.team[:4] or [
            {"name": "Dr. Jordan Lee", "role": "Head of School"},
        ], title="Leadership"),
        testimonials_section(fixture.testimonials or [
            {"quote": "Our children love coming to school every day.", "author": "Parent"},
        ]),
        cta_section(
            "Join our community",
            "Applications for the coming year are open.",
            {"label": "Start Your Application", "href": "/admissions"},
            ctx.colors,
            secondary={"label": "Schedule a Tour", "href": "/campus"},
        ),
    ]
    return make_page("home", business.name, sections)


@library.page("programs", "Programs")
def programs_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    sections = [
        page_header("Programs", "Pathways for every learner", ctx.colors),
        card_grid("programs", "Academic Programs", _programs(fixture), ctx.colors),
        cta_section(
            "Find the right fit",
            "Talk to our admissions team about your goals.",
            {"label": "Contact Admissions", "href": "/admissions"},
            ctx.colors,
        ),
    ]
    return make_page("programs", "Programs", sections)


@library.page("admissions", "Admissions")
def admissions_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    content = fixture.page_content("admissions")
    sections = [
        page_header("Admissions", "Your journey starts here", ctx.colors),
        list_section(
            "admission-steps",
            "How to Apply",
            content.get("steps") or [
                {"label": "1. Inquire", "value": "Tell us about your learner"},
                {"label": "2. Visit", "value": "Tour the campus and meet teachers"},
                {"label": "3. Apply", "value": "Submit the online application"},
                {"label": "4. Enroll", "value": "Receive your decision and enroll"},
            ],
        ),
        form_section(
            "inquiry-form",
            "Request Information",
            [
                {"name": "parent_name", "label": "Parent/Guardian Name", "type": "text", "required": True},
                {"name": "email", "label": "Email", "type": "email", "required": True},
                {"name": "student_grade", "label": "Entering Grade", "type": "text"},
            ],
            "Submit Inquiry",
            ctx.colors,
        ),
    ]
    return make_page("admissions", "Admissions", sections)


@library.page("faculty", "Faculty")
def faculty_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    sections = [
        page_header("Faculty", "Dedicated educators and mentors", ctx.colors),
        team_section(fixture.team or fixture.page_content("faculty").get("members") or [
            {"name": "Dr. Jordan Lee", "role": "Head of School"},
            {"name": "Maria Santos", "role": "Science Department Chair"},
            {"name": "David Okafor", "role": "Mathematics"},
        ], title="Our Faculty"),
    ]
    return make_page("faculty", "Faculty", sections)


@library.page("campus", "Campus")
def campus_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    content = fixture.page_content("campus")
    sections = [
        page_header("Campus Life", "Spaces built for learning and play", ctx.colors),
        card_grid(
            "facilities",
            "Facilities",
            content.get("facilities") or [
                {"title": "Library", "description": "Over 20,000 volumes"},
                {"title": "Science Labs", "description": "Hands-on experiments"},
                {"title": "Athletics", "description": "Gym, fields, and pool"},
            ],
            ctx.colors,
        ),
        gallery_section(content.get("images") or [], title="Around Campus"),
    ]
    return make_page("campus", "Campus", sections)


@library.page("about", "About")
def about_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    business = fixture.business
    content = fixture.page_content("about")
    sections = [
        page_header(f"About {business.name}", business.tagline or "Our mission and values", ctx.colors),
        text_section(
            "story",
            "Our Mission",
            content.get("mission") or business.description or f"{business.name} prepares students for life.",
        ),
        card_grid(
            "values",
            "Our Values",
            content.get("values") or [
                {"title": "Curiosity", "description": "Questions drive learning"},
                {"title": "Integrity", "description": "Doing right when no one is watching"},
                {"title": "Community", "description": "We grow together"},
            ],
            ctx.colors,
        ),
    ]
    return make_page("about", "About", sections)


@library.page("contact", "Contact")
def contact_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    sections = [
        page_header("Contact", "We look forward to meeting you", ctx.colors),
        contact_section(fixture.business),
    ]
    return make_page("contact", "Contact", sections)

"""Healthcare page templates (clinics, medical practices, dental offices)."""

from __future__ import annotations

from sitegen.models import BusinessFixture, ColorTokens, Page
from sitegen.sections import (
    card_grid,
    contact_section,
    cta_section,
    form_section,
    list_section,
    page_header,
    stats_section,
    team_section,
    testimonials_section,
    text_section,
)
from sitegen.templates.base import IndustryLibrary, PageContext, layout_hero, make_page

DEFAULT_COLORS: dict[str, ColorTokens] = {
    "healthcare": ColorTokens(primary="#059669", secondary="#10B981", accent="#34D399"),
    "dental": ColorTokens(primary="#0D9488", secondary="#14B8A6", accent="#5EEAD4"),
}

library = IndustryLibrary(
    "healthcare",
    DEFAULT_COLORS,
    fallback_industry="healthcare",
    aliases={
        "medical-practice": "healthcare",
        "medical-clinic": "healthcare",
        "urgent-care": "healthcare",
        "pediatrics": "healthcare",
        "dental-office": "dental",
        "dentistry": "dental",
        "orthodontist": "dental",
    },
    highlight_pages=("appointments",),
)

_DEFAULT_SERVICES = [
    {"title": "Primary Care", "description": "Checkups, screenings, and everyday care", "icon": "stethoscope"},
    {"title": "Pediatrics", "description": "Gentle care for infants through teens", "icon": "baby"},
    {"title": "Women's Health", "description": "Comprehensive care at every stage", "icon": "heart"},
    {"title": "Lab Services", "description": "On-site testing with fast results", "icon": "flask"},
]

_DEFAULT_PROVIDERS = [
    {"name": "Dr. Sarah Mitchell", "role": "Family Medicine", "credentials": "MD, Board Certified"},
    {"name": "Dr. James Park", "role": "Internal Medicine", "credentials": "MD, FACP"},
    {"name": "Lisa Moreno", "role": "Nurse Practitioner", "credentials": "FNP-C"},
]


# Home hero copy per hero style; tagline and description override headline and subheadline.
_HERO_DEFAULTS: dict[str, dict] = {
    "centered": {
        "headline": "Your Health, Our Priority",
        "subheadline": "Compassionate care for you and your family",
        "primary_cta": {"label": "Book Appointment", "href": "/appointments"},
        "secondary_cta": {"label": "Patient Portal", "href": "/patient-portal"},
    },
    "split": {
        "headline": "Expert Medical Care",
        "subheadline": "Trusted by thousands of patients",
        "primary_cta": {"label": "Schedule Visit", "href": "/appointments"},
        "highlights": [
            {"value": "20+", "label": "Years Experience"},
            {"value": "50k+", "label": "Patients Served"},
            {"value": "4.9", "label": "Patient Rating"},
        ],
    },
    "minimal": {
        "subheadline": "Access your health information",
        "primary_cta": {"label": "Patient Portal", "href": "/patient-portal"},
        "secondary_cta": {"label": "Book Now", "href": "/appointments"},
    },
}


def _services(fixture: BusinessFixture) -> list[dict]:
    return fixture.services or fixture.page_content("services").get("items") or _DEFAULT_SERVICES


def _providers(fixture: BusinessFixture) -> list[dict]:
    return fixture.team or fixture.page_content("providers").get("members") or _DEFAULT_PROVIDERS


@library.page("home", "Home")
def home_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    business = fixture.business
    content = fixture.page_content("home")
    defaults = dict(_HERO_DEFAULTS.get(ctx.layout.style.hero_style, _HERO_DEFAULTS["centered"]))
    if business.tagline:
        defaults["headline"] = business.tagline
    if business.description:
        defaults["subheadline"] = business.description
    sections = [
        layout_hero(fixture, ctx, defaults),
        card_grid(
            "services-preview",
            "Our Services",
            _services(fixture)[:4],
            ctx.colors,
            columns=4,
            link={"label": "View All Services", "href": "/services"},
        ),
        stats_section(
            content.get("stats") or [
                {"value": "20+", "label": "Years of Care"},
                {"value": "50k+", "label": "Patients Served"},
                {"value": "4.9", "label": "Patient Rating"},
            ],
            ctx.colors,
        ),
        team_section(_providers(fixture)[:3], title="Our Providers"),
        testimonials_section(fixture.testimonials or [
            {"quote": "The staff made me feel at ease from the moment I walked in.", "author": "Patient"},
        ], title="Patient Stories"),
        cta_section(
            "Your health can't wait",
            "Same-week appointments available.",
            {"label": "Book Appointment", "href": "/appointments"},
            ctx.colors,
            secondary={"label": "Call Us", "href": f"tel:{business.phone}" if business.phone else "/contact"},
        ),
    ]
    return make_page("home", business.name, sections)


@library.page("services", "Services")
def services_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    sections = [
        page_header("Our Services", "Comprehensive care under one roof", ctx.colors),
        card_grid("service-grid", "What We Offer", _services(fixture), ctx.colors),
        list_section(
            "process",
            "Your Visit",
            [
                {"label": "1. Book", "value": "Schedule online or by phone"},
                {"label": "2. Check in", "value": "Arrive 10 minutes early"},
                {"label": "3. Follow up", "value": "Results in your patient portal"},
            ],
        ),
        cta_section(
            "Ready to schedule?",
            "New patients are always welcome.",
            {"label": "Book Appointment", "href": "/appointments"},
            ctx.colors,
        ),
    ]
    return make_page("services", "Services", sections)


@library.page("about", "About")
def about_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    business = fixture.business
    content = fixture.page_content("about")
    sections = [
        page_header(f"About {business.name}", business.tagline or "Caring for our community", ctx.colors),
        text_section(
            "story",
            "Our Mission",
            content.get("mission") or business.description
            or f"{business.name} provides compassionate, evidence-based care.",
        ),
        card_grid(
            "values",
            "Our Values",
            content.get("values") or [
                {"title": "Compassion", "description": "Every patient treated like family"},
                {"title": "Excellence", "description": "Evidence-based medicine"},
                {"title": "Access", "description": "Care when and where you need it"},
            ],
            ctx.colors,
        ),
        stats_section(
            [{"value": "20+", "label": "Years"}, {"value": "15", "label": "Providers"}],
            ctx.colors,
        ),
        team_section(_providers(fixture), title="Our Team"),
    ]
    return make_page("about", "About Us", sections)


@library.page("contact", "Contact")
def contact_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    sections = [
        page_header("Contact Us", "We're here for you", ctx.colors),
        contact_section(fixture.business),
    ]
    return make_page("contact", "Contact", sections)


@library.page("providers", "Providers")
def providers_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    sections = [
        page_header("Our Providers", "Experienced, board-certified clinicians", ctx.colors),
        team_section(_providers(fixture), title="Meet Your Care Team"),
    ]
    return make_page("providers", "Our Providers", sections)


@library.page("appointments", "Book Appointment")
def appointments_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    sections = [
        page_header("Book an Appointment", "Choose a time that works for you", ctx.colors),
        form_section(
            "appointment-form",
            "Appointment Request",
            [
                {"name": "name", "label": "Full Name", "type": "text", "required": True},
                {"name": "phone", "label": "Phone", "type": "tel", "required": True},
                {"name": "service", "label": "Service", "type": "select",
                 "options": [s.get("title", "") for s in _services(fixture)]},
                {"name": "date", "label": "Preferred Date", "type": "date"},
                {"name": "new_patient", "label": "New patient", "type": "checkbox"},
            ],
            "Request Appointment",
            ctx.colors,
            subtitle="We'll confirm by phone within one business day.",
        ),
    ]
    return make_page("appointments", "Book Appointment", sections)


@library.page("patient-portal", "Patient Portal")
def patient_portal_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    sections = [
        page_header("Patient Portal", "Your health information, anytime", ctx.colors),
        card_grid(
            "portal-actions",
            "What You Can Do",
            [
                {"title": "View Results", "description": "Lab and imaging results", "href": "/patient-portal"},
                {"title": "Message Your Provider", "description": "Secure messaging"},
                {"title": "Refill Prescriptions", "description": "Request refills online"},
                {"title": "Pay Your Bill", "description": "Secure online payments"},
            ],
            ctx.colors,
            columns=2,
        ),
        text_section("portal-help", "Need Help?", "Call our front desk to reset your portal password."),
    ]
    return make_page("patient-portal", "Patient Portal", sections)


@library.page("insurance", "Insurance")
def insurance_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    content = fixture.page_content("insurance")
    sections = [
        page_header("Insurance & Billing", "We accept most major plans", ctx.colors),
        list_section(
            "insurance-plans",
            "Accepted Plans",
            content.get("plans") or [
                {"label": "Aetna", "value": "PPO, HMO"},
                {"label": "Blue Cross Blue Shield", "value": "All plans"},
                {"label": "Cigna", "value": "PPO"},
                {"label": "Medicare", "value": "Part B"},
            ],
        ),
        cta_section(
            "Questions about coverage?",
            "Our billing team can verify your benefits.",
            {"label": "Contact Billing", "href": "/contact"},
            ctx.colors,
        ),
    ]
    return make_page("insurance", "Insurance", sections)

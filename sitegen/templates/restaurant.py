"""Restaurant page templates (pizza, steakhouse, cafe, bakery, restaurant)."""

from __future__ import annotations

from sitegen.models import BusinessFixture, ColorTokens, Page
from sitegen.sections import (
    card_grid,
    contact_section,
    cta_section,
    form_section,
    gallery_section,
    list_section,
    menu_section,
    page_header,
    stats_section,
    testimonials_section,
    text_section,
)
from sitegen.templates.base import IndustryLibrary, PageContext, layout_hero, make_page

DEFAULT_COLORS: dict[str, ColorTokens] = {
    "pizza-restaurant": ColorTokens(
        primary="#DC2626", secondary="#F97316", accent="#FBBF24", background="#FFFBEB", text="#1F2937"
    ),
    "steakhouse": ColorTokens(
        primary="#7C2D12", secondary="#991B1B", accent="#B91C1C", background="#1C1917", text="#FAFAF9"
    ),
    "coffee-cafe": ColorTokens(
        primary="#78350F", secondary="#92400E", accent="#F59E0B", background="#FFFBEB", text="#1F2937"
    ),
    "restaurant": ColorTokens(
        primary="#166534", secondary="#15803D", accent="#22C55E", background="#F0FDF4", text="#1F2937"
    ),
    "bakery": ColorTokens(
        primary="#92400E", secondary="#B45309", accent="#FBBF24", background="#FFFBEB", text="#1F2937"
    ),
}

library = IndustryLibrary(
    "restaurant",
    DEFAULT_COLORS,
    fallback_industry="restaurant",
    aliases={
        "pizza-place": "pizza-restaurant",
        "steak-house": "steakhouse",
        "grill": "steakhouse",
        "coffee-shop": "coffee-cafe",
        "bistro": "restaurant",
        "diner": "restaurant",
        "patisserie": "bakery",
    },
    highlight_pages=("reservations",),
)

_DEFAULT_MENU = [
    {
        "name": "Favorites",
        "items": [
            {"name": "House Special", "price": "$14", "description": "Our most-loved dish, made fresh daily"},
            {"name": "Chef's Choice", "price": "$18", "description": "A rotating seasonal creation"},
            {"name": "Classic Plate", "price": "$12", "description": "Simple, honest, and delicious"},
        ],
    },
]


def _menu(fixture: BusinessFixture) -> list[dict]:
    return fixture.menu or fixture.page_content("menu").get("categories") or _DEFAULT_MENU


@library.page("home", "Home")
def home_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    business = fixture.business
    content = fixture.page_content("home")
    hero = layout_hero(
        fixture,
        ctx,
        {
            "headline": business.tagline or f"Welcome to {business.name}",
            "subheadline": business.description or "Fresh food, warm hospitality, unforgettable flavor",
            "primary_cta": {"label": "View Menu", "href": "/menu"},
            "secondary_cta": {"label": "Reserve a Table", "href": "/reservations"},
            "highlights": [
                {"value": "4.8", "label": "Average Rating"},
                {"value": "15+", "label": "Years Serving"},
                {"value": "100%", "label": "Fresh Ingredients"},
            ],
        },
    )
    sections = [
        hero,
        card_grid(
            "specials",
            "Today's Specials",
            content.get("specials") or [
                {"title": "Lunch Combo", "description": "Entree, side, and drink", "price": "$11"},
                {"title": "Family Night", "description": "Feeds four, every Tuesday", "price": "$39"},
            ],
            ctx.colors,
            columns=2,
        ),
        menu_section(_menu(fixture), ctx.colors, title="Menu Highlights", section_type="menu-preview", limit=3),
        text_section(
            "story",
            "Our Story",
            content.get("story") or f"{business.name} started with a simple idea: great food brings people together.",
        ),
        testimonials_section(fixture.testimonials or content.get("testimonials") or [
            {"quote": "Best meal in town, every single time.", "author": "Local Regular"},
        ]),
        list_section(
            "hours-location",
            "Hours & Location",
            [{"label": day, "value": hours} for day, hours in business.hours.items()]
            or [{"label": "Address", "value": business.address or "Visit us downtown"}],
        ),
        cta_section(
            "Hungry yet?",
            "Book your table or order for pickup today.",
            {"label": "Reserve Now", "href": "/reservations"},
            ctx.colors,
            secondary={"label": "Order Online", "href": "/menu"},
        ),
    ]
    return make_page("home", business.name, sections)


@library.page("menu", "Menu")
def menu_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    content = fixture.page_content("menu")
    sections = [
        page_header("Our Menu", content.get("subtitle") or "Made fresh, served with care", ctx.colors),
        menu_section(_menu(fixture), ctx.colors),
        cta_section(
            "Planning an event?",
            "Our catering team can feed a crowd.",
            {"label": "Catering Options", "href": "/catering"},
            ctx.colors,
        ),
    ]
    return make_page("menu", "Menu", sections)


@library.page("about", "About")
def about_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    business = fixture.business
    content = fixture.page_content("about")
    sections = [
        page_header(f"About {business.name}", business.tagline or "Our kitchen, our people", ctx.colors),
        text_section(
            "story",
            "Our Story",
            content.get("story") or business.description or f"{business.name} is a family-run kitchen.",
        ),
        stats_section(
            content.get("stats") or [
                {"value": "15+", "label": "Years"},
                {"value": "50k", "label": "Meals Served"},
                {"value": "12", "label": "Team Members"},
            ],
            ctx.colors,
        ),
        card_grid(
            "values",
            "What We Believe",
            content.get("values") or [
                {"title": "Fresh", "description": "Ingredients sourced daily"},
                {"title": "Local", "description": "Partnering with nearby farms"},
                {"title": "Welcoming", "description": "Everyone has a seat at our table"},
            ],
            ctx.colors,
        ),
    ]
    return make_page("about", "About Us", sections)


@library.page("contact", "Contact")
def contact_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    sections = [
        page_header("Visit Us", "We'd love to hear from you", ctx.colors),
        contact_section(fixture.business),
    ]
    return make_page("contact", "Contact", sections)


@library.page("reservations", "Reservations")
def reservations_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    content = fixture.page_content("reservations")
    sections = [
        page_header("Reserve a Table", content.get("subtitle") or "Book online in seconds", ctx.colors),
        form_section(
            "reservation-form",
            "Reservation Details",
            [
                {"name": "name", "label": "Name", "type": "text", "required": True},
                {"name": "phone", "label": "Phone", "type": "tel", "required": True},
                {"name": "date", "label": "Date", "type": "date", "required": True},
                {"name": "time", "label": "Time", "type": "time", "required": True},
                {"name": "party_size", "label": "Party Size", "type": "number", "required": True},
                {"name": "notes", "label": "Special Requests", "type": "textarea"},
            ],
            "Request Reservation",
            ctx.colors,
        ),
        list_section(
            "policies",
            "Good to Know",
            content.get("policies") or [
                {"label": "Large parties", "value": "Groups of 8+ please call ahead"},
                {"label": "Cancellations", "value": "Let us know 24 hours in advance"},
            ],
        ),
    ]
    return make_page("reservations", "Reservations", sections)


@library.page("catering", "Catering")
def catering_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    content = fixture.page_content("catering")
    sections = [
        page_header("Catering", "Bring our kitchen to your event", ctx.colors),
        card_grid(
            "catering-packages",
            "Packages",
            content.get("packages") or [
                {"title": "Office Lunch", "description": "Serves 10-20", "price": "From $150"},
                {"title": "Celebration", "description": "Serves 25-50", "price": "From $400"},
                {"title": "Full Service", "description": "Staffed events of any size", "price": "Custom quote"},
            ],
            ctx.colors,
        ),
        form_section(
            "catering-form",
            "Request a Quote",
            [
                {"name": "name", "label": "Name", "type": "text", "required": True},
                {"name": "email", "label": "Email", "type": "email", "required": True},
                {"name": "event_date", "label": "Event Date", "type": "date"},
                {"name": "guests", "label": "Guest Count", "type": "number"},
            ],
            "Send Request",
            ctx.colors,
        ),
    ]
    return make_page("catering", "Catering", sections)


@library.page("gallery", "Gallery")
def gallery_page(fixture: BusinessFixture, ctx: PageContext) -> Page:
    content = fixture.page_content("gallery")
    sections = [
        page_header("Gallery", "A look inside our kitchen and dining room", ctx.colors),
        gallery_section(
            content.get("images") or [
                {"src": "/images/dining-room.jpg", "alt": "Dining room"},
                {"src": "/images/kitchen.jpg", "alt": "Kitchen"},
                {"src": "/images/signature-dish.jpg", "alt": "Signature dish"},
            ]
        ),
    ]
    return make_page("gallery", "Gallery", sections)

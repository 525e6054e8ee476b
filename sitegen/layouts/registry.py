"""Canonical layout registry.

A layout is a named bundle of style enum values (hero style, card style,
shadows, spacing, border radius) plus a per-page section order.  The same
fixture rendered with two layouts yields two visually different sites at zero
AI cost.

Every function in this module is pure: layout selection must be reproducible
and testable without a generation run.
"""

from __future__ import annotations

import re

from sitegen.models import LayoutConfig, LayoutStyle, PageType

# ---------------------------------------------------------------------------
# Layout definitions
# ---------------------------------------------------------------------------

DEFAULT_LAYOUT_ID = "patient-focused"


def _layout(
    layout_id: str,
    name: str,
    description: str,
    style: dict[str, str],
    section_order: dict[PageType, tuple[str, ...]],
    emphasis: tuple[str, ...],
) -> LayoutConfig:
    return LayoutConfig(
        id=layout_id,
        name=name,
        description=description,
        style=LayoutStyle(**style),
        section_order=section_order,
        emphasis=emphasis,
    )


_LAYOUTS: tuple[LayoutConfig, ...] = (
    _layout(
        "patient-focused",
        "Patient Focused",
        "Warm, welcoming design emphasizing easy booking and comfort",
        {"hero_style": "centered", "card_style": "rounded", "border_radius": "16px",
         "shadows": "soft", "spacing": "comfortable"},
        {
            PageType.HOME: ("hero", "services-preview", "testimonials", "stats", "cta"),
            PageType.SERVICES: ("hero", "service-grid", "process", "cta"),
            PageType.ABOUT: ("hero", "story", "values", "team", "cta"),
        },
        ("booking", "testimonials", "comfort", "accessibility"),
    ),
    _layout(
        "medical-professional",
        "Medical Professional",
        "Clean, clinical design emphasizing credentials and expertise",
        {"hero_style": "split", "card_style": "bordered", "border_radius": "8px",
         "shadows": "minimal", "spacing": "structured"},
        {
            PageType.HOME: ("hero", "stats", "services-preview", "team", "testimonials", "cta"),
            PageType.SERVICES: ("hero", "service-grid", "stats", "cta"),
            PageType.ABOUT: ("hero", "story", "stats", "team", "cta"),
        },
        ("credentials", "expertise", "statistics", "technology"),
    ),
    _layout(
        "clinical-dashboard",
        "Clinical Dashboard",
        "Data-focused design with quick access to patient tools",
        {"hero_style": "minimal", "card_style": "flat", "border_radius": "4px",
         "shadows": "none", "spacing": "compact"},
        {
            PageType.HOME: ("hero", "stats", "services-preview", "contact"),
            PageType.SERVICES: ("service-grid", "cta"),
            PageType.ABOUT: ("hero", "stats", "team"),
        },
        ("efficiency", "data", "quick-access", "portal"),
    ),
    _layout(
        "warm-inviting",
        "Warm & Inviting",
        "Cozy design with bold food photography and easy reservations",
        {"hero_style": "centered", "card_style": "rounded", "border_radius": "20px",
         "shadows": "soft", "spacing": "comfortable"},
        {
            PageType.HOME: ("hero", "specials", "menu-preview", "story", "testimonials",
                            "hours-location", "cta"),
            PageType.MENU: ("hero", "menu", "cta"),
            PageType.GALLERY: ("hero", "gallery"),
        },
        ("menu", "ambiance", "reservations", "family"),
    ),
    _layout(
        "elegant-dining",
        "Elegant Dining",
        "Dark, refined design for fine dining and tasting menus",
        {"hero_style": "fullscreen", "card_style": "bordered", "border_radius": "4px",
         "shadows": "dramatic", "spacing": "spacious"},
        {
            PageType.HOME: ("hero", "story", "menu-preview", "testimonials", "cta"),
            PageType.MENU: ("hero", "menu"),
        },
        ("experience", "tasting-menu", "wine", "ambiance"),
    ),
    _layout(
        "modern-startup",
        "Modern Startup",
        "Bold design for innovative products",
        {"hero_style": "centered", "card_style": "rounded", "border_radius": "16px",
         "shadows": "soft", "spacing": "comfortable"},
        {
            PageType.HOME: ("hero", "features", "stats", "testimonials", "pricing", "cta"),
            PageType.FEATURES: ("hero", "features", "cta"),
            PageType.PRICING: ("hero", "pricing", "faq"),
        },
        ("innovation", "demo", "features", "testimonials"),
    ),
    _layout(
        "enterprise-trust",
        "Enterprise Trust",
        "Professional design for B2B products and firms",
        {"hero_style": "split", "card_style": "bordered", "border_radius": "8px",
         "shadows": "minimal", "spacing": "structured"},
        {
            PageType.HOME: ("hero", "stats", "features", "testimonials", "pricing", "cta"),
            PageType.SERVICES: ("hero", "service-grid", "cta"),
            PageType.PRICING: ("hero", "pricing", "faq", "cta"),
        },
        ("features", "integrations", "security", "enterprise"),
    ),
    _layout(
        "conversion-focused",
        "Conversion Focused",
        "Optimized design for signups, trials, and checkout",
        {"hero_style": "minimal", "card_style": "flat", "border_radius": "4px",
         "shadows": "none", "spacing": "compact"},
        {
            PageType.HOME: ("hero", "features", "pricing", "faq", "cta"),
            PageType.PRICING: ("pricing", "faq"),
        },
        ("signup", "trial", "features", "pricing"),
    ),
    _layout(
        "academic-excellence",
        "Academic Excellence",
        "Traditional design emphasizing achievements",
        {"hero_style": "split", "card_style": "bordered", "border_radius": "8px",
         "shadows": "minimal", "spacing": "structured"},
        {
            PageType.HOME: ("hero", "stats", "programs", "team", "testimonials", "cta"),
            PageType.PROGRAMS: ("hero", "programs", "cta"),
        },
        ("academics", "achievements", "faculty", "programs"),
    ),
    _layout(
        "vibrant-community",
        "Vibrant Community",
        "Energetic design highlighting community life",
        {"hero_style": "centered", "card_style": "rounded", "border_radius": "16px",
         "shadows": "soft", "spacing": "comfortable"},
        {
            PageType.HOME: ("hero", "programs", "testimonials", "stats", "cta"),
            PageType.PROGRAMS: ("hero", "programs", "cta"),
            PageType.TEAM: ("hero", "team"),
        },
        ("community", "activities", "events", "culture"),
    ),
    _layout(
        "bold-energy",
        "Bold Energy",
        "High-contrast design with dramatic imagery",
        {"hero_style": "fullscreen", "card_style": "angular", "border_radius": "4px",
         "shadows": "dramatic", "spacing": "structured"},
        {
            PageType.HOME: ("hero", "stats", "services-preview", "testimonials", "cta"),
            PageType.SERVICES: ("hero", "service-grid", "pricing", "cta"),
        },
        ("motivation", "classes", "results", "community"),
    ),
)

LAYOUTS: dict[str, LayoutConfig] = {layout.id: layout for layout in _LAYOUTS}

# Keys are normalised industry names: lowercase letters only.
INDUSTRY_LAYOUT_MAP: dict[str, str] = {
    "healthcare": "patient-focused",
    "medical": "patient-focused",
    "clinic": "patient-focused",
    "hospital": "patient-focused",
    "doctor": "patient-focused",
    "dental": "patient-focused",
    "dentist": "patient-focused",
    "restaurant": "warm-inviting",
    "pizza": "warm-inviting",
    "pizzeria": "warm-inviting",
    "pizzarestaurant": "warm-inviting",
    "cafe": "warm-inviting",
    "coffee": "warm-inviting",
    "coffeecafe": "warm-inviting",
    "bakery": "warm-inviting",
    "steakhouse": "elegant-dining",
    "finedining": "elegant-dining",
    "saas": "modern-startup",
    "software": "modern-startup",
    "tech": "modern-startup",
    "startup": "modern-startup",
    "ecommerce": "conversion-focused",
    "shop": "conversion-focused",
    "store": "conversion-focused",
    "retail": "conversion-focused",
    "agency": "enterprise-trust",
    "consulting": "enterprise-trust",
    "lawfirm": "enterprise-trust",
    "legal": "enterprise-trust",
    "accounting": "enterprise-trust",
    "professional": "enterprise-trust",
    "school": "vibrant-community",
    "education": "vibrant-community",
    "academy": "vibrant-community",
    "university": "academic-excellence",
    "training": "academic-excellence",
    "tutoring": "academic-excellence",
    "fitness": "bold-energy",
    "gym": "bold-energy",
    "fitnessgym": "bold-energy",
    "yoga": "vibrant-community",
    "salon": "patient-focused",
    "spa": "patient-focused",
}

# ---------------------------------------------------------------------------
# Style enum -> CSS value tables
# ---------------------------------------------------------------------------

SHADOW_VALUES: dict[str, str] = {
    "soft": "0 4px 20px rgba(0,0,0,0.06)",
    "minimal": "0 2px 8px rgba(0,0,0,0.04)",
    "dramatic": "0 20px 60px rgba(0,0,0,0.3)",
}

SPACING_VALUES: dict[str, str] = {
    "compact": "16px",
    "structured": "24px",
    "comfortable": "32px",
    "spacious": "48px",
}

CARD_RADIUS_VALUES: dict[str, str] = {
    "rounded": "16px",
    "bordered": "8px",
    "flat": "4px",
    "angular": "0",
}

DEFAULT_SHADOW = "none"
DEFAULT_SPACING = "24px"
DEFAULT_CARD_RADIUS = "4px"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_layout(layout_id: str | None) -> LayoutConfig:
    """Return the layout registered as *layout_id*.

    Unknown or empty ids resolve to the default layout (``patient-focused``);
    this function never returns ``None`` and never raises.
    """
    if layout_id and layout_id in LAYOUTS:
        return LAYOUTS[layout_id]
    return LAYOUTS[DEFAULT_LAYOUT_ID]


def get_available_layouts() -> list[LayoutConfig]:
    """Return every registered layout in declaration order."""
    return list(_LAYOUTS)


def normalize_industry_key(industry: str | None) -> str:
    """Lowercase *industry* and strip every non-letter (``"Law Firm"`` -> ``"lawfirm"``)."""
    if not industry:
        return ""
    return re.sub(r"[^a-z]", "", industry.lower())


def get_recommended_layout(industry: str | None) -> str:
    """Return the recommended layout id for *industry*, or the default id."""
    return INDUSTRY_LAYOUT_MAP.get(normalize_industry_key(industry), DEFAULT_LAYOUT_ID)


def get_layout_css(layout_or_id: LayoutConfig | str | None) -> dict[str, str]:
    """Derive the four layout CSS custom properties from a layout's style enums.

    Args:
        layout_or_id: A ``LayoutConfig`` or a layout id (resolved with
            :func:`get_layout`, so unknown ids use the default layout).

    Returns:
        ``{"--layout-border-radius", "--layout-shadow", "--layout-spacing",
        "--layout-card-radius"}`` mapped to CSS values.  Unmapped shadow values
        become ``"none"``.
    """
    layout = layout_or_id if isinstance(layout_or_id, LayoutConfig) else get_layout(layout_or_id)
    style = layout.style
    return {
        "--layout-border-radius": style.border_radius,
        "--layout-shadow": SHADOW_VALUES.get(style.shadows, DEFAULT_SHADOW),
        "--layout-spacing": SPACING_VALUES.get(style.spacing, DEFAULT_SPACING),
        "--layout-card-radius": CARD_RADIUS_VALUES.get(style.card_style, DEFAULT_CARD_RADIUS),
    }


def layout_css_block(layout_or_id: LayoutConfig | str | None) -> str:
    """Return the layout variables as a ``:root { ... }`` CSS block."""
    lines = [f"  {name}: {value};" for name, value in get_layout_css(layout_or_id).items()]
    return ":root {\n" + "\n".join(lines) + "\n}\n"

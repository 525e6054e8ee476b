"""Per-industry layout catalogue.

Each industry offers three layout variants (one per hero family) with a colour
palette per variant and a default variant.  The canonical registry in
:mod:`sitegen.layouts.registry` is industry-agnostic; this catalogue is what
``generate_all_layout_variants`` walks to preview every look for one business.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from sitegen.models import ColorTokens, LayoutConfig, LayoutStyle, PageType

DEFAULT_INDUSTRY = "healthcare"

INDUSTRY_ALIASES: dict[str, str] = {
    "medical": "healthcare",
    "clinic": "healthcare",
    "hospital": "healthcare",
    "doctor": "healthcare",
    "dentist": "dental",
    "pizzeria": "pizza-restaurant",
    "pizza": "pizza-restaurant",
    "cafe": "coffee-cafe",
    "coffee": "coffee-cafe",
    "coffeeshop": "coffee-cafe",
    "spa": "salon-spa",
    "salon": "salon-spa",
    "beauty": "salon-spa",
    "barbershop": "salon-spa",
    "barber": "salon-spa",
    "gym": "fitness-gym",
    "fitness": "fitness-gym",
    "yoga-studio": "yoga",
    "lawyer": "law-firm",
    "attorney": "law-firm",
    "legal": "law-firm",
    "software": "saas",
    "tech": "saas",
    "shop": "ecommerce",
    "store": "ecommerce",
    "retail": "ecommerce",
    "academy": "school",
    "education": "school",
}


@dataclass(frozen=True)
class IndustryLayouts:
    """The layout variants offered for one industry."""

    industry: str
    default_layout: str
    layouts: dict[str, LayoutConfig] = field(default_factory=dict)
    palettes: dict[str, ColorTokens] = field(default_factory=dict)

    def default(self) -> LayoutConfig:
        return self.layouts[self.default_layout]


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

# (id, name, description, hero, card, radius, shadows, spacing, (primary, secondary, accent))
_Variant = tuple[str, str, str, str, str, str, str, str, tuple[str, str, str]]

# Home section order per hero family; "{feature}" is the industry's showcase section.
_HOME_ORDERS: dict[str, tuple[str, ...]] = {
    "centered": ("hero", "{feature}", "testimonials", "stats", "cta"),
    "split": ("hero", "stats", "{feature}", "team", "testimonials", "cta"),
    "minimal": ("hero", "{feature}", "contact"),
    "fullscreen": ("hero", "story", "{feature}", "testimonials", "cta"),
}

_CATALOGUE: dict[str, tuple[str, str, tuple[_Variant, ...]]] = {
    "healthcare": ("services-preview", "patient-focused", (
        ("patient-focused", "Patient Focused", "Warm, welcoming design emphasizing easy booking and comfort",
         "centered", "rounded", "16px", "soft", "comfortable", ("#059669", "#10B981", "#34D399")),
        ("medical-professional", "Medical Professional", "Clean, clinical design emphasizing credentials and expertise",
         "split", "bordered", "8px", "minimal", "structured", ("#0284C7", "#0EA5E9", "#38BDF8")),
        ("clinical-dashboard", "Clinical Dashboard", "Data-focused design with quick access to patient tools",
         "minimal", "flat", "4px", "none", "compact", ("#7C3AED", "#8B5CF6", "#A78BFA")),
    )),
    "dental": ("services-preview", "family-friendly", (
        ("family-friendly", "Family Friendly", "Gentle, approachable design for the whole family",
         "centered", "rounded", "20px", "soft", "comfortable", ("#0D9488", "#14B8A6", "#5EEAD4")),
        ("modern-cosmetic", "Modern Cosmetic", "Polished design showcasing smile makeovers",
         "split", "bordered", "8px", "minimal", "structured", ("#3B82F6", "#60A5FA", "#93C5FD")),
        ("clinical-efficient", "Clinical Efficient", "Streamlined design focused on fast booking",
         "minimal", "flat", "4px", "none", "compact", ("#6366F1", "#818CF8", "#A5B4FC")),
    )),
    "pizza-restaurant": ("menu-preview", "family-fun", (
        ("family-fun", "Family Fun", "Bright, playful design for family pizza nights",
         "centered", "rounded", "20px", "soft", "comfortable", ("#DC2626", "#F97316", "#FBBF24")),
        ("artisan-craft", "Artisan Craft", "Crafted design highlighting ingredients and ovens",
         "split", "bordered", "8px", "minimal", "structured", ("#92400E", "#B45309", "#D97706")),
        ("quick-order", "Quick Order", "Order-first design for takeout and delivery",
         "minimal", "flat", "4px", "none", "compact", ("#E11D48", "#F43F5E", "#FB7185")),
    )),
    "steakhouse": ("menu-preview", "luxury-dining", (
        ("luxury-dining", "Luxury Dining", "Dark, dramatic design for an upscale evening",
         "fullscreen", "bordered", "4px", "dramatic", "spacious", ("#1F1F1F", "#991B1B", "#B91C1C")),
        ("rustic-grill", "Rustic Grill", "Warm wood-and-fire design for a casual grill",
         "split", "rounded", "12px", "soft", "comfortable", ("#78350F", "#92400E", "#B45309")),
        ("modern-chophouse", "Modern Chophouse", "Sharp, monochrome design for a modern steakhouse",
         "minimal", "flat", "0", "none", "structured", ("#18181B", "#27272A", "#71717A")),
    )),
    "coffee-cafe": ("menu-preview", "cozy-warmth", (
        ("cozy-warmth", "Cozy Warmth", "Inviting design for a neighbourhood cafe",
         "centered", "rounded", "16px", "soft", "comfortable", ("#78350F", "#92400E", "#F59E0B")),
        ("modern-minimal", "Modern Minimal", "Clean design for specialty coffee",
         "split", "bordered", "8px", "minimal", "structured", ("#1F2937", "#374151", "#9CA3AF")),
        ("quick-grab", "Quick Grab", "Order-ahead design for commuters",
         "minimal", "flat", "4px", "none", "compact", ("#047857", "#059669", "#34D399")),
    )),
    "restaurant": ("menu-preview", "farm-fresh", (
        ("farm-fresh", "Farm Fresh", "Natural design celebrating seasonal produce",
         "centered", "rounded", "12px", "soft", "comfortable", ("#166534", "#15803D", "#22C55E")),
        ("elegant-dining", "Elegant Dining", "Refined design for fine dining",
         "fullscreen", "bordered", "4px", "minimal", "spacious", ("#1E1B18", "#44403C", "#A8A29E")),
        ("neighborhood-bistro", "Neighborhood Bistro", "Friendly design for a local bistro",
         "split", "rounded", "16px", "soft", "comfortable", ("#0369A1", "#0284C7", "#38BDF8")),
    )),
    "bakery": ("menu-preview", "artisan-charm", (
        ("artisan-charm", "Artisan Charm", "Handmade feel for a traditional bakery",
         "centered", "rounded", "20px", "soft", "comfortable", ("#92400E", "#B45309", "#FBBF24")),
        ("modern-patisserie", "Modern Patisserie", "Elegant design for pastries and cakes",
         "split", "bordered", "8px", "minimal", "structured", ("#831843", "#9D174D", "#DB2777")),
        ("sweet-simple", "Sweet & Simple", "Straightforward design for quick orders",
         "minimal", "flat", "4px", "none", "compact", ("#DC2626", "#EF4444", "#FCA5A5")),
    )),
    "salon-spa": ("services-preview", "luxury-retreat", (
        ("luxury-retreat", "Luxury Retreat", "Calm, spacious design for a day spa",
         "fullscreen", "rounded", "16px", "soft", "spacious", ("#831843", "#9D174D", "#F9A8D4")),
        ("modern-beauty", "Modern Beauty", "Trend-forward design for a modern salon",
         "split", "bordered", "8px", "minimal", "structured", ("#7C3AED", "#8B5CF6", "#C4B5FD")),
        ("quick-book", "Quick Book", "Booking-first design for busy clients",
         "minimal", "flat", "4px", "none", "compact", ("#0D9488", "#14B8A6", "#5EEAD4")),
    )),
    "fitness-gym": ("services-preview", "bold-energy", (
        ("bold-energy", "Bold Energy", "High-contrast design with dramatic imagery",
         "fullscreen", "angular", "4px", "dramatic", "structured", ("#DC2626", "#EF4444", "#FCA5A5")),
        ("modern-wellness", "Modern Wellness", "Balanced design for holistic fitness",
         "split", "rounded", "12px", "soft", "comfortable", ("#059669", "#10B981", "#6EE7B7")),
        ("functional-focused", "Functional Focused", "No-frills design for training programs",
         "minimal", "bordered", "8px", "minimal", "compact", ("#1F2937", "#374151", "#6B7280")),
    )),
    "yoga": ("services-preview", "serene-zen", (
        ("serene-zen", "Serene Zen", "Airy design for a peaceful studio",
         "centered", "rounded", "24px", "soft", "spacious", ("#0D9488", "#14B8A6", "#99F6E4")),
        ("modern-flow", "Modern Flow", "Contemporary design for flow classes",
         "split", "bordered", "8px", "minimal", "structured", ("#7C3AED", "#8B5CF6", "#C4B5FD")),
        ("active-practice", "Active Practice", "Schedule-first design for active members",
         "minimal", "flat", "4px", "none", "compact", ("#EA580C", "#F97316", "#FDBA74")),
    )),
    "law-firm": ("services-preview", "trust-authority", (
        ("trust-authority", "Trust & Authority", "Traditional design conveying experience",
         "split", "bordered", "4px", "minimal", "structured", ("#1E3A5F", "#2563EB", "#3B82F6")),
        ("modern-practice", "Modern Practice", "Approachable design for a modern firm",
         "centered", "rounded", "12px", "soft", "comfortable", ("#0F766E", "#14B8A6", "#2DD4BF")),
        ("results-focused", "Results Focused", "Direct design leading with case results",
         "minimal", "flat", "0", "none", "compact", ("#18181B", "#27272A", "#A1A1AA")),
    )),
    "saas": ("features", "modern-startup", (
        ("enterprise-trust", "Enterprise Trust", "Professional design for B2B products",
         "split", "bordered", "8px", "minimal", "structured", ("#1E40AF", "#3B82F6", "#60A5FA")),
        ("modern-startup", "Modern Startup", "Bold design for innovative products",
         "centered", "rounded", "16px", "soft", "comfortable", ("#7C3AED", "#8B5CF6", "#A78BFA")),
        ("conversion-focused", "Conversion Focused", "Optimized design for signups and trials",
         "minimal", "flat", "4px", "none", "compact", ("#059669", "#10B981", "#34D399")),
    )),
    "ecommerce": ("features", "modern-shop", (
        ("boutique-luxury", "Boutique Luxury", "Editorial design for premium collections",
         "fullscreen", "bordered", "0", "minimal", "spacious", ("#1F1F1F", "#44403C", "#D4AF37")),
        ("modern-shop", "Modern Shop", "Friendly design for browsing categories",
         "split", "rounded", "12px", "soft", "comfortable", ("#0369A1", "#0284C7", "#38BDF8")),
        ("fast-checkout", "Fast Checkout", "Deal-driven design for quick purchases",
         "minimal", "flat", "4px", "none", "compact", ("#DC2626", "#EF4444", "#FCA5A5")),
    )),
    "school": ("programs", "vibrant-community", (
        ("academic-excellence", "Academic Excellence", "Traditional design emphasizing achievements",
         "split", "bordered", "8px", "minimal", "structured", ("#1E3A5F", "#1E40AF", "#3B82F6")),
        ("vibrant-community", "Vibrant Community", "Energetic design highlighting community life",
         "centered", "rounded", "16px", "soft", "comfortable", ("#7C3AED", "#8B5CF6", "#C4B5FD")),
        ("info-focused", "Info Focused", "Practical design for announcements and calendars",
         "minimal", "flat", "4px", "none", "compact", ("#0F766E", "#14B8A6", "#2DD4BF")),
    )),
}


def _build(industry: str, feature: str, default_id: str, variants: tuple[_Variant, ...]) -> IndustryLayouts:
    layouts: dict[str, LayoutConfig] = {}
    palettes: dict[str, ColorTokens] = {}
    for layout_id, name, description, hero, card, radius, shadows, spacing, colors in variants:
        home = tuple(feature if s == "{feature}" else s for s in _HOME_ORDERS[hero])
        layouts[layout_id] = LayoutConfig(
            id=layout_id,
            name=name,
            description=description,
            style=LayoutStyle(
                hero_style=hero,
                card_style=card,
                border_radius=radius,
                shadows=shadows,
                spacing=spacing,
            ),
            section_order={PageType.HOME: home},
        )
        primary, secondary, accent = colors
        palettes[layout_id] = ColorTokens(primary=primary, secondary=secondary, accent=accent)
    return IndustryLayouts(
        industry=industry, default_layout=default_id, layouts=layouts, palettes=palettes
    )


INDUSTRY_LAYOUTS: dict[str, IndustryLayouts] = {
    industry: _build(industry, feature, default_id, variants)
    for industry, (feature, default_id, variants) in _CATALOGUE.items()
}


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


def normalize_industry(industry: str | None) -> str:
    """Map a free-form industry name onto a catalogue key.

    Spaces become hyphens, other punctuation is dropped and common aliases
    (``pizza``, ``medical``, ``gym``...) are resolved.  Empty input maps to
    ``healthcare``.
    """
    if not industry:
        return DEFAULT_INDUSTRY
    normalized = re.sub(r"\s+", "-", industry.strip().lower())
    normalized = re.sub(r"[^a-z0-9-]", "", normalized)
    normalized = re.sub(r"-{2,}", "-", normalized).strip("-")
    return INDUSTRY_ALIASES.get(normalized, normalized)


def get_industry_layouts(industry: str | None) -> IndustryLayouts:
    """Return the variants for *industry*; unknown industries get healthcare's."""
    return INDUSTRY_LAYOUTS.get(normalize_industry(industry), INDUSTRY_LAYOUTS[DEFAULT_INDUSTRY])


def get_industry_layout(industry: str | None, layout_id: str | None = None) -> LayoutConfig:
    """Return variant *layout_id* of *industry*, or the industry default."""
    catalogue = get_industry_layouts(industry)
    if layout_id and layout_id in catalogue.layouts:
        return catalogue.layouts[layout_id]
    return catalogue.default()


def get_available_industry_layouts(industry: str | None) -> list[tuple[LayoutConfig, bool]]:
    """Return ``(layout, is_default)`` pairs for every variant of *industry*."""
    catalogue = get_industry_layouts(industry)
    return [
        (layout, layout_id == catalogue.default_layout)
        for layout_id, layout in catalogue.layouts.items()
    ]


def get_industry_palette(industry: str | None, layout_id: str | None = None) -> ColorTokens:
    """Return the colour palette of a variant (the default variant when unknown)."""
    catalogue = get_industry_layouts(industry)
    if layout_id and layout_id in catalogue.palettes:
        return catalogue.palettes[layout_id]
    return catalogue.palettes[catalogue.default_layout]

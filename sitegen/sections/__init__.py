"""Section generators: hero variants plus reusable content blocks."""

from sitegen.sections.blocks import (
    apply_section_order,
    card_grid,
    contact_section,
    cta_section,
    form_section,
    gallery_section,
    list_section,
    menu_section,
    page_header,
    pricing_section,
    stats_section,
    team_section,
    testimonials_section,
    text_section,
)
from sitegen.sections.hero import (
    HERO_VARIANTS,
    CtaLink,
    HeroContent,
    get_hero_variant,
    hero_centered,
    hero_minimal,
    hero_split,
)

__all__ = [
    # Hero
    "HERO_VARIANTS",
    "CtaLink",
    "HeroContent",
    "get_hero_variant",
    "hero_centered",
    "hero_minimal",
    "hero_split",
    # Blocks
    "apply_section_order",
    "card_grid",
    "contact_section",
    "cta_section",
    "form_section",
    "gallery_section",
    "list_section",
    "menu_section",
    "page_header",
    "pricing_section",
    "stats_section",
    "team_section",
    "testimonials_section",
    "text_section",
]

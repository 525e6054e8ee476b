"""Layout registry and per-industry layout catalogue."""

from sitegen.layouts.industry import (
    INDUSTRY_LAYOUTS,
    IndustryLayouts,
    get_available_industry_layouts,
    get_industry_layout,
    get_industry_layouts,
    get_industry_palette,
    normalize_industry,
)
from sitegen.layouts.registry import (
    DEFAULT_LAYOUT_ID,
    INDUSTRY_LAYOUT_MAP,
    LAYOUTS,
    get_available_layouts,
    get_layout,
    get_layout_css,
    get_recommended_layout,
    layout_css_block,
)

__all__ = [
    "DEFAULT_LAYOUT_ID",
    "INDUSTRY_LAYOUTS",
    "INDUSTRY_LAYOUT_MAP",
    "IndustryLayouts",
    "LAYOUTS",
    "get_available_industry_layouts",
    "get_available_layouts",
    "get_industry_layout",
    "get_industry_layouts",
    "get_industry_palette",
    "get_layout",
    "get_layout_css",
    "get_recommended_layout",
    "layout_css_block",
    "normalize_industry",
]

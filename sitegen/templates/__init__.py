"""Industry page-template libraries.

Quick usage::

    from sitegen.templates import SiteOptions, generate_site

    site = generate_site(fixture, SiteOptions(layout="medical-professional"))
    for name, page in site.pages.items():
        print(name, page.section_types())
"""

from sitegen.templates.base import (
    IndustryLibrary,
    PageContext,
    PageTemplate,
    SiteOptions,
    make_page,
)
from sitegen.templates.catalog import (
    FALLBACK_LIBRARY,
    LIBRARIES,
    generate_all_layout_variants,
    generate_site,
    generate_site_with_layout,
    get_library,
)

__all__ = [
    "FALLBACK_LIBRARY",
    "IndustryLibrary",
    "LIBRARIES",
    "PageContext",
    "PageTemplate",
    "SiteOptions",
    "generate_all_layout_variants",
    "generate_site",
    "generate_site_with_layout",
    "get_library",
    "make_page",
]

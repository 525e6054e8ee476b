"""Swappable renderers for generated sites."""

from sitegen.render.renderer import (
    HtmlRenderer,
    JsonRenderer,
    Renderer,
    page_filename,
    write_site,
)

__all__ = [
    "HtmlRenderer",
    "JsonRenderer",
    "Renderer",
    "page_filename",
    "write_site",
]

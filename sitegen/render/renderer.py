"""Renderers turning a structured ``GeneratedSite`` into files.

Page generators only produce typed section descriptors.  A renderer decides
what those descriptors become on disk: :class:`HtmlRenderer` renders static
HTML through Jinja2 templates shipped in ``sitegen/render/templates/``,
:class:`JsonRenderer` dumps the structure itself for other toolchains.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from jinja2 import Environment, FileSystemLoader, select_autoescape

from sitegen.models import GeneratedSite, Page, Section
from sitegen.utils import pascal_case, slugify, write_text_file

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


@runtime_checkable
class Renderer(Protocol):
    """Backend-specific renderer for generated sites."""

    def render_page(self, page: Page, site: GeneratedSite) -> str: ...

    def render_site(self, site: GeneratedSite) -> dict[str, str]:
        """Return ``{relative_path: content}`` for every file of the site."""
        ...


def page_filename(path: str) -> str:
    """Map a route path to a static file name (``/`` -> ``index.html``)."""
    stripped = path.strip("/")
    return "index.html" if not stripped else f"{stripped}.html"


def _href_filter(value: str) -> str:
    """Rewrite internal routes to static file names; leave other links untouched."""
    if value.startswith("/") and "." not in value:
        return page_filename(value)
    return value


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------


class HtmlRenderer:
    """Renders pages to static HTML with Jinja2.

    Section templates are resolved most-specific first:
    ``sections/{type}-{variant}.html.j2``, ``sections/{type}.html.j2``,
    ``sections/{variant}.html.j2`` and finally ``sections/generic.html.j2``.
    Adding a new section type therefore needs no code change here.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(enabled_extensions=("html", "html.j2")),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["slugify"] = slugify
        self.env.filters["pascal_case"] = pascal_case
        self.env.filters["href"] = _href_filter

    def section_template_names(self, section: Section) -> list[str]:
        return [
            f"sections/{section.type}-{section.variant}.html.j2",
            f"sections/{section.type}.html.j2",
            f"sections/{section.variant}.html.j2",
            "sections/generic.html.j2",
        ]

    def render_section(self, section: Section, site: GeneratedSite) -> str:
        template = self.env.select_template(self.section_template_names(section))
        return template.render(section=section, props=section.props, site=site, colors=site.colors)

    def render_page(self, page: Page, site: GeneratedSite) -> str:
        body = [self.render_section(section, site) for section in page.sections]
        template = self.env.get_template("page.html.j2")
        return template.render(page=page, site=site, app=site.app, sections_html=body)

    def render_styles(self, site: GeneratedSite) -> str:
        context: dict[str, Any] = {"site": site, "colors": site.colors, "css": site.css}
        return self.env.get_template("styles.css.j2").render(**context)

    def render_site(self, site: GeneratedSite) -> dict[str, str]:
        files = {page_filename(page.path): self.render_page(page, site) for page in site.pages.values()}
        files["styles.css"] = self.render_styles(site)
        return files


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


class JsonRenderer:
    """Dumps the structured page representation as JSON documents."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def render_page(self, page: Page, site: GeneratedSite) -> str:
        return page.model_dump_json(indent=self.indent) + "\n"

    def render_site(self, site: GeneratedSite) -> dict[str, str]:
        files = {
            f"pages/{page.page_id}.json": self.render_page(page, site)
            for page in site.pages.values()
        }
        files["site.json"] = site.model_dump_json(indent=self.indent, exclude={"pages"}) + "\n"
        return files


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


async def write_site(
    site: GeneratedSite,
    output_dir: str | Path,
    renderer: Renderer | None = None,
) -> list[Path]:
    """Render *site* and write every file under *output_dir*.

    Returns:
        The written paths, sorted.
    """
    renderer = renderer or HtmlRenderer()
    out_base = Path(output_dir)
    files = renderer.render_site(site)
    written = await asyncio.gather(
        *(write_text_file(out_base / rel_path, content) for rel_path, content in files.items())
    )
    return sorted(written)

"""Reusable section builders shared by the industry page templates.

Every builder is a pure function returning a :class:`~sitegen.models.Section`
with JSON-safe props.  Builders never read the layout; ordering is applied
afterwards with :func:`apply_section_order`.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from sitegen.models import BusinessInfo, ColorTokens, Section


def _copy_items(items: Iterable[dict[str, Any]] | None) -> list[dict[str, Any]]:
    return [dict(item) for item in (items or [])]


def text_section(section_type: str, title: str, body: str | Sequence[str], **extra: Any) -> Section:
    """Heading plus one or more paragraphs (story, mission, policies...)."""
    paragraphs = [body] if isinstance(body, str) else list(body)
    return Section(
        type=section_type,
        variant="text",
        props={"title": title, "paragraphs": paragraphs, **extra},
    )


def stats_section(items: Iterable[dict[str, Any]], colors: ColorTokens, title: str = "") -> Section:
    return Section(
        type="stats",
        props={"title": title, "items": _copy_items(items), "accent": colors.primary},
    )


def card_grid(
    section_type: str,
    title: str,
    items: Iterable[dict[str, Any]],
    colors: ColorTokens,
    *,
    subtitle: str = "",
    columns: int = 3,
    link: dict[str, str] | None = None,
) -> Section:
    """Grid of cards (services, features, programs, locations...).

    Each item is a dict with at least ``title``; ``description``, ``icon``,
    ``price`` and ``href`` are rendered when present.
    """
    props: dict[str, Any] = {
        "title": title,
        "subtitle": subtitle,
        "items": _copy_items(items),
        "columns": columns,
        "accent": colors.primary,
    }
    if link:
        props["link"] = dict(link)
    return Section(type=section_type, variant="cards", props=props)


def testimonials_section(items: Iterable[dict[str, Any]], title: str = "What People Say") -> Section:
    return Section(type="testimonials", props={"title": title, "items": _copy_items(items)})


def cta_section(
    headline: str,
    subheadline: str,
    button: dict[str, str],
    colors: ColorTokens,
    secondary: dict[str, str] | None = None,
) -> Section:
    """Full-width call-to-action banner in the brand gradient."""
    return Section(
        type="cta",
        props={
            "headline": headline,
            "subheadline": subheadline,
            "button": dict(button),
            "secondary": dict(secondary) if secondary else None,
            "background": f"linear-gradient(135deg, {colors.primary}, {colors.gradient_end})",
        },
    )


def menu_section(
    categories: Iterable[dict[str, Any]],
    colors: ColorTokens,
    title: str = "Our Menu",
    section_type: str = "menu",
    limit: int | None = None,
) -> Section:
    """Menu grouped by category.  ``limit`` keeps the first N items per category (previews)."""
    groups: list[dict[str, Any]] = []
    for category in categories or []:
        items = _copy_items(category.get("items"))
        if limit is not None:
            items = items[:limit]
        groups.append({"name": category.get("name", ""), "items": items})
    return Section(
        type=section_type,
        props={"title": title, "categories": groups, "accent": colors.primary},
    )


def team_section(members: Iterable[dict[str, Any]], title: str = "Meet Our Team") -> Section:
    return Section(type="team", props={"title": title, "members": _copy_items(members)})


def pricing_section(plans: Iterable[dict[str, Any]], colors: ColorTokens, title: str = "Pricing") -> Section:
    """Pricing tiers; a plan with ``highlight: True`` is drawn in the accent colour."""
    return Section(
        type="pricing",
        props={"title": title, "plans": _copy_items(plans), "accent": colors.primary},
    )


def contact_section(business: BusinessInfo, title: str = "Contact Us", show_form: bool = True) -> Section:
    return Section(
        type="contact",
        props={
            "title": title,
            "phone": business.phone,
            "email": business.email,
            "address": business.address,
            "hours": dict(business.hours),
            "show_form": show_form,
        },
    )


def gallery_section(images: Iterable[dict[str, Any]], title: str = "Gallery") -> Section:
    return Section(type="gallery", props={"title": title, "images": _copy_items(images)})


def list_section(section_type: str, title: str, items: Iterable[dict[str, Any]]) -> Section:
    """Question/answer or label/value list (FAQ, hours, insurance plans...)."""
    return Section(type=section_type, variant="list", props={"title": title, "items": _copy_items(items)})


def form_section(
    section_type: str,
    title: str,
    fields: Iterable[dict[str, Any]],
    submit_label: str,
    colors: ColorTokens,
    subtitle: str = "",
) -> Section:
    """Input form (reservations, appointments, demo requests, admissions)."""
    return Section(
        type=section_type,
        variant="form",
        props={
            "title": title,
            "subtitle": subtitle,
            "fields": _copy_items(fields),
            "submit_label": submit_label,
            "accent": colors.primary,
        },
    )


def page_header(title: str, subtitle: str, colors: ColorTokens) -> Section:
    """Compact banner used at the top of inner pages."""
    return Section(
        type="page-header",
        props={
            "title": title,
            "subtitle": subtitle,
            "background": f"linear-gradient(135deg, {colors.primary}, {colors.gradient_end})",
        },
    )


def apply_section_order(sections: Sequence[Section], order: Sequence[str]) -> list[Section]:
    """Reorder *sections* to follow *order*.

    Sections whose type appears in *order* are sorted into that order within
    the slots they already occupy; every other section keeps its position.
    Order entries with no matching section are ignored and no section is
    dropped.
    """
    if not order:
        return list(sections)
    rank = {section_type: index for index, section_type in enumerate(order)}
    slots = [i for i, s in enumerate(sections) if s.type in rank]
    listed = sorted((sections[i] for i in slots), key=lambda s: rank[s.type])
    result = list(sections)
    for slot, section in zip(slots, listed):
        result[slot] = section
    return result

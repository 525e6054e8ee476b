"""Hero section variants.

Three visual styles render the same content fields: ``centered``, ``split``
and ``minimal``.  Each variant returns a :class:`~sitegen.models.Section`
whose props always carry ``headline``, ``subheadline``, ``primary_cta``,
``secondary_cta`` and ``business``; only the presentation props differ.

Variants are pure: no clocks, randomness, or environment reads.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from sitegen.models import BusinessInfo, ColorTokens, Section


class CtaLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    href: str


class HeroContent(BaseModel):
    """Content fields shared by every hero variant.  ``None`` means "use the variant default"."""

    model_config = ConfigDict(frozen=True)

    headline: Optional[str] = None
    subheadline: Optional[str] = None
    primary_cta: Optional[CtaLink] = None
    secondary_cta: Optional[CtaLink] = None
    highlights: tuple[dict[str, str], ...] = Field(default=())

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "HeroContent":
        """Build content from a fixture's ``hero`` block.

        Accepts either nested CTA dicts or the flat ``cta``/``ctaLink``/
        ``secondaryCta``/``secondaryCtaLink`` keys used by fixture files.
        """
        data = data or {}
        primary = data.get("primary_cta") or data.get("primaryCta")
        if primary is None and data.get("cta"):
            primary = {"label": data["cta"], "href": data.get("ctaLink", "/contact")}
        secondary = data.get("secondary_cta")
        if secondary is None and isinstance(data.get("secondaryCta"), dict):
            secondary = data["secondaryCta"]
        elif secondary is None and data.get("secondaryCta"):
            secondary = {"label": data["secondaryCta"], "href": data.get("secondaryCtaLink", "/about")}
        return cls(
            headline=data.get("headline"),
            subheadline=data.get("subheadline"),
            primary_cta=primary,
            secondary_cta=secondary,
            highlights=tuple(data.get("highlights") or ()),
        )


HeroVariant = Callable[[HeroContent, ColorTokens, Optional[BusinessInfo]], Section]


def _business_context(business: BusinessInfo | None) -> dict[str, Any]:
    if business is None:
        return {"name": "", "industry": "", "tagline": "", "phone": ""}
    return {
        "name": business.name,
        "industry": business.industry,
        "tagline": business.tagline,
        "phone": business.phone,
    }


def _cta(link: CtaLink | None, label: str, href: str) -> dict[str, str]:
    chosen = link or CtaLink(label=label, href=href)
    return chosen.model_dump()


def _welcome(business: BusinessInfo | None) -> str:
    return f"Welcome to {business.name}" if business and business.name else "Welcome"


def hero_centered(
    content: HeroContent,
    colors: ColorTokens,
    business: BusinessInfo | None = None,
) -> Section:
    """Full-width gradient hero with centred copy and two CTAs."""
    return Section(
        type="hero",
        variant="centered",
        props={
            "headline": content.headline or _welcome(business),
            "subheadline": content.subheadline or (business.tagline if business else ""),
            "primary_cta": _cta(content.primary_cta, "Contact Us", "/contact"),
            "secondary_cta": _cta(content.secondary_cta, "Learn More", "/about"),
            "business": _business_context(business),
            "background": f"linear-gradient(135deg, {colors.primary}, {colors.gradient_end})",
            "text_color": "#FFFFFF",
        },
    )


def hero_split(
    content: HeroContent,
    colors: ColorTokens,
    business: BusinessInfo | None = None,
) -> Section:
    """Two-column hero: copy and highlights on the left, brand panel on the right."""
    call_href = f"tel:{business.phone}" if business and business.phone else "/contact"
    return Section(
        type="hero",
        variant="split",
        props={
            "headline": content.headline or _welcome(business),
            "subheadline": content.subheadline or (business.tagline if business else ""),
            "primary_cta": _cta(content.primary_cta, "Get Started", "/contact"),
            "secondary_cta": _cta(content.secondary_cta, "Call Us", call_href),
            "business": _business_context(business),
            "background": colors.background,
            "text_color": colors.text,
            "accent": colors.primary,
            "eyebrow": business.industry if business else "",
            "highlights": [dict(h) for h in content.highlights],
        },
    )


def hero_minimal(
    content: HeroContent,
    colors: ColorTokens,
    business: BusinessInfo | None = None,
) -> Section:
    """Compact banner hero for quick-access layouts."""
    return Section(
        type="hero",
        variant="minimal",
        props={
            "headline": content.headline or _welcome(business),
            "subheadline": content.subheadline or "How can we help you today?",
            "primary_cta": _cta(content.primary_cta, "Get Started", "/contact"),
            "secondary_cta": _cta(content.secondary_cta, "Learn More", "/about"),
            "business": _business_context(business),
            "background": colors.primary,
            "text_color": "#FFFFFF",
        },
    )


HERO_VARIANTS: dict[str, HeroVariant] = {
    "centered": hero_centered,
    "split": hero_split,
    "minimal": hero_minimal,
}

DEFAULT_HERO_STYLE = "centered"


def get_hero_variant(style: str | None) -> HeroVariant:
    """Return the hero generator for *style*; unknown styles get ``hero_centered``."""
    return HERO_VARIANTS.get(style or DEFAULT_HERO_STYLE, hero_centered)

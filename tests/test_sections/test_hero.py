"""Unit tests for hero section variants (sitegen.sections.hero)."""

from __future__ import annotations

import pytest

from sitegen.models import BusinessInfo, ColorTokens
from sitegen.sections.hero import (
    HERO_VARIANTS,
    CtaLink,
    HeroContent,
    get_hero_variant,
    hero_centered,
    hero_minimal,
    hero_split,
)

COLORS = ColorTokens(primary="#059669", secondary="#10B981")
BUSINESS = BusinessInfo(name="Riverside Clinic", industry="Family Medicine", phone="555-0100")


class TestVariantLookup:
    @pytest.mark.unit
    def test_unknown_style_is_centered(self):
        assert get_hero_variant("nonexistent-style") is get_hero_variant("centered")

    @pytest.mark.unit
    @pytest.mark.parametrize("style", [None, "", "fullscreen"])
    def test_missing_or_unsupported_style_is_centered(self, style):
        assert get_hero_variant(style) is hero_centered

    @pytest.mark.unit
    def test_registered_styles(self):
        assert HERO_VARIANTS == {"centered": hero_centered, "split": hero_split, "minimal": hero_minimal}


class TestVariants:
    @pytest.mark.unit
    @pytest.mark.parametrize("variant", [hero_centered, hero_split, hero_minimal])
    def test_shared_props(self, variant):
        section = variant(HeroContent(), COLORS, BUSINESS)
        assert section.type == "hero"
        for key in ("headline", "subheadline", "primary_cta", "secondary_cta", "business"):
            assert key in section.props
        assert section.props["business"]["name"] == "Riverside Clinic"

    @pytest.mark.unit
    @pytest.mark.parametrize("variant", [hero_centered, hero_split, hero_minimal])
    def test_deterministic(self, variant):
        content = HeroContent(headline="Same")
        assert variant(content, COLORS, BUSINESS) == variant(content, COLORS, BUSINESS)

    @pytest.mark.unit
    def test_centered_defaults_are_neutral(self):
        props = hero_centered(HeroContent(), COLORS).props
        assert props["headline"] == "Welcome"
        assert props["primary_cta"] == {"label": "Contact Us", "href": "/contact"}
        assert props["background"] == "linear-gradient(135deg, #059669, #10B981)"
        assert props["business"] == {"name": "", "industry": "", "tagline": "", "phone": ""}

    @pytest.mark.unit
    def test_split_uses_business_phone_and_industry(self):
        props = hero_split(HeroContent(), COLORS, BUSINESS).props
        assert props["headline"] == "Welcome to Riverside Clinic"
        assert props["secondary_cta"] == {"label": "Call Us", "href": "tel:555-0100"}
        assert props["eyebrow"] == "Family Medicine"
        assert props["highlights"] == []

    @pytest.mark.unit
    def test_split_without_business(self):
        props = hero_split(HeroContent(), COLORS).props
        assert props["secondary_cta"]["href"] == "/contact"
        assert props["eyebrow"] == ""

    @pytest.mark.unit
    def test_minimal_welcomes_business(self):
        assert hero_minimal(HeroContent(), COLORS, BUSINESS).props["headline"] == "Welcome to Riverside Clinic"
        assert hero_minimal(HeroContent(), COLORS).props["headline"] == "Welcome"

    @pytest.mark.unit
    @pytest.mark.parametrize("variant", [hero_centered, hero_split, hero_minimal])
    def test_defaults_carry_no_industry_copy(self, variant):
        rendered = str(variant(HeroContent(), COLORS).props)
        for phrase in ("Health", "Patient", "Practice", "Appointment"):
            assert phrase not in rendered

    @pytest.mark.unit
    def test_content_overrides_defaults(self):
        content = HeroContent(
            headline="Walk-ins welcome",
            primary_cta=CtaLink(label="Visit", href="/visit"),
            highlights=({"value": "7", "label": "Days a week"},),
        )
        props = hero_split(content, COLORS, BUSINESS).props
        assert props["headline"] == "Walk-ins welcome"
        assert props["primary_cta"] == {"label": "Visit", "href": "/visit"}
        assert props["highlights"] == [{"value": "7", "label": "Days a week"}]


class TestHeroContent:
    @pytest.mark.unit
    def test_from_flat_keys(self):
        content = HeroContent.from_dict(
            {"headline": "Hi", "cta": "Order", "ctaLink": "/menu", "secondaryCta": "About"}
        )
        assert content.primary_cta == CtaLink(label="Order", href="/menu")
        assert content.secondary_cta == CtaLink(label="About", href="/about")

    @pytest.mark.unit
    def test_from_nested_keys(self):
        content = HeroContent.from_dict({"primary_cta": {"label": "Go", "href": "/go"}})
        assert content.primary_cta.href == "/go"
        assert content.secondary_cta is None

    @pytest.mark.unit
    def test_from_none(self):
        assert HeroContent.from_dict(None) == HeroContent()

"""About page hero section model."""

from typing import ClassVar

from pydantic import Field

from brighten.models.base import CamelModel, RequestModel
from brighten.models.content import ContentEntity


class HeroStat(CamelModel):
    value: str
    label: str


class HeroButton(CamelModel):
    text: str
    link: str
    is_primary: bool = False


DEFAULT_ABOUT_HERO = {
    "title": "We Are",
    "titleHighlight": "Brighten Solutions",
    "subtitle": "ABOUT US",
    "description1": (
        "Founded in 2016, Brighten Solutions has grown from a small startup to a leading "
        "digital agency. We combine technical expertise with creative thinking to deliver "
        "exceptional digital experiences that drive real business results."
    ),
    "description2": (
        "Our team of experts is passionate about helping businesses thrive in the digital "
        "landscape through innovative solutions, strategic thinking, and a commitment to "
        "excellence."
    ),
    "image": "/images/about-hero.png",
    "stats": [
        {"value": "8+", "label": "Years"},
        {"value": "200+", "label": "Projects"},
        {"value": "50+", "label": "Team Members"},
        {"value": "15+", "label": "Awards"},
    ],
    "buttons": [
        {"text": "Our Services", "link": "/services", "isPrimary": True},
        {"text": "Contact Us", "link": "/contact", "isPrimary": False},
    ],
}


class AboutHero(ContentEntity):
    """The single about-page hero document."""

    entity_type: ClassVar[str] = "ABOUT_HERO"
    display_name: ClassVar[str] = "About hero"

    title: str
    title_highlight: str
    subtitle: str
    description1: str
    description2: str
    image: str
    stats: list[HeroStat] = Field(default_factory=list)
    buttons: list[HeroButton] = Field(default_factory=list)


class CreateAboutHeroRequest(RequestModel):
    title: str = Field(..., min_length=1)
    title_highlight: str = Field(..., min_length=1)
    subtitle: str = Field(..., min_length=1)
    description1: str = Field(..., min_length=1)
    description2: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1)
    stats: list[HeroStat] = Field(default_factory=list)
    buttons: list[HeroButton] = Field(default_factory=list)
    is_active: bool = True


class UpdateAboutHeroRequest(RequestModel):
    title: str | None = Field(None, min_length=1)
    title_highlight: str | None = Field(None, min_length=1)
    subtitle: str | None = Field(None, min_length=1)
    description1: str | None = Field(None, min_length=1)
    description2: str | None = Field(None, min_length=1)
    image: str | None = Field(None, min_length=1)
    stats: list[HeroStat] | None = None
    buttons: list[HeroButton] | None = None
    is_active: bool | None = None

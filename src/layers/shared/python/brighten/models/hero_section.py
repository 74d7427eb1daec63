"""Home page hero section model.

Services, social links and client logos carry an ``order`` and are returned
sorted by it.
"""

from enum import Enum
from typing import Any, ClassVar

from pydantic import Field

from brighten.models.base import CamelModel, RequestModel
from brighten.models.content import ContentEntity

DEFAULT_HERO_TITLE = "Brighten Solutions"
DEFAULT_HERO_DESCRIPTION = (
    "We are leading award-winning digital marketing agency and inbound marketing experts "
    "since 2016. We deliver solutions that are at the intersection of business goals & "
    "user goals but are always led by great design."
)


class SocialPlatform(str, Enum):
    INSTAGRAM = "instagram"
    FACEBOOK = "facebook"
    LINKEDIN = "linkedin"
    WHATSAPP = "whatsapp"
    TWITTER = "twitter"
    YOUTUBE = "youtube"


class HeroService(CamelModel):
    text: str
    order: int = 0


class HeroSocialLink(CamelModel):
    platform: SocialPlatform
    url: str
    order: int = 0


class ClientSection(CamelModel):
    title: str = "WHO WE WORK WITH"
    enabled: bool = True


class ClientLogo(CamelModel):
    name: str
    logo_url: str
    order: int = 0


DEFAULT_HERO_SECTION = {
    "title": DEFAULT_HERO_TITLE,
    "description": DEFAULT_HERO_DESCRIPTION,
    "services": [
        {"text": "Custom Software Company in Surat", "order": 0},
        {"text": "Website Development", "order": 1},
        {"text": "Digital Marketing", "order": 2},
        {"text": "Application Development", "order": 3},
        {"text": "SEO Optimization", "order": 4},
    ],
    "socialLinks": [
        {"platform": "instagram", "url": "https://instagram.com", "order": 0},
        {"platform": "facebook", "url": "https://facebook.com", "order": 1},
        {"platform": "linkedin", "url": "https://linkedin.com", "order": 2},
        {"platform": "whatsapp", "url": "https://whatsapp.com", "order": 3},
    ],
    "clientLogos": [
        {"name": "Daga Group", "logoUrl": "/brightensolution/client-logos/daga-group.webp", "order": 0},
        {"name": "Hanuman Textiles", "logoUrl": "/brightensolution/client-logos/hanuman-textiles.png", "order": 1},
        {"name": "Hare Krishna", "logoUrl": "/brightensolution/client-logos/hare-krishna.png", "order": 2},
        {"name": "Larsen & Turbo", "logoUrl": "/brightensolution/client-logos/lt-logo.webp", "order": 3},
        {"name": "M4M", "logoUrl": "/brightensolution/client-logos/m4m.png", "order": 4},
        {"name": "Maruti", "logoUrl": "/brightensolution/client-logos/maruti.png", "order": 5},
    ],
}


class HeroSection(ContentEntity):
    """The single home-page hero document."""

    entity_type: ClassVar[str] = "HERO_SECTION"
    display_name: ClassVar[str] = "Hero section"

    title: str = DEFAULT_HERO_TITLE
    description: str = DEFAULT_HERO_DESCRIPTION
    button_text: str = "Start exploring"
    button_link: str = "/services"
    hero_image: str = "/brightensolution/hero-image.png"
    services: list[HeroService] = Field(default_factory=list)
    social_links: list[HeroSocialLink] = Field(default_factory=list)
    client_section: ClientSection = Field(default_factory=ClientSection)
    client_logos: list[ClientLogo] = Field(default_factory=list)

    def to_api(self) -> dict[str, Any]:
        data = super().to_api()
        for key in ("services", "socialLinks", "clientLogos"):
            data[key].sort(key=lambda entry: entry["order"])
        return data


class CreateHeroSectionRequest(RequestModel):
    title: str = Field(DEFAULT_HERO_TITLE, min_length=1)
    description: str = Field(DEFAULT_HERO_DESCRIPTION, min_length=1)
    button_text: str = "Start exploring"
    button_link: str = "/services"
    hero_image: str = "/brightensolution/hero-image.png"
    services: list[HeroService] = Field(default_factory=list)
    social_links: list[HeroSocialLink] = Field(default_factory=list)
    client_section: ClientSection = Field(default_factory=ClientSection)
    client_logos: list[ClientLogo] = Field(default_factory=list)
    is_active: bool = True


class UpdateHeroSectionRequest(RequestModel):
    title: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    button_text: str | None = None
    button_link: str | None = None
    hero_image: str | None = None
    services: list[HeroService] | None = None
    social_links: list[HeroSocialLink] | None = None
    client_section: ClientSection | None = None
    client_logos: list[ClientLogo] | None = None
    is_active: bool | None = None

"""Portfolio model - case studies shown on /portfolio."""

from enum import Enum
from typing import ClassVar

from pydantic import Field

from brighten.models.base import RequestModel
from brighten.models.content import DEFAULT_ACCENT_COLOR, HEX_COLOR_PATTERN, ContentEntity


class PortfolioCategory(str, Enum):
    """Portfolio filter categories."""

    WEB = "web"
    MOBILE = "mobile"
    DESIGN = "design"
    BRANDING = "branding"
    SOCIAL_MEDIA = "Social Media"


class PortfolioItem(ContentEntity):
    """A portfolio project."""

    entity_type: ClassVar[str] = "PORTFOLIO"
    display_name: ClassVar[str] = "Portfolio item"
    has_slug: ClassVar[bool] = True

    title: str = Field(..., max_length=255)
    slug: str = Field(..., max_length=255)
    description: str
    category: list[PortfolioCategory] = Field(..., min_length=1)
    image: str
    logo: str | None = None
    technologies: list[str] = Field(..., min_length=1)
    live_url: str | None = None
    code_url: str | None = None
    featured: bool = False
    color: str = Field(default=DEFAULT_ACCENT_COLOR, pattern=HEX_COLOR_PATTERN)
    order: int = 0


class CreatePortfolioRequest(RequestModel):
    """Request model for creating a portfolio item."""

    title: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    description: str = Field(..., min_length=1)
    category: list[PortfolioCategory] = Field(..., min_length=1)
    image: str = Field(..., min_length=1, description="Project image is required")
    logo: str | None = None
    technologies: list[str] = Field(..., min_length=1)
    live_url: str | None = None
    code_url: str | None = None
    featured: bool = False
    color: str = Field(default=DEFAULT_ACCENT_COLOR, pattern=HEX_COLOR_PATTERN)
    order: int = 0
    is_active: bool = True


class UpdatePortfolioRequest(RequestModel):
    """Request model for updating a portfolio item."""

    title: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    category: list[PortfolioCategory] | None = Field(None, min_length=1)
    image: str | None = Field(None, min_length=1)
    logo: str | None = None
    technologies: list[str] | None = Field(None, min_length=1)
    live_url: str | None = None
    code_url: str | None = None
    featured: bool | None = None
    color: str | None = Field(None, pattern=HEX_COLOR_PATTERN)
    order: int | None = None
    is_active: bool | None = None

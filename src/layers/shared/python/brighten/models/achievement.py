"""Achievement model (awards and recognitions on the about page)."""

from typing import ClassVar

from pydantic import Field

from brighten.models.base import RequestModel
from brighten.models.content import ContentEntity


class Achievement(ContentEntity):
    entity_type: ClassVar[str] = "ACHIEVEMENT"
    display_name: ClassVar[str] = "Achievement"

    icon: str
    title: str = Field(..., max_length=255)
    organization: str
    year: str
    image: str
    is_featured: bool = False
    order: int = 0


class CreateAchievementRequest(RequestModel):
    icon: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=255)
    organization: str = Field(..., min_length=1)
    year: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1)
    is_featured: bool = False
    order: int = 0
    is_active: bool = True


class UpdateAchievementRequest(RequestModel):
    icon: str | None = Field(None, min_length=1)
    title: str | None = Field(None, min_length=1, max_length=255)
    organization: str | None = Field(None, min_length=1)
    year: str | None = Field(None, min_length=1)
    image: str | None = Field(None, min_length=1)
    is_featured: bool | None = None
    order: int | None = None
    is_active: bool | None = None

"""Experience section model.

A single active document drives the "Experience" block of the home page.
"""

from datetime import date
from typing import Any, ClassVar

from pydantic import Field

from brighten.models.base import CamelModel, RequestModel, utc_now
from brighten.models.content import ContentEntity

DEFAULT_FOUNDING_DATE = date(2016, 12, 1)


class ExperienceHighlight(CamelModel):
    icon: str
    title: str
    description: str


class ExperienceStat(CamelModel):
    value: str
    label: str
    is_years_of_experience: bool = False


class ExperienceAward(CamelModel):
    icon: str
    title: str
    year: str
    color: str
    text_color: str


def years_since(founded: date, today: date | None = None) -> int:
    """Whole years elapsed since ``founded``."""
    today = today or utc_now().date()
    years = today.year - founded.year
    if (today.month, today.day) < (founded.month, founded.day):
        years -= 1
    return max(years, 0)


class Experience(ContentEntity):
    """The experience section document."""

    entity_type: ClassVar[str] = "EXPERIENCE"
    display_name: ClassVar[str] = "Experience"

    title: str
    subtitle: str
    description: str
    image: str
    founding_date: date = DEFAULT_FOUNDING_DATE
    button_text: str
    button_link: str
    achievements: list[ExperienceHighlight] = Field(default_factory=list)
    stats: list[ExperienceStat] = Field(default_factory=list)
    awards: list[ExperienceAward] = Field(default_factory=list)
    order: int = 0

    def to_api(self, today: date | None = None) -> dict[str, Any]:
        """Serialize for the site, filling years-of-experience stats."""
        data = super().to_api()
        years = str(years_since(self.founding_date, today))
        for stat in data["stats"]:
            if stat.get("isYearsOfExperience"):
                stat["value"] = years
        return data


class CreateExperienceRequest(RequestModel):
    title: str = Field(..., min_length=1)
    subtitle: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1)
    founding_date: date = DEFAULT_FOUNDING_DATE
    button_text: str = Field(..., min_length=1)
    button_link: str = Field(..., min_length=1)
    achievements: list[ExperienceHighlight] = Field(default_factory=list)
    stats: list[ExperienceStat] = Field(default_factory=list)
    awards: list[ExperienceAward] = Field(default_factory=list)
    order: int = 0
    is_active: bool = True


class UpdateExperienceRequest(RequestModel):
    title: str | None = Field(None, min_length=1)
    subtitle: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    image: str | None = Field(None, min_length=1)
    founding_date: date | None = None
    button_text: str | None = Field(None, min_length=1)
    button_link: str | None = Field(None, min_length=1)
    achievements: list[ExperienceHighlight] | None = None
    stats: list[ExperienceStat] | None = None
    awards: list[ExperienceAward] | None = None
    order: int | None = None
    is_active: bool | None = None

"""About page "Our Story" timeline model."""

from typing import ClassVar

from pydantic import Field

from brighten.models.base import CamelModel, RequestModel
from brighten.models.content import ContentEntity


class Milestone(CamelModel):
    year: str
    title: str
    description: str
    achievements: list[str] = Field(default_factory=list)
    icon: str


DEFAULT_OUR_STORY = {
    "title": "The Story Behind Our Success",
    "subtitle": "OUR JOURNEY",
    "description": (
        "From humble beginnings to industry leadership, our journey has been defined by "
        "innovation, perseverance, and a commitment to excellence."
    ),
    "milestones": [
        {
            "year": "2016",
            "title": "The Beginning",
            "description": (
                "Brighten Solutions was founded with a vision to transform digital "
                "experiences for businesses."
            ),
            "achievements": [
                "First office in Mumbai",
                "Initial team of 5 specialists",
                "Focus on web development",
            ],
            "icon": "🚀",
        },
        {
            "year": "2018",
            "title": "Growth & Expansion",
            "description": "We expanded our team and service offerings to meet growing client demands.",
            "achievements": [
                "Team grew to 15 members",
                "Added mobile app development services",
                "First major corporate client",
            ],
            "icon": "📈",
        },
        {
            "year": "2020",
            "title": "Recognition & Innovation",
            "description": (
                "Our work began receiving industry recognition as we pushed the boundaries "
                "of digital innovation."
            ),
            "achievements": [
                "Digital Marketing Excellence Award",
                "Expanded to 25+ team members",
                "Launched SEO department",
            ],
            "icon": "🏆",
        },
        {
            "year": "2022",
            "title": "Global Reach",
            "description": (
                "We expanded our client base internationally and established partnerships "
                "across borders."
            ),
            "achievements": [
                "First international clients",
                "Opened second office",
                "Launched AI solutions department",
            ],
            "icon": "🌎",
        },
        {
            "year": "2024",
            "title": "Today & Beyond",
            "description": (
                "Now an established industry leader, we continue to innovate and grow our "
                "capabilities."
            ),
            "achievements": [
                "50+ team members",
                "International client portfolio",
                "Industry-leading digital solutions",
            ],
            "icon": "✨",
        },
    ],
}


class OurStory(ContentEntity):
    """The single company-history document."""

    entity_type: ClassVar[str] = "OUR_STORY"
    display_name: ClassVar[str] = "Our story"

    title: str
    subtitle: str
    description: str
    milestones: list[Milestone] = Field(default_factory=list)


class CreateOurStoryRequest(RequestModel):
    title: str = Field(..., min_length=1)
    subtitle: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    milestones: list[Milestone] = Field(default_factory=list)
    is_active: bool = True


class UpdateOurStoryRequest(RequestModel):
    title: str | None = Field(None, min_length=1)
    subtitle: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    milestones: list[Milestone] | None = None
    is_active: bool | None = None

"""Team member model for the about page."""

from enum import Enum
from typing import ClassVar

from pydantic import Field

from brighten.models.base import CamelModel, RequestModel
from brighten.models.content import EMAIL_PATTERN, ContentEntity


class Department(str, Enum):
    """Team filter departments."""

    LEADERSHIP = "leadership"
    DEVELOPMENT = "development"
    DESIGN = "design"
    MARKETING = "marketing"
    OTHER = "other"


class SocialLinks(CamelModel):
    linkedin: str | None = None
    twitter: str | None = None


class TeamMember(ContentEntity):
    """A member of the agency team."""

    entity_type: ClassVar[str] = "TEAM"
    display_name: ClassVar[str] = "Team member"

    name: str = Field(..., max_length=255)
    position: str
    education: str
    email: str = Field(..., pattern=EMAIL_PATTERN)
    id_card: str | None = None
    department: Department = Department.OTHER
    image: str
    bio: str
    social: SocialLinks = Field(default_factory=SocialLinks)
    order: int = 0


class CreateTeamMemberRequest(RequestModel):
    """Request model for adding a team member."""

    name: str = Field(..., min_length=1, max_length=255)
    position: str = Field(..., min_length=1)
    education: str = Field(..., min_length=1)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    id_card: str | None = None
    department: Department = Department.OTHER
    image: str = Field(..., min_length=1)
    bio: str = Field(..., min_length=1)
    social: SocialLinks = Field(default_factory=SocialLinks)
    order: int = 0
    is_active: bool = True


class UpdateTeamMemberRequest(RequestModel):
    """Request model for updating a team member."""

    name: str | None = Field(None, min_length=1, max_length=255)
    position: str | None = Field(None, min_length=1)
    education: str | None = Field(None, min_length=1)
    email: str | None = Field(None, pattern=EMAIL_PATTERN)
    id_card: str | None = None
    department: Department | None = None
    image: str | None = Field(None, min_length=1)
    bio: str | None = Field(None, min_length=1)
    social: SocialLinks | None = None
    order: int | None = None
    is_active: bool | None = None

"""Service model - the agency's service offerings."""

from typing import ClassVar

from pydantic import Field

from brighten.models.base import RequestModel
from brighten.models.content import ContentEntity


class Service(ContentEntity):
    """A service offering shown on /services and /services/{slug}.

    Ordered by ``sequence``, which is assigned on creation as one more than
    the current maximum.
    """

    entity_type: ClassVar[str] = "SERVICE"
    display_name: ClassVar[str] = "Service"
    order_field: ClassVar[str] = "sequence"
    has_slug: ClassVar[bool] = True

    title: str = Field(..., max_length=255)
    slug: str = Field(..., max_length=255)
    description: str
    icon: str
    image: str
    featured_project: str | None = None
    content: str
    sequence: int = Field(default=0, ge=0)


class CreateServiceRequest(RequestModel):
    """Request model for creating a service."""

    title: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    description: str = Field(..., min_length=1)
    icon: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1)
    featured_project: str | None = None
    content: str = Field(..., min_length=1)
    is_active: bool = True


class UpdateServiceRequest(RequestModel):
    """Request model for updating a service."""

    title: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    icon: str | None = Field(None, min_length=1)
    image: str | None = Field(None, min_length=1)
    featured_project: str | None = None
    content: str | None = Field(None, min_length=1)
    sequence: int | None = Field(None, ge=0)
    is_active: bool | None = None

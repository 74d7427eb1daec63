"""Client testimonial model."""

from typing import ClassVar

from pydantic import Field

from brighten.models.base import RequestModel
from brighten.models.content import ContentEntity


class Testimonial(ContentEntity):
    entity_type: ClassVar[str] = "TESTIMONIAL"
    display_name: ClassVar[str] = "Testimonial"

    quote: str
    name: str = Field(..., max_length=255)
    position: str
    company: str
    image: str
    logo: str | None = None
    order: int = 0


class CreateTestimonialRequest(RequestModel):
    quote: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    position: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1)
    logo: str | None = None
    order: int = 0
    is_active: bool = True


class UpdateTestimonialRequest(RequestModel):
    quote: str | None = Field(None, min_length=1)
    name: str | None = Field(None, min_length=1, max_length=255)
    position: str | None = Field(None, min_length=1)
    company: str | None = Field(None, min_length=1)
    image: str | None = Field(None, min_length=1)
    logo: str | None = None
    order: int | None = None
    is_active: bool | None = None

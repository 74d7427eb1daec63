"""Company value model ("Our values" on the about page)."""

from typing import ClassVar

from pydantic import Field

from brighten.models.base import RequestModel
from brighten.models.content import DEFAULT_ACCENT_COLOR, HEX_COLOR_PATTERN, ContentEntity


class CompanyValue(ContentEntity):
    entity_type: ClassVar[str] = "VALUE"
    display_name: ClassVar[str] = "Value"

    title: str = Field(..., max_length=255)
    description: str
    icon: str
    color: str = Field(default=DEFAULT_ACCENT_COLOR, pattern=HEX_COLOR_PATTERN)
    order: int = 0


class CreateCompanyValueRequest(RequestModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    icon: str = Field(..., min_length=1)
    color: str = Field(default=DEFAULT_ACCENT_COLOR, pattern=HEX_COLOR_PATTERN)
    order: int = 0
    is_active: bool = True


class UpdateCompanyValueRequest(RequestModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    icon: str | None = Field(None, min_length=1)
    color: str | None = Field(None, pattern=HEX_COLOR_PATTERN)
    order: int | None = None
    is_active: bool | None = None

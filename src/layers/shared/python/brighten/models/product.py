"""Product model."""

from typing import ClassVar

from pydantic import Field

from brighten.models.base import RequestModel
from brighten.models.content import ContentEntity

SHORT_DESCRIPTION_MAX = 200


class Product(ContentEntity):
    """A packaged product shown on /products."""

    entity_type: ClassVar[str] = "PRODUCT"
    display_name: ClassVar[str] = "Product"
    has_slug: ClassVar[bool] = True

    title: str = Field(..., max_length=255)
    slug: str = Field(..., max_length=255)
    short_description: str = Field(..., max_length=SHORT_DESCRIPTION_MAX)
    description: str
    icon: str
    image: str
    features: list[str] = Field(..., min_length=1)
    content: str
    popular: bool = False
    coming_soon: bool = False
    order: int = 0


class CreateProductRequest(RequestModel):
    """Request model for creating a product."""

    title: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    short_description: str = Field(..., min_length=1, max_length=SHORT_DESCRIPTION_MAX)
    description: str = Field(..., min_length=1)
    icon: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1)
    features: list[str] = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    popular: bool = False
    coming_soon: bool = False
    order: int = 0
    is_active: bool = True


class UpdateProductRequest(RequestModel):
    """Request model for updating a product."""

    title: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255)
    short_description: str | None = Field(None, min_length=1, max_length=SHORT_DESCRIPTION_MAX)
    description: str | None = Field(None, min_length=1)
    icon: str | None = Field(None, min_length=1)
    image: str | None = Field(None, min_length=1)
    features: list[str] | None = Field(None, min_length=1)
    content: str | None = Field(None, min_length=1)
    popular: bool | None = None
    coming_soon: bool | None = None
    order: int | None = None
    is_active: bool | None = None

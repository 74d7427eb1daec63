"""Gallery image model.

The image itself lives in blob storage; this document only records its URL
and upload metadata.
"""

from typing import ClassVar

from pydantic import Field

from brighten.models.base import RequestModel
from brighten.models.content import ContentEntity

DEFAULT_GALLERY_CATEGORY = "Other"


class GalleryImage(ContentEntity):
    entity_type: ClassVar[str] = "GALLERY"
    display_name: ClassVar[str] = "Gallery image"

    title: str = Field(..., max_length=255)
    description: str | None = None
    category: str = DEFAULT_GALLERY_CATEGORY
    image_url: str
    file_name: str | None = None
    file_size: int | None = Field(None, ge=0)
    file_type: str | None = None
    order: int = 0


class CreateGalleryImageRequest(RequestModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    category: str = Field(default=DEFAULT_GALLERY_CATEGORY, min_length=1)
    image_url: str = Field(..., min_length=1)
    file_name: str | None = None
    file_size: int | None = Field(None, ge=0)
    file_type: str | None = None
    order: int = 0
    is_active: bool = True


class UpdateGalleryImageRequest(RequestModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    category: str | None = Field(None, min_length=1)
    image_url: str | None = Field(None, min_length=1)
    order: int | None = None
    is_active: bool | None = None

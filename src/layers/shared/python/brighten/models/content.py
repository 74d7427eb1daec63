"""Shared base for site content entities.

Every content type lives under its own partition and is soft-deletable via
``is_active``. Types with a public URL carry a slug, which is reserved by a
separate item so it stays unique within the type.

DynamoDB keys:
    PK: CONTENT#{entity_type}
    SK: {entity_type}#{id}
    Slug reservation: PK SLUG#{entity_type}, SK SLUG#{slug}
"""

from typing import ClassVar

from pydantic import Field

from brighten.models.base import BaseModel

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"
EMAIL_PATTERN = r"^.+@.+\..+$"
DEFAULT_ACCENT_COLOR = "#F66526"


class ContentEntity(BaseModel):
    """Base class for all site content documents."""

    entity_type: ClassVar[str] = ""
    display_name: ClassVar[str] = ""
    order_field: ClassVar[str] = "order"
    has_slug: ClassVar[bool] = False

    is_active: bool = Field(default=True, description="Soft-delete flag")

    def get_pk(self) -> str:
        """Get partition key: CONTENT#{entity_type}."""
        return f"CONTENT#{self.entity_type}"

    def get_sk(self) -> str:
        """Get sort key: {entity_type}#{id}."""
        return f"{self.entity_type}#{self.id}"

    @classmethod
    def partition_key(cls) -> str:
        return f"CONTENT#{cls.entity_type}"

    @classmethod
    def sort_key(cls, item_id: str) -> str:
        return f"{cls.entity_type}#{item_id}"

    @classmethod
    def slug_keys(cls, slug: str) -> dict[str, str]:
        """Keys of the slug reservation item for this type."""
        return {"PK": f"SLUG#{cls.entity_type}", "SK": f"SLUG#{slug}"}

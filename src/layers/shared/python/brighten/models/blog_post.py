"""Blog post model."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from brighten.models.base import CamelModel, RequestModel
from brighten.models.content import ContentEntity

DEFAULT_READING_TIME = "5 min read"


class Author(CamelModel):
    """Post author byline."""

    name: str = Field(..., min_length=1, max_length=255)
    avatar: str = ""


class BlogPost(ContentEntity):
    """A blog article.

    Public listings only show published posts. ``published_at`` is stamped
    the first time a post becomes published.
    """

    entity_type: ClassVar[str] = "BLOG"
    display_name: ClassVar[str] = "Blog post"
    has_slug: ClassVar[bool] = True

    title: str = Field(..., max_length=255)
    slug: str = Field(..., max_length=255)
    excerpt: str
    content: str
    cover_image: str | None = None
    category: str
    tags: list[str] = Field(default_factory=list)
    author: Author
    is_published: bool = False
    published_at: datetime | None = None
    views: int = 0
    reading_time: str = DEFAULT_READING_TIME
    featured: bool = False
    order: int = 0


class CreateBlogPostRequest(RequestModel):
    """Request model for creating a blog post."""

    title: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    excerpt: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    cover_image: str | None = None
    category: str = Field(..., min_length=1)
    tags: list[str] = Field(default_factory=list)
    author: Author
    is_published: bool = False
    reading_time: str = DEFAULT_READING_TIME
    featured: bool = False
    order: int = 0
    is_active: bool = True


class UpdateBlogPostRequest(RequestModel):
    """Request model for updating a blog post."""

    title: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255)
    excerpt: str | None = Field(None, min_length=1)
    content: str | None = Field(None, min_length=1)
    cover_image: str | None = None
    category: str | None = Field(None, min_length=1)
    tags: list[str] | None = None
    author: Author | None = None
    is_published: bool | None = None
    reading_time: str | None = None
    featured: bool | None = None
    order: int | None = None
    is_active: bool | None = None

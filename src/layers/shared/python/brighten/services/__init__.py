"""Service classes for business logic."""

from brighten.services.content_service import (
    CONTENT_TYPES,
    BlogService,
    ContentService,
    ContentType,
    ExperienceService,
    ListResult,
    SectionService,
    get_content_type,
    section_service,
)
from brighten.services.visitor_service import VisitorService

__all__ = [
    "CONTENT_TYPES",
    "BlogService",
    "ContentService",
    "ContentType",
    "ExperienceService",
    "ListResult",
    "SectionService",
    "VisitorService",
    "get_content_type",
    "section_service",
]

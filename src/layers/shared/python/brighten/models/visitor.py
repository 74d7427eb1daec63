"""Visitor model for anonymous visitor and lead tracking.

One record per visitor id. The id comes from the ``visitor_id`` cookie that
the site sets on first load, or is minted server-side when a report arrives
without one.

DynamoDB keys:
    PK: VISITOR
    SK: VISITOR#{visitor_id}
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from brighten.models.base import BaseModel, CamelModel, RequestModel, utc_now

# Cap pages_visited list to prevent unbounded growth
MAX_PAGES_VISITED = 50


class VisitorStatus(str, Enum):
    """Lead status; changed only by an admin."""

    NEW = "new"
    CONTACTED = "contacted"
    CONVERTED = "converted"
    REJECTED = "rejected"


class RawStorageData(CamelModel):
    """Verbatim snapshot of a browsing context's storage.

    Each store maps key to value exactly as read. The whole snapshot replaces
    the previous one on every report.
    """

    cookies: dict[str, str] = Field(default_factory=dict)
    local_storage: dict[str, str] = Field(default_factory=dict)
    session_storage: dict[str, str] = Field(default_factory=dict)


class PageVisit(CamelModel):
    """One entry of the page-visit log."""

    path: str
    title: str | None = None
    visited_at: datetime = Field(default_factory=utc_now)
    time_spent: float | None = None


class DeviceInfo(CamelModel):
    browser: str | None = None
    browser_version: str | None = None
    os: str | None = None
    os_version: str | None = None
    device: str | None = None
    screen_resolution: str | None = None


class LocationInfo(CamelModel):
    country: str | None = None
    region: str | None = None
    city: str | None = None
    timezone: str | None = None


class ContactInfo(CamelModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None


class Visitor(BaseModel):
    """Anonymous visitor, optionally identified as a lead later on."""

    visitor_id: str
    first_visit: datetime = Field(default_factory=utc_now)
    last_visit: datetime = Field(default_factory=utc_now)
    visit_count: int = 1

    pages_visited: list[PageVisit] = Field(default_factory=list)
    referrer: str | None = None
    device: DeviceInfo | None = None
    location: LocationInfo | None = None
    contact_info: ContactInfo | None = None

    raw_storage_data: RawStorageData = Field(default_factory=RawStorageData)

    status: VisitorStatus = VisitorStatus.NEW
    notes: str | None = None

    def get_pk(self) -> str:
        """Get the partition key."""
        return "VISITOR"

    def get_sk(self) -> str:
        """Get the sort key."""
        return f"VISITOR#{self.visitor_id}"


class StorageReport(RequestModel):
    """Body of a storage-data report from the browser."""

    timestamp: datetime | None = None
    storage_data: RawStorageData = Field(default_factory=RawStorageData)
    visitor_id: str | None = Field(None, max_length=128)


class PageViewReport(RequestModel):
    """Body of a page-view report."""

    path: str = Field(..., min_length=1, max_length=2048)
    title: str | None = Field(None, max_length=500)
    time_spent: float | None = Field(None, ge=0)
    visitor_id: str | None = Field(None, max_length=128)


class UpdateVisitorRequest(RequestModel):
    """Admin update of a visitor record."""

    status: VisitorStatus | None = None
    contact_info: ContactInfo | None = None
    notes: str | None = Field(None, max_length=5000)

"""Visitor tracking and lead management."""

import csv
import io
import json
import uuid
from typing import Any

import structlog

from brighten.models.visitor import (
    PageViewReport,
    PageVisit,
    StorageReport,
    UpdateVisitorRequest,
    Visitor,
)
from brighten.repositories.visitor import VisitorRepository, VISITOR_PK, visitor_sk
from brighten.services.content_service import ListResult, validate_request
from brighten.utils.exceptions import NotFoundError

logger = structlog.get_logger()

DEFAULT_VISITOR_PAGE_SIZE = 50

EXPORT_COLUMNS = [
    "Visitor ID",
    "Name",
    "Email",
    "Phone",
    "First Visit",
    "Last Visit",
    "Visit Count",
    "Pages Visited",
    "Device",
    "Browser",
    "OS",
    "Referrer",
    "Location",
    "Status",
]
STORAGE_COLUMNS = ["Cookies", "LocalStorage", "SessionStorage"]


def new_visitor_id() -> str:
    return str(uuid.uuid4())


class VisitorService:
    """Record visitor reports and serve the admin visitor views."""

    def __init__(self, repository: VisitorRepository | None = None):
        self.repo = repository or VisitorRepository()

    def record_storage_report(
        self,
        payload: dict[str, Any],
        visitor_id: str | None = None,
    ) -> tuple[Visitor, bool]:
        """Upsert the visitor for one storage report.

        Args:
            payload: Report body ``{timestamp, storageData}``.
            visitor_id: ID from the visitor_id cookie. Falls back to the
                body's ``visitorId`` and then to a freshly minted id.

        Returns:
            Tuple of (visitor, whether it was created).
        """
        report = validate_request(StorageReport, payload)
        visitor_id = visitor_id or report.visitor_id or new_visitor_id()

        visitor, is_new = self.repo.upsert_storage_snapshot(visitor_id, report.storage_data)

        logger.info(
            "Storage snapshot recorded",
            visitor_id=visitor_id,
            is_new=is_new,
            visit_count=visitor.visit_count,
        )
        return visitor, is_new

    def record_page_view(
        self,
        payload: dict[str, Any],
        visitor_id: str | None = None,
    ) -> Visitor:
        """Log a page view against the visitor, creating it if needed."""
        report = validate_request(PageViewReport, payload)
        visitor_id = visitor_id or report.visitor_id or new_visitor_id()

        visit = PageVisit(path=report.path, title=report.title, time_spent=report.time_spent)
        visitor = self.repo.record_page_view(visitor_id, visit)

        logger.debug("Page view recorded", visitor_id=visitor_id, path=report.path)
        return visitor

    def list(
        self,
        status: str | None = None,
        search: str | None = None,
        page: int = 1,
        limit: int = DEFAULT_VISITOR_PAGE_SIZE,
    ) -> ListResult:
        """List visitors by last visit, newest first."""
        visitors = self.repo.list_visitors(status=status, search=search)
        start = (page - 1) * limit
        return ListResult(
            items=visitors[start : start + limit],
            total=len(visitors),
            page=page,
            limit=limit,
            paginated=True,
        )

    def get(self, visitor_id: str) -> Visitor:
        """Fetch one visitor.

        Raises:
            NotFoundError: If the visitor does not exist.
        """
        return self.repo.get_or_raise(VISITOR_PK, visitor_sk(visitor_id), "Visitor")

    def update(self, visitor_id: str, payload: dict[str, Any]) -> Visitor:
        """Apply an admin edit (status, contact info, notes)."""
        visitor = self.get(visitor_id)
        request = validate_request(UpdateVisitorRequest, payload)
        updates = request.model_dump(exclude_unset=True)

        for key, value in updates.items():
            if value is not None:
                setattr(visitor, key, value)

        self.repo.save(visitor)

        logger.info("Visitor updated", visitor_id=visitor_id, fields=sorted(updates))
        return visitor

    def delete(self, visitor_id: str) -> None:
        """Delete a visitor record.

        Raises:
            NotFoundError: If the visitor does not exist.
        """
        if not self.repo.delete_visitor(visitor_id):
            raise NotFoundError("Visitor", visitor_id)
        logger.info("Visitor deleted", visitor_id=visitor_id)

    def export_csv(self, status: str | None = None, include_storage: bool = False) -> tuple[str, int]:
        """Render visitors as CSV, newest visit first.

        Args:
            status: Only visitors with this status.
            include_storage: Add the raw storage maps as JSON columns.

        Returns:
            Tuple of (csv text, row count).
        """
        visitors = self.repo.list_visitors(status=status)

        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(EXPORT_COLUMNS + (STORAGE_COLUMNS if include_storage else []))

        for visitor in visitors:
            contact = visitor.contact_info
            device = visitor.device
            location = visitor.location
            row = [
                visitor.visitor_id,
                contact.name or "" if contact else "",
                contact.email or "" if contact else "",
                contact.phone or "" if contact else "",
                visitor.first_visit.isoformat(),
                visitor.last_visit.isoformat(),
                visitor.visit_count,
                len(visitor.pages_visited),
                device.device or "" if device else "",
                f"{device.browser or ''} {device.browser_version or ''}".strip() if device else "",
                f"{device.os or ''} {device.os_version or ''}".strip() if device else "",
                visitor.referrer or "",
                ", ".join(filter(None, [location.country, location.city])) if location else "",
                visitor.status,
            ]
            if include_storage:
                storage = visitor.raw_storage_data
                row += [
                    json.dumps(storage.cookies),
                    json.dumps(storage.local_storage),
                    json.dumps(storage.session_storage),
                ]
            writer.writerow(row)

        return output.getvalue(), len(visitors)

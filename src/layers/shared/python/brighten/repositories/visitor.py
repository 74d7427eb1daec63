"""Visitor repository for anonymous visitor tracking.

Uses DynamoDB UpdateItem with if_not_exists for atomic upserts, so
first-visit fields are never overwritten and concurrent reports for one
visitor never lose a visit count.
"""

from datetime import datetime
from typing import Any

import structlog
from botocore.exceptions import ClientError

from brighten.models.base import generate_ulid, utc_now
from brighten.models.visitor import (
    MAX_PAGES_VISITED,
    PageVisit,
    RawStorageData,
    Visitor,
    VisitorStatus,
)
from brighten.repositories.base import BaseRepository

logger = structlog.get_logger()

VISITOR_PK = "VISITOR"


def visitor_sk(visitor_id: str) -> str:
    return f"VISITOR#{visitor_id}"


class VisitorRepository(BaseRepository[Visitor]):
    """Repository for Visitor records in DynamoDB."""

    def __init__(self, table_name: str | None = None):
        super().__init__(Visitor, table_name)

    def get_by_visitor_id(self, visitor_id: str) -> Visitor | None:
        return self.get(VISITOR_PK, visitor_sk(visitor_id))

    def _seed_parts(self) -> list[str]:
        """SET clauses that only take effect when the record is new."""
        return [
            "id = if_not_exists(id, :id)",
            "visitorId = if_not_exists(visitorId, :vid)",
            "firstVisit = if_not_exists(firstVisit, :now)",
            "createdAt = if_not_exists(createdAt, :now)",
            "#status = if_not_exists(#status, :status)",
            "version = if_not_exists(version, :one)",
            "pagesVisited = if_not_exists(pagesVisited, :empty_list)",
            "rawStorageData = if_not_exists(rawStorageData, :empty_storage)",
        ]

    def _seed_values(self, visitor_id: str, now: datetime) -> dict[str, Any]:
        return {
            ":id": generate_ulid(),
            ":vid": visitor_id,
            ":now": now.isoformat(),
            ":status": VisitorStatus.NEW.value,
            ":one": 1,
            ":empty_list": [],
            ":empty_storage": RawStorageData().model_dump(by_alias=True),
        }

    def upsert_storage_snapshot(
        self,
        visitor_id: str,
        storage_data: RawStorageData,
        now: datetime | None = None,
    ) -> tuple[Visitor, bool]:
        """Record one storage report for a visitor.

        Creates the record on first sight. Every call replaces the stored
        snapshot, sets lastVisit and adds one to visitCount in a single
        UpdateItem.

        Args:
            visitor_id: Visitor ID (from the visitor_id cookie).
            storage_data: The reported snapshot.
            now: Report time. Defaults to the current UTC time.

        Returns:
            Tuple of (updated visitor, whether the record was created).
        """
        now = now or utc_now()

        set_parts = [
            *[p for p in self._seed_parts() if not p.startswith("rawStorageData")],
            # Always update last-touch fields
            "lastVisit = :now",
            "updatedAt = :now",
            "rawStorageData = :storage",
        ]
        expr_values = self._seed_values(visitor_id, now)
        del expr_values[":empty_storage"]
        expr_values[":storage"] = storage_data.model_dump(by_alias=True)

        update_expr = f"SET {', '.join(set_parts)} ADD visitCount :one"

        try:
            response = self.table.update_item(
                Key=self._build_key(VISITOR_PK, visitor_sk(visitor_id)),
                UpdateExpression=update_expr,
                ExpressionAttributeNames={"#status": "status"},
                ExpressionAttributeValues=expr_values,
                ReturnValues="ALL_NEW",
            )
        except ClientError as e:
            logger.exception(
                "Failed to upsert visitor storage snapshot",
                visitor_id=visitor_id,
                error=str(e),
            )
            raise

        visitor = Visitor.from_dynamodb(response["Attributes"])
        return visitor, visitor.visit_count == 1

    def record_page_view(self, visitor_id: str, page_visit: PageVisit) -> Visitor:
        """Append a page visit, creating the visitor record if needed.

        Args:
            visitor_id: Visitor ID.
            page_visit: The visit to log.

        Returns:
            The visitor after the update.
        """
        now = utc_now()

        set_parts = [
            *self._seed_parts(),
            "visitCount = if_not_exists(visitCount, :one)",
            "lastVisit = :now",
            "updatedAt = :now",
        ]

        try:
            self.table.update_item(
                Key=self._build_key(VISITOR_PK, visitor_sk(visitor_id)),
                UpdateExpression=f"SET {', '.join(set_parts)}",
                ExpressionAttributeNames={"#status": "status"},
                ExpressionAttributeValues=self._seed_values(visitor_id, now),
            )
        except ClientError as e:
            logger.exception("Failed to upsert visitor page view", visitor_id=visitor_id, error=str(e))
            raise

        self._append_page_visited(visitor_id, page_visit)
        return self.get_or_raise(VISITOR_PK, visitor_sk(visitor_id), "Visitor")

    def _append_page_visited(self, visitor_id: str, page_visit: PageVisit) -> None:
        """Append to pagesVisited, capped at MAX_PAGES_VISITED.

        The newest entries are kept. An overflowing list is rewritten to its
        last MAX_PAGES_VISITED entries, guarded on the size seen after the
        append; if a concurrent append wins, its own trim handles the overflow.
        """
        key = self._build_key(VISITOR_PK, visitor_sk(visitor_id))
        entry = Visitor._serialize_value(page_visit.model_dump(mode="json", by_alias=True))
        try:
            response = self.table.update_item(
                Key=key,
                UpdateExpression="SET pagesVisited = list_append(if_not_exists(pagesVisited, :empty), :page)",
                ExpressionAttributeValues={":page": [entry], ":empty": []},
                ReturnValues="UPDATED_NEW",
            )
        except ClientError as e:
            logger.warning(
                "Failed to append page to pagesVisited",
                visitor_id=visitor_id,
                error=str(e),
            )
            return

        pages = response["Attributes"]["pagesVisited"]
        if len(pages) <= MAX_PAGES_VISITED:
            return

        try:
            self.table.update_item(
                Key=key,
                UpdateExpression="SET pagesVisited = :latest",
                ConditionExpression="size(pagesVisited) = :seen",
                ExpressionAttributeValues={
                    ":latest": pages[-MAX_PAGES_VISITED:],
                    ":seen": len(pages),
                },
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                logger.debug("pagesVisited changed during trim", visitor_id=visitor_id)
                return
            logger.warning(
                "Failed to trim pagesVisited",
                visitor_id=visitor_id,
                error=str(e),
            )

    def list_visitors(
        self,
        status: str | None = None,
        search: str | None = None,
    ) -> list[Visitor]:
        """List visitors, most recently seen first.

        Args:
            status: Only visitors with this status.
            search: Case-insensitive substring of visitor ID, contact name or email.
        """
        visitors = self.query_all(VISITOR_PK, sk_prefix="VISITOR#")

        if status:
            visitors = [v for v in visitors if v.status == status]

        if search:
            needle = search.lower()

            def matches(visitor: Visitor) -> bool:
                haystack = [visitor.visitor_id]
                if visitor.contact_info:
                    haystack += [visitor.contact_info.name or "", visitor.contact_info.email or ""]
                return any(needle in value.lower() for value in haystack)

            visitors = [v for v in visitors if matches(v)]

        visitors.sort(key=lambda v: v.last_visit, reverse=True)
        return visitors

    def save(self, visitor: Visitor) -> Visitor:
        """Save admin edits with optimistic locking."""
        return self.update(visitor)

    def delete_visitor(self, visitor_id: str) -> bool:
        return self.delete(VISITOR_PK, visitor_sk(visitor_id))

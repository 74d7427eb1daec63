"""Repository for site content entities.

Slugged types keep a reservation item next to the entity. Creating, renaming
and deleting a slugged entity writes both items in one transaction so a slug
can never be held by two items of the same type.
"""

from typing import Any, TypeVar

import structlog
from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import ClientError

from brighten.models.content import ContentEntity
from brighten.repositories.base import BaseRepository
from brighten.utils.exceptions import ConflictError, NotFoundError

logger = structlog.get_logger()

C = TypeVar("C", bound=ContentEntity)

_serializer = TypeSerializer()


def _serialize(item: dict[str, Any]) -> dict[str, Any]:
    return {k: _serializer.serialize(v) for k, v in item.items()}


class ContentRepository(BaseRepository[C]):
    """Data access for one content type."""

    def list_all(self) -> list[C]:
        """Every stored item of this type, active or not."""
        return self.query_all(
            self.model_class.partition_key(),
            sk_prefix=f"{self.model_class.entity_type}#",
        )

    def get_by_id(self, item_id: str) -> C | None:
        return self.get(self.model_class.partition_key(), self.model_class.sort_key(item_id))

    def get_by_slug(self, slug: str) -> C | None:
        """Resolve a slug through its reservation item."""
        response = self.table.get_item(Key=self.model_class.slug_keys(slug))
        reservation = response.get("Item")
        if not reservation:
            return None
        return self.get_by_id(reservation["itemId"])

    def _reservation_item(self, item: C) -> dict[str, Any]:
        reservation = self.model_class.slug_keys(item.slug)
        reservation["itemId"] = item.id
        return reservation

    def _raise_slug_conflict(self, error: ClientError, slug: str, slug_index: int) -> None:
        reasons = error.response.get("CancellationReasons", [])
        if len(reasons) > slug_index and reasons[slug_index].get("Code") == "ConditionalCheckFailed":
            raise ConflictError(
                f"{self.model_class.display_name} with slug '{slug}' already exists",
                conflict_type="slug",
            )
        raise ConflictError(f"{self.model_class.display_name} was modified or already exists")

    def create_item(self, item: C) -> C:
        """Create an item, reserving its slug when the type has one.

        Raises:
            ConflictError: If the slug is already taken.
        """
        if not self.model_class.has_slug:
            return self.create(item)

        item.update_timestamp()
        db_item = item.to_dynamodb()
        db_item.update(item.get_keys())

        try:
            self.client.transact_write_items(
                TransactItems=[
                    {
                        "Put": {
                            "TableName": self.table_name,
                            "Item": _serialize(db_item),
                            "ConditionExpression": "attribute_not_exists(PK)",
                        }
                    },
                    {
                        "Put": {
                            "TableName": self.table_name,
                            "Item": _serialize(self._reservation_item(item)),
                            "ConditionExpression": "attribute_not_exists(PK)",
                        }
                    },
                ]
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "TransactionCanceledException":
                self._raise_slug_conflict(e, item.slug, 1)
            raise

        logger.debug(
            "Content created with slug reservation",
            entity_type=self.model_class.entity_type,
            item_id=item.id,
            slug=item.slug,
        )
        return item

    def update_item(self, item: C, previous_slug: str | None = None) -> C:
        """Save an updated item with optimistic locking.

        When the slug changed, the new slug is reserved and the old one
        released in the same transaction.
        """
        if not self.model_class.has_slug or previous_slug in (None, item.slug):
            return self.update(item)

        old_version = item.version
        item.increment_version()
        item.update_timestamp()
        db_item = item.to_dynamodb()
        db_item.update(item.get_keys())

        try:
            self.client.transact_write_items(
                TransactItems=[
                    {
                        "Put": {
                            "TableName": self.table_name,
                            "Item": _serialize(db_item),
                            "ConditionExpression": "version = :old_version",
                            "ExpressionAttributeValues": {
                                ":old_version": _serializer.serialize(old_version),
                            },
                        }
                    },
                    {
                        "Put": {
                            "TableName": self.table_name,
                            "Item": _serialize(self._reservation_item(item)),
                            "ConditionExpression": "attribute_not_exists(PK)",
                        }
                    },
                    {
                        "Delete": {
                            "TableName": self.table_name,
                            "Key": _serialize(self.model_class.slug_keys(previous_slug)),
                        }
                    },
                ]
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "TransactionCanceledException":
                self._raise_slug_conflict(e, item.slug, 1)
            raise

        logger.debug(
            "Content slug changed",
            entity_type=self.model_class.entity_type,
            item_id=item.id,
            old_slug=previous_slug,
            new_slug=item.slug,
        )
        return item

    def delete_item(self, item_id: str) -> bool:
        """Delete an item and release its slug.

        Returns:
            True if deleted, False if not found.
        """
        item = self.get_by_id(item_id)
        if not item:
            return False

        if self.model_class.has_slug:
            try:
                self.table.delete_item(Key=self.model_class.slug_keys(item.slug))
            except ClientError:
                logger.warning(
                    "Failed to delete slug reservation",
                    entity_type=self.model_class.entity_type,
                    slug=item.slug,
                )

        return self.delete(self.model_class.partition_key(), self.model_class.sort_key(item_id))

    def increment_views(self, item_id: str) -> C:
        """Atomically add one to ``views`` and return the updated item.

        Raises:
            NotFoundError: If the item does not exist.
        """
        try:
            response = self.table.update_item(
                Key=self._build_key(
                    self.model_class.partition_key(), self.model_class.sort_key(item_id)
                ),
                UpdateExpression="ADD #views :one",
                ConditionExpression="attribute_exists(PK)",
                ExpressionAttributeNames={"#views": "views"},
                ExpressionAttributeValues={":one": 1},
                ReturnValues="ALL_NEW",
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise NotFoundError(self.model_class.display_name, item_id)
            raise
        return self.model_class.from_dynamodb(response["Attributes"])

"""Base repository class for DynamoDB operations."""

import os
from typing import Any, Generic, TypeVar

import boto3
import structlog
from botocore.exceptions import ClientError

from brighten.models.base import BaseModel
from brighten.utils.exceptions import ConflictError, NotFoundError

logger = structlog.get_logger()

T = TypeVar("T", bound=BaseModel)


def default_table_name() -> str:
    return os.environ.get("TABLE_NAME", "brighten-dev")


class BaseRepository(Generic[T]):
    """Base repository for the single-table design.

    Provides common CRUD operations with optimistic locking support.
    """

    def __init__(
        self,
        model_class: type[T],
        table_name: str | None = None,
    ):
        """Initialize repository.

        Args:
            model_class: The Pydantic model class for this repository.
            table_name: DynamoDB table name. Defaults to TABLE_NAME env var.
        """
        self.model_class = model_class
        self.table_name = table_name or default_table_name()
        self._dynamodb = None
        self._table = None
        self._client = None

    @property
    def dynamodb(self):
        """Get DynamoDB resource (lazy initialization)."""
        if self._dynamodb is None:
            self._dynamodb = boto3.resource("dynamodb")
        return self._dynamodb

    @property
    def table(self):
        """Get DynamoDB table (lazy initialization)."""
        if self._table is None:
            self._table = self.dynamodb.Table(self.table_name)
        return self._table

    @property
    def client(self):
        """Low-level DynamoDB client (lazy initialization).

        Used for transactions; items must be serialized with TypeSerializer.
        """
        if self._client is None:
            self._client = boto3.client("dynamodb")
        return self._client

    def _build_key(self, pk: str, sk: str) -> dict[str, str]:
        return {"PK": pk, "SK": sk}

    def get(self, pk: str, sk: str) -> T | None:
        """Get an item by its primary key.

        Returns:
            Model instance or None if not found.
        """
        try:
            response = self.table.get_item(Key=self._build_key(pk, sk))
        except ClientError as e:
            logger.error("DynamoDB get_item failed", error=str(e), pk=pk, sk=sk)
            raise

        item = response.get("Item")
        if not item:
            return None
        return self.model_class.from_dynamodb(item)

    def get_or_raise(self, pk: str, sk: str, resource_type: str) -> T:
        """Get an item or raise NotFoundError."""
        item = self.get(pk, sk)
        if not item:
            resource_id = sk.split("#", 1)[-1] if "#" in sk else sk
            raise NotFoundError(resource_type, resource_id)
        return item

    def put(self, item: T, condition_expression: str | None = None) -> T:
        """Put an item, stamping ``updated_at``.

        Raises:
            ConflictError: If the condition expression fails.
        """
        item.update_timestamp()
        db_item = item.to_dynamodb()
        db_item.update(item.get_keys())

        kwargs: dict[str, Any] = {"Item": db_item}
        if condition_expression:
            kwargs["ConditionExpression"] = condition_expression

        try:
            self.table.put_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise ConflictError("Item already exists or version mismatch")
            logger.error("DynamoDB put_item failed", error=str(e))
            raise

        logger.debug(
            "Item saved",
            pk=db_item["PK"],
            sk=db_item["SK"],
            model=self.model_class.__name__,
        )
        return item

    def create(self, item: T) -> T:
        """Create a new item (fails if it exists)."""
        return self.put(item, condition_expression="attribute_not_exists(PK)")

    def update(self, item: T, check_version: bool = True) -> T:
        """Update an existing item with optimistic locking.

        Raises:
            ConflictError: If the stored version changed underneath us.
        """
        old_version = item.version
        item.increment_version()
        item.update_timestamp()

        db_item = item.to_dynamodb()
        db_item.update(item.get_keys())

        kwargs: dict[str, Any] = {"Item": db_item}
        if check_version:
            kwargs["ConditionExpression"] = "version = :old_version"
            kwargs["ExpressionAttributeValues"] = {":old_version": old_version}

        try:
            self.table.put_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise ConflictError("Item was modified by another process")
            logger.error("DynamoDB update failed", error=str(e))
            raise

        logger.debug("Item updated", pk=db_item["PK"], sk=db_item["SK"], version=item.version)
        return item

    def delete(self, pk: str, sk: str) -> bool:
        """Delete an item.

        Returns:
            True if deleted, False if not found.
        """
        try:
            self.table.delete_item(
                Key=self._build_key(pk, sk),
                ConditionExpression="attribute_exists(PK)",
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                return False
            logger.error("DynamoDB delete_item failed", error=str(e))
            raise

        logger.debug("Item deleted", pk=pk, sk=sk)
        return True

    def query(
        self,
        pk: str,
        sk_prefix: str | None = None,
        limit: int | None = None,
        scan_forward: bool = True,
        last_key: dict | None = None,
    ) -> tuple[list[T], dict | None]:
        """Query one page of items by partition key.

        Returns:
            Tuple of (items, last_evaluated_key).
        """
        if sk_prefix:
            key_condition = "PK = :pk AND begins_with(SK, :sk_prefix)"
            expr_values = {":pk": pk, ":sk_prefix": sk_prefix}
        else:
            key_condition = "PK = :pk"
            expr_values = {":pk": pk}

        kwargs: dict[str, Any] = {
            "KeyConditionExpression": key_condition,
            "ExpressionAttributeValues": expr_values,
            "ScanIndexForward": scan_forward,
        }
        if limit:
            kwargs["Limit"] = limit
        if last_key:
            kwargs["ExclusiveStartKey"] = last_key

        try:
            response = self.table.query(**kwargs)
        except ClientError as e:
            logger.error("DynamoDB query failed", error=str(e), pk=pk)
            raise

        items = [self.model_class.from_dynamodb(item) for item in response.get("Items", [])]
        return items, response.get("LastEvaluatedKey")

    def query_all(self, pk: str, sk_prefix: str | None = None) -> list[T]:
        """Query every item under a partition, following pagination."""
        results: list[T] = []
        last_key = None
        while True:
            items, last_key = self.query(pk, sk_prefix=sk_prefix, last_key=last_key)
            results.extend(items)
            if not last_key:
                return results

    def batch_write(self, items: list[T]) -> None:
        """Batch write multiple items."""
        if not items:
            return

        try:
            with self.table.batch_writer() as batch:
                for item in items:
                    item.update_timestamp()
                    db_item = item.to_dynamodb()
                    db_item.update(item.get_keys())
                    batch.put_item(Item=db_item)
        except ClientError as e:
            logger.error("DynamoDB batch_write failed", error=str(e))
            raise

        logger.debug("Batch write completed", count=len(items))

"""
DynamoDB implementation of the PostRepository port.

Posts live in a single table keyed by id (partition) and createdAt (sort).
"""

from typing import Any

import structlog
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from ...domain.entities import Post, PostKey
from ...domain.exceptions import PostNotFoundError
from ...domain.ports import PostChanges, PostRepository
from ..logging import Timer

logger = structlog.get_logger()


class DynamoDbPostRepository(PostRepository):
    """
    DynamoDB implementation of PostRepository.

    Works against a boto3 ``Table`` resource so expression building stays
    inside this adapter.
    """

    def __init__(self, table: Any) -> None:
        """
        Initialize with a table resource.

        Args:
            table: boto3 ``dynamodb.Table``
        """
        self._table = table

    def list_all(self) -> list[Post]:
        """Scan the whole table, following pagination."""
        items: list[dict] = []
        scan_kwargs: dict[str, Any] = {}

        with Timer() as t:
            while True:
                response = self._table.scan(**scan_kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key

        logger.debug("Posts scanned", count=len(items), duration_ms=t.duration_ms)
        return [Post.from_item(item) for item in items]

    def get_by_id(self, post_id: str) -> Post | None:
        response = self._table.query(
            KeyConditionExpression=Key("id").eq(post_id),
        )
        items = response.get("Items", [])
        if not items:
            return None
        return Post.from_item(items[0])

    def get(self, key: PostKey) -> Post | None:
        response = self._table.get_item(Key=key.to_item())
        item = response.get("Item")
        if not item:
            return None
        return Post.from_item(item)

    def create(self, post: Post) -> None:
        with Timer() as t:
            self._table.put_item(Item=post.to_item())
        logger.debug("Post item written", post_id=post.id, duration_ms=t.duration_ms)

    def update(self, key: PostKey, changes: PostChanges) -> Post:
        assignments = [
            "title = :t",
            "author = :a",
            "description = :d",
            "locale = :l",
            "datePost = :dp",
        ]
        values: dict[str, str] = {
            ":t": changes.title,
            ":a": changes.author,
            ":d": changes.description,
            ":l": changes.locale,
            ":dp": changes.date_post,
        }
        if changes.url_image is not None:
            assignments.append("urlImage = :u")
            values[":u"] = changes.url_image
        if changes.key_image is not None:
            assignments.append("keyImage = :k")
            values[":k"] = changes.key_image

        try:
            with Timer() as t:
                response = self._table.update_item(
                    Key=key.to_item(),
                    ConditionExpression="attribute_exists(id)",
                    UpdateExpression="SET " + ", ".join(assignments),
                    ExpressionAttributeValues=values,
                    ReturnValues="ALL_NEW",
                )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "")
            if error_code == "ConditionalCheckFailedException":
                logger.warning("Post to update not found", post_id=key.id, created_at=key.created_at)
                raise PostNotFoundError(key.id, key.created_at) from e
            raise

        logger.debug("Post item updated", post_id=key.id, duration_ms=t.duration_ms)
        return Post.from_item(response["Attributes"])

    def delete(self, key: PostKey) -> Post:
        with Timer() as t:
            response = self._table.delete_item(
                Key=key.to_item(),
                ReturnValues="ALL_OLD",
            )
        attributes = response.get("Attributes")
        if not attributes:
            logger.warning("Post to delete not found", post_id=key.id, created_at=key.created_at)
            raise PostNotFoundError(key.id, key.created_at)

        logger.debug("Post item deleted", post_id=key.id, duration_ms=t.duration_ms)
        return Post.from_item(attributes)

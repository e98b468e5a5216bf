from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from gallery.domain.entities import PostKey
from gallery.domain.exceptions import PostNotFoundError
from gallery.domain.ports import PostChanges
from gallery.infrastructure.adapters import DynamoDbPostRepository

KEY = PostKey(id="post-123", created_at="2024-01-15T10:00:00.000Z")


def _client_error(code: str, operation: str = "UpdateItem") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


class TestDynamoDbPostRepository:
    @pytest.fixture
    def table(self):
        return MagicMock()

    @pytest.fixture
    def repository(self, table):
        return DynamoDbPostRepository(table)

    @pytest.fixture
    def changes(self):
        return PostChanges(
            title="Sunrise",
            author="Ana",
            description="Beach at dawn",
            locale="Florianopolis",
            date_post="2024-01-16",
        )

    def test_list_all_follows_pagination(self, repository, table, stored_item):
        second = {**stored_item, "id": "post-456"}
        table.scan.side_effect = [
            {"Items": [stored_item], "LastEvaluatedKey": {"id": "post-123"}},
            {"Items": [second]},
        ]

        posts = repository.list_all()

        assert [p.id for p in posts] == ["post-123", "post-456"]
        assert table.scan.call_count == 2
        assert table.scan.call_args_list[0].kwargs == {}
        assert table.scan.call_args_list[1].kwargs == {
            "ExclusiveStartKey": {"id": "post-123"}
        }

    def test_list_all_empty_table(self, repository, table):
        table.scan.return_value = {"Items": []}

        assert repository.list_all() == []

    def test_get_by_id_returns_first_match(self, repository, table, stored_item):
        table.query.return_value = {"Items": [stored_item]}

        post = repository.get_by_id("post-123")

        assert post.id == "post-123"
        assert post.key_image == "key-abc"
        assert "KeyConditionExpression" in table.query.call_args.kwargs

    def test_get_by_id_returns_none(self, repository, table):
        table.query.return_value = {"Items": []}

        assert repository.get_by_id("missing") is None

    def test_get_by_key(self, repository, table, stored_item):
        table.get_item.return_value = {"Item": stored_item}

        post = repository.get(KEY)

        table.get_item.assert_called_once_with(Key=KEY.to_item())
        assert post.title == "Sunset"

    def test_get_by_key_missing(self, repository, table):
        table.get_item.return_value = {}

        assert repository.get(KEY) is None

    def test_create_puts_item(self, repository, table, stored_post):
        repository.create(stored_post)

        table.put_item.assert_called_once_with(Item=stored_post.to_item())

    def test_update_text_fields_only(self, repository, table, stored_item, changes):
        table.update_item.return_value = {"Attributes": {**stored_item, "title": "Sunrise"}}

        post = repository.update(KEY, changes)

        kwargs = table.update_item.call_args.kwargs
        assert kwargs["Key"] == KEY.to_item()
        assert kwargs["ConditionExpression"] == "attribute_exists(id)"
        assert kwargs["ReturnValues"] == "ALL_NEW"
        assert "urlImage" not in kwargs["UpdateExpression"]
        assert "keyImage" not in kwargs["UpdateExpression"]
        assert kwargs["ExpressionAttributeValues"][":t"] == "Sunrise"
        assert kwargs["ExpressionAttributeValues"][":dp"] == "2024-01-16"
        assert post.title == "Sunrise"

    def test_update_with_image_fields(self, repository, table, stored_item, changes):
        changes.url_image = "https://bucket/new-key"
        changes.key_image = "new-key"
        table.update_item.return_value = {"Attributes": stored_item}

        repository.update(KEY, changes)

        kwargs = table.update_item.call_args.kwargs
        assert "urlImage = :u" in kwargs["UpdateExpression"]
        assert "keyImage = :k" in kwargs["UpdateExpression"]
        assert kwargs["ExpressionAttributeValues"][":u"] == "https://bucket/new-key"
        assert kwargs["ExpressionAttributeValues"][":k"] == "new-key"

    def test_update_missing_post_raises_not_found(self, repository, table, changes):
        table.update_item.side_effect = _client_error("ConditionalCheckFailedException")

        with pytest.raises(PostNotFoundError, match="Post not found"):
            repository.update(KEY, changes)

    def test_update_other_errors_propagate(self, repository, table, changes):
        table.update_item.side_effect = _client_error("ProvisionedThroughputExceededException")

        with pytest.raises(ClientError):
            repository.update(KEY, changes)

    def test_delete_returns_old_item(self, repository, table, stored_item):
        table.delete_item.return_value = {"Attributes": stored_item}

        post = repository.delete(KEY)

        table.delete_item.assert_called_once_with(Key=KEY.to_item(), ReturnValues="ALL_OLD")
        assert post.key_image == "key-abc"

    def test_delete_missing_post_raises_not_found(self, repository, table):
        table.delete_item.return_value = {}

        with pytest.raises(PostNotFoundError, match="Post not found"):
            repository.delete(KEY)

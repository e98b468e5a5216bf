from datetime import datetime

from gallery.domain.entities import Post, PostKey


class TestPost:
    def test_create_generates_id_and_timestamp(self):
        post = Post.create(
            title="Sunset",
            author="Ana",
            description="Beach at dusk",
            locale="Florianopolis",
            date_post="2024-01-14",
            url_image="https://bucket/key",
            key_image="key",
        )

        assert len(post.id) == 36
        assert post.created_at.endswith("Z")
        datetime.fromisoformat(post.created_at.replace("Z", "+00:00"))

    def test_create_generates_unique_ids(self):
        kwargs = dict(
            title="t",
            author="a",
            description="d",
            locale="l",
            date_post="dp",
            url_image="u",
            key_image="k",
        )

        assert Post.create(**kwargs).id != Post.create(**kwargs).id

    def test_to_item_uses_camel_case(self, stored_post):
        item = stored_post.to_item()

        assert item["createdAt"] == "2024-01-15T10:00:00.000Z"
        assert item["datePost"] == "2024-01-14"
        assert item["urlImage"].endswith("/key-abc")
        assert item["keyImage"] == "key-abc"

    def test_from_item_round_trips(self, stored_post):
        assert Post.from_item(stored_post.to_item()) == stored_post

    def test_from_item_tolerates_missing_optional_attributes(self):
        post = Post.from_item({"id": "p1", "createdAt": "2024-01-01T00:00:00.000Z"})

        assert post.title == ""
        assert post.key_image == ""

    def test_key_item(self):
        key = PostKey(id="post-123", created_at="2024-01-15T10:00:00.000Z")

        assert key.to_item() == {
            "id": "post-123",
            "createdAt": "2024-01-15T10:00:00.000Z",
        }

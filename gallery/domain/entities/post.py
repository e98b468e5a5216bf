from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4


@dataclass(frozen=True)
class PostKey:
    """Primary key of a post: partition key id, sort key createdAt."""

    id: str
    created_at: str

    def to_item(self) -> dict[str, str]:
        return {"id": self.id, "createdAt": self.created_at}


@dataclass
class Post:
    """Gallery entry: image reference plus metadata."""

    id: str
    created_at: str
    title: str
    author: str
    description: str
    locale: str
    date_post: str
    url_image: str
    key_image: str

    @classmethod
    def create(
        cls,
        title: str,
        author: str,
        description: str,
        locale: str,
        date_post: str,
        url_image: str,
        key_image: str,
    ) -> "Post":
        """Factory method generating the id and creation timestamp."""
        return cls(
            id=str(uuid4()),
            created_at=datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            title=title,
            author=author,
            description=description,
            locale=locale,
            date_post=date_post,
            url_image=url_image,
            key_image=key_image,
        )

    def to_item(self) -> dict[str, str]:
        """Table item with camelCase attribute names."""
        return {
            "id": self.id,
            "createdAt": self.created_at,
            "title": self.title,
            "author": self.author,
            "description": self.description,
            "locale": self.locale,
            "datePost": self.date_post,
            "urlImage": self.url_image,
            "keyImage": self.key_image,
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "Post":
        return cls(
            id=item["id"],
            created_at=item["createdAt"],
            title=item.get("title", ""),
            author=item.get("author", ""),
            description=item.get("description", ""),
            locale=item.get("locale", ""),
            date_post=item.get("datePost", ""),
            url_image=item.get("urlImage", ""),
            key_image=item.get("keyImage", ""),
        )

"""
Outbound port for post persistence.

This port defines the interface for post storage operations.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..entities import Post, PostKey


@dataclass
class PostChanges:
    """Fields rewritten by an update; image fields only when a new image was stored."""

    title: str
    author: str
    description: str
    locale: str
    date_post: str
    url_image: str | None = None
    key_image: str | None = None


class PostRepository(ABC):
    """
    Outbound port for post persistence.

    This abstraction allows the application layer to work with posts
    without knowing about the underlying table.
    """

    @abstractmethod
    def list_all(self) -> list[Post]:
        """Return every stored post."""
        ...

    @abstractmethod
    def get_by_id(self, post_id: str) -> Post | None:
        """
        Retrieve the first post stored under an id.

        Args:
            post_id: Partition key of the post

        Returns:
            Post if found, None otherwise
        """
        ...

    @abstractmethod
    def get(self, key: PostKey) -> Post | None:
        """Retrieve a post by its full key."""
        ...

    @abstractmethod
    def create(self, post: Post) -> None:
        """Persist a new post."""
        ...

    @abstractmethod
    def update(self, key: PostKey, changes: PostChanges) -> Post:
        """
        Rewrite an existing post in place.

        Args:
            key: Key of the post to update
            changes: Fields to rewrite

        Returns:
            The post as stored after the update

        Raises:
            PostNotFoundError: If no post exists under the key
        """
        ...

    @abstractmethod
    def delete(self, key: PostKey) -> Post:
        """
        Remove a post.

        Returns:
            The post as it was before deletion

        Raises:
            PostNotFoundError: If no post exists under the key
        """
        ...

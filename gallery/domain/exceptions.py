class GalleryError(Exception):
    """Base class for gallery domain errors."""


class InvalidPasswordError(GalleryError):
    """Supplied password does not match the gallery password."""

    def __init__(self) -> None:
        super().__init__("Invalid password")


class InvalidImageError(GalleryError):
    """Image payload is empty or not valid base64."""


class PostNotFoundError(GalleryError):
    """No post stored under the requested key."""

    def __init__(self, post_id: str, created_at: str | None = None) -> None:
        super().__init__("Post not found")
        self.post_id = post_id
        self.created_at = created_at

from abc import ABC, abstractmethod


class ImageStorage(ABC):
    """Outbound port for image blobs."""

    @abstractmethod
    def put(self, key: str, body: bytes, content_type: str) -> str:
        """
        Store an image blob, replacing any blob under the same key.

        Args:
            key: Object key
            body: Raw image bytes
            content_type: MIME type stored with the object

        Returns:
            Public URL of the stored object
        """
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the blob stored under a key."""
        ...

    @abstractmethod
    def url_for(self, key: str) -> str:
        """Public URL for an object key."""
        ...

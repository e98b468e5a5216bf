"""
Domain ports (interfaces) for the gallery handlers.

Ports define the contracts that infrastructure adapters must implement,
keeping the application layer independent of AWS.
"""

from .image_storage import ImageStorage
from .post_repository import PostChanges, PostRepository

__all__ = [
    "ImageStorage",
    "PostChanges",
    "PostRepository",
]

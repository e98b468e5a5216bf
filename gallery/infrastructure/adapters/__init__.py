"""
Infrastructure adapters implementing the domain ports.
"""

from .dynamodb_post_repository import DynamoDbPostRepository
from .s3_image_storage import S3ImageStorage

__all__ = [
    "DynamoDbPostRepository",
    "S3ImageStorage",
]

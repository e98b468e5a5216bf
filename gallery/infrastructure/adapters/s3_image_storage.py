"""S3 implementation of the ImageStorage port."""

from typing import Any

import structlog

from ...domain.ports import ImageStorage
from ..logging import Timer

logger = structlog.get_logger()


class S3ImageStorage(ImageStorage):
    """Stores post images in a public-read bucket."""

    def __init__(self, client: Any, bucket: str, region: str) -> None:
        self._client = client
        self._bucket = bucket
        self._region = region

    def put(self, key: str, body: bytes, content_type: str) -> str:
        with Timer() as t:
            self._client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        logger.info(
            "Image stored",
            bucket=self._bucket,
            key=key,
            content_type=content_type,
            size=len(body),
            duration_ms=t.duration_ms,
        )
        return self.url_for(key)

    def delete(self, key: str) -> None:
        with Timer() as t:
            self._client.delete_object(Bucket=self._bucket, Key=key)
        logger.info("Image deleted", bucket=self._bucket, key=key, duration_ms=t.duration_ms)

    def url_for(self, key: str) -> str:
        return f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{key}"

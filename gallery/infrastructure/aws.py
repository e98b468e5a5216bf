"""boto3 clients shared by every invocation of a Lambda container."""

from functools import lru_cache

import boto3

from ..config import settings


def _client_kwargs() -> dict:
    client_kwargs = {"region_name": settings.aws_region}
    if settings.aws_endpoint_url:
        client_kwargs["endpoint_url"] = settings.aws_endpoint_url
    return client_kwargs


@lru_cache(maxsize=1)
def get_posts_table():
    dynamodb = boto3.resource("dynamodb", **_client_kwargs())
    return dynamodb.Table(settings.posts_ddb)


@lru_cache(maxsize=1)
def get_s3_client():
    return boto3.client("s3", **_client_kwargs())

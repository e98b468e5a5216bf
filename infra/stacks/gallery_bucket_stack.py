"""Gallery Bucket Stack - public-read S3 bucket holding post images."""

from aws_cdk import RemovalPolicy, Stack
from aws_cdk import aws_s3 as s3
from constructs import Construct


class GalleryBucketStack(Stack):
    """S3 bucket for post images, readable by anyone through its object URL."""

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.gallery_bucket = s3.Bucket(
            self,
            "GalleryBucket",
            bucket_name="gallery-storage",
            removal_policy=RemovalPolicy.DESTROY,
            block_public_access=s3.BlockPublicAccess(
                block_public_acls=False,
                block_public_policy=False,
                ignore_public_acls=False,
                restrict_public_buckets=False,
            ),
            public_read_access=True,
        )

from .gallery_bucket_stack import GalleryBucketStack
from .gallery_stack import GalleryStack
from .posts_stack import PostsStack
from .posts_table_stack import PostsTableStack

__all__ = [
    "GalleryBucketStack",
    "PostsTableStack",
    "PostsStack",
    "GalleryStack",
]

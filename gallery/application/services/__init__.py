from .create_post_service import CreatePostService
from .delete_post_service import DeletePostService
from .get_post_service import GetPostService
from .list_posts_service import ListPostsService
from .update_post_service import UpdatePostService

__all__ = [
    "CreatePostService",
    "DeletePostService",
    "GetPostService",
    "ListPostsService",
    "UpdatePostService",
]

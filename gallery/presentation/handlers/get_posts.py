"""Lambda handler for GET /posts."""

from ..dependencies import get_list_posts_service
from ..http import api_handler


@api_handler
def handler(event: dict, context) -> dict:
    posts = get_list_posts_service().execute()
    return {"posts": [post.to_json_dict() for post in posts]}

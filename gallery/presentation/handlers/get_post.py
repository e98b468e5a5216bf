"""Lambda handler for GET /posts/{id}."""

from ..dependencies import get_get_post_service
from ..http import api_handler, path_id


@api_handler
def handler(event: dict, context) -> dict:
    post = get_get_post_service().execute(path_id(event))
    return {"post": post.to_json_dict() if post else None}

"""Lambda handler for PUT /posts/{id}."""

from ...application.dtos import UpdatePostDTO
from ..dependencies import get_update_post_service
from ..http import api_handler, parse_body, path_id


@api_handler
def handler(event: dict, context) -> dict:
    post_id = path_id(event)
    dto = parse_body(event, UpdatePostDTO)
    post = get_update_post_service().execute(post_id, dto)
    return {"message": "ok", "post": post.to_json_dict()}

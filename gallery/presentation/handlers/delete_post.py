"""Lambda handler for DELETE /posts/{id}."""

from ...application.dtos import DeletePostDTO
from ..dependencies import get_delete_post_service
from ..http import api_handler, parse_body, path_id


@api_handler
def handler(event: dict, context) -> dict:
    post_id = path_id(event)
    dto = parse_body(event, DeletePostDTO)
    post = get_delete_post_service().execute(post_id, dto)
    return {"post": post.to_json_dict()}

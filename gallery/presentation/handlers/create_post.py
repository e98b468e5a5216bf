"""Lambda handler for POST /posts."""

from ...application.dtos import CreatePostDTO
from ..dependencies import get_create_post_service
from ..http import api_handler, parse_body


@api_handler
def handler(event: dict, context) -> dict:
    dto = parse_body(event, CreatePostDTO)
    post = get_create_post_service().execute(dto)
    return {"post": post.to_json_dict()}

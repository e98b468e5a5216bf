"""
API Gateway proxy helpers shared by the post handlers.

Every response carries open CORS headers and a JSON body whose
``statusCode`` mirrors the HTTP status.
"""

import base64
import binascii
import json
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from ..domain.exceptions import GalleryError, InvalidImageError, InvalidPasswordError
from ..infrastructure.logging import bind_request_ids

logger = structlog.get_logger()

CORS_HEADERS = {
    "Access-Control-Allow-Headers": "*",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "*",
}

DTO = TypeVar("DTO", bound=BaseModel)


class InvalidRequestError(Exception):
    """Request body or path could not be parsed."""

    def __init__(self, description: str) -> None:
        super().__init__(description)
        self.description = description


def json_response(status_code: int, body: dict[str, Any]) -> dict[str, Any]:
    """Build a proxy integration response."""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json", **CORS_HEADERS},
        "body": json.dumps({"statusCode": status_code, **body}),
    }


def parse_body(event: dict, dto_class: type[DTO]) -> DTO:
    """
    Decode and validate the JSON request body.

    Raises:
        InvalidRequestError: If the body is missing, not JSON or fails validation
    """
    raw = event.get("body")
    if raw is None:
        raise InvalidRequestError("Request body is required")
    if event.get("isBase64Encoded"):
        try:
            raw = base64.b64decode(raw, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise InvalidRequestError("Request body is not valid base64 UTF-8") from e

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidRequestError(f"Request body is not valid JSON: {e.msg}") from e
    if not isinstance(payload, dict):
        raise InvalidRequestError("Request body must be a JSON object")

    try:
        return dto_class.model_validate(payload)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise InvalidRequestError(f"Invalid or missing fields: {fields}") from e


def path_id(event: dict) -> str:
    """The ``{id}`` path parameter."""
    post_id = (event.get("pathParameters") or {}).get("id")
    if not post_id:
        raise InvalidRequestError("Path parameter 'id' is required")
    return post_id


def api_handler(func: Callable[[dict, Any], dict[str, Any]]):
    """
    Wrap a handler body into a Lambda proxy handler.

    The wrapped function returns the success body; errors are mapped to
    400 (bad password, bad request, bad image) or 500.
    """

    @wraps(func)
    def wrapper(event: dict, context: Any) -> dict[str, Any]:
        bind_request_ids(event, context)
        logger.info(
            "Request received",
            http_method=event.get("httpMethod"),
            resource=event.get("resource"),
        )

        try:
            body = func(event, context)
        except InvalidPasswordError as e:
            return json_response(400, {"message": str(e)})
        except InvalidRequestError as e:
            logger.warning("Invalid request", description=e.description)
            return json_response(
                400, {"message": "Invalid request body", "description": e.description}
            )
        except InvalidImageError as e:
            logger.warning("Invalid image", error=str(e))
            return json_response(400, {"message": str(e)})
        except GalleryError as e:
            logger.error("Request failed", error=str(e), error_type=type(e).__name__)
            return json_response(
                500, {"message": "Internal Server Error", "error": str(e)}
            )
        except Exception as e:
            logger.error(
                "Unhandled error",
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return json_response(500, {"message": "Internal Server Error"})

        return json_response(200, body)

    return wrapper

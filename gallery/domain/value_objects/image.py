import base64
import binascii
from dataclasses import dataclass

from ..exceptions import InvalidImageError

DEFAULT_MIME_TYPE = "image/png"

# Base64 prefixes of the PNG and JPEG magic numbers
_SIGNATURES = {
    "iVBORw0KGgo": "image/png",
    "/9j/": "image/jpg",
}


def detect_mime_type(encoded: str) -> str:
    """Infer the MIME type from the leading characters of a base64 image."""
    for signature, mime_type in _SIGNATURES.items():
        if encoded.startswith(signature):
            return mime_type
    return DEFAULT_MIME_TYPE


@dataclass(frozen=True)
class ImagePayload:
    """Immutable base64 image as received in a request body."""

    encoded: str

    def __post_init__(self) -> None:
        if not self.encoded or not self.encoded.strip():
            raise InvalidImageError("Image payload cannot be empty")

    @property
    def mime_type(self) -> str:
        return detect_mime_type(self.encoded.lstrip())

    def decode(self) -> bytes:
        # MIME-style encoders wrap lines
        compact = "".join(self.encoded.split())
        try:
            return base64.b64decode(compact, validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidImageError("Image payload is not valid base64") from e

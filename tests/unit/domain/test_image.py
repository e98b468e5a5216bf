import base64

import pytest

from gallery.domain.exceptions import InvalidImageError
from gallery.domain.value_objects import DEFAULT_MIME_TYPE, ImagePayload, detect_mime_type

from tests.images import JPEG_BASE64, JPEG_BYTES, PNG_BASE64, PNG_BYTES


class TestDetectMimeType:
    def test_png_signature(self):
        assert detect_mime_type(PNG_BASE64) == "image/png"

    def test_jpeg_signature(self):
        assert detect_mime_type(JPEG_BASE64) == "image/jpg"

    def test_unknown_signature_defaults_to_png(self):
        assert detect_mime_type("R0lGODlhAQABAAAAACw=") == DEFAULT_MIME_TYPE

    def test_signature_must_be_a_prefix(self):
        assert detect_mime_type("AAAA/9j/") == "image/png"


class TestImagePayload:
    def test_decode_png(self):
        image = ImagePayload(PNG_BASE64)

        assert image.decode() == PNG_BYTES
        assert image.mime_type == "image/png"

    def test_decode_jpeg(self):
        image = ImagePayload(JPEG_BASE64)

        assert image.decode() == JPEG_BYTES
        assert image.mime_type == "image/jpg"

    def test_decode_line_wrapped_payload(self):
        image = ImagePayload(base64.encodebytes(PNG_BYTES).decode())

        assert image.decode() == PNG_BYTES
        assert image.mime_type == "image/png"

    def test_empty_payload_raises_error(self):
        with pytest.raises(InvalidImageError, match="cannot be empty"):
            ImagePayload("")

    def test_whitespace_payload_raises_error(self):
        with pytest.raises(InvalidImageError, match="cannot be empty"):
            ImagePayload("   ")

    def test_invalid_base64_raises_on_decode(self):
        image = ImagePayload("not base64!!")

        with pytest.raises(InvalidImageError, match="not valid base64"):
            image.decode()

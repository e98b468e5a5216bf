from .image import DEFAULT_MIME_TYPE, ImagePayload, detect_mime_type

__all__ = ["DEFAULT_MIME_TYPE", "ImagePayload", "detect_mime_type"]

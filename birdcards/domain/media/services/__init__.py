"""Pure media domain services."""

from .image_reference import IMAGE_URL_PREFIX, build_image_url, extract_file_id

__all__ = [
    "IMAGE_URL_PREFIX",
    "build_image_url",
    "extract_file_id",
]

"""Conversion between flashcard image URLs and uploaded file identifiers."""

import re

from birdcards.domain.common.exceptions import ValidationError
from birdcards.domain.common.value_objects import FileId

IMAGE_URL_PREFIX = "/uploads/flashcards/"

# Exactly one path segment after the prefix, nothing else
_IMAGE_URL_PATTERN = re.compile(r"^/uploads/flashcards/([^/]+)$")


def build_image_url(file_id: FileId) -> str:
    """Public URL under which an uploaded image is served."""
    return f"{IMAGE_URL_PREFIX}{file_id.value}"


def extract_file_id(image_url: str | None) -> FileId | None:
    """
    Extract the uploaded file id from a reference-style image URL.

    External URLs, URLs with extra path segments and segments that are not
    valid ids all yield None, so they are never considered for cleanup.
    """
    if not image_url:
        return None
    match = _IMAGE_URL_PATTERN.match(image_url)
    if not match:
        return None
    try:
        return FileId.parse(match.group(1))
    except ValidationError:
        return None

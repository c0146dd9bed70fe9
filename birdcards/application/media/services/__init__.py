"""Media application services."""

from .deck_ownership_guard import DeckOwnershipGuard
from .upload_validator import (
    ALLOWED_MIME_TYPES,
    EXTENSION_MIME_TYPES,
    UploadValidator,
    detect_image_type,
)

__all__ = [
    "ALLOWED_MIME_TYPES",
    "EXTENSION_MIME_TYPES",
    "DeckOwnershipGuard",
    "UploadValidator",
    "detect_image_type",
]

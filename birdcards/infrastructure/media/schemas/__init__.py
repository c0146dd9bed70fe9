"""Image upload API schemas."""

from .upload_schemas import ImageDeleteResponse, ImageMetadataResponse, ImageUploadResponse

__all__ = ["ImageDeleteResponse", "ImageMetadataResponse", "ImageUploadResponse"]

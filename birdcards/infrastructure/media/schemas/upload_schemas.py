"""Pydantic schemas for image upload responses."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class ImageUploadResponse(BaseModel):
    """Schema for image upload response."""

    success: bool = Field(..., description="Whether the upload was successful")
    message: str = Field(..., description="Response message")
    file_id: UUID = Field(..., description="ID to pass as file_id when creating a flashcard")
    url: str = Field(..., description="Public URL of the image")


class ImageDeleteResponse(BaseModel):
    """Schema for image deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")


class ImageMetadataResponse(BaseModel):
    """Schema for uploaded image metadata."""

    file_id: UUID
    deck_id: UUID
    url: str
    original_name: str
    mime_type: str
    size_bytes: int
    uploaded_at: datetime

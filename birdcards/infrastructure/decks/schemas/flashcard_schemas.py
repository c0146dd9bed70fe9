"""Pydantic schemas for Flashcard API request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class Flashcard(BaseModel):
    """Schema for Flashcard response."""

    id: UUID
    deck_id: UUID
    bird_name: str
    image_url: str
    created_at: datetime | None


class FlashcardCreateRequest(BaseModel):
    """Schema for creating a flashcard. One of image_url or file_id is required."""

    bird_name: str = Field(..., min_length=1, max_length=255, description="Name of the bird")
    image_url: str | None = Field(None, min_length=1, description="Literal image URL")
    file_id: str | None = Field(
        None, description="ID returned by POST /uploads/flashcards/{deck_id}, wins over image_url"
    )


class FlashcardCreateResponse(BaseModel):
    """Schema for flashcard creation response."""

    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    flashcard: Flashcard = Field(..., description="Created flashcard")


class FlashcardUpdateRequest(BaseModel):
    """Schema for updating a flashcard."""

    bird_name: str | None = Field(None, min_length=1, max_length=255, description="New bird name")
    image_url: str | None = Field(None, min_length=1, description="New literal image URL")
    file_id: str | None = Field(None, description="ID of a newly uploaded image")


class FlashcardUpdateResponse(BaseModel):
    """Schema for flashcard update response."""

    success: bool = Field(..., description="Whether the update was successful")
    message: str = Field(..., description="Response message")
    flashcard: Flashcard = Field(..., description="Updated flashcard")


class FlashcardDeleteResponse(BaseModel):
    """Schema for flashcard deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")


class FlashcardsListResponse(BaseModel):
    """Schema for list of flashcards response."""

    flashcards: list[Flashcard] = Field(..., description="List of flashcards, oldest first")

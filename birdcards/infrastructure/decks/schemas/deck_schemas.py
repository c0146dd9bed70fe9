"""Pydantic schemas for Deck API request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class DeckCreateRequest(BaseModel):
    """Schema for creating a deck."""

    name: str = Field(..., min_length=1, max_length=200, description="Name of the deck")
    description: str | None = Field(None, description="Optional description")


class DeckUpdateRequest(BaseModel):
    """Schema for updating a deck. Omitted fields are left unchanged."""

    name: str | None = Field(None, min_length=1, max_length=200, description="New name")
    description: str | None = Field(None, description="New description, blank to clear")


class Deck(BaseModel):
    """Schema for Deck response."""

    id: UUID
    user_id: UUID
    name: str
    description: str | None
    created_at: datetime | None


class DeckCreateResponse(BaseModel):
    """Schema for deck creation response."""

    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    deck: Deck = Field(..., description="Created deck")


class DecksListResponse(BaseModel):
    decks: list[Deck] = Field(..., description="List of decks, newest first")


class DeckUpdateResponse(BaseModel):
    """Schema for deck update response."""

    success: bool = Field(..., description="Whether the update was successful")
    message: str = Field(..., description="Response message")
    deck: Deck = Field(..., description="Updated deck")

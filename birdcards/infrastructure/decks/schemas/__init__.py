"""Deck and flashcard API schemas."""

from .deck_schemas import (
    Deck,
    DeckCreateRequest,
    DeckCreateResponse,
    DecksListResponse,
    DeckUpdateRequest,
    DeckUpdateResponse,
)
from .flashcard_schemas import (
    Flashcard,
    FlashcardCreateRequest,
    FlashcardCreateResponse,
    FlashcardDeleteResponse,
    FlashcardsListResponse,
    FlashcardUpdateRequest,
    FlashcardUpdateResponse,
)

__all__ = [
    "Deck",
    "DeckCreateRequest",
    "DeckCreateResponse",
    "DeckUpdateRequest",
    "DeckUpdateResponse",
    "DecksListResponse",
    "Flashcard",
    "FlashcardCreateRequest",
    "FlashcardCreateResponse",
    "FlashcardDeleteResponse",
    "FlashcardUpdateRequest",
    "FlashcardUpdateResponse",
    "FlashcardsListResponse",
]

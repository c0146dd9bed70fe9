"""Common value objects shared across all domain modules."""

from .ids import DeckId, FileId, FlashcardId, UserId

__all__ = [
    "DeckId",
    "FileId",
    "FlashcardId",
    "UserId",
]

"""Protocol for Flashcard repository."""

from typing import Protocol

from birdcards.domain.common.value_objects.ids import DeckId, FileId, FlashcardId
from birdcards.domain.decks.entities.flashcard import Flashcard


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations."""

    def find_by_id(self, flashcard_id: FlashcardId, deck_id: DeckId) -> Flashcard | None:
        """
        Find a flashcard by ID within a deck.

        Callers verify deck ownership first; the deck scope keeps a card of
        another deck from being reached through an owned deck id.
        """
        ...

    def find_by_deck(self, deck_id: DeckId) -> list[Flashcard]:
        """
        Get all flashcards of a deck.

        Returns:
            List of flashcard entities ordered by created_at ASC
        """
        ...

    def is_image_referenced(self, file_id: FileId, deck_id: DeckId) -> bool:
        """Whether a card of the deck still points at the uploaded file."""
        ...

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Save a flashcard entity (create or update). Commits.
        """
        ...

    def delete(self, flashcard_id: FlashcardId, deck_id: DeckId) -> bool:
        """
        Delete a flashcard. Commits.

        Returns:
            True if deleted, False if not found
        """
        ...

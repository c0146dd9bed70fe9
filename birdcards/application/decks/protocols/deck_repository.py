"""Protocol for Deck repository."""

from typing import Protocol

from birdcards.domain.common.value_objects.ids import DeckId, UserId
from birdcards.domain.decks.entities.deck import Deck


class DeckRepositoryProtocol(Protocol):
    """Protocol for Deck repository operations."""

    def find_by_id(self, deck_id: DeckId, user_id: UserId) -> Deck | None:
        """
        Find a deck by ID with user ownership check.

        Args:
            deck_id: The deck ID
            user_id: The user ID for ownership verification

        Returns:
            Deck entity if found and owned by user, None otherwise
        """
        ...

    def find_by_user(self, user_id: UserId) -> list[Deck]:
        """
        Get all decks of a user.

        Returns:
            List of deck entities ordered by created_at DESC
        """
        ...

    def save(self, deck: Deck) -> Deck:
        """
        Save a deck entity (create or update).

        Returns:
            Saved deck entity with database-generated values
        """
        ...

    def delete(self, deck: Deck) -> None:
        """
        Delete a deck. Commits.

        Its flashcards and uploaded file records go with it; stored image
        bytes are not touched.
        """
        ...

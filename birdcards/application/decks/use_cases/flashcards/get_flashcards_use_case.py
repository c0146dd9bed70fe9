"""Use case for listing flashcards of a deck."""

from uuid import UUID

from birdcards.application.decks.protocols.deck_repository import DeckRepositoryProtocol
from birdcards.application.decks.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from birdcards.application.decks.use_cases.deck_lookup import get_owned_deck
from birdcards.domain.common.value_objects.ids import UserId
from birdcards.domain.decks.entities.flashcard import Flashcard


class GetFlashcardsUseCase:
    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
    ) -> None:
        self.deck_repository = deck_repository
        self.flashcard_repository = flashcard_repository

    def get_flashcards(self, deck_id: str, user_id: UUID) -> list[Flashcard]:
        """
        Get all flashcards of a deck owned by the user, oldest first.

        Raises:
            DeckNotFoundError: If the deck is not found or not owned by the user
        """
        deck = get_owned_deck(self.deck_repository, deck_id, UserId(user_id))
        return self.flashcard_repository.find_by_deck(deck.id)

"""Use cases for reading decks."""

from uuid import UUID

from birdcards.application.decks.protocols.deck_repository import DeckRepositoryProtocol
from birdcards.application.decks.use_cases.deck_lookup import get_owned_deck
from birdcards.domain.common.value_objects.ids import UserId
from birdcards.domain.decks.entities.deck import Deck


class GetDecksUseCase:
    def __init__(self, deck_repository: DeckRepositoryProtocol) -> None:
        self.deck_repository = deck_repository

    def get_decks(self, user_id: UUID) -> list[Deck]:
        """Get all decks of a user, newest first."""
        return self.deck_repository.find_by_user(UserId(user_id))

    def get_deck(self, deck_id: str, user_id: UUID) -> Deck:
        """
        Get a single deck owned by the user.

        Raises:
            DeckNotFoundError: If the deck does not exist or is not owned by the user
        """
        return get_owned_deck(self.deck_repository, deck_id, UserId(user_id))

"""Use case for creating decks."""

from uuid import UUID

import structlog

from birdcards.application.decks.protocols.deck_repository import DeckRepositoryProtocol
from birdcards.domain.common.value_objects.ids import UserId
from birdcards.domain.decks.entities.deck import Deck

logger = structlog.get_logger(__name__)


class CreateDeckUseCase:
    """Use case for creating decks."""

    def __init__(self, deck_repository: DeckRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.deck_repository = deck_repository

    def create_deck(self, user_id: UUID, name: str, description: str | None = None) -> Deck:
        """
        Create a deck for a user.

        Raises:
            DomainValidationError: If the name is empty or too long
        """
        deck = Deck.create(user_id=UserId(user_id), name=name, description=description)
        deck = self.deck_repository.save(deck)

        logger.info("created_deck", deck_id=str(deck.id), user_id=str(user_id))
        return deck

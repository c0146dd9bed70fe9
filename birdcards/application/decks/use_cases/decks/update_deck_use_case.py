"""Use case for updating decks."""

from uuid import UUID

import structlog

from birdcards.application.decks.protocols.deck_repository import DeckRepositoryProtocol
from birdcards.application.decks.use_cases.deck_lookup import get_owned_deck
from birdcards.domain.common.value_objects.ids import UserId
from birdcards.domain.decks.entities.deck import Deck
from birdcards.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class UpdateDeckUseCase:
    """Use case for renaming decks and editing their description."""

    def __init__(self, deck_repository: DeckRepositoryProtocol) -> None:
        self.deck_repository = deck_repository

    def update_deck(
        self,
        deck_id: str,
        user_id: UUID,
        name: str | None = None,
        description: str | None = None,
    ) -> Deck:
        """
        Update a deck owned by the user.

        A blank description clears it.

        Raises:
            ValidationError: If neither field is given
            DeckNotFoundError: If the deck is not found or not owned by the user
            DomainValidationError: If the new name is empty or too long
        """
        if name is None and description is None:
            raise ValidationError("At least one of name or description must be provided")

        deck = get_owned_deck(self.deck_repository, deck_id, UserId(user_id))

        if name is not None:
            deck.rename(name)
        if description is not None:
            deck.update_description(description)

        deck = self.deck_repository.save(deck)
        logger.info("updated_deck", deck_id=str(deck.id))
        return deck

"""Deck ownership check shared by the authenticated media use cases."""

import structlog

from birdcards.application.decks.protocols.deck_repository import DeckRepositoryProtocol
from birdcards.domain.common.value_objects.ids import DeckId, UserId
from birdcards.domain.decks.entities.deck import Deck
from birdcards.exceptions import ImageAccessDeniedError

logger = structlog.get_logger(__name__)


class DeckOwnershipGuard:
    """
    Verifies that a user owns a deck before any file or record is touched.

    The lookup runs on every call; ownership is never cached. The public image
    read does not use this guard: holding a file id is enough to view it.
    """

    def __init__(self, deck_repository: DeckRepositoryProtocol) -> None:
        self.deck_repository = deck_repository

    def assert_ownership(self, user_id: UserId, deck_id: DeckId) -> Deck:
        """
        Return the deck if it exists and belongs to the user.

        Raises:
            ImageAccessDeniedError: If the deck is missing or owned by someone else
        """
        deck = self.deck_repository.find_by_id(deck_id, user_id)
        if deck is None:
            logger.warning(
                "deck_ownership_denied",
                user_id=str(user_id),
                deck_id=str(deck_id),
            )
            raise ImageAccessDeniedError(deck_id)
        return deck

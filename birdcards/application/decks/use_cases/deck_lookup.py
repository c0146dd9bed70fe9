"""Shared deck lookup for the deck and flashcard use cases."""

from birdcards.application.decks.protocols.deck_repository import DeckRepositoryProtocol
from birdcards.domain.common.exceptions import ValidationError as DomainValidationError
from birdcards.domain.common.value_objects.ids import DeckId, UserId
from birdcards.domain.decks.entities.deck import Deck
from birdcards.exceptions import DeckNotFoundError


def get_owned_deck(deck_repository: DeckRepositoryProtocol, deck_id: str, user_id: UserId) -> Deck:
    """
    Load a deck owned by the user.

    Raises:
        DeckNotFoundError: If the id is malformed, unknown, or owned by someone else
    """
    try:
        deck_id_vo = DeckId.parse(deck_id)
    except DomainValidationError:
        raise DeckNotFoundError(deck_id) from None

    deck = deck_repository.find_by_id(deck_id_vo, user_id)
    if deck is None:
        raise DeckNotFoundError(deck_id)
    return deck

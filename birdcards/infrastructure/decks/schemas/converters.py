"""Domain entity to response schema conversion."""

from birdcards.domain.decks.entities.deck import Deck as DeckEntity
from birdcards.domain.decks.entities.flashcard import Flashcard as FlashcardEntity
from birdcards.infrastructure.decks.schemas.deck_schemas import Deck
from birdcards.infrastructure.decks.schemas.flashcard_schemas import Flashcard


def deck_to_schema(deck: DeckEntity) -> Deck:
    return Deck(
        id=deck.id.value,
        user_id=deck.user_id.value,
        name=deck.name,
        description=deck.description,
        created_at=deck.created_at,
    )


def flashcard_to_schema(flashcard: FlashcardEntity) -> Flashcard:
    return Flashcard(
        id=flashcard.id.value,
        deck_id=flashcard.deck_id.value,
        bird_name=flashcard.bird_name,
        image_url=flashcard.image_url,
        created_at=flashcard.created_at,
    )

"""Mapper for Flashcard ORM to domain conversion."""

from birdcards.domain.common.value_objects import DeckId, FlashcardId
from birdcards.domain.decks.entities.flashcard import Flashcard
from birdcards.models import Flashcard as FlashcardORM


class FlashcardMapper:
    """Mapper for Flashcard ORM to domain conversion."""

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        """Convert ORM model to domain entity."""
        return Flashcard(
            id=FlashcardId(orm_model.id),
            deck_id=DeckId(orm_model.deck_id),
            bird_name=orm_model.bird_name,
            image_url=orm_model.image_url,
            created_at=orm_model.created_at,
        )

    def to_orm(
        self, domain_entity: Flashcard, orm_model: FlashcardORM | None = None
    ) -> FlashcardORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Cards never move between decks
            orm_model.bird_name = domain_entity.bird_name
            orm_model.image_url = domain_entity.image_url
            return orm_model

        return FlashcardORM(
            id=domain_entity.id.value,
            deck_id=domain_entity.deck_id.value,
            bird_name=domain_entity.bird_name,
            image_url=domain_entity.image_url,
        )

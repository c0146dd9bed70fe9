"""Mapper for Deck ORM to domain conversion."""

from birdcards.domain.common.value_objects import DeckId, UserId
from birdcards.domain.decks.entities.deck import Deck
from birdcards.models import Deck as DeckORM


class DeckMapper:
    """Mapper for Deck ORM to domain conversion."""

    def to_domain(self, orm_model: DeckORM) -> Deck:
        """Convert ORM model to domain entity."""
        return Deck(
            id=DeckId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            name=orm_model.name,
            description=orm_model.description,
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: Deck, orm_model: DeckORM | None = None) -> DeckORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.name = domain_entity.name
            orm_model.description = domain_entity.description
            return orm_model

        return DeckORM(
            id=domain_entity.id.value,
            user_id=domain_entity.user_id.value,
            name=domain_entity.name,
            description=domain_entity.description,
        )

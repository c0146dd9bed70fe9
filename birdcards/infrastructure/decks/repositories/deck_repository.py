"""Repository for Deck domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from birdcards.domain.common.value_objects.ids import DeckId, UserId
from birdcards.domain.decks.entities.deck import Deck
from birdcards.infrastructure.decks.mappers.deck_mapper import DeckMapper
from birdcards.models import Deck as DeckORM


class DeckRepository:
    """Repository for Deck domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = DeckMapper()

    def find_by_id(self, deck_id: DeckId, user_id: UserId) -> Deck | None:
        """
        Find a deck by ID with user ownership check.

        Args:
            deck_id: The deck ID
            user_id: The user ID for ownership verification

        Returns:
            Deck entity if found and owned by user, None otherwise
        """
        stmt = select(DeckORM).where(
            DeckORM.id == deck_id.value,
            DeckORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user(self, user_id: UserId) -> list[Deck]:
        stmt = (
            select(DeckORM)
            .where(DeckORM.user_id == user_id.value)
            .order_by(DeckORM.created_at.desc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, deck: Deck) -> Deck:
        """
        Save a deck entity (create or update).

        Returns:
            Saved deck entity with database-generated values
        """
        orm_model = self.db.get(DeckORM, deck.id.value)
        if orm_model is None:
            orm_model = self.mapper.to_orm(deck)
            self.db.add(orm_model)
        else:
            self.mapper.to_orm(deck, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, deck: Deck) -> None:
        """
        Hard delete a deck.

        Flashcards and uploaded file records are removed through the ORM
        cascade on DeckORM.
        """
        stmt = select(DeckORM).where(DeckORM.id == deck.id.value)
        deck_orm = self.db.execute(stmt).scalar_one()
        self.db.delete(deck_orm)
        self.db.commit()

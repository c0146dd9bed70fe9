"""Repository for Flashcard domain entities."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from birdcards.domain.common.value_objects.ids import DeckId, FileId, FlashcardId
from birdcards.domain.decks.entities.flashcard import Flashcard
from birdcards.domain.media.services.image_reference import build_image_url
from birdcards.infrastructure.decks.mappers.flashcard_mapper import FlashcardMapper
from birdcards.models import Flashcard as FlashcardORM


class FlashcardRepository:
    """Repository for Flashcard domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardMapper()

    def find_by_id(self, flashcard_id: FlashcardId, deck_id: DeckId) -> Flashcard | None:
        """
        Find a flashcard by ID within a deck.

        Args:
            flashcard_id: The flashcard ID
            deck_id: The deck the flashcard must belong to

        Returns:
            Flashcard entity if found in the deck, None otherwise
        """
        stmt = select(FlashcardORM).where(
            FlashcardORM.id == flashcard_id.value,
            FlashcardORM.deck_id == deck_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_deck(self, deck_id: DeckId) -> list[Flashcard]:
        """
        Get all flashcards of a deck.

        Returns:
            List of flashcard entities ordered by created_at ASC
        """
        stmt = (
            select(FlashcardORM)
            .where(FlashcardORM.deck_id == deck_id.value)
            .order_by(FlashcardORM.created_at.asc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def is_image_referenced(self, file_id: FileId, deck_id: DeckId) -> bool:
        stmt = select(func.count(FlashcardORM.id)).where(
            FlashcardORM.deck_id == deck_id.value,
            FlashcardORM.image_url == build_image_url(file_id),
        )
        return (self.db.execute(stmt).scalar() or 0) > 0

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Save a flashcard entity (create or update).

        Args:
            flashcard: The flashcard entity to save

        Returns:
            Saved flashcard entity with database-generated values
        """
        orm_model = self.db.get(FlashcardORM, flashcard.id.value)
        if orm_model is None:
            orm_model = self.mapper.to_orm(flashcard)
            self.db.add(orm_model)
        else:
            self.mapper.to_orm(flashcard, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, flashcard_id: FlashcardId, deck_id: DeckId) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if deleted, False if not found
        """
        stmt = select(FlashcardORM).where(
            FlashcardORM.id == flashcard_id.value,
            FlashcardORM.deck_id == deck_id.value,
        )
        flashcard_orm = self.db.execute(stmt).scalar_one_or_none()

        if not flashcard_orm:
            return False

        self.db.delete(flashcard_orm)
        self.db.commit()
        return True

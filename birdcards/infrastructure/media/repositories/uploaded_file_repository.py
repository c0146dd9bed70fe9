"""Repository for uploaded file records."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from birdcards.domain.common.value_objects.ids import DeckId, FileId
from birdcards.domain.media.entities.uploaded_file import UploadedFile
from birdcards.infrastructure.media.mappers.uploaded_file_mapper import UploadedFileMapper
from birdcards.models import UploadedFile as UploadedFileORM


class UploadedFileRepository:
    """Repository for uploaded file records."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UploadedFileMapper()

    def find_by_id(self, file_id: FileId) -> UploadedFile | None:
        orm_model = self.db.get(UploadedFileORM, file_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_deck(self, deck_id: DeckId) -> list[UploadedFile]:
        stmt = select(UploadedFileORM).where(UploadedFileORM.deck_id == deck_id.value)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def add(self, uploaded_file: UploadedFile) -> UploadedFile:
        """
        Insert a new file record.

        The session is rolled back before re-raising a failed insert so it
        stays usable for the rest of the request.
        """
        orm_model = self.mapper.to_orm(uploaded_file)
        try:
            self.db.add(orm_model)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, file_id: FileId) -> bool:
        """
        Delete a file record.

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(UploadedFileORM, file_id.value)
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.commit()
        return True

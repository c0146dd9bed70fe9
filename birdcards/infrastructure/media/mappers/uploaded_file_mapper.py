"""Mapper for UploadedFile ORM to domain conversion."""

from birdcards.domain.common.value_objects import DeckId, FileId, UserId
from birdcards.domain.media.entities.uploaded_file import UploadedFile
from birdcards.models import UploadedFile as UploadedFileORM


class UploadedFileMapper:
    """Mapper for UploadedFile ORM to domain conversion. Records are insert-only."""

    def to_domain(self, orm_model: UploadedFileORM) -> UploadedFile:
        """Convert ORM model to domain entity."""
        return UploadedFile(
            id=FileId(orm_model.id),
            deck_id=DeckId(orm_model.deck_id),
            user_id=UserId(orm_model.user_id),
            stored_name=orm_model.stored_name,
            original_name=orm_model.original_name,
            mime_type=orm_model.mime_type,
            size_bytes=orm_model.size_bytes,
            uploaded_at=orm_model.uploaded_at,
        )

    def to_orm(self, domain_entity: UploadedFile) -> UploadedFileORM:
        """Convert domain entity to a new ORM model."""
        return UploadedFileORM(
            id=domain_entity.id.value,
            deck_id=domain_entity.deck_id.value,
            user_id=domain_entity.user_id.value,
            stored_name=domain_entity.stored_name,
            original_name=domain_entity.original_name,
            mime_type=domain_entity.mime_type,
            size_bytes=domain_entity.size_bytes,
            uploaded_at=domain_entity.uploaded_at,
        )

"""Use case for uploading flashcard images."""

from uuid import UUID

import structlog

from birdcards.application.media.protocols.image_storage import ImageStorageProtocol
from birdcards.application.media.protocols.uploaded_file_repository import (
    UploadedFileRepositoryProtocol,
)
from birdcards.application.media.services.deck_ownership_guard import DeckOwnershipGuard
from birdcards.application.media.services.upload_validator import UploadValidator
from birdcards.domain.common.exceptions import ValidationError as DomainValidationError
from birdcards.domain.common.value_objects.ids import DeckId, FileId, UserId
from birdcards.domain.media.entities.uploaded_file import UploadedFile
from birdcards.exceptions import ImageAccessDeniedError

logger = structlog.get_logger(__name__)

MAX_ORIGINAL_NAME_LENGTH = 255


class UploadImageUseCase:
    """Use case for storing an uploaded image against a deck."""

    def __init__(
        self,
        uploaded_file_repository: UploadedFileRepositoryProtocol,
        image_storage: ImageStorageProtocol,
        ownership_guard: DeckOwnershipGuard,
        validator: UploadValidator,
    ) -> None:
        """Initialize use case with dependencies."""
        self.uploaded_file_repository = uploaded_file_repository
        self.image_storage = image_storage
        self.ownership_guard = ownership_guard
        self.validator = validator

    def upload_image(
        self,
        deck_id: str,
        user_id: UUID,
        content: bytes,
        content_type: str | None,
        filename: str,
        size_bytes: int | None = None,
    ) -> UploadedFile:
        """
        Validate and store an image, then record it.

        The operation is complete only once both the file and its record
        exist. If the record cannot be inserted the written file is removed
        again, so a failed upload never leaves an untracked file behind.

        Args:
            deck_id: Deck the image is uploaded for (raw path parameter)
            user_id: ID of the uploading user
            content: File content
            content_type: MIME type declared by the client
            filename: Filename declared by the client
            size_bytes: Size to check against the ceiling, defaults to len(content)

        Returns:
            The stored file record

        Raises:
            ImageAccessDeniedError: If the user does not own the deck
            PayloadTooLargeError: If the file is too large
            UnsupportedMediaTypeError: If type, extension or content is rejected
            InvalidPathError: If the storage name escapes the uploads root
        """
        user_id_vo = UserId(user_id)
        try:
            deck_id_vo = DeckId.parse(deck_id)
        except DomainValidationError:
            raise ImageAccessDeniedError(deck_id) from None

        self.ownership_guard.assert_ownership(user_id_vo, deck_id_vo)

        file_id = FileId.generate()
        size = len(content) if size_bytes is None else max(size_bytes, len(content))
        stored_name, mime_type = self.validator.validate(
            file_id=file_id,
            declared_mime=content_type,
            original_name=filename,
            size_bytes=size,
            content=content,
        )

        self.image_storage.save(stored_name, content)

        record = UploadedFile(
            id=file_id,
            deck_id=deck_id_vo,
            user_id=user_id_vo,
            stored_name=stored_name,
            original_name=filename[:MAX_ORIGINAL_NAME_LENGTH],
            mime_type=mime_type,
            size_bytes=len(content),
        )
        try:
            record = self.uploaded_file_repository.add(record)
        except Exception:
            self.image_storage.delete(stored_name)
            logger.exception("upload_record_failed", file_id=str(file_id))
            raise

        logger.info(
            "uploaded_image",
            file_id=str(file_id),
            deck_id=str(deck_id_vo),
            mime_type=mime_type,
            size_bytes=record.size_bytes,
        )
        return record

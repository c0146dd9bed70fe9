"""Use case for deleting uploaded images."""

from uuid import UUID

import structlog

from birdcards.application.media.protocols.image_storage import ImageStorageProtocol
from birdcards.application.media.protocols.uploaded_file_repository import (
    UploadedFileRepositoryProtocol,
)
from birdcards.application.media.services.deck_ownership_guard import DeckOwnershipGuard
from birdcards.domain.common.exceptions import ValidationError as DomainValidationError
from birdcards.domain.common.value_objects.ids import FileId, UserId
from birdcards.exceptions import ImageNotFoundError

logger = structlog.get_logger(__name__)


class DeleteImageUseCase:
    """Use case for deleting an uploaded image and its record."""

    def __init__(
        self,
        uploaded_file_repository: UploadedFileRepositoryProtocol,
        image_storage: ImageStorageProtocol,
        ownership_guard: DeckOwnershipGuard,
    ) -> None:
        """Initialize use case with dependencies."""
        self.uploaded_file_repository = uploaded_file_repository
        self.image_storage = image_storage
        self.ownership_guard = ownership_guard

    def delete_image(self, file_id: str | FileId, user_id: UUID | UserId) -> None:
        """
        Delete an image file and its record.

        A file already missing from disk is tolerated; the record is still
        removed. Deleting the same id twice fails on the second call because
        the record is gone.

        Args:
            file_id: ID of the image (raw or typed)
            user_id: ID of the requesting user

        Raises:
            ImageNotFoundError: If no record exists for the id
            ImageAccessDeniedError: If the user does not own the image's deck
        """
        if isinstance(file_id, FileId):
            file_id_vo = file_id
        else:
            try:
                file_id_vo = FileId.parse(file_id)
            except DomainValidationError:
                raise ImageNotFoundError(file_id) from None
        user_id_vo = user_id if isinstance(user_id, UserId) else UserId(user_id)

        record = self.uploaded_file_repository.find_by_id(file_id_vo)
        if record is None:
            raise ImageNotFoundError(file_id_vo)

        self.ownership_guard.assert_ownership(user_id_vo, record.deck_id)

        removed = self.image_storage.delete(record.stored_name)
        if not removed:
            logger.info("image_already_absent", file_id=str(file_id_vo))

        self.uploaded_file_repository.delete(file_id_vo)
        logger.info("deleted_image", file_id=str(file_id_vo))

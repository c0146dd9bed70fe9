"""Use case for resolving uploaded images for download."""

from pathlib import Path
from uuid import UUID

import structlog

from birdcards.application.media.protocols.image_storage import ImageStorageProtocol
from birdcards.application.media.protocols.uploaded_file_repository import (
    UploadedFileRepositoryProtocol,
)
from birdcards.application.media.services.deck_ownership_guard import DeckOwnershipGuard
from birdcards.application.media.services.upload_validator import EXTENSION_MIME_TYPES
from birdcards.domain.common.exceptions import ValidationError as DomainValidationError
from birdcards.domain.common.value_objects.ids import FileId, UserId
from birdcards.domain.media.entities.uploaded_file import UploadedFile
from birdcards.exceptions import ImageAccessDeniedError, ImageNotFoundError

logger = structlog.get_logger(__name__)


def _parse_file_id(file_id: str) -> FileId:
    try:
        return FileId.parse(file_id)
    except DomainValidationError:
        raise ImageNotFoundError(file_id) from None


class GetImageUseCase:
    """Use case for locating an uploaded image on disk."""

    def __init__(
        self,
        uploaded_file_repository: UploadedFileRepositoryProtocol,
        image_storage: ImageStorageProtocol,
        ownership_guard: DeckOwnershipGuard,
        legacy_fallback: bool = True,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            uploaded_file_repository: File record store
            image_storage: On-disk image store
            ownership_guard: Deck ownership check
            legacy_fallback: Look on disk for files that have no record
        """
        self.uploaded_file_repository = uploaded_file_repository
        self.image_storage = image_storage
        self.ownership_guard = ownership_guard
        self.legacy_fallback = legacy_fallback

    def get_image(self, file_id: str, user_id: UUID) -> tuple[UploadedFile, Path]:
        """
        Get an image record and its path with ownership verification.

        A caller who does not own the file's deck gets the same not-found
        error as for an unknown id, so the response never confirms that
        the id exists.

        Raises:
            ImageNotFoundError: If the id is unknown, not owned, or the file is gone
        """
        file_id_vo = _parse_file_id(file_id)
        record = self.uploaded_file_repository.find_by_id(file_id_vo)
        if record is None:
            raise ImageNotFoundError(file_id)

        try:
            self.ownership_guard.assert_ownership(UserId(user_id), record.deck_id)
        except ImageAccessDeniedError:
            raise ImageNotFoundError(file_id) from None

        path = self.image_storage.find(record.stored_name)
        if path is None:
            logger.warning("image_missing_on_disk", file_id=file_id)
            raise ImageNotFoundError(file_id)
        return record, path

    def get_public_image(self, file_id: str) -> tuple[Path, str]:
        """
        Get the path and MIME type of an image without authentication.

        Anyone holding a valid id may view the image; the id is unguessable
        and never derived from user input.

        Returns:
            Tuple of (absolute path, MIME type)

        Raises:
            ImageNotFoundError: If neither a record nor a legacy file exists
        """
        file_id_vo = _parse_file_id(file_id)
        record = self.uploaded_file_repository.find_by_id(file_id_vo)

        if record is None:
            if self.legacy_fallback:
                legacy = self._find_legacy_image(file_id_vo)
                if legacy is not None:
                    return legacy
            raise ImageNotFoundError(file_id)

        path = self.image_storage.find(record.stored_name)
        if path is None:
            logger.warning("image_missing_on_disk", file_id=file_id)
            raise ImageNotFoundError(file_id)
        return path, record.mime_type

    def _find_legacy_image(self, file_id: FileId) -> tuple[Path, str] | None:
        """Try {id}{ext} for every allowed extension (files uploaded before records)."""
        for extension, mime_type in EXTENSION_MIME_TYPES.items():
            path = self.image_storage.find(f"{file_id.value}{extension}")
            if path is not None:
                logger.info("served_legacy_image", file_id=str(file_id), extension=extension)
                return path, mime_type
        return None

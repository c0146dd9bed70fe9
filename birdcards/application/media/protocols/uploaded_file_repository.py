"""Protocol for the uploaded file record store."""

from typing import Protocol

from birdcards.domain.common.value_objects.ids import DeckId, FileId
from birdcards.domain.media.entities.uploaded_file import UploadedFile


class UploadedFileRepositoryProtocol(Protocol):
    """Protocol for uploaded file record operations."""

    def find_by_id(self, file_id: FileId) -> UploadedFile | None:
        """
        Find a file record by ID.

        No ownership filter: guards are applied by the use cases so the
        public read path can share this lookup.
        """
        ...

    def find_by_deck(self, deck_id: DeckId) -> list[UploadedFile]:
        """Get all file records of a deck."""
        ...

    def add(self, uploaded_file: UploadedFile) -> UploadedFile:
        """
        Insert a new file record. Commits.

        Records are insert-only; there is no update.
        """
        ...

    def delete(self, file_id: FileId) -> bool:
        """
        Delete a file record. Commits.

        Returns:
            True if deleted, False if not found
        """
        ...

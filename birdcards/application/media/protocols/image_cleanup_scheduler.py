"""Protocol for deferred deletion of orphaned images."""

from typing import Protocol

from birdcards.domain.common.value_objects.ids import FileId, UserId


class ImageCleanupSchedulerProtocol(Protocol):
    """
    Fire-and-forget deletion of images no flashcard references any more.

    Implementations must return immediately, never raise into the caller and
    report failures only through logging.
    """

    def schedule_deletion(self, file_id: FileId, user_id: UserId) -> None:
        """Run the full image delete (record and bytes) as user_id."""
        ...

    def schedule_file_removal(self, stored_name: str) -> None:
        """Remove stored bytes whose record is already gone, e.g. after a deck delete."""
        ...

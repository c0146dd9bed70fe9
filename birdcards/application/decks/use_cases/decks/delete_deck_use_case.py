"""Use case for deleting decks."""

from uuid import UUID

import structlog

from birdcards.application.decks.protocols.deck_repository import DeckRepositoryProtocol
from birdcards.application.decks.use_cases.deck_lookup import get_owned_deck
from birdcards.application.media.protocols.image_cleanup_scheduler import (
    ImageCleanupSchedulerProtocol,
)
from birdcards.application.media.protocols.uploaded_file_repository import (
    UploadedFileRepositoryProtocol,
)
from birdcards.domain.common.value_objects.ids import UserId

logger = structlog.get_logger(__name__)


class DeleteDeckUseCase:
    """Use case for deleting decks."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        uploaded_file_repository: UploadedFileRepositoryProtocol,
        cleanup_scheduler: ImageCleanupSchedulerProtocol,
    ) -> None:
        self.deck_repository = deck_repository
        self.uploaded_file_repository = uploaded_file_repository
        self.cleanup_scheduler = cleanup_scheduler

    def delete_deck(self, deck_id: str, user_id: UUID) -> None:
        """
        Delete a deck with its flashcards and uploaded images (hard delete).

        The deck, its cards and its file records are removed in one commit.
        The image bytes are handed to the cleanup scheduler afterwards, since
        no record is left to authorise a regular image delete.

        Raises:
            DeckNotFoundError: If the deck is not found or not owned by the user
        """
        deck = get_owned_deck(self.deck_repository, deck_id, UserId(user_id))
        uploaded_files = self.uploaded_file_repository.find_by_deck(deck.id)

        self.deck_repository.delete(deck)
        logger.info("deleted_deck", deck_id=str(deck.id), uploaded_files=len(uploaded_files))

        for uploaded_file in uploaded_files:
            self.cleanup_scheduler.schedule_file_removal(uploaded_file.stored_name)

"""Use case for deleting flashcards."""

from uuid import UUID

import structlog

from birdcards.application.decks.protocols.deck_repository import DeckRepositoryProtocol
from birdcards.application.decks.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from birdcards.application.decks.use_cases.deck_lookup import get_owned_deck
from birdcards.application.media.protocols.image_cleanup_scheduler import (
    ImageCleanupSchedulerProtocol,
)
from birdcards.domain.common.exceptions import ValidationError as DomainValidationError
from birdcards.domain.common.value_objects.ids import FlashcardId, UserId
from birdcards.exceptions import FlashcardNotFoundError

logger = structlog.get_logger(__name__)


class DeleteFlashcardUseCase:
    """Use case for deleting flashcards."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        cleanup_scheduler: ImageCleanupSchedulerProtocol,
    ) -> None:
        """Initialize use case with repository protocols and the cleanup scheduler."""
        self.deck_repository = deck_repository
        self.flashcard_repository = flashcard_repository
        self.cleanup_scheduler = cleanup_scheduler

    def delete_flashcard(self, deck_id: str, flashcard_id: str, user_id: UUID) -> None:
        """
        Delete a flashcard and schedule cleanup of its uploaded image.

        Raises:
            DeckNotFoundError: If the deck is not found or not owned by the user
            FlashcardNotFoundError: If the flashcard is not in the deck
        """
        user_id_vo = UserId(user_id)
        deck = get_owned_deck(self.deck_repository, deck_id, user_id_vo)

        try:
            flashcard_id_vo = FlashcardId.parse(flashcard_id)
        except DomainValidationError:
            raise FlashcardNotFoundError(flashcard_id) from None

        flashcard = self.flashcard_repository.find_by_id(flashcard_id_vo, deck.id)
        if flashcard is None:
            raise FlashcardNotFoundError(flashcard_id)

        image_file_id = flashcard.image_file_id

        if not self.flashcard_repository.delete(flashcard_id_vo, deck.id):
            raise FlashcardNotFoundError(flashcard_id)
        logger.info("deleted_flashcard", flashcard_id=flashcard_id)

        if image_file_id is not None and not self.flashcard_repository.is_image_referenced(
            image_file_id, deck.id
        ):
            self.cleanup_scheduler.schedule_deletion(image_file_id, user_id_vo)

"""Use case for updating flashcards."""

from uuid import UUID

import structlog

from birdcards.application.decks.protocols.deck_repository import DeckRepositoryProtocol
from birdcards.application.decks.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from birdcards.application.decks.use_cases.deck_lookup import get_owned_deck
from birdcards.application.decks.use_cases.flashcards.image_source import (
    check_image_url,
    resolve_uploaded_file,
)
from birdcards.application.media.protocols.image_cleanup_scheduler import (
    ImageCleanupSchedulerProtocol,
)
from birdcards.application.media.protocols.uploaded_file_repository import (
    UploadedFileRepositoryProtocol,
)
from birdcards.domain.common.exceptions import ValidationError as DomainValidationError
from birdcards.domain.common.value_objects.ids import FlashcardId, UserId
from birdcards.domain.decks.entities.flashcard import Flashcard
from birdcards.exceptions import FlashcardNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


class UpdateFlashcardUseCase:
    """Use case for updating flashcards."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        uploaded_file_repository: UploadedFileRepositoryProtocol,
        cleanup_scheduler: ImageCleanupSchedulerProtocol,
    ) -> None:
        """Initialize use case with repository protocols and the cleanup scheduler."""
        self.deck_repository = deck_repository
        self.flashcard_repository = flashcard_repository
        self.uploaded_file_repository = uploaded_file_repository
        self.cleanup_scheduler = cleanup_scheduler

    def update_flashcard(
        self,
        deck_id: str,
        flashcard_id: str,
        user_id: UUID,
        bird_name: str | None = None,
        image_url: str | None = None,
        file_id: str | None = None,
    ) -> Flashcard:
        """
        Update a flashcard's bird name and/or image.

        When the image changes away from an uploaded file that no other card
        uses, that file is handed to the cleanup scheduler once the update is
        committed. The response never waits for the cleanup.

        Args:
            deck_id: ID of the deck
            flashcard_id: ID of the flashcard to update
            user_id: ID of the user
            bird_name: New bird name (optional)
            image_url: New literal image URL (optional)
            file_id: ID of a newly uploaded image (optional, wins over image_url)

        Returns:
            Updated flashcard domain entity

        Raises:
            DeckNotFoundError: If the deck is not found or not owned by the user
            FlashcardNotFoundError: If the flashcard is not in the deck
            ValidationError: If nothing to update is given or the uploaded image is not usable
        """
        if bird_name is None and image_url is None and file_id is None:
            raise ValidationError("At least one of bird_name, image_url or file_id must be provided")

        user_id_vo = UserId(user_id)
        deck = get_owned_deck(self.deck_repository, deck_id, user_id_vo)

        try:
            flashcard_id_vo = FlashcardId.parse(flashcard_id)
        except DomainValidationError:
            raise FlashcardNotFoundError(flashcard_id) from None

        flashcard = self.flashcard_repository.find_by_id(flashcard_id_vo, deck.id)
        if flashcard is None:
            raise FlashcardNotFoundError(flashcard_id)

        if bird_name is not None:
            flashcard.update_bird_name(bird_name)

        replaced = None
        if file_id:
            replaced = flashcard.attach_uploaded_image(
                resolve_uploaded_file(self.uploaded_file_repository, file_id, deck.id)
            )
        elif image_url is not None:
            replaced = flashcard.replace_image(
                check_image_url(self.uploaded_file_repository, image_url, deck.id)
            )

        flashcard = self.flashcard_repository.save(flashcard)
        logger.info("updated_flashcard", flashcard_id=flashcard_id)

        if replaced is not None:
            if self.flashcard_repository.is_image_referenced(replaced, deck.id):
                logger.info("replaced_image_still_referenced", file_id=str(replaced))
            else:
                self.cleanup_scheduler.schedule_deletion(replaced, user_id_vo)

        return flashcard

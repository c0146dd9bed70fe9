"""Use case for creating flashcards."""

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
from birdcards.application.media.protocols.uploaded_file_repository import (
    UploadedFileRepositoryProtocol,
)
from birdcards.domain.common.value_objects.ids import UserId
from birdcards.domain.decks.entities.flashcard import Flashcard
from birdcards.domain.media.services.image_reference import build_image_url
from birdcards.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class CreateFlashcardUseCase:
    """Use case for creating flashcards in a deck."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        uploaded_file_repository: UploadedFileRepositoryProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.deck_repository = deck_repository
        self.flashcard_repository = flashcard_repository
        self.uploaded_file_repository = uploaded_file_repository

    def create_flashcard(
        self,
        deck_id: str,
        user_id: UUID,
        bird_name: str,
        image_url: str | None = None,
        file_id: str | None = None,
    ) -> Flashcard:
        """
        Create a flashcard in a deck owned by the user.

        An uploaded file id takes precedence over a literal image URL and is
        stored as its reference-style URL.

        Args:
            deck_id: ID of the deck
            user_id: ID of the user
            bird_name: Name of the bird shown on the card
            image_url: Literal image URL; /uploads/flashcards/ URLs must name a file of this deck
            file_id: ID of an image uploaded for this deck

        Returns:
            Created flashcard domain entity

        Raises:
            DeckNotFoundError: If the deck is not found or not owned by the user
            ValidationError: If no image is given or the uploaded image is not usable
        """
        deck = get_owned_deck(self.deck_repository, deck_id, UserId(user_id))

        if file_id:
            image_url = build_image_url(
                resolve_uploaded_file(self.uploaded_file_repository, file_id, deck.id)
            )
        elif image_url:
            image_url = check_image_url(self.uploaded_file_repository, image_url, deck.id)
        else:
            raise ValidationError("Either image_url or file_id must be provided")

        flashcard = Flashcard.create(deck_id=deck.id, bird_name=bird_name, image_url=image_url)
        flashcard = self.flashcard_repository.save(flashcard)

        logger.info("created_flashcard", flashcard_id=str(flashcard.id), deck_id=str(deck.id))
        return flashcard

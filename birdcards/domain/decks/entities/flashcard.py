"""
Flashcard entity for bird identification study.
"""

from dataclasses import dataclass
from datetime import datetime

from birdcards.domain.common.entity import Entity
from birdcards.domain.common.exceptions import ValidationError
from birdcards.domain.common.value_objects import DeckId, FileId, FlashcardId
from birdcards.domain.media.services.image_reference import (
    build_image_url,
    extract_file_id,
)


@dataclass(eq=False)
class Flashcard(Entity[FlashcardId]):
    """
    Flashcard pairing a bird name with an image.

    Business Rules:
    - Bird name and image URL cannot be empty
    - The image URL is either a reference to an uploaded file
      (/uploads/flashcards/{file_id}) or a literal external URL
    """

    id: FlashcardId
    deck_id: DeckId
    bird_name: str
    image_url: str
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.bird_name or not self.bird_name.strip():
            raise ValidationError("Bird name cannot be empty", field="bird_name")
        if not self.image_url or not self.image_url.strip():
            raise ValidationError("Image URL cannot be empty", field="image_url")

    @property
    def image_file_id(self) -> FileId | None:
        """Uploaded file this card points at, if it uses a reference-style URL."""
        return extract_file_id(self.image_url)

    def update_bird_name(self, bird_name: str) -> None:
        """
        Update the bird name.

        Raises:
            ValidationError: If bird name is empty
        """
        if not bird_name or not bird_name.strip():
            raise ValidationError("Bird name cannot be empty", field="bird_name")
        self.bird_name = bird_name.strip()

    def replace_image(self, image_url: str) -> FileId | None:
        """
        Point the card at a new image.

        Returns:
            The previously referenced uploaded file when it is no longer used,
            so the caller can schedule its cleanup. None for external URLs or
            when the reference did not change.

        Raises:
            ValidationError: If image URL is empty
        """
        if not image_url or not image_url.strip():
            raise ValidationError("Image URL cannot be empty", field="image_url")
        previous = self.image_file_id
        self.image_url = image_url.strip()
        if previous is not None and previous != self.image_file_id:
            return previous
        return None

    def attach_uploaded_image(self, file_id: FileId) -> FileId | None:
        """Point the card at an uploaded file. Same return contract as replace_image."""
        return self.replace_image(build_image_url(file_id))

    @classmethod
    def create(cls, deck_id: DeckId, bird_name: str, image_url: str) -> "Flashcard":
        """Create a new flashcard with a fresh id."""
        return cls(
            id=FlashcardId.generate(),
            deck_id=deck_id,
            bird_name=bird_name.strip(),
            image_url=image_url.strip(),
        )

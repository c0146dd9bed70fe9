"""Uploaded image record."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from birdcards.domain.common.entity import Entity
from birdcards.domain.common.exceptions import ValidationError
from birdcards.domain.common.value_objects import DeckId, FileId, UserId
from birdcards.domain.media.services.image_reference import build_image_url


@dataclass(eq=False)
class UploadedFile(Entity[FileId]):
    """
    Record of an image stored under the uploads root.

    Business Rules:
    - stored_name is always "{id}{extension}"; original_name is provenance only
      and never used to build a path
    - Records are never mutated; every upload creates a new id
    - deck_id is the authorization boundary for authenticated access
    """

    id: FileId
    deck_id: DeckId
    user_id: UserId
    stored_name: str
    original_name: str
    mime_type: str
    size_bytes: int
    uploaded_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.stored_name.startswith(str(self.id.value)):
            raise ValidationError(
                "Stored name must be derived from the file id",
                field="stored_name",
                value=self.stored_name,
            )
        if self.size_bytes < 0:
            raise ValidationError("Size cannot be negative", field="size_bytes")

    @property
    def url(self) -> str:
        return build_image_url(self.id)

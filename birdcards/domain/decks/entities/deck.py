"""Deck entity."""

from dataclasses import dataclass
from datetime import datetime

from birdcards.domain.common.entity import Entity
from birdcards.domain.common.exceptions import ValidationError
from birdcards.domain.common.value_objects import DeckId, UserId

MAX_DECK_NAME_LENGTH = 200


@dataclass(eq=False)
class Deck(Entity[DeckId]):
    """
    A named collection of flashcards owned by a user.

    Business Rules:
    - Name cannot be empty
    - A deck belongs to exactly one user, who alone may modify it or its files
    """

    id: DeckId
    user_id: UserId
    name: str
    description: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Deck name cannot be empty", field="name")
        if len(self.name) > MAX_DECK_NAME_LENGTH:
            raise ValidationError("Deck name is too long", field="name")

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.user_id == user_id

    def rename(self, name: str) -> None:
        """
        Change the deck name.

        Raises:
            ValidationError: If the name is empty or too long
        """
        name = name.strip() if name else ""
        if not name:
            raise ValidationError("Deck name cannot be empty", field="name")
        if len(name) > MAX_DECK_NAME_LENGTH:
            raise ValidationError("Deck name is too long", field="name")
        self.name = name

    def update_description(self, description: str | None) -> None:
        # Blank clears the description
        self.description = (description or "").strip() or None

    @classmethod
    def create(cls, user_id: UserId, name: str, description: str | None = None) -> "Deck":
        """Create a new deck with a fresh id."""
        return cls(
            id=DeckId.generate(),
            user_id=user_id,
            name=name.strip(),
            description=description.strip() if description else None,
        )

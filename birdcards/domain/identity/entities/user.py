"""User entity for identity management."""

from dataclasses import dataclass
from datetime import datetime

from birdcards.domain.common.entity import Entity
from birdcards.domain.common.exceptions import ValidationError
from birdcards.domain.common.value_objects.ids import UserId

# Domain constraints
MAX_EMAIL_LENGTH = 255


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User entity representing an authenticated user in the system.

    Business Rules:
    - Email must be non-empty and have reasonable length (max MAX_EMAIL_LENGTH chars)
    - Identity is issued by an external provider; no password is stored
    """

    id: UserId
    email: str
    name: str
    picture: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.email:
            raise ValidationError("Email cannot be empty", field="email", value=self.email)
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                "Email cannot exceed MAX_EMAIL_LENGTH characters", field="email", value=self.email
            )

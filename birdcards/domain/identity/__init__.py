"""Identity domain layer."""

from birdcards.domain.identity.entities.user import User
from birdcards.domain.identity.exceptions import UserNotFoundError

__all__ = [
    "User",
    "UserNotFoundError",
]

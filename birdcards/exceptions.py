"""Custom exception hierarchy for the birdcards application."""

from fastapi import HTTPException
from starlette import status


class BirdcardsError(Exception):
    """Base exception for all birdcards errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(BirdcardsError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class DeckNotFoundError(NotFoundError):
    """Deck not found error."""

    def __init__(self, deck_id: object | None = None, *, message: str | None = None) -> None:
        """Initialize with deck ID or custom message."""
        self.deck_id = deck_id
        if message:
            super().__init__(message)
        elif deck_id is not None:
            super().__init__(f"Deck with id {deck_id} not found")
        else:
            super().__init__("Deck not found")


class FlashcardNotFoundError(NotFoundError):
    """Flashcard not found error."""

    def __init__(self, flashcard_id: object | None = None) -> None:
        """Initialize with flashcard ID."""
        self.flashcard_id = flashcard_id
        if flashcard_id is not None:
            super().__init__(f"Flashcard with id {flashcard_id} not found")
        else:
            super().__init__("Flashcard not found")


class ImageNotFoundError(NotFoundError):
    """
    Uploaded image not found.

    The message is deliberately the same whether the record is missing, the
    file is missing on disk, or the caller does not own the deck, so responses
    never confirm that an id exists.
    """

    def __init__(self, file_id: object | None = None) -> None:
        """Initialize with the requested file ID (kept for logging only)."""
        self.file_id = file_id
        super().__init__("Image not found")


class ValidationError(BirdcardsError):
    """Validation error."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=status_code)


class PayloadTooLargeError(ValidationError):
    """Uploaded file exceeds the size ceiling."""

    def __init__(self, size_bytes: int, max_size_bytes: int) -> None:
        """Initialize with the offending size and the ceiling."""
        self.size_bytes = size_bytes
        self.max_size_bytes = max_size_bytes
        super().__init__(
            f"File too large. Maximum size is {max_size_bytes // (1024 * 1024)}MB"
        )


class UnsupportedMediaTypeError(ValidationError):
    """Uploaded file type, extension or content is not an allowed image."""

    def __init__(self, reason: str) -> None:
        """Initialize with reason for rejection."""
        self.reason = reason
        super().__init__(reason)


class InvalidPathError(ValidationError):
    """A stored filename resolved outside the uploads root."""

    def __init__(self, filename: str) -> None:
        """Initialize with the rejected filename."""
        self.filename = filename
        super().__init__("Invalid file path")


class AuthorizationError(BirdcardsError):
    """Caller is not allowed to act on the resource."""

    def __init__(self, message: str = "Not authorized to perform this action") -> None:
        """Initialize with message and 403 status code."""
        super().__init__(message, status_code=403)


class ImageAccessDeniedError(AuthorizationError):
    """Caller does not own the deck an image belongs to."""

    def __init__(self, deck_id: object | None = None) -> None:
        """Initialize with the deck the caller tried to use."""
        self.deck_id = deck_id
        super().__init__("You do not have permission to access files of this deck")


class ImageCleanupError(BirdcardsError):
    """Deferred deletion of a replaced or orphaned image failed. Never sent to clients."""

    def __init__(self, file_id: object, reason: str) -> None:
        """Initialize with the file being cleaned up and the failure reason."""
        self.file_id = file_id
        self.reason = reason
        super().__init__(f"Failed to clean up image {file_id}: {reason}")


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)

"""Turning a flashcard request's image fields into an image URL."""

from birdcards.application.media.protocols.uploaded_file_repository import (
    UploadedFileRepositoryProtocol,
)
from birdcards.domain.common.exceptions import ValidationError as DomainValidationError
from birdcards.domain.common.value_objects.ids import DeckId, FileId
from birdcards.domain.media.services.image_reference import IMAGE_URL_PREFIX
from birdcards.exceptions import ValidationError


def resolve_uploaded_file(
    uploaded_file_repository: UploadedFileRepositoryProtocol,
    file_id: str,
    deck_id: DeckId,
    field: str = "file_id",
) -> FileId:
    """
    Look up an uploaded file of the deck by its raw id.

    Raises:
        ValidationError: If the id does not name an uploaded image of this deck
    """
    try:
        file_id_vo = FileId.parse(file_id)
    except DomainValidationError:
        raise ValidationError(f"{field} does not reference an uploaded image") from None

    record = uploaded_file_repository.find_by_id(file_id_vo)
    if record is None or record.deck_id != deck_id:
        raise ValidationError(f"{field} does not reference an uploaded image of this deck")
    return file_id_vo


def check_image_url(
    uploaded_file_repository: UploadedFileRepositoryProtocol,
    image_url: str,
    deck_id: DeckId,
) -> str:
    """
    Validate a literal image URL before it is stored on a card.

    URLs under /uploads/flashcards/ must name an uploaded image of the same
    deck, exactly like a file_id. Any other URL is kept as an external image.
    """
    url = image_url.strip()
    if url.startswith(IMAGE_URL_PREFIX):
        resolve_uploaded_file(
            uploaded_file_repository,
            url.removeprefix(IMAGE_URL_PREFIX),
            deck_id,
            field="image_url",
        )
    return url

"""API routes for flashcard image uploads."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from starlette.responses import FileResponse

from birdcards.application.media.use_cases.delete_image_use_case import DeleteImageUseCase
from birdcards.application.media.use_cases.get_image_use_case import GetImageUseCase
from birdcards.application.media.use_cases.upload_image_use_case import UploadImageUseCase
from birdcards.config import get_settings
from birdcards.core import container
from birdcards.domain.common.exceptions import DomainError
from birdcards.domain.identity.entities.user import User
from birdcards.exceptions import BirdcardsError, ValidationError
from birdcards.infrastructure.common.di import inject_use_case
from birdcards.infrastructure.identity.dependencies import get_current_user
from birdcards.infrastructure.media.schemas import (
    ImageDeleteResponse,
    ImageMetadataResponse,
    ImageUploadResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/uploads/flashcards", tags=["uploads"])


@router.post(
    "/{deck_id}",
    response_model=ImageUploadResponse,
    status_code=status.HTTP_201_CREATED,
)
def upload_image(
    deck_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    image: Annotated[UploadFile | None, File()] = None,
    use_case: UploadImageUseCase = Depends(inject_use_case(container.upload_image_use_case)),
) -> ImageUploadResponse:
    """
    Upload a flashcard image for a deck.

    The returned file_id is then passed to the flashcard endpoints.

    Args:
        deck_id: ID of a deck owned by the current user
        image: Uploaded image file (JPEG, PNG, GIF or WebP)

    Returns:
        ImageUploadResponse with the file id and its public URL

    Raises:
        HTTPException: 400 if the file is missing or rejected, 403 if the deck
            is not owned by the current user
    """
    if image is None:
        raise ValidationError("No file uploaded")

    try:
        # Read one byte past the ceiling so oversized uploads are detected without reading them whole
        content = image.file.read(use_case.validator.max_size_bytes + 1)
        record = use_case.upload_image(
            deck_id=deck_id,
            user_id=current_user.id.value,
            content=content,
            content_type=image.content_type,
            filename=image.filename or "",
            size_bytes=len(content),
        )
        return ImageUploadResponse(
            success=True,
            message="File uploaded successfully",
            file_id=record.id.value,
            url=record.url,
        )
    except (BirdcardsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to upload image for deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{file_id}", status_code=status.HTTP_200_OK)
def get_image(
    file_id: str,
    use_case: GetImageUseCase = Depends(inject_use_case(container.get_image_use_case)),
) -> FileResponse:
    """
    Serve an uploaded image.

    No authentication: anyone holding a valid file id may view the image.
    Every failure is reported as the same 404.
    """
    path, mime_type = use_case.get_public_image(file_id)
    return FileResponse(
        path,
        media_type=mime_type,
        headers={
            "X-Content-Type-Options": "nosniff",
            "Cache-Control": f"public, max-age={get_settings().IMAGE_CACHE_MAX_AGE}",
        },
    )


@router.get(
    "/{file_id}/info",
    response_model=ImageMetadataResponse,
    status_code=status.HTTP_200_OK,
)
def get_image_info(
    file_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: GetImageUseCase = Depends(inject_use_case(container.get_image_use_case)),
) -> ImageMetadataResponse:
    """
    Get the metadata of an uploaded image owned by the current user.

    Raises:
        HTTPException: 404 if the image is unknown, missing on disk, or
            belongs to a deck of another user
    """
    record, _ = use_case.get_image(file_id, current_user.id.value)
    return ImageMetadataResponse(
        file_id=record.id.value,
        deck_id=record.deck_id.value,
        url=record.url,
        original_name=record.original_name,
        mime_type=record.mime_type,
        size_bytes=record.size_bytes,
        uploaded_at=record.uploaded_at,
    )


@router.delete(
    "/{file_id}",
    response_model=ImageDeleteResponse,
    status_code=status.HTTP_200_OK,
)
def delete_image(
    file_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: DeleteImageUseCase = Depends(inject_use_case(container.delete_image_use_case)),
) -> ImageDeleteResponse:
    """
    Delete an uploaded image and its record.

    Raises:
        HTTPException: 404 if the image is unknown, 403 if it belongs to a deck
            of another user
    """
    try:
        use_case.delete_image(file_id, current_user.id.value)
        return ImageDeleteResponse(success=True, message="File deleted successfully")
    except (BirdcardsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete image {file_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e

"""API routes for flashcards inside a deck."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from birdcards.application.decks.use_cases.flashcards.create_flashcard_use_case import (
    CreateFlashcardUseCase,
)
from birdcards.application.decks.use_cases.flashcards.delete_flashcard_use_case import (
    DeleteFlashcardUseCase,
)
from birdcards.application.decks.use_cases.flashcards.get_flashcards_use_case import (
    GetFlashcardsUseCase,
)
from birdcards.application.decks.use_cases.flashcards.update_flashcard_use_case import (
    UpdateFlashcardUseCase,
)
from birdcards.core import container
from birdcards.domain.common.exceptions import DomainError
from birdcards.domain.identity.entities.user import User
from birdcards.exceptions import BirdcardsError
from birdcards.infrastructure.common.di import inject_use_case
from birdcards.infrastructure.decks.schemas import (
    FlashcardCreateRequest,
    FlashcardCreateResponse,
    FlashcardDeleteResponse,
    FlashcardsListResponse,
    FlashcardUpdateRequest,
    FlashcardUpdateResponse,
)
from birdcards.infrastructure.decks.schemas.converters import flashcard_to_schema
from birdcards.infrastructure.identity.dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks/{deck_id}/flashcards", tags=["flashcards"])


@router.get("", response_model=FlashcardsListResponse, status_code=status.HTTP_200_OK)
def get_flashcards(
    deck_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: GetFlashcardsUseCase = Depends(inject_use_case(container.get_flashcards_use_case)),
) -> FlashcardsListResponse:
    """List the flashcards of a deck, oldest first."""
    try:
        flashcards = use_case.get_flashcards(deck_id, current_user.id.value)
        return FlashcardsListResponse(
            flashcards=[flashcard_to_schema(flashcard) for flashcard in flashcards]
        )
    except (BirdcardsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list flashcards of deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "",
    response_model=FlashcardCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_flashcard(
    deck_id: str,
    request: FlashcardCreateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: CreateFlashcardUseCase = Depends(
        inject_use_case(container.create_flashcard_use_case)
    ),
) -> FlashcardCreateResponse:
    """
    Create a flashcard in a deck.

    Args:
        deck_id: ID of the deck
        request: Bird name plus either an uploaded file id or an image URL

    Returns:
        Created flashcard
    """
    try:
        flashcard = use_case.create_flashcard(
            deck_id=deck_id,
            user_id=current_user.id.value,
            bird_name=request.bird_name,
            image_url=request.image_url,
            file_id=request.file_id,
        )
        return FlashcardCreateResponse(
            success=True,
            message="Flashcard created successfully",
            flashcard=flashcard_to_schema(flashcard),
        )
    except (BirdcardsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create flashcard in deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put(
    "/{flashcard_id}",
    response_model=FlashcardUpdateResponse,
    status_code=status.HTTP_200_OK,
)
def update_flashcard(
    deck_id: str,
    flashcard_id: str,
    request: FlashcardUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UpdateFlashcardUseCase = Depends(
        inject_use_case(container.update_flashcard_use_case)
    ),
) -> FlashcardUpdateResponse:
    """
    Update a flashcard's bird name and/or image.

    A replaced uploaded image is deleted in the background after the update
    has been saved.

    Args:
        deck_id: ID of the deck
        flashcard_id: ID of the flashcard to update
        request: Fields to change

    Returns:
        Updated flashcard

    Raises:
        HTTPException: If flashcard not found or update fails
    """
    try:
        flashcard = use_case.update_flashcard(
            deck_id=deck_id,
            flashcard_id=flashcard_id,
            user_id=current_user.id.value,
            bird_name=request.bird_name,
            image_url=request.image_url,
            file_id=request.file_id,
        )
        return FlashcardUpdateResponse(
            success=True,
            message="Flashcard updated successfully",
            flashcard=flashcard_to_schema(flashcard),
        )
    except (BirdcardsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{flashcard_id}",
    response_model=FlashcardDeleteResponse,
    status_code=status.HTTP_200_OK,
)
def delete_flashcard(
    deck_id: str,
    flashcard_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: DeleteFlashcardUseCase = Depends(
        inject_use_case(container.delete_flashcard_use_case)
    ),
) -> FlashcardDeleteResponse:
    """
    Delete a flashcard.

    Its uploaded image, if no other card uses it, is deleted in the background.
    """
    try:
        use_case.delete_flashcard(
            deck_id=deck_id,
            flashcard_id=flashcard_id,
            user_id=current_user.id.value,
        )
        return FlashcardDeleteResponse(
            success=True,
            message="Flashcard deleted successfully",
        )
    except (BirdcardsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e

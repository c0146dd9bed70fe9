"""API routes for deck management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from birdcards.application.decks.use_cases.decks.create_deck_use_case import CreateDeckUseCase
from birdcards.application.decks.use_cases.decks.delete_deck_use_case import DeleteDeckUseCase
from birdcards.application.decks.use_cases.decks.get_decks_use_case import GetDecksUseCase
from birdcards.application.decks.use_cases.decks.update_deck_use_case import UpdateDeckUseCase
from birdcards.core import container
from birdcards.domain.common.exceptions import DomainError
from birdcards.domain.identity.entities.user import User
from birdcards.exceptions import BirdcardsError
from birdcards.infrastructure.common.di import inject_use_case
from birdcards.infrastructure.decks.schemas import (
    Deck,
    DeckCreateRequest,
    DeckCreateResponse,
    DecksListResponse,
    DeckUpdateRequest,
    DeckUpdateResponse,
)
from birdcards.infrastructure.decks.schemas.converters import deck_to_schema
from birdcards.infrastructure.identity.dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["decks"])


@router.post(
    "",
    response_model=DeckCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_deck(
    request: DeckCreateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: CreateDeckUseCase = Depends(inject_use_case(container.create_deck_use_case)),
) -> DeckCreateResponse:
    """
    Create a deck for the current user.

    Returns:
        Created deck
    """
    try:
        deck = use_case.create_deck(
            user_id=current_user.id.value,
            name=request.name,
            description=request.description,
        )
        return DeckCreateResponse(
            success=True,
            message="Deck created successfully",
            deck=deck_to_schema(deck),
        )
    except (BirdcardsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create deck: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("", response_model=DecksListResponse, status_code=status.HTTP_200_OK)
def get_decks(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: GetDecksUseCase = Depends(inject_use_case(container.get_decks_use_case)),
) -> DecksListResponse:
    """List the current user's decks, newest first."""
    try:
        decks = use_case.get_decks(current_user.id.value)
        return DecksListResponse(decks=[deck_to_schema(deck) for deck in decks])
    except (BirdcardsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list decks: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{deck_id}", response_model=Deck, status_code=status.HTTP_200_OK)
def get_deck(
    deck_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: GetDecksUseCase = Depends(inject_use_case(container.get_decks_use_case)),
) -> Deck:
    """
    Get a single deck.

    Raises:
        HTTPException: 404 if the deck does not exist or belongs to another user
    """
    try:
        return deck_to_schema(use_case.get_deck(deck_id, current_user.id.value))
    except (BirdcardsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/{deck_id}", response_model=DeckUpdateResponse, status_code=status.HTTP_200_OK)
def update_deck(
    deck_id: str,
    request: DeckUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UpdateDeckUseCase = Depends(inject_use_case(container.update_deck_use_case)),
) -> DeckUpdateResponse:
    """
    Rename a deck or change its description.

    Raises:
        HTTPException: 400 if nothing is given or the name is blank, 404 if the
            deck does not exist or belongs to another user
    """
    try:
        deck = use_case.update_deck(
            deck_id,
            current_user.id.value,
            name=request.name,
            description=request.description,
        )
        return DeckUpdateResponse(
            success=True,
            message="Deck updated successfully",
            deck=deck_to_schema(deck),
        )
    except (BirdcardsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{deck_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_deck(
    deck_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: DeleteDeckUseCase = Depends(inject_use_case(container.delete_deck_use_case)),
) -> None:
    """
    Delete a deck with all its flashcards and uploaded images (hard delete).

    Image files are removed in the background after the response.

    Raises:
        HTTPException: 404 if the deck does not exist or belongs to another user
    """
    try:
        use_case.delete_deck(deck_id, current_user.id.value)
    except (BirdcardsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e

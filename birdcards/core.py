from dependency_injector import containers, providers
from fastapi import BackgroundTasks
from sqlalchemy.orm import Session

from birdcards.application.decks.use_cases.decks.create_deck_use_case import CreateDeckUseCase
from birdcards.application.decks.use_cases.decks.delete_deck_use_case import DeleteDeckUseCase
from birdcards.application.decks.use_cases.decks.get_decks_use_case import GetDecksUseCase
from birdcards.application.decks.use_cases.decks.update_deck_use_case import UpdateDeckUseCase
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
from birdcards.application.identity.use_cases.get_user_by_id_use_case import GetUserByIdUseCase
from birdcards.application.media.services.deck_ownership_guard import DeckOwnershipGuard
from birdcards.application.media.services.upload_validator import UploadValidator
from birdcards.application.media.use_cases.delete_image_use_case import DeleteImageUseCase
from birdcards.application.media.use_cases.get_image_use_case import GetImageUseCase
from birdcards.application.media.use_cases.upload_image_use_case import UploadImageUseCase
from birdcards.config import get_settings, get_uploads_root
from birdcards.database import get_session_factory
from birdcards.infrastructure.decks.repositories.deck_repository import DeckRepository
from birdcards.infrastructure.decks.repositories.flashcard_repository import FlashcardRepository
from birdcards.infrastructure.identity.repositories.user_repository import UserRepository
from birdcards.infrastructure.media.repositories.image_file_repository import (
    ImageFileRepository,
)
from birdcards.infrastructure.media.repositories.uploaded_file_repository import (
    UploadedFileRepository,
)
from birdcards.infrastructure.media.workers.after_response_scheduler import (
    AfterResponseCleanupScheduler,
)
from birdcards.infrastructure.media.workers.image_cleanup_worker import ImageCleanupWorker


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)
    background_tasks = providers.Dependency(instance_of=BackgroundTasks)

    settings = providers.Callable(get_settings)
    uploads_root = providers.Callable(get_uploads_root)
    session_factory = providers.Callable(get_session_factory, settings=settings)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    deck_repository = providers.Factory(DeckRepository, db=db)
    flashcard_repository = providers.Factory(FlashcardRepository, db=db)
    uploaded_file_repository = providers.Factory(UploadedFileRepository, db=db)
    image_file_repository = providers.Factory(ImageFileRepository, uploads_root=uploads_root)

    # Media services
    deck_ownership_guard = providers.Factory(DeckOwnershipGuard, deck_repository=deck_repository)
    upload_validator = providers.Factory(
        UploadValidator,
        max_size_bytes=settings.provided.MAX_UPLOAD_SIZE_BYTES,
    )

    # One worker per process, sessions come from the application session factory
    image_cleanup_worker = providers.Singleton(
        ImageCleanupWorker,
        session_factory=session_factory,
        uploads_root=uploads_root,
    )
    # Per request: jobs reach the worker after the response is sent
    cleanup_scheduler = providers.Factory(
        AfterResponseCleanupScheduler,
        background_tasks=background_tasks,
        worker=image_cleanup_worker,
    )

    # Identity use cases
    get_user_by_id_use_case = providers.Factory(GetUserByIdUseCase, user_repository=user_repository)

    # Media use cases
    upload_image_use_case = providers.Factory(
        UploadImageUseCase,
        uploaded_file_repository=uploaded_file_repository,
        image_storage=image_file_repository,
        ownership_guard=deck_ownership_guard,
        validator=upload_validator,
    )
    get_image_use_case = providers.Factory(
        GetImageUseCase,
        uploaded_file_repository=uploaded_file_repository,
        image_storage=image_file_repository,
        ownership_guard=deck_ownership_guard,
        legacy_fallback=settings.provided.LEGACY_UPLOAD_FALLBACK,
    )
    delete_image_use_case = providers.Factory(
        DeleteImageUseCase,
        uploaded_file_repository=uploaded_file_repository,
        image_storage=image_file_repository,
        ownership_guard=deck_ownership_guard,
    )

    # Deck use cases
    create_deck_use_case = providers.Factory(CreateDeckUseCase, deck_repository=deck_repository)
    get_decks_use_case = providers.Factory(GetDecksUseCase, deck_repository=deck_repository)
    update_deck_use_case = providers.Factory(UpdateDeckUseCase, deck_repository=deck_repository)
    delete_deck_use_case = providers.Factory(
        DeleteDeckUseCase,
        deck_repository=deck_repository,
        uploaded_file_repository=uploaded_file_repository,
        cleanup_scheduler=cleanup_scheduler,
    )

    # Flashcard use cases
    get_flashcards_use_case = providers.Factory(
        GetFlashcardsUseCase,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
    )
    create_flashcard_use_case = providers.Factory(
        CreateFlashcardUseCase,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
        uploaded_file_repository=uploaded_file_repository,
    )
    update_flashcard_use_case = providers.Factory(
        UpdateFlashcardUseCase,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
        uploaded_file_repository=uploaded_file_repository,
        cleanup_scheduler=cleanup_scheduler,
    )
    delete_flashcard_use_case = providers.Factory(
        DeleteFlashcardUseCase,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
        cleanup_scheduler=cleanup_scheduler,
    )


# Initialize container
container = Container()

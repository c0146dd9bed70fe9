"""In-process worker that deletes images no flashcard references any more."""

import queue
import threading
from collections.abc import Callable
from functools import partial
from pathlib import Path

import structlog
from sqlalchemy.orm import Session

from birdcards.application.media.services.deck_ownership_guard import DeckOwnershipGuard
from birdcards.application.media.use_cases.delete_image_use_case import DeleteImageUseCase
from birdcards.domain.common.value_objects.ids import FileId, UserId
from birdcards.exceptions import ImageCleanupError, ImageNotFoundError
from birdcards.infrastructure.decks.repositories.deck_repository import DeckRepository
from birdcards.infrastructure.media.repositories.image_file_repository import (
    ImageFileRepository,
)
from birdcards.infrastructure.media.repositories.uploaded_file_repository import (
    UploadedFileRepository,
)

logger = structlog.get_logger(__name__)

_STOP = None


class ImageCleanupWorker:
    """
    Runs image deletions on a background thread after the request has finished.

    Jobs are kept in memory only; anything still queued when the process dies
    is lost and the file stays on disk. Each job opens its own session and
    runs the same delete operation as DELETE /uploads/flashcards/{file_id},
    including the ownership check. Outcomes are only logged.
    """

    def __init__(self, session_factory: Callable[[], Session], uploads_root: Path) -> None:
        self.session_factory = session_factory
        self.uploads_root = uploads_root
        self._queue: queue.Queue[Callable[[], None] | None] = queue.Queue()
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    def schedule_deletion(self, file_id: FileId, user_id: UserId) -> None:
        """Queue an image for deletion and return immediately."""
        self._ensure_started()
        self._queue.put(partial(self._process, file_id, user_id))
        logger.info("image_cleanup_scheduled", file_id=str(file_id), user_id=str(user_id))

    def schedule_file_removal(self, stored_name: str) -> None:
        """Queue removal of stored bytes whose record has already been deleted."""
        self._ensure_started()
        self._queue.put(partial(self._remove_file, stored_name))
        logger.info("image_file_removal_scheduled", stored_name=stored_name)

    def join(self) -> None:
        """Block until every queued job has been processed."""
        self._queue.join()

    def shutdown(self, timeout: float = 5.0) -> None:
        """Process the remaining jobs and stop the thread."""
        with self._lock:
            thread = self._thread
            self._thread = None
        if thread is None or not thread.is_alive():
            return
        self._queue.put(_STOP)
        thread.join(timeout)
        if thread.is_alive():
            logger.warning("image_cleanup_worker_still_running", pending=self._queue.qsize())

    def _ensure_started(self) -> None:
        with self._lock:
            if self._thread is not None and self._thread.is_alive():
                return
            self._thread = threading.Thread(
                target=self._run, name="image-cleanup-worker", daemon=True
            )
            self._thread.start()

    def _run(self) -> None:
        while True:
            job = self._queue.get()
            try:
                if job is _STOP:
                    return
                job()
            finally:
                self._queue.task_done()

    def _process(self, file_id: FileId, user_id: UserId) -> None:
        try:
            with self.session_factory() as db:
                use_case = DeleteImageUseCase(
                    uploaded_file_repository=UploadedFileRepository(db),
                    image_storage=ImageFileRepository(self.uploads_root),
                    ownership_guard=DeckOwnershipGuard(DeckRepository(db)),
                )
                use_case.delete_image(file_id, user_id)
        except ImageNotFoundError:
            logger.info("image_cleanup_skipped", file_id=str(file_id), reason="not_found")
        except Exception as e:
            error = ImageCleanupError(file_id, str(e))
            logger.error("image_cleanup_failed", file_id=str(file_id), error=error.message, exc_info=True)
        else:
            logger.info("image_cleanup_completed", file_id=str(file_id))

    def _remove_file(self, stored_name: str) -> None:
        try:
            removed = ImageFileRepository(self.uploads_root).delete(stored_name)
        except Exception as e:
            error = ImageCleanupError(stored_name, str(e))
            logger.error(
                "image_cleanup_failed", stored_name=stored_name, error=error.message, exc_info=True
            )
        else:
            logger.info("image_file_removed", stored_name=stored_name, removed=removed)

"""Cleanup scheduler bound to a single request."""

from fastapi import BackgroundTasks

from birdcards.application.media.protocols.image_cleanup_scheduler import (
    ImageCleanupSchedulerProtocol,
)
from birdcards.domain.common.value_objects.ids import FileId, UserId


class AfterResponseCleanupScheduler:
    """
    Hands cleanup jobs to the worker only once the response has been sent.

    Jobs are registered as background tasks of the current request, which
    Starlette runs after the last body chunk has gone out. The worker then
    performs the deletion on its own thread.
    """

    def __init__(
        self, background_tasks: BackgroundTasks, worker: ImageCleanupSchedulerProtocol
    ) -> None:
        self.background_tasks = background_tasks
        self.worker = worker

    def schedule_deletion(self, file_id: FileId, user_id: UserId) -> None:
        self.background_tasks.add_task(self.worker.schedule_deletion, file_id, user_id)

    def schedule_file_removal(self, stored_name: str) -> None:
        self.background_tasks.add_task(self.worker.schedule_file_removal, stored_name)

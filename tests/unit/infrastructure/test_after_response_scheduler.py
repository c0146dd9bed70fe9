"""Tests for AfterResponseCleanupScheduler."""

import asyncio

from fastapi import BackgroundTasks

from birdcards.domain.common.value_objects import FileId, UserId
from birdcards.infrastructure.media.workers.after_response_scheduler import (
    AfterResponseCleanupScheduler,
)


class RecordingWorker:
    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []

    def schedule_deletion(self, file_id: FileId, user_id: UserId) -> None:
        self.calls.append(("delete", str(file_id), str(user_id)))

    def schedule_file_removal(self, stored_name: str) -> None:
        self.calls.append(("remove", stored_name))


class TestAfterResponseCleanupScheduler:
    def test_jobs_wait_for_background_tasks(self) -> None:
        worker = RecordingWorker()
        tasks = BackgroundTasks()
        scheduler = AfterResponseCleanupScheduler(tasks, worker)
        file_id, user_id = FileId.generate(), UserId.generate()

        scheduler.schedule_deletion(file_id, user_id)
        scheduler.schedule_file_removal(f"{file_id}.jpg")

        assert worker.calls == []

        asyncio.run(tasks())

        assert worker.calls == [
            ("delete", str(file_id), str(user_id)),
            ("remove", f"{file_id}.jpg"),
        ]

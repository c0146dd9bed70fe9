from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider
from fastapi import BackgroundTasks

from birdcards.core import container
from birdcards.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession, BackgroundTasks], T]:
    """
    Build a use case for the current request.

    The request's session and background task list are bound to the
    container while the use case graph is built. Use cases that schedule
    image cleanup keep the task list, so their jobs start only after the
    response has been sent.
    """

    def dependency(db: DatabaseSession, background_tasks: BackgroundTasks) -> T:
        container.db.override(db)
        container.background_tasks.override(background_tasks)
        try:
            return provider()
        finally:
            container.background_tasks.reset_override()
            container.db.reset_override()

    return dependency

"""Use case for loading the authenticated user."""

from uuid import UUID

from birdcards.application.identity.protocols.user_repository import UserRepositoryProtocol
from birdcards.domain.common.value_objects.ids import UserId
from birdcards.domain.identity.entities.user import User
from birdcards.domain.identity.exceptions import UserNotFoundError


class GetUserByIdUseCase:
    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    def get_user(self, user_id: UUID) -> User:
        """
        Get a user by id.

        Raises:
            UserNotFoundError: If no user has that id
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

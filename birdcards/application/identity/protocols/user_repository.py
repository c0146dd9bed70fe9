from typing import Protocol

from birdcards.domain.common.value_objects.ids import UserId
from birdcards.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    def find_by_id(self, user_id: UserId) -> User | None: ...

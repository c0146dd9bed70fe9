"""Repository for User domain entities."""

from sqlalchemy.orm import Session

from birdcards.domain.common.value_objects.ids import UserId
from birdcards.domain.identity.entities.user import User
from birdcards.infrastructure.identity.mappers.user_mapper import UserMapper
from birdcards.models import User as UserORM


class UserRepository:
    """Repository for User domain entities. Users are created by the login flow."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        orm_model = self.db.get(UserORM, user_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

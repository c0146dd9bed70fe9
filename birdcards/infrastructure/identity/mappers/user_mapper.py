"""Mapper for User ORM to domain conversion."""

from birdcards.domain.common.value_objects.ids import UserId
from birdcards.domain.identity.entities.user import User
from birdcards.models import User as UserORM


class UserMapper:
    """Mapper for User ORM to domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=UserId(orm_model.id),
            email=orm_model.email,
            name=orm_model.name,
            picture=orm_model.picture,
            created_at=orm_model.created_at,
        )

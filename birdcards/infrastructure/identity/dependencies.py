"""FastAPI dependencies for authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from birdcards.core import container
from birdcards.database import DatabaseSession
from birdcards.domain.identity.entities.user import User
from birdcards.domain.identity.exceptions import UserNotFoundError
from birdcards.exceptions import CredentialsException
from birdcards.infrastructure.identity.auth.token_service import verify_access_token

# Tokens are issued by the external login flow; tokenUrl only feeds the docs UI
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")


def get_current_user(token: Annotated[str, Depends(oauth2_scheme)], db: DatabaseSession) -> User:
    """
    Get the current authenticated user from the access token.

    Args:
        token: JWT access token from Authorization header
        db: Database session

    Returns:
        User domain entity

    Raises:
        CredentialsException: If token is invalid or user not found
    """
    user_id = verify_access_token(token)
    if user_id is None:
        raise CredentialsException

    try:
        container.db.override(db)
        use_case = container.get_user_by_id_use_case()
    finally:
        container.db.reset_override()

    try:
        return use_case.get_user(user_id)
    except UserNotFoundError:
        raise CredentialsException from None


CurrentUser = Annotated[User, Depends(get_current_user)]

"""FastAPI dependencies for authentication."""

from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from quizbank.core.app_exceptions import AuthenticationError
from quizbank.core.security import verify_access_token
from quizbank.db.session import get_db
from quizbank.models.user import User


def get_current_user(
    authorization: Annotated[str | None, Header()] = None,
    db: Session = Depends(get_db),
) -> User:
    """Dependency to get the current authenticated user from JWT token."""
    if not authorization:
        raise AuthenticationError("Authorization header missing")

    # Extract token from "Bearer <token>"
    try:
        scheme, token = authorization.split()
        if scheme.lower() != "bearer":
            raise ValueError("Invalid authorization scheme")
    except ValueError:
        raise AuthenticationError(
            "Invalid authorization header format. Expected: Bearer <token>"
        ) from None

    try:
        payload = verify_access_token(token)
        user_id = int(payload["sub"])
    except Exception as e:
        raise AuthenticationError(f"Invalid or expired token: {e}") from e

    user = db.get(User, user_id)
    if user is None or user.deleted_at is not None:
        raise AuthenticationError("User not found")

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
DbSession = Annotated[Session, Depends(get_db)]

"""User service: registration, login and profile maintenance."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from quizbank.core.app_exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundOrUnauthorizedError,
)
from quizbank.core.logging import get_logger
from quizbank.core.security import hash_password, verify_password
from quizbank.models.user import User

logger = get_logger(__name__)


def _find_by(db: Session, **criteria) -> User | None:
    stmt = select(User).filter_by(**criteria).where(User.active())
    return db.scalar(stmt)


def register_user(db: Session, username: str, password: str, email: str | None = None) -> User:
    """Create a user. Username and email must be unused."""
    if _find_by(db, username=username):
        raise ConflictError("Username is already taken")
    if email and _find_by(db, email=email):
        raise ConflictError("Email is already registered")

    user = User(username=username, email=email or None, password_hash=hash_password(password))
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info("user_registered", extra={"user_id": user.id})
    return user


def authenticate_user(db: Session, username: str, password: str) -> User:
    user = _find_by(db, username=username)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("login_failed", extra={"username": username})
        raise AuthenticationError("Invalid username or password")
    return user


def get_user(db: Session, user_id: int) -> User:
    user = _find_by(db, id=user_id)
    if user is None:
        raise NotFoundOrUnauthorizedError("User not found")
    return user


def update_user(db: Session, user_id: int, email: str | None) -> User:
    """Change the user's email (None clears it)."""
    user = get_user(db, user_id)
    if email and email != user.email:
        other = _find_by(db, email=email)
        if other is not None and other.id != user.id:
            raise ConflictError("Email is already registered")
    user.email = email or None
    db.commit()
    db.refresh(user)
    return user


def change_password(db: Session, user_id: int, old_password: str, new_password: str) -> None:
    user = get_user(db, user_id)
    if not verify_password(old_password, user.password_hash):
        raise AuthenticationError("Old password is incorrect")
    user.password_hash = hash_password(new_password)
    db.commit()

    logger.info("password_changed", extra={"user_id": user_id})

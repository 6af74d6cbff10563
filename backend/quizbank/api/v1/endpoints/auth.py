"""Registration, login and profile endpoints."""

from fastapi import APIRouter, status

from quizbank.core.dependencies import CurrentUser, DbSession
from quizbank.core.security import create_access_token
from quizbank.schemas.auth import (
    LoginRequest,
    PasswordChangeRequest,
    RegisterRequest,
    TokenResponse,
    UserOut,
    UserUpdateRequest,
)
from quizbank.services import users as user_service

router = APIRouter()


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: DbSession):
    """Create an account. 409 when the username or email is taken."""
    return user_service.register_user(db, payload.username, payload.password, payload.email)


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, db: DbSession):
    user = user_service.authenticate_user(db, payload.username, payload.password)
    return TokenResponse(
        access_token=create_access_token(user.id),
        user=UserOut.model_validate(user),
    )


@router.get("/me", response_model=UserOut)
def me(current_user: CurrentUser):
    return current_user


@router.put("/me", response_model=UserOut)
def update_me(payload: UserUpdateRequest, db: DbSession, current_user: CurrentUser):
    return user_service.update_user(db, current_user.id, payload.email)


@router.post("/me/password", status_code=status.HTTP_204_NO_CONTENT)
def change_password(payload: PasswordChangeRequest, db: DbSession, current_user: CurrentUser):
    user_service.change_password(db, current_user.id, payload.old_password, payload.new_password)
    return None

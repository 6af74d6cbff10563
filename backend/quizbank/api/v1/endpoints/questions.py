"""Question endpoints: per-bank listing, creation and import; per-id CRUD."""

from typing import Any

from fastapi import APIRouter, Body, status

from quizbank.core.dependencies import CurrentUser, DbSession
from quizbank.schemas.question import ImportResult, QuestionIn, QuestionOut
from quizbank.services import questions as question_service

router = APIRouter()


@router.get("/banks/{bank_id}/questions", response_model=list[QuestionOut])
def list_bank_questions(bank_id: int, db: DbSession, current_user: CurrentUser):
    return question_service.list_bank_questions(db, bank_id, current_user.id)


@router.post(
    "/banks/{bank_id}/questions",
    response_model=QuestionOut,
    status_code=status.HTTP_201_CREATED,
)
def create_question(bank_id: int, payload: QuestionIn, db: DbSession, current_user: CurrentUser):
    return question_service.create_question(db, bank_id, current_user.id, payload)


@router.post("/banks/{bank_id}/questions/import", response_model=ImportResult)
def import_questions(
    bank_id: int, payload: list[QuestionIn], db: DbSession, current_user: CurrentUser
):
    """Import a batch of questions; nothing is stored if any item fails."""
    count = question_service.import_questions(db, bank_id, current_user.id, payload)
    return ImportResult(count=count)


@router.get("/questions/{question_id}", response_model=QuestionOut)
def get_question(question_id: int, db: DbSession, current_user: CurrentUser):
    return question_service.get_question(db, question_id, current_user.id)


@router.put("/questions/{question_id}", response_model=QuestionOut)
def update_question(
    question_id: int,
    db: DbSession,
    current_user: CurrentUser,
    updates: dict[str, Any] = Body(...),
):
    """Partial update; only content fields may change."""
    return question_service.update_question(db, question_id, current_user.id, updates)


@router.delete("/questions/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_question(question_id: int, db: DbSession, current_user: CurrentUser):
    question_service.delete_question(db, question_id, current_user.id)
    return None

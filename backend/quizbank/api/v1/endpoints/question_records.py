"""Answer record endpoints for the current user."""

from fastapi import APIRouter, status

from quizbank.core.dependencies import CurrentUser, DbSession
from quizbank.schemas.question import QuestionOut
from quizbank.schemas.question_record import (
    ClearResult,
    QuestionRecordCreate,
    QuestionRecordOut,
    RecordStats,
)
from quizbank.services import question_records as record_service

router = APIRouter()


@router.post("", response_model=QuestionRecordOut, status_code=status.HTTP_201_CREATED)
def add_record(payload: QuestionRecordCreate, db: DbSession, current_user: CurrentUser):
    return record_service.add_record(
        db,
        current_user.id,
        payload.question_id,
        payload.user_answer,
        payload.is_correct,
        answered_at=payload.answered_at,
    )


@router.get("", response_model=list[QuestionRecordOut])
def list_records(db: DbSession, current_user: CurrentUser, is_correct: bool | None = None):
    """Most recent first; filter with ?is_correct=true|false."""
    return record_service.list_records(db, current_user.id, is_correct)


@router.get("/wrong-questions", response_model=list[QuestionOut])
def list_wrong_questions(db: DbSession, current_user: CurrentUser):
    return record_service.list_wrong_questions(db, current_user.id)


@router.get("/stats", response_model=RecordStats)
def record_stats(db: DbSession, current_user: CurrentUser, bank_id: int | None = None):
    return record_service.record_stats(db, current_user.id, bank_id)


@router.delete("", response_model=ClearResult)
def clear_records(db: DbSession, current_user: CurrentUser, bank_id: int | None = None):
    """Clear all records, or only those for questions in ?bank_id=."""
    return ClearResult(deleted=record_service.clear_records(db, current_user.id, bank_id))


@router.delete("/wrong/{question_id}", response_model=ClearResult)
def remove_wrong_record(question_id: int, db: DbSession, current_user: CurrentUser):
    deleted = record_service.remove_wrong_record(db, current_user.id, question_id)
    return ClearResult(deleted=deleted)

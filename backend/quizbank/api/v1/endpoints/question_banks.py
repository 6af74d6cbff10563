"""Question bank endpoints. Every route is scoped to the current user."""

from fastapi import APIRouter, status

from quizbank.core.dependencies import CurrentUser, DbSession
from quizbank.schemas.question_bank import (
    QuestionBankCreate,
    QuestionBankOut,
    QuestionBankUpdate,
    QuestionBankWithQuestions,
)
from quizbank.services import question_banks as bank_service

router = APIRouter()


@router.get("", response_model=list[QuestionBankOut])
def list_banks(db: DbSession, current_user: CurrentUser):
    return bank_service.list_banks(db, current_user.id)


@router.post("", response_model=QuestionBankOut, status_code=status.HTTP_201_CREATED)
def create_bank(payload: QuestionBankCreate, db: DbSession, current_user: CurrentUser):
    return bank_service.create_bank(db, current_user.id, payload.name, payload.description)


@router.get("/{bank_id}", response_model=QuestionBankWithQuestions)
def get_bank(bank_id: int, db: DbSession, current_user: CurrentUser):
    """Bank with all its questions."""
    bank, questions = bank_service.get_bank_with_questions(db, bank_id, current_user.id)
    return QuestionBankWithQuestions(
        **QuestionBankOut.model_validate(bank).model_dump(), questions=questions
    )


@router.put("/{bank_id}", response_model=QuestionBankOut)
def update_bank(bank_id: int, payload: QuestionBankUpdate, db: DbSession, current_user: CurrentUser):
    return bank_service.update_bank(
        db, bank_id, current_user.id, payload.name, payload.description
    )


@router.delete("/{bank_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_bank(bank_id: int, db: DbSession, current_user: CurrentUser):
    """Delete a bank together with its questions."""
    bank_service.delete_bank(db, bank_id, current_user.id)
    return None

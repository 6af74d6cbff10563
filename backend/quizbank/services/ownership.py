"""Ownership guard: every access proves user -> bank -> question first.

All lookups join the chain in one query and skip soft-deleted rows at every
hop. A miss never says whether the entity exists for someone else; callers
only see NotFoundOrUnauthorizedError.
"""

from sqlalchemy import Select, exists, select
from sqlalchemy.orm import Session

from quizbank.core.app_exceptions import NotFoundOrUnauthorizedError
from quizbank.models.question import Question
from quizbank.models.question_bank import QuestionBank

BANK_NOT_FOUND = "Question bank not found or access denied"
QUESTION_NOT_FOUND = "Question not found or access denied"


def owned_bank_query(bank_id: int, user_id: int) -> Select:
    return select(QuestionBank).where(
        QuestionBank.id == bank_id,
        QuestionBank.user_id == user_id,
        QuestionBank.active(),
    )


def owned_question_query(question_id: int, user_id: int) -> Select:
    return (
        select(Question)
        .join(QuestionBank, Question.bank_id == QuestionBank.id)
        .where(
            Question.id == question_id,
            QuestionBank.user_id == user_id,
            Question.active(),
            QuestionBank.active(),
        )
    )


def require_bank(db: Session, bank_id: int, user_id: int) -> QuestionBank:
    """Return the bank if user_id owns it, else raise NotFoundOrUnauthorizedError."""
    bank = db.scalar(owned_bank_query(bank_id, user_id))
    if bank is None:
        raise NotFoundOrUnauthorizedError(BANK_NOT_FOUND, details={"bank_id": bank_id})
    return bank


def require_question(db: Session, question_id: int, user_id: int) -> Question:
    """Return the question if its bank is owned by user_id."""
    question = db.scalar(owned_question_query(question_id, user_id))
    if question is None:
        raise NotFoundOrUnauthorizedError(
            QUESTION_NOT_FOUND, details={"question_id": question_id}
        )
    return question


def question_exists(db: Session, question_id: int) -> bool:
    return bool(
        db.scalar(select(exists().where(Question.id == question_id, Question.active())))
    )


def owns_question(db: Session, question_id: int, user_id: int) -> bool:
    return bool(db.scalar(select(owned_question_query(question_id, user_id).exists())))

"""Answer record service: attempts, wrong-question views and clearing."""

from datetime import datetime

from sqlalchemy import case, func, select, update
from sqlalchemy.orm import Session

from quizbank.core.app_exceptions import NotFoundOrUnauthorizedError
from quizbank.core.logging import get_logger
from quizbank.db.base import utcnow
from quizbank.models.question import Question
from quizbank.models.question_record import QuestionRecord
from quizbank.schemas.question import QuestionOut
from quizbank.schemas.question_record import RecordStats
from quizbank.services.ownership import QUESTION_NOT_FOUND, owns_question, question_exists
from quizbank.services.question_codec import decode_question, encode_answer

logger = get_logger(__name__)


def add_record(
    db: Session,
    user_id: int,
    question_id: int,
    user_answer: str | list[str],
    is_correct: bool,
    answered_at: datetime | None = None,
) -> QuestionRecord:
    """Record one answer attempt by user_id on a question they own."""
    if not question_exists(db, question_id):
        raise NotFoundOrUnauthorizedError(QUESTION_NOT_FOUND, details={"question_id": question_id})
    if not owns_question(db, question_id, user_id):
        raise NotFoundOrUnauthorizedError(QUESTION_NOT_FOUND, details={"question_id": question_id})

    record = QuestionRecord(
        user_id=user_id,
        question_id=question_id,
        user_answer=encode_answer(user_answer),
        is_correct=bool(is_correct),
        answered_at=answered_at or utcnow(),
    )
    db.add(record)
    db.commit()
    db.refresh(record)

    logger.info(
        "record_added",
        extra={
            "record_id": record.id,
            "user_id": user_id,
            "question_id": question_id,
            "is_correct": record.is_correct,
        },
    )
    return record


def list_records(db: Session, user_id: int, is_correct: bool | None = None) -> list[QuestionRecord]:
    """The user's records, most recent first, optionally filtered by correctness."""
    stmt = select(QuestionRecord).where(
        QuestionRecord.user_id == user_id, QuestionRecord.active()
    )
    if is_correct is not None:
        stmt = stmt.where(QuestionRecord.is_correct == is_correct)
    stmt = stmt.order_by(QuestionRecord.answered_at.desc(), QuestionRecord.id.desc())
    return list(db.scalars(stmt).all())


def list_wrong_questions(db: Session, user_id: int) -> list[QuestionOut]:
    """Distinct questions with at least one incorrect attempt by user_id."""
    stmt = (
        select(Question)
        .join(QuestionRecord, QuestionRecord.question_id == Question.id)
        .where(
            QuestionRecord.user_id == user_id,
            QuestionRecord.is_correct.is_(False),
            QuestionRecord.active(),
            Question.active(),
        )
        .distinct()
        .order_by(Question.id)
    )
    return [decode_question(q) for q in db.scalars(stmt).all()]


def _bank_question_ids(bank_id: int):
    return select(Question.id).where(Question.bank_id == bank_id)


def clear_records(db: Session, user_id: int, bank_id: int | None = None) -> int:
    """Delete the user's records, optionally only those for questions in bank_id.

    Returns the number of records removed.
    """
    stmt = update(QuestionRecord).where(
        QuestionRecord.user_id == user_id, QuestionRecord.active()
    )
    if bank_id is not None:
        stmt = stmt.where(QuestionRecord.question_id.in_(_bank_question_ids(bank_id)))

    result = db.execute(
        stmt.values(deleted_at=utcnow()).execution_options(synchronize_session=False)
    )
    db.commit()

    logger.info(
        "records_cleared",
        extra={"user_id": user_id, "bank_id": bank_id, "deleted": result.rowcount},
    )
    return result.rowcount


def remove_wrong_record(db: Session, user_id: int, question_id: int) -> int:
    """Drop a question from the wrong-answer list; correct attempts are kept."""
    result = db.execute(
        update(QuestionRecord)
        .where(
            QuestionRecord.user_id == user_id,
            QuestionRecord.question_id == question_id,
            QuestionRecord.is_correct.is_(False),
            QuestionRecord.active(),
        )
        .values(deleted_at=utcnow())
        .execution_options(synchronize_session=False)
    )
    db.commit()

    logger.info(
        "wrong_record_removed",
        extra={"user_id": user_id, "question_id": question_id, "deleted": result.rowcount},
    )
    return result.rowcount


def record_stats(db: Session, user_id: int, bank_id: int | None = None) -> RecordStats:
    """Total / correct / wrong counts and accuracy over the user's live records."""
    stmt = select(
        func.count(QuestionRecord.id),
        func.coalesce(func.sum(case((QuestionRecord.is_correct.is_(True), 1), else_=0)), 0),
    ).where(QuestionRecord.user_id == user_id, QuestionRecord.active())
    if bank_id is not None:
        stmt = stmt.where(QuestionRecord.question_id.in_(_bank_question_ids(bank_id)))

    total, correct = db.execute(stmt).one()
    total, correct = int(total or 0), int(correct or 0)
    return RecordStats(
        total=total,
        correct=correct,
        wrong=total - correct,
        accuracy=round(correct / total, 4) if total else 0.0,
    )

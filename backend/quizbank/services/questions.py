"""Question service: CRUD and batch import inside an owned bank."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from quizbank.core.app_exceptions import ValidationError
from quizbank.core.logging import get_logger
from quizbank.db.base import utcnow
from quizbank.db.session import transaction
from quizbank.models.question import Question
from quizbank.schemas.question import QuestionIn, QuestionOut
from quizbank.services.ownership import require_bank, require_question
from quizbank.services.question_codec import decode_question, encode_question, encode_updates

logger = get_logger(__name__)

# Keys a caller may change through update_question. id, bank_id and the
# timestamps are immutable from the outside.
UPDATABLE_FIELDS = frozenset({"type", "content", "options", "answer", "explanation", "tags"})


def create_question(db: Session, bank_id: int, owner_id: int, data: QuestionIn) -> QuestionOut:
    """Create a question in bank_id. Any bank_id carried by data is ignored."""
    bank = require_bank(db, bank_id, owner_id)

    question = Question(bank_id=bank.id, **encode_question(data))
    db.add(question)
    db.commit()
    db.refresh(question)

    logger.info(
        "question_created",
        extra={"question_id": question.id, "bank_id": bank.id, "user_id": owner_id},
    )
    return decode_question(question)


def get_question(db: Session, question_id: int, owner_id: int) -> QuestionOut:
    """Fetch a question through the ownership chain."""
    return decode_question(require_question(db, question_id, owner_id))


def update_question(
    db: Session, question_id: int, owner_id: int, updates: dict[str, Any]
) -> QuestionOut:
    """Apply a partial update and return the fresh state.

    Only UPDATABLE_FIELDS are accepted; anything else is rejected rather than
    silently written.
    """
    question = require_question(db, question_id, owner_id)

    rejected = sorted(set(updates) - UPDATABLE_FIELDS)
    if rejected:
        raise ValidationError(
            "Fields cannot be updated: " + ", ".join(rejected),
            details={"rejected": rejected, "allowed": sorted(UPDATABLE_FIELDS)},
        )

    values = encode_updates(updates)

    for column, value in values.items():
        setattr(question, column, value)
    db.commit()

    logger.info(
        "question_updated",
        extra={"question_id": question_id, "user_id": owner_id, "fields": sorted(updates)},
    )
    db.expire(question)
    return get_question(db, question_id, owner_id)


def delete_question(db: Session, question_id: int, owner_id: int) -> None:
    question = require_question(db, question_id, owner_id)
    question.deleted_at = utcnow()
    db.commit()

    logger.info("question_deleted", extra={"question_id": question_id, "user_id": owner_id})


def list_bank_questions(db: Session, bank_id: int, owner_id: int) -> list[QuestionOut]:
    """All live questions of an owned bank, oldest first."""
    bank = require_bank(db, bank_id, owner_id)
    stmt = (
        select(Question)
        .where(Question.bank_id == bank.id, Question.active())
        .order_by(Question.id)
    )
    return [decode_question(q) for q in db.scalars(stmt).all()]


def import_questions(db: Session, bank_id: int, owner_id: int, items: list[QuestionIn]) -> int:
    """Insert a batch of questions into bank_id, all or nothing.

    Rows are inserted one by one inside a single transaction. If any insert
    fails the whole batch is rolled back and TransactionAbortedError is
    raised; no partial import is ever visible.
    """
    bank = require_bank(db, bank_id, owner_id)
    if not items:
        return 0

    imported = 0
    with transaction(db, "import_questions"):
        for item in items:
            db.add(Question(bank_id=bank.id, **encode_question(item)))
            db.flush()
            imported += 1

    logger.info(
        "questions_imported",
        extra={"bank_id": bank.id, "user_id": owner_id, "count": imported},
    )
    return imported

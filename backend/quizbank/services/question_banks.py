"""Question bank service: CRUD scoped to the owning user."""

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from quizbank.core.app_exceptions import ValidationError
from quizbank.core.logging import get_logger
from quizbank.db.base import utcnow
from quizbank.db.session import transaction
from quizbank.models.question import Question
from quizbank.models.question_bank import QuestionBank
from quizbank.schemas.question import QuestionOut
from quizbank.services.ownership import require_bank
from quizbank.services.question_codec import decode_question

logger = get_logger(__name__)


def _clean_name(name: str | None) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Bank name is required")
    return name


def create_bank(db: Session, owner_id: int, name: str, description: str = "") -> QuestionBank:
    """Create a bank owned by owner_id."""
    bank = QuestionBank(user_id=owner_id, name=_clean_name(name), description=description or "")
    db.add(bank)
    db.commit()
    db.refresh(bank)

    logger.info("bank_created", extra={"bank_id": bank.id, "user_id": owner_id})
    return bank


def list_banks(db: Session, owner_id: int) -> list[QuestionBank]:
    """All live banks of owner_id in insertion order."""
    stmt = (
        select(QuestionBank)
        .where(QuestionBank.user_id == owner_id, QuestionBank.active())
        .order_by(QuestionBank.id)
    )
    return list(db.scalars(stmt).all())


def get_bank_with_questions(
    db: Session, bank_id: int, owner_id: int
) -> tuple[QuestionBank, list[QuestionOut]]:
    """Bank plus its decoded questions; NotFound unless owner_id owns it."""
    bank = require_bank(db, bank_id, owner_id)
    return bank, [decode_question(q) for q in bank.questions]


def update_bank(
    db: Session, bank_id: int, owner_id: int, name: str, description: str
) -> QuestionBank:
    """Overwrite name and description. An empty description is kept as-is."""
    bank = require_bank(db, bank_id, owner_id)
    bank.name = _clean_name(name)
    bank.description = description or ""
    db.commit()
    db.refresh(bank)

    logger.info("bank_updated", extra={"bank_id": bank.id, "user_id": owner_id})
    return bank


def delete_bank(db: Session, bank_id: int, owner_id: int) -> None:
    """Delete a bank and all its questions atomically.

    Answer records that reference the deleted questions are kept as history.
    """
    bank = require_bank(db, bank_id, owner_id)
    now = utcnow()

    with transaction(db, "delete_bank"):
        result = db.execute(
            update(Question)
            .where(Question.bank_id == bank.id, Question.active())
            .values(deleted_at=now)
            .execution_options(synchronize_session=False)
        )
        bank.deleted_at = now
        db.flush()

    logger.info(
        "bank_deleted",
        extra={"bank_id": bank_id, "user_id": owner_id, "questions_deleted": result.rowcount},
    )

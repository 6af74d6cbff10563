"""Tests for the question bank service."""

import pytest
from sqlalchemy import event, select
from sqlalchemy.exc import OperationalError

from quizbank.core.app_exceptions import (
    NotFoundOrUnauthorizedError,
    TransactionAbortedError,
    ValidationError,
)
from quizbank.models.question import Question
from quizbank.models.question_bank import QuestionBank
from quizbank.services.question_banks import (
    create_bank,
    delete_bank,
    get_bank_with_questions,
    list_banks,
    update_bank,
)
from quizbank.services.question_records import add_record, list_records
from quizbank.services.questions import create_question, import_questions
from tests.helpers.seed import short_answer, single_choice


def _live_questions(db, bank_id):
    stmt = select(Question).where(Question.bank_id == bank_id, Question.active())
    return db.scalars(stmt).all()


def test_create_bank_sets_owner_and_timestamps(db, test_user):
    bank = create_bank(db, test_user.id, "  History ", "Dates and wars")

    assert bank.id is not None
    assert bank.user_id == test_user.id
    assert bank.name == "History"
    assert bank.description == "Dates and wars"
    assert bank.created_at is not None
    assert bank.updated_at is not None


def test_create_bank_requires_name(db, test_user):
    with pytest.raises(ValidationError):
        create_bank(db, test_user.id, "   ")


def test_list_banks_only_returns_own_banks_in_insertion_order(db, test_user, other_user):
    first = create_bank(db, test_user.id, "First")
    create_bank(db, other_user.id, "Not mine")
    second = create_bank(db, test_user.id, "Second")

    banks = list_banks(db, test_user.id)

    assert [b.id for b in banks] == [first.id, second.id]


def test_get_bank_with_questions_includes_decoded_questions(db, test_user, bank):
    create_question(db, bank.id, test_user.id, single_choice())
    create_question(db, bank.id, test_user.id, short_answer())

    loaded, questions = get_bank_with_questions(db, bank.id, test_user.id)

    assert loaded.id == bank.id
    assert len(questions) == 2
    assert [o.id for o in questions[0].options] == ["a", "b"]
    assert questions[0].tags == ["geo"]


def test_get_bank_with_questions_hides_other_users_bank(db, test_user, other_user, bank):
    with pytest.raises(NotFoundOrUnauthorizedError) as exc_info:
        get_bank_with_questions(db, bank.id, other_user.id)
    assert exc_info.value.status_code == 404

    # Indistinguishable from a bank that does not exist at all
    with pytest.raises(NotFoundOrUnauthorizedError) as missing:
        get_bank_with_questions(db, 999_999, other_user.id)
    assert missing.value.message == exc_info.value.message


def test_update_bank_overwrites_both_fields(db, test_user):
    bank = create_bank(db, test_user.id, "Old", "Some description")

    updated = update_bank(db, bank.id, test_user.id, "New", "")

    assert updated.name == "New"
    assert updated.description == ""


def test_update_bank_rejects_non_owner(db, other_user, bank):
    with pytest.raises(NotFoundOrUnauthorizedError):
        update_bank(db, bank.id, other_user.id, "Hijacked", "")

    db.refresh(bank)
    assert bank.name == "Geography"


def test_delete_bank_removes_bank_and_questions(db, test_user, bank):
    import_questions(db, bank.id, test_user.id, [single_choice(), short_answer()])
    keep = create_bank(db, test_user.id, "Keep")
    create_question(db, keep.id, test_user.id, short_answer())

    delete_bank(db, bank.id, test_user.id)

    assert list_banks(db, test_user.id) == [keep]
    assert _live_questions(db, bank.id) == []
    assert len(_live_questions(db, keep.id)) == 1
    with pytest.raises(NotFoundOrUnauthorizedError):
        get_bank_with_questions(db, bank.id, test_user.id)


def test_delete_bank_keeps_answer_records(db, test_user, bank):
    question = create_question(db, bank.id, test_user.id, short_answer())
    add_record(db, test_user.id, question.id, "Lyon", False)

    delete_bank(db, bank.id, test_user.id)

    assert len(list_records(db, test_user.id)) == 1


def test_delete_bank_rejects_non_owner(db, test_user, other_user, bank):
    create_question(db, bank.id, test_user.id, short_answer())

    with pytest.raises(NotFoundOrUnauthorizedError):
        delete_bank(db, bank.id, other_user.id)

    assert len(_live_questions(db, bank.id)) == 1


@pytest.mark.parametrize(
    "failure, expected",
    [
        (OperationalError("UPDATE question_banks", {}, Exception("disk I/O error")), TransactionAbortedError),
        (RuntimeError("process interrupted"), RuntimeError),
    ],
)
def test_delete_bank_failure_midway_rolls_back_everything(db, test_user, bank, failure, expected):
    import_questions(db, bank.id, test_user.id, [single_choice(), short_answer()])

    # Questions are already marked deleted when the bank row is flushed.
    def fail_on_bank_update(mapper, connection, target):
        raise failure

    event.listen(QuestionBank, "before_update", fail_on_bank_update)
    try:
        with pytest.raises(expected):
            delete_bank(db, bank.id, test_user.id)
    finally:
        event.remove(QuestionBank, "before_update", fail_on_bank_update)

    assert [b.id for b in list_banks(db, test_user.id)] == [bank.id]
    assert len(_live_questions(db, bank.id)) == 2
    _, questions = get_bank_with_questions(db, bank.id, test_user.id)
    assert len(questions) == 2

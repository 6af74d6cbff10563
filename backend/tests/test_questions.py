"""Tests for the question service."""

import pytest
from sqlalchemy import func, select

from quizbank.core.app_exceptions import (
    NotFoundOrUnauthorizedError,
    TransactionAbortedError,
    ValidationError,
)
from quizbank.models.question import Question, QuestionType
from quizbank.schemas.question import Option, QuestionIn
from quizbank.services.questions import (
    create_question,
    delete_question,
    get_question,
    import_questions,
    list_bank_questions,
    update_question,
)
from tests.helpers.seed import create_test_bank, short_answer, single_choice


def _count_rows(db, bank_id):
    return db.scalar(select(func.count(Question.id)).where(Question.bank_id == bank_id))


def test_create_and_read_back_structured_fields(db, test_user, bank):
    created = create_question(db, bank.id, test_user.id, single_choice())

    fetched = get_question(db, created.id, test_user.id)

    assert fetched.options == [Option(id="a", content="Yes"), Option(id="b", content="No")]
    assert fetched.tags == ["geo"]
    assert fetched.type == QuestionType.SINGLE_CHOICE
    assert fetched.answer == "a"


def test_create_question_stores_serialized_columns(db, test_user, bank):
    created = create_question(db, bank.id, test_user.id, single_choice())

    row = db.get(Question, created.id)
    assert row.options_json == '[{"id":"a","content":"Yes"},{"id":"b","content":"No"}]'
    assert row.tags_json == '["geo"]'


def test_create_question_ignores_caller_bank_id(db, test_user, other_user, bank):
    foreign_bank = create_test_bank(db, other_user, name="Foreign")

    created = create_question(db, bank.id, test_user.id, single_choice(bank_id=foreign_bank.id))

    assert created.bank_id == bank.id
    assert _count_rows(db, foreign_bank.id) == 0


def test_create_question_in_foreign_bank_is_not_found(db, other_user, bank):
    with pytest.raises(NotFoundOrUnauthorizedError):
        create_question(db, bank.id, other_user.id, short_answer())
    assert _count_rows(db, bank.id) == 0


def test_multiple_choice_answer_is_json_encoded(db, test_user, bank):
    data = single_choice(type=QuestionType.MULTIPLE_CHOICE, answer=["a", "b"])

    created = create_question(db, bank.id, test_user.id, data)

    assert created.answer == '["a","b"]'


def test_empty_lists_are_not_serialized(db, test_user, bank):
    created = create_question(db, bank.id, test_user.id, short_answer())

    row = db.get(Question, created.id)
    assert row.options_json is None
    assert row.tags_json is None
    assert created.options == []
    assert created.tags == []


def test_get_question_requires_ownership_chain(db, test_user, other_user, bank):
    created = create_question(db, bank.id, test_user.id, short_answer())

    with pytest.raises(NotFoundOrUnauthorizedError):
        get_question(db, created.id, other_user.id)


def test_update_question_reserializes_structured_fields(db, test_user, bank):
    created = create_question(db, bank.id, test_user.id, single_choice())

    updated = update_question(
        db,
        created.id,
        test_user.id,
        {
            "options": [{"id": "x", "content": "Maybe"}],
            "tags": ["geo", "easy"],
            "content": "Is the earth flat?",
        },
    )

    assert updated.options == [Option(id="x", content="Maybe")]
    assert updated.tags == ["geo", "easy"]
    assert updated.content == "Is the earth flat?"
    row = db.get(Question, created.id)
    assert row.options_json == '[{"id":"x","content":"Maybe"}]'
    assert row.tags_json == '["geo","easy"]'


def test_update_question_clearing_tags_clears_stored_text(db, test_user, bank):
    created = create_question(db, bank.id, test_user.id, single_choice())

    updated = update_question(db, created.id, test_user.id, {"tags": []})

    assert updated.tags == []
    assert db.get(Question, created.id).tags_json is None


@pytest.mark.parametrize("field", ["bank_id", "id", "created_at", "options_json"])
def test_update_question_rejects_immutable_fields(db, test_user, bank, field):
    created = create_question(db, bank.id, test_user.id, single_choice())

    with pytest.raises(ValidationError) as exc_info:
        update_question(db, created.id, test_user.id, {field: 1, "content": "changed"})
    assert field in exc_info.value.details["rejected"]

    assert get_question(db, created.id, test_user.id).content == "Is the earth round?"


def test_update_question_rejects_unknown_type(db, test_user, bank):
    created = create_question(db, bank.id, test_user.id, short_answer())

    with pytest.raises(ValidationError):
        update_question(db, created.id, test_user.id, {"type": "essay"})


@pytest.mark.parametrize(
    "updates",
    [
        {"tags": [1, 2]},
        {"tags": ["geo", None]},
        {"options": [{"id": "a"}]},
        {"options": [{"id": 1, "content": "Yes"}]},
        {"content": 123},
        {"content": "   "},
        {"content": None},
        {"explanation": None},
        {"answer": 3},
        {"type": None},
        {"tags": ["hard"], "content": 123},
    ],
)
def test_update_question_rejects_mistyped_values(db, test_user, bank, updates):
    created = create_question(db, bank.id, test_user.id, single_choice())

    with pytest.raises(ValidationError):
        update_question(db, created.id, test_user.id, updates)

    db.rollback()
    row = db.get(Question, created.id)
    assert row.tags_json == '["geo"]'
    assert row.explanation == "Satellite photos."
    fetched = get_question(db, created.id, test_user.id)
    assert fetched.content == "Is the earth round?"
    assert fetched.tags == ["geo"]
    assert fetched.options == [Option(id="a", content="Yes"), Option(id="b", content="No")]


def test_update_question_null_clears_structured_fields(db, test_user, bank):
    created = create_question(db, bank.id, test_user.id, single_choice())

    updated = update_question(db, created.id, test_user.id, {"tags": None, "options": None})

    assert updated.tags == []
    assert updated.options == []
    row = db.get(Question, created.id)
    assert row.tags_json is None
    assert row.options_json is None


def test_update_question_by_non_owner(db, test_user, other_user, bank):
    created = create_question(db, bank.id, test_user.id, short_answer())

    with pytest.raises(NotFoundOrUnauthorizedError):
        update_question(db, created.id, other_user.id, {"content": "pwned"})


def test_delete_question(db, test_user, other_user, bank):
    created = create_question(db, bank.id, test_user.id, short_answer())

    with pytest.raises(NotFoundOrUnauthorizedError):
        delete_question(db, created.id, other_user.id)

    delete_question(db, created.id, test_user.id)

    with pytest.raises(NotFoundOrUnauthorizedError):
        get_question(db, created.id, test_user.id)
    assert list_bank_questions(db, bank.id, test_user.id) == []


def test_list_bank_questions(db, test_user, other_user, bank):
    first = create_question(db, bank.id, test_user.id, short_answer("Q1"))
    second = create_question(db, bank.id, test_user.id, short_answer("Q2"))

    questions = list_bank_questions(db, bank.id, test_user.id)

    assert [q.id for q in questions] == [first.id, second.id]
    with pytest.raises(NotFoundOrUnauthorizedError):
        list_bank_questions(db, bank.id, other_user.id)


def test_import_questions_inserts_all(db, test_user, bank):
    items = [single_choice(f"Q{i}") for i in range(5)]

    count = import_questions(db, bank.id, test_user.id, items)

    assert count == 5
    assert _count_rows(db, bank.id) == 5
    assert all(q.tags == ["geo"] for q in list_bank_questions(db, bank.id, test_user.id))


def test_import_questions_empty_batch(db, test_user, bank):
    assert import_questions(db, bank.id, test_user.id, []) == 0


def test_import_questions_rolls_back_whole_batch_on_failure(db, test_user, bank):
    broken = QuestionIn.model_construct(
        type=QuestionType.SHORT_ANSWER, content=None, answer="x", options=[], tags=[]
    )
    items = [short_answer("Q1"), short_answer("Q2"), broken, short_answer("Q4")]

    with pytest.raises(TransactionAbortedError) as exc_info:
        import_questions(db, bank.id, test_user.id, items)

    assert exc_info.value.details == {"operation": "import_questions"}
    assert _count_rows(db, bank.id) == 0
    assert list_bank_questions(db, bank.id, test_user.id) == []


def test_import_questions_into_foreign_bank(db, other_user, bank):
    with pytest.raises(NotFoundOrUnauthorizedError):
        import_questions(db, bank.id, other_user.id, [short_answer()])
    assert _count_rows(db, bank.id) == 0

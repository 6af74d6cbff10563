"""Encode/decode between structured question fields and their stored text.

options and tags are persisted as JSON text. These are plain functions with
no session access; the question service calls them explicitly around every
write and read.

An empty list is stored as NULL, never as "[]", and NULL reads back as an
empty list. Callers cannot tell "absent" from "empty" after a reload.
"""

import json
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from quizbank.core.app_exceptions import ValidationError
from quizbank.models.question import Question, QuestionType
from quizbank.schemas.question import Option, QuestionIn, QuestionOut, QuestionUpdate

_options_adapter = TypeAdapter(list[Option])
_tags_adapter = TypeAdapter(list[str])


class QuestionDecodeError(ValueError):
    """Stored JSON for a question column could not be decoded."""


def _dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def encode_options(options: list[Option] | list[dict] | None) -> str | None:
    if not options:
        return None
    return _dumps([Option.model_validate(o).model_dump() for o in options])


def decode_options(text: str | None) -> list[Option]:
    if not text:
        return []
    try:
        return _options_adapter.validate_json(text)
    except PydanticValidationError as e:
        raise QuestionDecodeError(f"Malformed options_json: {e}") from e


def encode_tags(tags: list[str] | None) -> str | None:
    if not tags:
        return None
    return _dumps(list(tags))


def decode_tags(text: str | None) -> list[str]:
    if not text:
        return []
    try:
        return _tags_adapter.validate_json(text)
    except PydanticValidationError as e:
        raise QuestionDecodeError(f"Malformed tags_json: {e}") from e


def encode_answer(answer: str | list[str]) -> str:
    """Multi-select answers become a JSON array string; others stay plain."""
    if isinstance(answer, list):
        return _dumps(answer)
    return answer


def encode_question(data: QuestionIn) -> dict[str, Any]:
    """Column values for a question row (bank_id is not included)."""
    return {
        "type": QuestionType(data.type).value,
        "content": data.content,
        "options_json": encode_options(data.options),
        "answer": encode_answer(data.answer),
        "explanation": data.explanation or "",
        "tags_json": encode_tags(data.tags),
    }


def encode_updates(updates: dict[str, Any]) -> dict[str, Any]:
    """Translate a partial structured update into column values.

    The whole payload is validated against QuestionUpdate first, so nothing
    is returned for a write unless every value would decode again. Structured
    keys (options, tags) are re-serialized so the stored text never goes
    stale.
    """
    try:
        update = QuestionUpdate.model_validate(updates)
    except PydanticValidationError as e:
        raise ValidationError(
            "Invalid question update",
            details=[
                {
                    "field": ".".join(str(loc) for loc in error["loc"]),
                    "issue": error["msg"],
                    "type": error["type"],
                }
                for error in e.errors()
            ],
        ) from e

    values = update.model_dump(exclude_unset=True)
    if "options" in values:
        values["options_json"] = encode_options(values.pop("options"))
    if "tags" in values:
        values["tags_json"] = encode_tags(values.pop("tags"))
    if "answer" in values:
        values["answer"] = encode_answer(values["answer"])
    if "type" in values:
        values["type"] = QuestionType(values["type"]).value
    return values


def decode_question(row: Question) -> QuestionOut:
    """Structured view of a stored question row."""
    return QuestionOut(
        id=row.id,
        bank_id=row.bank_id,
        type=row.type,
        content=row.content,
        options=decode_options(row.options_json),
        answer=row.answer,
        explanation=row.explanation or "",
        tags=decode_tags(row.tags_json),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )

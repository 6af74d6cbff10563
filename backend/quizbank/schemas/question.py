"""Pydantic schemas for questions."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quizbank.models.question import QuestionType


class Option(BaseModel):
    """A choice option: stable id plus display text."""

    id: str
    content: str


class QuestionIn(BaseModel):
    """Question payload for create and import.

    bank_id is accepted for compatibility with exported files but is always
    replaced by the bank the request targets.
    """

    bank_id: int | None = None
    type: QuestionType
    content: str = Field(..., min_length=1)
    options: list[Option] = Field(default_factory=list)
    answer: str | list[str]
    explanation: str = ""
    tags: list[str] = Field(default_factory=list)


class QuestionUpdate(BaseModel):
    """Partial question update.

    Only keys that were sent are applied. options and tags may be null to
    clear them; the other fields may be omitted but never set to null.
    """

    model_config = ConfigDict(extra="forbid")

    type: QuestionType | None = None
    content: str | None = None
    options: list[Option] | None = None
    answer: str | list[str] | None = None
    explanation: str | None = None
    tags: list[str] | None = None

    @field_validator("type", "content", "answer", "explanation")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("Question content cannot be empty")
        return v


class QuestionOut(BaseModel):
    """Question with options and tags in structured form."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    bank_id: int
    type: QuestionType
    content: str
    options: list[Option] = Field(default_factory=list)
    answer: str
    explanation: str = ""
    tags: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class ImportResult(BaseModel):
    """Batch import outcome."""

    count: int

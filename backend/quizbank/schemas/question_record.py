"""Pydantic schemas for answer records."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class QuestionRecordCreate(BaseModel):
    """Answer submission."""

    question_id: int
    user_answer: str | list[str]
    is_correct: bool = False
    answered_at: datetime | None = None


class QuestionRecordOut(BaseModel):
    """Answer record response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    question_id: int
    user_answer: str
    is_correct: bool
    answered_at: datetime
    created_at: datetime


class RecordStats(BaseModel):
    """Aggregate answer statistics for a user (optionally one bank)."""

    total: int = 0
    correct: int = 0
    wrong: int = 0
    accuracy: float = Field(0.0, description="correct / total, 0.0 when no records")


class ClearResult(BaseModel):
    """Number of records removed."""

    deleted: int

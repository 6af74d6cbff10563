"""Pydantic schemas for question banks."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from quizbank.schemas.question import QuestionOut


class QuestionBankCreate(BaseModel):
    """Request to create a bank."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""


class QuestionBankUpdate(BaseModel):
    """Full overwrite of name and description."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""


class QuestionBankOut(BaseModel):
    """Bank response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    description: str
    created_at: datetime
    updated_at: datetime


class QuestionBankWithQuestions(QuestionBankOut):
    """Bank with its (decoded) questions."""

    questions: list[QuestionOut] = Field(default_factory=list)

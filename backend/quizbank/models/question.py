"""Question model."""

from enum import Enum

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from quizbank.db.base import Base, SoftDeleteMixin, TimestampMixin


class QuestionType(str, Enum):
    """Question type enum."""

    SINGLE_CHOICE = "single-choice"
    MULTIPLE_CHOICE = "multiple-choice"
    TRUE_FALSE = "true-false"
    SHORT_ANSWER = "short-answer"
    FILL_IN_BLANK = "fill-in-blank"


class Question(TimestampMixin, SoftDeleteMixin, Base):
    """Question row.

    options and tags are stored as JSON text in options_json / tags_json.
    Use quizbank.services.question_codec to convert to and from the
    structured form; nothing here decodes implicitly.
    """

    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    bank_id = Column(Integer, ForeignKey("question_banks.id"), nullable=False, index=True)
    type = Column(String(32), nullable=False)
    content = Column(Text, nullable=False)
    options_json = Column(Text, nullable=True)
    answer = Column(Text, nullable=False)  # JSON array text for multiple-choice
    explanation = Column(Text, nullable=False, default="")
    tags_json = Column(Text, nullable=True)

    bank = relationship("QuestionBank")

"""Answer record model."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from quizbank.db.base import Base, SoftDeleteMixin, TimestampMixin, utcnow


class QuestionRecord(TimestampMixin, SoftDeleteMixin, Base):
    """One answer attempt. Never updated in place; corrections are new rows."""

    __tablename__ = "question_records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    question_id = Column(Integer, ForeignKey("questions.id"), nullable=False, index=True)
    user_answer = Column(Text, nullable=False)  # JSON array text for multi-select
    is_correct = Column(Boolean, nullable=False, default=False)
    answered_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    question = relationship("Question")

"""Question bank model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from quizbank.db.base import Base, SoftDeleteMixin, TimestampMixin


class QuestionBank(TimestampMixin, SoftDeleteMixin, Base):
    """A named collection of questions owned by one user."""

    __tablename__ = "question_banks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")

    user = relationship("User", back_populates="question_banks")
    # Soft-deleted questions never show up through the relationship
    questions = relationship(
        "Question",
        primaryjoin="and_(QuestionBank.id == Question.bank_id, Question.deleted_at.is_(None))",
        order_by="Question.id",
        viewonly=True,
    )

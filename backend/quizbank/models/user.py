"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from quizbank.db.base import Base, SoftDeleteMixin, TimestampMixin


class User(TimestampMixin, SoftDeleteMixin, Base):
    """User model. Lifecycle is owned by the auth layer; never deleted here."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(64), unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    email = Column(String(255), unique=True, nullable=True)

    question_banks = relationship("QuestionBank", back_populates="user")

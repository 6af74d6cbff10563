"""Database models."""

from quizbank.models.question import Question, QuestionType
from quizbank.models.question_bank import QuestionBank
from quizbank.models.question_record import QuestionRecord
from quizbank.models.user import User

__all__ = [
    "User",
    "QuestionBank",
    "Question",
    "QuestionType",
    "QuestionRecord",
]

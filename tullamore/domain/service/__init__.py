"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .question_service import QuestionService
from .tag_service import TagService
from .user_service import UserService

__all__ = [
    "AnswerService",
    "QuestionService",
    "Service",
    "TagService",
    "UserService",
]

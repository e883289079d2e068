"""Repository interfaces for Tullamore domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from tullamore.domain.repository.answer import AnswerRepository
from tullamore.domain.repository.question import QuestionRepository
from tullamore.domain.repository.tag import TagRepository
from tullamore.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "TagRepository",
    "QuestionRepository",
    "AnswerRepository",
]

"""PostgreSQL repository implementations."""

from tullamore.persistence.repository.answer import PostgresAnswerRepository
from tullamore.persistence.repository.question import PostgresQuestionRepository
from tullamore.persistence.repository.tag import PostgresTagRepository
from tullamore.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresTagRepository",
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
]

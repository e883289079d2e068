"""Shared state behind the in-memory repositories.

Plays the role of the database: repositories created for different
requests see the same data as long as they share a store.
"""

from tullamore.domain.model import Answer, Question, Tag, User
from tullamore.domain.value import AnswerId, QuestionId, UserId


class InMemoryStore:
    """Tables of the in-memory database."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.tags: dict[str, Tag] = {}
        self.questions: dict[QuestionId, Question] = {}
        self.answers: dict[AnswerId, Answer] = {}

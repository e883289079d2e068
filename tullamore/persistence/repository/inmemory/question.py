"""In-memory question repository for testing."""

from typing import Iterable, List, Optional

from tullamore.domain.model.question import Question
from tullamore.domain.repository.question import QuestionRepository
from tullamore.domain.value import QuestionId, TagName, UserId

from .store import InMemoryStore


def _page(questions: Iterable[Question], limit: int, offset: int) -> List[Question]:
    ordered = sorted(questions, key=lambda q: q.created_at, reverse=True)
    return ordered[offset : offset + limit]


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def exists(self, question_id: QuestionId) -> bool:
        """Check whether a question exists."""
        return question_id in self._store.questions

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._store.questions.get(question_id)

    async def find_all(self, limit: int = 30, offset: int = 0) -> List[Question]:
        """Find all questions with pagination."""
        return _page(self._store.questions.values(), limit, offset)

    async def find_by_title(
        self, title: str, limit: int = 30, offset: int = 0
    ) -> List[Question]:
        """Find questions whose title contains the given text."""
        needle = title.lower()
        return _page(
            (q for q in self._store.questions.values() if needle in q.title.lower()),
            limit,
            offset,
        )

    async def find_by_author(
        self, user_id: UserId, limit: int = 30, offset: int = 0
    ) -> List[Question]:
        """Find questions asked by a user."""
        return _page(
            (q for q in self._store.questions.values() if q.created_by == user_id),
            limit,
            offset,
        )

    async def find_answered_by_user(
        self, user_id: UserId, limit: int = 30, offset: int = 0
    ) -> List[Question]:
        """Find questions that a user has answered."""
        answered = {
            a.question_id for a in self._store.answers.values() if a.created_by == user_id
        }
        return _page(
            (q for q in self._store.questions.values() if q.id in answered),
            limit,
            offset,
        )

    async def find_by_tag(
        self, tag: TagName, limit: int = 30, offset: int = 0
    ) -> List[Question]:
        """Find questions carrying a tag."""
        return _page(
            (q for q in self._store.questions.values() if tag in q.tags),
            limit,
            offset,
        )

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self._store.questions[question.id] = question
        return question

    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question."""
        self._store.questions.pop(question_id, None)

"""In-memory answer repository for testing."""

from typing import List, Optional

from tullamore.domain.model.answer import Answer
from tullamore.domain.repository.answer import AnswerRepository
from tullamore.domain.value import AnswerId, QuestionId

from .store import InMemoryStore


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def exists(self, answer_id: AnswerId) -> bool:
        """Check whether an answer exists."""
        return answer_id in self._store.answers

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._store.answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question, oldest first."""
        answers = [
            a for a in self._store.answers.values() if a.question_id == question_id
        ]
        return sorted(answers, key=lambda a: a.created_at)

    async def save(self, answer: Answer) -> Answer:
        """Save an answer."""
        self._store.answers[answer.id] = answer
        return answer

    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer."""
        self._store.answers.pop(answer_id, None)

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question."""
        answer_ids = [
            a.id for a in self._store.answers.values() if a.question_id == question_id
        ]
        for answer_id in answer_ids:
            del self._store.answers[answer_id]
        return len(answer_ids)

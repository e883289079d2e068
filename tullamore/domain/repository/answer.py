"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from tullamore.domain.model.answer import Answer
from tullamore.domain.value import AnswerId, QuestionId


class AnswerRepository(ABC):
    """Repository for Answer entity.

    An answer is loaded together with its vote set.
    """

    @abstractmethod
    async def exists(self, answer_id: AnswerId) -> bool:
        """Check whether an answer exists.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            True if the answer exists
        """
        pass

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question, oldest first.

        Args:
            question_id: The question ID

        Returns:
            List of answers
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update), including its votes.

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer and its votes.

        Args:
            answer_id: The answer ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question, with their votes.

        Args:
            question_id: The question ID

        Returns:
            Number of answers deleted
        """
        pass

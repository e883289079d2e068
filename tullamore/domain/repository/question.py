"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from tullamore.domain.model.question import Question
from tullamore.domain.value import QuestionId, TagName, UserId


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    A question is loaded together with its tag names and its vote set.
    Answers are not loaded; use AnswerRepository.find_by_question.
    Listing methods return newest questions first.
    """

    @abstractmethod
    async def exists(self, question_id: QuestionId) -> bool:
        """Check whether a question exists.

        Args:
            question_id: The question's unique identifier

        Returns:
            True if the question exists
        """
        pass

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 30, offset: int = 0) -> List[Question]:
        """Find all questions with pagination.

        Args:
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions
        """
        pass

    @abstractmethod
    async def find_by_title(
        self, title: str, limit: int = 30, offset: int = 0
    ) -> List[Question]:
        """Find questions whose title contains the given text (case-insensitive).

        Args:
            title: Text to search for
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of matching questions
        """
        pass

    @abstractmethod
    async def find_by_author(
        self, user_id: UserId, limit: int = 30, offset: int = 0
    ) -> List[Question]:
        """Find questions asked by a user.

        Args:
            user_id: The author's user ID
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions asked by the user
        """
        pass

    @abstractmethod
    async def find_answered_by_user(
        self, user_id: UserId, limit: int = 30, offset: int = 0
    ) -> List[Question]:
        """Find questions that a user has answered.

        Args:
            user_id: The answer author's user ID
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of distinct questions with at least one answer by the user
        """
        pass

    @abstractmethod
    async def find_by_tag(
        self, tag: TagName, limit: int = 30, offset: int = 0
    ) -> List[Question]:
        """Find questions carrying a tag.

        Args:
            tag: Tag name
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of tagged questions
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update), including its tags and votes.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question with its tag associations and votes.

        Answers are not touched; delete them first with
        AnswerRepository.delete_by_question.

        Args:
            question_id: The question ID to delete
        """
        pass

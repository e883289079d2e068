"""Question domain service."""

from datetime import datetime

import logfire

from tullamore.domain.error import QuestionAlreadyExistsError, QuestionNotFoundError
from tullamore.domain.model.question import Question, QuestionPatch
from tullamore.domain.repository import AnswerRepository, QuestionRepository
from tullamore.domain.value import QuestionId, TagName, UserId

from .base import Service
from .tag_service import TagService


def _question_id(question_or_id: Question | QuestionId) -> QuestionId:
    return question_or_id.id if isinstance(question_or_id, Question) else question_or_id


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        tag_service: TagService,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository (for cascading deletes and lookups)
            tag_service: Tag domain service (for tag validation)
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.tag_service = tag_service

    async def add_question(self, question: Question) -> Question:
        """Add a new question.

        Args:
            question: Question to add

        Returns:
            Saved question

        Raises:
            QuestionAlreadyExistsError: If the question ID is already stored
            TagNotFoundError: If any of the question's tags does not exist
        """
        with logfire.span(
            "question_service.add_question",
            question_id=str(question.id),
            title=question.title,
        ):
            if await self.question_repository.exists(question.id):
                logfire.warn("Question already exists", question_id=str(question.id))
                raise QuestionAlreadyExistsError(str(question.id))

            if question.tags:
                await self.tag_service.validate_tags_exist(question.tags)

            saved = await self.question_repository.save(question)
            logfire.info("Question added", question_id=str(saved.id))
            return saved

    async def delete_question(self, question_or_id: Question | QuestionId) -> None:
        """Delete a question and all of its answers.

        Accepts an ID or any reference to the question, including a stale one.

        Args:
            question_or_id: Question or question ID

        Raises:
            QuestionNotFoundError: If the question does not exist
        """
        question_id = _question_id(question_or_id)
        with logfire.span(
            "question_service.delete_question", question_id=str(question_id)
        ):
            if not await self.question_repository.exists(question_id):
                logfire.warn(
                    "Question not found for deletion", question_id=str(question_id)
                )
                raise QuestionNotFoundError(str(question_id))

            deleted_answers = await self.answer_repository.delete_by_question(
                question_id
            )
            await self.question_repository.delete(question_id)
            logfire.info(
                "Question deleted",
                question_id=str(question_id),
                deleted_answers=deleted_answers,
            )

    async def update_question(
        self, question_id: QuestionId, question: Question
    ) -> Question:
        """Replace a question's mutable fields.

        Title, body, tags, votes and modified_by are taken from the input.
        The stored id, created_at and created_by are kept whatever the input
        says, and last_updated_at is set to now.

        Args:
            question_id: ID of the question to update
            question: Question carrying the new field values

        Returns:
            Updated question

        Raises:
            QuestionNotFoundError: If the question does not exist
            TagNotFoundError: If any of the new tags does not exist
        """
        with logfire.span(
            "question_service.update_question", question_id=str(question_id)
        ):
            existing = await self.question_repository.find_by_id(question_id)
            if existing is None:
                logfire.warn(
                    "Question not found for update", question_id=str(question_id)
                )
                raise QuestionNotFoundError(str(question_id))

            if question.tags:
                await self.tag_service.validate_tags_exist(question.tags)

            updated = question.with_changes(
                id=existing.id,
                created_at=existing.created_at,
                created_by=existing.created_by,
                last_updated_at=datetime.now(),
            )
            saved = await self.question_repository.save(updated)
            logfire.info("Question updated", question_id=str(question_id))
            return saved

    async def patch_question(
        self, question_id: QuestionId, patch: QuestionPatch
    ) -> Question:
        """Apply a partial update to a question.

        Only supplied, non-null fields are applied. Supplying votes replaces
        the vote set, which recomputes the upvote and downvote counts.

        Args:
            question_id: ID of the question to patch
            patch: Fields to change

        Returns:
            Patched question

        Raises:
            QuestionNotFoundError: If the question does not exist
            TagNotFoundError: If any of the new tags does not exist
        """
        with logfire.span(
            "question_service.patch_question", question_id=str(question_id)
        ):
            existing = await self.question_repository.find_by_id(question_id)
            if existing is None:
                logfire.warn(
                    "Question not found for patch", question_id=str(question_id)
                )
                raise QuestionNotFoundError(str(question_id))

            changes = patch.changes()
            if changes.get("tags"):
                await self.tag_service.validate_tags_exist(changes["tags"])

            patched = existing.with_changes(**changes)
            saved = await self.question_repository.save(patched)
            logfire.info(
                "Question patched",
                question_id=str(question_id),
                fields=sorted(changes),
                upvotes=saved.upvotes,
                downvotes=saved.downvotes,
            )
            return saved

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Args:
            question_id: Question ID

        Returns:
            The question

        Raises:
            QuestionNotFoundError: If the question does not exist
        """
        with logfire.span("question_service.get_question", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                logfire.warn("Question not found", question_id=str(question_id))
                raise QuestionNotFoundError(str(question_id))
            return question

    async def does_question_exist(self, question_or_id: Question | QuestionId) -> bool:
        """Check whether a question exists.

        Args:
            question_or_id: Question or question ID

        Returns:
            True if the question exists
        """
        return await self.question_repository.exists(_question_id(question_or_id))

    async def get_all_questions(self, limit: int = 30, offset: int = 0) -> list[Question]:
        """Get all questions, newest first."""
        return await self.question_repository.find_all(limit=limit, offset=offset)

    async def find_questions_by_title(
        self, title: str, limit: int = 30, offset: int = 0
    ) -> list[Question]:
        """Find questions whose title contains the given text."""
        with logfire.span("question_service.find_questions_by_title", title=title):
            return await self.question_repository.find_by_title(
                title, limit=limit, offset=offset
            )

    async def find_questions_asked_by_user(
        self, user_id: UserId, limit: int = 30, offset: int = 0
    ) -> list[Question]:
        """Find questions asked by a user."""
        with logfire.span(
            "question_service.find_questions_asked_by_user", user_id=str(user_id)
        ):
            return await self.question_repository.find_by_author(
                user_id, limit=limit, offset=offset
            )

    async def find_questions_answered_by_user(
        self, user_id: UserId, limit: int = 30, offset: int = 0
    ) -> list[Question]:
        """Find questions a user has answered."""
        with logfire.span(
            "question_service.find_questions_answered_by_user", user_id=str(user_id)
        ):
            return await self.question_repository.find_answered_by_user(
                user_id, limit=limit, offset=offset
            )

    async def find_questions_by_tag(
        self, tag: TagName, limit: int = 30, offset: int = 0
    ) -> list[Question]:
        """Find questions carrying a tag."""
        with logfire.span("question_service.find_questions_by_tag", tag=tag.root):
            return await self.question_repository.find_by_tag(
                tag, limit=limit, offset=offset
            )

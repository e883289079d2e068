"""Answer domain service."""

from typing import Optional

import logfire

from tullamore.domain.error import (
    AnswerAlreadyExistsError,
    AnswerNotFoundError,
    QuestionNotFoundError,
)
from tullamore.domain.model.answer import Answer
from tullamore.domain.model.vote import Vote
from tullamore.domain.repository import AnswerRepository, QuestionRepository
from tullamore.domain.value import AnswerId, QuestionId

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository (for existence checks)
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository

    async def add_answer(self, answer: Answer) -> Answer:
        """Add an answer to a question.

        Args:
            answer: Answer to add

        Returns:
            Saved answer

        Raises:
            QuestionNotFoundError: If the answered question does not exist
            AnswerAlreadyExistsError: If the answer ID is already stored
        """
        with logfire.span(
            "answer_service.add_answer",
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
        ):
            if not await self.question_repository.exists(answer.question_id):
                logfire.warn(
                    "Answer to non-existent question",
                    question_id=str(answer.question_id),
                )
                raise QuestionNotFoundError(str(answer.question_id))

            if await self.answer_repository.exists(answer.id):
                logfire.warn("Answer already exists", answer_id=str(answer.id))
                raise AnswerAlreadyExistsError(str(answer.id))

            saved = await self.answer_repository.save(answer)
            logfire.info("Answer added", answer_id=str(saved.id))
            return saved

    async def get_answer(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            AnswerNotFoundError: If the answer does not exist
        """
        answer = await self.answer_repository.find_by_id(answer_id)
        if answer is None:
            logfire.warn("Answer not found", answer_id=str(answer_id))
            raise AnswerNotFoundError(str(answer_id))
        return answer

    async def get_answers_for_question(self, question_id: QuestionId) -> list[Answer]:
        """Get all answers to a question, oldest first.

        Raises:
            QuestionNotFoundError: If the question does not exist
        """
        with logfire.span(
            "answer_service.get_answers_for_question", question_id=str(question_id)
        ):
            if not await self.question_repository.exists(question_id):
                raise QuestionNotFoundError(str(question_id))

            answers = await self.answer_repository.find_by_question(question_id)
            logfire.info("Answers retrieved", count=len(answers))
            return answers

    async def choose_answer(self, answer_id: AnswerId) -> Answer:
        """Mark an answer as the chosen answer for its question.

        Any other answer to the same question loses its chosen flag, so a
        question has at most one chosen answer.

        Args:
            answer_id: ID of the answer to choose

        Returns:
            The chosen answer

        Raises:
            AnswerNotFoundError: If the answer does not exist
        """
        with logfire.span("answer_service.choose_answer", answer_id=str(answer_id)):
            answer = await self.get_answer(answer_id)

            siblings = await self.answer_repository.find_by_question(
                answer.question_id
            )
            for sibling in siblings:
                if sibling.chosen_answer and sibling.id != answer.id:
                    await self.answer_repository.save(
                        sibling.with_changes(chosen_answer=False)
                    )
                    logfire.info("Answer unchosen", answer_id=str(sibling.id))

            chosen = await self.answer_repository.save(
                answer.with_changes(chosen_answer=True)
            )
            logfire.info(
                "Answer chosen",
                answer_id=str(answer_id),
                question_id=str(answer.question_id),
            )
            return chosen

    async def patch_answer(
        self,
        answer_id: AnswerId,
        body: Optional[str] = None,
        votes: Optional[frozenset[Vote]] = None,
    ) -> Answer:
        """Apply a partial update to an answer.

        Only non-null arguments are applied. Supplying votes replaces the
        vote set, which recomputes the upvote and downvote counts.

        Raises:
            AnswerNotFoundError: If the answer does not exist
        """
        with logfire.span("answer_service.patch_answer", answer_id=str(answer_id)):
            answer = await self.get_answer(answer_id)

            changes: dict = {}
            if body is not None:
                changes["body"] = body
            if votes is not None:
                changes["votes"] = votes

            saved = await self.answer_repository.save(answer.with_changes(**changes))
            logfire.info("Answer patched", answer_id=str(answer_id))
            return saved

    async def delete_answer(self, answer_id: AnswerId) -> None:
        """Delete an answer.

        Raises:
            AnswerNotFoundError: If the answer does not exist
        """
        with logfire.span("answer_service.delete_answer", answer_id=str(answer_id)):
            if not await self.answer_repository.exists(answer_id):
                logfire.warn("Answer not found for deletion", answer_id=str(answer_id))
                raise AnswerNotFoundError(str(answer_id))

            await self.answer_repository.delete(answer_id)
            logfire.info("Answer deleted", answer_id=str(answer_id))

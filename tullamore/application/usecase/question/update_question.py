"""Update (replace) question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase
from tullamore.application.usecase.dto import (
    VoteItem,
    items_to_votes,
    referenced_users,
)
from tullamore.domain.model.question import Question
from tullamore.domain.service import QuestionService, UserService
from tullamore.domain.value import QuestionId, TagName, UserId

from .get_question import QuestionResponse


class UpdateQuestionRequest(BaseModel):
    """Update question request.

    Carries the full new state of the question's mutable fields.
    """

    question_id: str  # UUID string
    title: str
    body: str | None = None
    tags: list[str] = []
    votes: list[VoteItem] = []
    modified_by: str | None = None  # UUID string


class UpdateQuestionUseCase(BaseUseCase):
    """Use case for replacing a question's content."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize update question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service (voter and editor checks)
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: UpdateQuestionRequest) -> QuestionResponse:
        """Execute update question flow.

        The stored id, creation time and author are kept.

        Raises:
            QuestionNotFoundError: If the question does not exist
            TagNotFoundError: If any tag does not exist
            UserNotFoundError: If a voter or the editor does not exist
            ValueError: If the new content fails validation
        """
        question_id = QuestionId(UUID(request.question_id))
        with logfire.span("update_question.execute", question_id=request.question_id):
            question = Question(
                id=question_id,
                title=request.title,
                body=request.body,
                tags=frozenset(TagName(name) for name in request.tags),
                votes=items_to_votes(request.votes),
                modified_by=(
                    UserId(UUID(request.modified_by)) if request.modified_by else None
                ),
            )
            await self.user_service.validate_users_exist(
                referenced_users(question.votes, question.modified_by)
            )
            updated = await self.question_service.update_question(question_id, question)
            return QuestionResponse.from_question(updated)

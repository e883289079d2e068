"""Get question use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase
from tullamore.application.usecase.dto import VoteItem, votes_to_items
from tullamore.domain.model.question import Question
from tullamore.domain.service import QuestionService
from tullamore.domain.value import QuestionId


class QuestionResponse(BaseModel):
    """Question response."""

    question_id: str
    title: str
    body: str | None
    tags: list[str]
    created_by: str | None
    modified_by: str | None
    created_at: datetime
    last_updated_at: datetime | None
    upvotes: int
    downvotes: int
    votes: list[VoteItem]

    @classmethod
    def from_question(cls, question: Question) -> "QuestionResponse":
        return cls(
            question_id=str(question.id),
            title=question.title,
            body=question.body,
            tags=sorted(tag.root for tag in question.tags),
            created_by=str(question.created_by) if question.created_by else None,
            modified_by=str(question.modified_by) if question.modified_by else None,
            created_at=question.created_at,
            last_updated_at=question.last_updated_at,
            upvotes=question.upvotes,
            downvotes=question.downvotes,
            votes=votes_to_items(question.votes),
        )


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string


class GetQuestionUseCase(BaseUseCase):
    """Use case for retrieving a question by ID."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: GetQuestionRequest) -> QuestionResponse:
        """Execute get question flow.

        Raises:
            QuestionNotFoundError: If the question does not exist
        """
        with logfire.span("get_question.execute", question_id=request.question_id):
            question = await self.question_service.get_question(
                QuestionId(UUID(request.question_id))
            )
            return QuestionResponse.from_question(question)

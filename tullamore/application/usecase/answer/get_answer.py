"""Get answer use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase
from tullamore.application.usecase.dto import VoteItem, votes_to_items
from tullamore.domain.model.answer import Answer
from tullamore.domain.service import AnswerService
from tullamore.domain.value import AnswerId


class AnswerResponse(BaseModel):
    """Answer response."""

    answer_id: str
    question_id: str
    body: str | None
    created_by: str | None
    created_at: datetime
    chosen_answer: bool
    upvotes: int
    downvotes: int
    votes: list[VoteItem]

    @classmethod
    def from_answer(cls, answer: Answer) -> "AnswerResponse":
        return cls(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            body=answer.body,
            created_by=str(answer.created_by) if answer.created_by else None,
            created_at=answer.created_at,
            chosen_answer=answer.chosen_answer,
            upvotes=answer.upvotes,
            downvotes=answer.downvotes,
            votes=votes_to_items(answer.votes),
        )


class GetAnswerRequest(BaseModel):
    """Get answer request."""

    answer_id: str  # UUID string


class GetAnswerUseCase(BaseUseCase):
    """Use case for retrieving an answer by ID."""

    def __init__(self, answer_service: AnswerService) -> None:
        self.answer_service = answer_service

    async def execute(self, request: GetAnswerRequest) -> AnswerResponse:
        """Execute get answer flow.

        Raises:
            AnswerNotFoundError: If the answer does not exist
        """
        answer = await self.answer_service.get_answer(AnswerId(UUID(request.answer_id)))
        return AnswerResponse.from_answer(answer)

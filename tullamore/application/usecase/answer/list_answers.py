"""List answers use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase
from tullamore.domain.service import AnswerService
from tullamore.domain.value import QuestionId

from .get_answer import AnswerResponse


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: str  # UUID string


class ListAnswersResponse(BaseModel):
    """List answers response."""

    answers: list[AnswerResponse]


class ListAnswersUseCase(BaseUseCase):
    """Use case for listing a question's answers, oldest first."""

    def __init__(self, answer_service: AnswerService) -> None:
        self.answer_service = answer_service

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Raises:
            QuestionNotFoundError: If the question does not exist
        """
        with logfire.span("list_answers.execute", question_id=request.question_id):
            answers = await self.answer_service.get_answers_for_question(
                QuestionId(UUID(request.question_id))
            )
            return ListAnswersResponse(
                answers=[AnswerResponse.from_answer(a) for a in answers]
            )

"""Delete question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase
from tullamore.domain.service import QuestionService
from tullamore.domain.value import QuestionId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str  # UUID string


class DeleteQuestionUseCase(BaseUseCase):
    """Use case for deleting a question together with its answers."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: DeleteQuestionRequest) -> None:
        """Execute delete question flow.

        Raises:
            QuestionNotFoundError: If the question does not exist
        """
        with logfire.span("delete_question.execute", question_id=request.question_id):
            await self.question_service.delete_question(
                QuestionId(UUID(request.question_id))
            )

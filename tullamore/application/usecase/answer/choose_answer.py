"""Choose answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase
from tullamore.domain.service import AnswerService
from tullamore.domain.value import AnswerId

from .get_answer import AnswerResponse


class ChooseAnswerRequest(BaseModel):
    """Choose answer request."""

    answer_id: str  # UUID string


class ChooseAnswerUseCase(BaseUseCase):
    """Use case for accepting an answer as the question's chosen answer."""

    def __init__(self, answer_service: AnswerService) -> None:
        self.answer_service = answer_service

    async def execute(self, request: ChooseAnswerRequest) -> AnswerResponse:
        """Execute choose answer flow.

        Raises:
            AnswerNotFoundError: If the answer does not exist
        """
        with logfire.span("choose_answer.execute", answer_id=request.answer_id):
            chosen = await self.answer_service.choose_answer(
                AnswerId(UUID(request.answer_id))
            )
            return AnswerResponse.from_answer(chosen)

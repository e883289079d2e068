"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase
from tullamore.domain.service import AnswerService
from tullamore.domain.value import AnswerId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: str  # UUID string


class DeleteAnswerUseCase(BaseUseCase):
    """Use case for deleting an answer."""

    def __init__(self, answer_service: AnswerService) -> None:
        self.answer_service = answer_service

    async def execute(self, request: DeleteAnswerRequest) -> None:
        """Execute delete answer flow.

        Raises:
            AnswerNotFoundError: If the answer does not exist
        """
        await self.answer_service.delete_answer(AnswerId(UUID(request.answer_id)))

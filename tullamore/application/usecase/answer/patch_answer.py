"""Patch answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase
from tullamore.application.usecase.dto import (
    VoteItem,
    items_to_votes,
    referenced_users,
)
from tullamore.domain.service import AnswerService, UserService
from tullamore.domain.value import AnswerId

from .get_answer import AnswerResponse


class PatchAnswerRequest(BaseModel):
    """Patch answer request. None fields are not changed."""

    answer_id: str  # UUID string
    body: str | None = None
    votes: list[VoteItem] | None = None


class PatchAnswerUseCase(BaseUseCase):
    """Use case for partially updating an answer."""

    def __init__(
        self, answer_service: AnswerService, user_service: UserService
    ) -> None:
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: PatchAnswerRequest) -> AnswerResponse:
        """Execute patch answer flow.

        Raises:
            AnswerNotFoundError: If the answer does not exist
            UserNotFoundError: If a voter does not exist
            ValueError: If a patched value fails validation
        """
        votes = items_to_votes(request.votes) if request.votes is not None else None
        with logfire.span("patch_answer.execute", answer_id=request.answer_id):
            if votes is not None:
                await self.user_service.validate_users_exist(referenced_users(votes))
            patched = await self.answer_service.patch_answer(
                AnswerId(UUID(request.answer_id)), body=request.body, votes=votes
            )
            return AnswerResponse.from_answer(patched)

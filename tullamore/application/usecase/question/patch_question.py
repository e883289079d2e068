"""Patch (partial update) question use case."""

from datetime import datetime
from typing import Any
from uuid import UUID

import logfire
from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase
from tullamore.application.usecase.dto import (
    VoteItem,
    items_to_votes,
    referenced_users,
)
from tullamore.domain.model.question import QuestionPatch
from tullamore.domain.service import QuestionService, UserService
from tullamore.domain.value import QuestionId, TagName, UserId

from .get_question import QuestionResponse


class PatchQuestionRequest(BaseModel):
    """Patch question request.

    Fields left unset or set to None are not changed.
    """

    question_id: str  # UUID string
    title: str | None = None
    body: str | None = None
    tags: list[str] | None = None
    votes: list[VoteItem] | None = None
    modified_by: str | None = None  # UUID string
    last_updated_at: datetime | None = None


class PatchQuestionUseCase(BaseUseCase):
    """Use case for partially updating a question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize patch question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service (voter and editor checks)
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: PatchQuestionRequest) -> QuestionResponse:
        """Execute patch question flow.

        Raises:
            QuestionNotFoundError: If the question does not exist
            TagNotFoundError: If any new tag does not exist
            UserNotFoundError: If a voter or the editor does not exist
            ValueError: If a patched value fails validation
        """
        changes: dict[str, Any] = {}
        if request.title is not None:
            changes["title"] = request.title
        if request.body is not None:
            changes["body"] = request.body
        if request.tags is not None:
            changes["tags"] = frozenset(TagName(name) for name in request.tags)
        if request.votes is not None:
            changes["votes"] = items_to_votes(request.votes)
        if request.modified_by is not None:
            changes["modified_by"] = UserId(UUID(request.modified_by))
        if request.last_updated_at is not None:
            changes["last_updated_at"] = request.last_updated_at

        with logfire.span(
            "patch_question.execute",
            question_id=request.question_id,
            fields=sorted(changes),
        ):
            await self.user_service.validate_users_exist(
                referenced_users(changes.get("votes", ()), changes.get("modified_by"))
            )
            patched = await self.question_service.patch_question(
                QuestionId(UUID(request.question_id)), QuestionPatch(**changes)
            )
            return QuestionResponse.from_question(patched)

"""Create answer use case."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase, resource_location
from tullamore.domain.model.answer import Answer
from tullamore.domain.service import AnswerService, UserService
from tullamore.domain.value import AnswerId, QuestionId, UserId

from .get_answer import AnswerResponse


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str  # UUID string
    body: str | None = None
    created_by: str | None = None  # UUID string of the answering user
    base_url: str  # Base URL of the HTTP request, used for the Location header


class CreateAnswerResponse(AnswerResponse):
    """Create answer response."""

    location: str


class CreateAnswerUseCase(BaseUseCase):
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService, user_service: UserService) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Raises:
            QuestionNotFoundError: If the question does not exist
            UserNotFoundError: If the answering user does not exist
            ValueError: If the answer fails validation
        """
        with logfire.span("create_answer.execute", question_id=request.question_id):
            created_by = None
            if request.created_by:
                created_by = UserId(UUID(request.created_by))
                await self.user_service.get_user(created_by)

            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=QuestionId(UUID(request.question_id)),
                body=request.body,
                created_by=created_by,
                created_at=datetime.now(),
            )
            saved = await self.answer_service.add_answer(answer)

            return CreateAnswerResponse(
                **AnswerResponse.from_answer(saved).model_dump(),
                location=resource_location(request.base_url, "answer", str(saved.id)),
            )

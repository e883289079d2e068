"""Create question use case."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase, resource_location
from tullamore.domain.model.question import Question
from tullamore.domain.service import QuestionService, UserService
from tullamore.domain.value import QuestionId, TagName, UserId

from .get_question import QuestionResponse


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str
    body: str | None = None
    tags: list[str] = []
    created_by: str | None = None  # UUID string of the asking user
    base_url: str  # Base URL of the HTTP request, used for the Location header


class CreateQuestionResponse(QuestionResponse):
    """Create question response."""

    location: str


class CreateQuestionUseCase(BaseUseCase):
    """Use case for asking a new question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Steps:
        1. Check the asking user exists (if one is given)
        2. Build the Question entity (validation happens in the domain model)
        3. Save it via QuestionService, which validates the tags

        Args:
            request: Create question request

        Returns:
            Created question with its resource location

        Raises:
            UserNotFoundError: If the asking user does not exist
            TagNotFoundError: If any tag does not exist
            ValueError: If the question fails validation
        """
        with logfire.span(
            "create_question.execute", title=request.title, tags=request.tags
        ):
            created_by = None
            if request.created_by:
                created_by = UserId(UUID(request.created_by))
                await self.user_service.get_user(created_by)

            question = Question(
                id=QuestionId(uuid4()),
                title=request.title,
                body=request.body,
                tags=frozenset(TagName(name) for name in request.tags),
                created_by=created_by,
                created_at=datetime.now(),
            )
            saved = await self.question_service.add_question(question)

            return CreateQuestionResponse(
                **QuestionResponse.from_question(saved).model_dump(),
                location=resource_location(
                    request.base_url, "question", str(saved.id)
                ),
            )

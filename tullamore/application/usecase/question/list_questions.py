"""List questions use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from tullamore.application.usecase.base import BaseUseCase
from tullamore.domain.service import QuestionService
from tullamore.domain.value import TagName, UserId

from .get_question import QuestionResponse


class ListQuestionsRequest(BaseModel):
    """List questions request.

    At most one filter may be given. Without a filter all questions are listed.
    """

    title: str | None = None  # Case-insensitive substring of the title
    tag: str | None = None
    asked_by: str | None = None  # UUID string
    answered_by: str | None = None  # UUID string
    limit: int = Field(default=30, ge=1)
    offset: int = Field(default=0, ge=0)


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionResponse]


class ListQuestionsUseCase(BaseUseCase):
    """Use case for listing and searching questions, newest first."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Raises:
            ValueError: If more than one filter is given
        """
        filters = {
            name: value
            for name, value in (
                ("title", request.title),
                ("tag", request.tag),
                ("asked_by", request.asked_by),
                ("answered_by", request.answered_by),
            )
            if value is not None
        }
        if len(filters) > 1:
            raise ValueError(
                f"Only one question filter can be used at a time, got: {sorted(filters)}"
            )

        page = {"limit": request.limit, "offset": request.offset}
        with logfire.span("list_questions.execute", filters=filters, **page):
            if request.title is not None:
                questions = await self.question_service.find_questions_by_title(
                    request.title, **page
                )
            elif request.tag is not None:
                questions = await self.question_service.find_questions_by_tag(
                    TagName(request.tag), **page
                )
            elif request.asked_by is not None:
                questions = await self.question_service.find_questions_asked_by_user(
                    UserId(UUID(request.asked_by)), **page
                )
            elif request.answered_by is not None:
                questions = (
                    await self.question_service.find_questions_answered_by_user(
                        UserId(UUID(request.answered_by)), **page
                    )
                )
            else:
                questions = await self.question_service.get_all_questions(**page)

            logfire.info("Questions listed", count=len(questions))
            return ListQuestionsResponse(
                questions=[QuestionResponse.from_question(q) for q in questions]
            )

"""Question routes."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel, Field

from tullamore.application.usecase.dto import VoteItem
from tullamore.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    PatchQuestionRequest,
    PatchQuestionUseCase,
    QuestionResponse,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from tullamore.config import PaginationSettings
from tullamore.interface.error import check_page, to_http_exception

router = APIRouter(prefix="/question", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=1, max_length=300)
    body: str | None = Field(default=None, max_length=30000)
    tags: list[str] = []
    created_by: UUID | None = None


class UpdateQuestionAPIRequest(BaseModel):
    """API request for replacing a question's content."""

    title: str = Field(min_length=1, max_length=300)
    body: str | None = Field(default=None, max_length=30000)
    tags: list[str] = []
    votes: list[VoteItem] = []
    modified_by: UUID | None = None


class PatchQuestionAPIRequest(BaseModel):
    """API request for partially updating a question.

    Omitted or null fields are left unchanged.
    """

    title: str | None = Field(default=None, min_length=1, max_length=300)
    body: str | None = Field(default=None, max_length=30000)
    tags: list[str] | None = None
    votes: list[VoteItem] | None = None
    modified_by: UUID | None = None
    last_updated_at: datetime | None = None


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    http_request: Request,
    response: Response,
    use_case: FromDishka[CreateQuestionUseCase],
) -> CreateQuestionResponse:
    """Ask a new question.

    Every tag must already exist. Responds with 201 and a Location header.
    """
    try:
        result = await use_case.execute(
            CreateQuestionRequest(
                title=request.title,
                body=request.body,
                tags=request.tags,
                created_by=str(request.created_by) if request.created_by else None,
                base_url=str(http_request.base_url),
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create question") from e

    response.headers["Location"] = result.location
    return result


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    use_case: FromDishka[ListQuestionsUseCase],
    pagination: FromDishka[PaginationSettings],
    title: str | None = None,
    tag: str | None = None,
    asked_by: UUID | None = None,
    answered_by: UUID | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> ListQuestionsResponse:
    """List questions, newest first.

    Args:
        use_case: List questions use case (injected)
        pagination: Paging limits (injected)
        title: Only questions whose title contains this text (case-insensitive)
        tag: Only questions carrying this tag
        asked_by: Only questions asked by this user
        answered_by: Only questions this user has answered
        limit: Maximum number of questions to return
        offset: Number of questions to skip

    Example:
        GET /question?tag=Java&limit=10
    """
    limit = pagination.default_limit if limit is None else limit
    check_page(limit, offset, pagination.max_limit)

    try:
        return await use_case.execute(
            ListQuestionsRequest(
                title=title,
                tag=tag,
                asked_by=str(asked_by) if asked_by else None,
                answered_by=str(answered_by) if answered_by else None,
                limit=limit,
                offset=offset,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "list questions") from e


@router.get("/{question_id}", response_model=QuestionResponse)
async def get_question(
    question_id: UUID, use_case: FromDishka[GetQuestionUseCase]
) -> QuestionResponse:
    """Get a question by ID."""
    try:
        return await use_case.execute(GetQuestionRequest(question_id=str(question_id)))
    except Exception as e:
        raise to_http_exception(e, "get question") from e


@router.put("/{question_id}", response_model=QuestionResponse)
async def update_question(
    question_id: UUID,
    request: UpdateQuestionAPIRequest,
    use_case: FromDishka[UpdateQuestionUseCase],
) -> QuestionResponse:
    """Replace a question's content.

    The question keeps its ID, creation time and author.
    """
    try:
        return await use_case.execute(
            UpdateQuestionRequest(
                question_id=str(question_id),
                title=request.title,
                body=request.body,
                tags=request.tags,
                votes=request.votes,
                modified_by=str(request.modified_by) if request.modified_by else None,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update question") from e


@router.patch("/{question_id}", response_model=QuestionResponse)
async def patch_question(
    question_id: UUID,
    request: PatchQuestionAPIRequest,
    use_case: FromDishka[PatchQuestionUseCase],
) -> QuestionResponse:
    """Partially update a question.

    Supplying votes replaces the vote set and so the vote counts.
    """
    try:
        return await use_case.execute(
            PatchQuestionRequest(
                question_id=str(question_id),
                title=request.title,
                body=request.body,
                tags=request.tags,
                votes=request.votes,
                modified_by=str(request.modified_by) if request.modified_by else None,
                last_updated_at=request.last_updated_at,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "patch question") from e


@router.delete("/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_question(
    question_id: UUID, use_case: FromDishka[DeleteQuestionUseCase]
) -> None:
    """Delete a question and all of its answers."""
    try:
        await use_case.execute(DeleteQuestionRequest(question_id=str(question_id)))
    except Exception as e:
        raise to_http_exception(e, "delete question") from e

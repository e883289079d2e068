"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel, Field

from tullamore.application.usecase.answer import (
    AnswerResponse,
    ChooseAnswerRequest,
    ChooseAnswerUseCase,
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    GetAnswerRequest,
    GetAnswerUseCase,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
    PatchAnswerRequest,
    PatchAnswerUseCase,
)
from tullamore.application.usecase.dto import VoteItem
from tullamore.interface.error import to_http_exception

router = APIRouter(tags=["answers"], route_class=DishkaRoute)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    body: str | None = Field(default=None, max_length=30000)
    created_by: UUID | None = None


class PatchAnswerAPIRequest(BaseModel):
    """API request for partially updating an answer."""

    body: str | None = Field(default=None, max_length=30000)
    votes: list[VoteItem] | None = None


@router.post(
    "/question/{question_id}/answer",
    response_model=CreateAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: UUID,
    request: CreateAnswerAPIRequest,
    http_request: Request,
    response: Response,
    use_case: FromDishka[CreateAnswerUseCase],
) -> CreateAnswerResponse:
    """Answer a question. Responds with 201 and a Location header."""
    try:
        result = await use_case.execute(
            CreateAnswerRequest(
                question_id=str(question_id),
                body=request.body,
                created_by=str(request.created_by) if request.created_by else None,
                base_url=str(http_request.base_url),
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create answer") from e

    response.headers["Location"] = result.location
    return result


@router.get("/question/{question_id}/answer", response_model=ListAnswersResponse)
async def list_answers(
    question_id: UUID, use_case: FromDishka[ListAnswersUseCase]
) -> ListAnswersResponse:
    """List a question's answers, oldest first."""
    try:
        return await use_case.execute(ListAnswersRequest(question_id=str(question_id)))
    except Exception as e:
        raise to_http_exception(e, "list answers") from e


@router.get("/answer/{answer_id}", response_model=AnswerResponse)
async def get_answer(
    answer_id: UUID, use_case: FromDishka[GetAnswerUseCase]
) -> AnswerResponse:
    """Get an answer by ID."""
    try:
        return await use_case.execute(GetAnswerRequest(answer_id=str(answer_id)))
    except Exception as e:
        raise to_http_exception(e, "get answer") from e


@router.patch("/answer/{answer_id}", response_model=AnswerResponse)
async def patch_answer(
    answer_id: UUID,
    request: PatchAnswerAPIRequest,
    use_case: FromDishka[PatchAnswerUseCase],
) -> AnswerResponse:
    """Partially update an answer's body or votes."""
    try:
        return await use_case.execute(
            PatchAnswerRequest(
                answer_id=str(answer_id), body=request.body, votes=request.votes
            )
        )
    except Exception as e:
        raise to_http_exception(e, "patch answer") from e


@router.post("/answer/{answer_id}/choose", response_model=AnswerResponse)
async def choose_answer(
    answer_id: UUID, use_case: FromDishka[ChooseAnswerUseCase]
) -> AnswerResponse:
    """Mark an answer as chosen, clearing any previously chosen answer."""
    try:
        return await use_case.execute(ChooseAnswerRequest(answer_id=str(answer_id)))
    except Exception as e:
        raise to_http_exception(e, "choose answer") from e


@router.delete("/answer/{answer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_answer(
    answer_id: UUID, use_case: FromDishka[DeleteAnswerUseCase]
) -> None:
    """Delete an answer."""
    try:
        await use_case.execute(DeleteAnswerRequest(answer_id=str(answer_id)))
    except Exception as e:
        raise to_http_exception(e, "delete answer") from e

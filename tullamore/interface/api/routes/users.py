"""User routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel, Field

from tullamore.application.usecase.user import (
    CreateUserRequest,
    CreateUserResponse,
    CreateUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    UserResponse,
)
from tullamore.interface.error import to_http_exception

router = APIRouter(prefix="/user", tags=["users"], route_class=DishkaRoute)


class CreateUserAPIRequest(BaseModel):
    """API request for registering a user."""

    username: str = Field(min_length=1, max_length=255)


@router.post(
    "", response_model=CreateUserResponse, status_code=status.HTTP_201_CREATED
)
async def create_user(
    request: CreateUserAPIRequest,
    http_request: Request,
    response: Response,
    use_case: FromDishka[CreateUserUseCase],
) -> CreateUserResponse:
    """Register a user. Responds with 409 if the username is taken."""
    try:
        result = await use_case.execute(
            CreateUserRequest(
                username=request.username, base_url=str(http_request.base_url)
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create user") from e

    response.headers["Location"] = result.location
    return result


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: UUID, use_case: FromDishka[GetUserUseCase]) -> UserResponse:
    """Get a user by ID."""
    try:
        return await use_case.execute(GetUserRequest(user_id=str(user_id)))
    except Exception as e:
        raise to_http_exception(e, "get user") from e

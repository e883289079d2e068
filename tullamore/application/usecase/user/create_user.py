"""Create user use case."""

from uuid import uuid4

import logfire
from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase, resource_location
from tullamore.domain.model.user import User
from tullamore.domain.service import UserService
from tullamore.domain.value import UserId, Username

from .get_user import UserResponse


class CreateUserRequest(BaseModel):
    """Create user request."""

    username: str
    base_url: str  # Base URL of the HTTP request, used for the Location header


class CreateUserResponse(UserResponse):
    """Create user response."""

    location: str


class CreateUserUseCase(BaseUseCase):
    """Use case for registering a user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> CreateUserResponse:
        """Execute create user flow.

        Raises:
            UserAlreadyExistsError: If the username is taken
            ValueError: If the username is invalid
        """
        with logfire.span("create_user.execute", username=request.username):
            user = User(id=UserId(uuid4()), username=Username(request.username))
            saved = await self.user_service.add_user(user)

            return CreateUserResponse(
                **UserResponse.from_user(saved).model_dump(),
                location=resource_location(request.base_url, "user", str(saved.id)),
            )

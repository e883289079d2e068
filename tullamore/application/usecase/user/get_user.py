"""Get user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase
from tullamore.domain.model.user import User
from tullamore.domain.service import UserService
from tullamore.domain.value import UserId


class UserResponse(BaseModel):
    """User response."""

    user_id: str
    username: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            user_id=str(user.id),
            username=user.username.root,
            created_at=user.created_at,
        )


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: str  # UUID string


class GetUserUseCase(BaseUseCase):
    """Use case for retrieving a user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserResponse:
        """Execute get user flow.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self.user_service.get_user(UserId(UUID(request.user_id)))
        return UserResponse.from_user(user)

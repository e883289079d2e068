"""User use cases."""

from .create_user import CreateUserRequest, CreateUserResponse, CreateUserUseCase
from .get_user import GetUserRequest, GetUserUseCase, UserResponse

__all__ = [
    "CreateUserRequest",
    "CreateUserResponse",
    "CreateUserUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "UserResponse",
]

"""User domain service."""

from collections.abc import Iterable

import logfire

from tullamore.domain.error import UserAlreadyExistsError, UserNotFoundError
from tullamore.domain.model.user import User
from tullamore.domain.repository import UserRepository
from tullamore.domain.value import UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def add_user(self, user: User) -> User:
        """Register a new user.

        Args:
            user: User to register

        Returns:
            Saved user

        Raises:
            UserAlreadyExistsError: If the username is taken
        """
        with logfire.span("user_service.add_user", username=user.username.root):
            if await self.user_repository.find_by_username(user.username):
                logfire.warn("Username taken", username=user.username.root)
                raise UserAlreadyExistsError(user.username.root)

            saved = await self.user_repository.save(user)
            logfire.info("User added", user_id=str(saved.id))
            return saved

    async def get_user(self, user_id: UserId) -> User:
        """Get a user by ID.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logfire.warn("User not found", user_id=str(user_id))
            raise UserNotFoundError(str(user_id))
        return user

    async def get_user_by_username(self, username: Username) -> User | None:
        """Get a user by username, or None if no such user exists."""
        return await self.user_repository.find_by_username(username)

    async def validate_users_exist(self, user_ids: Iterable[UserId]) -> None:
        """Check that every referenced user (voter, editor) exists.

        Raises:
            UserNotFoundError: For the first missing user, in id order
        """
        unique_ids = sorted(set(user_ids), key=str)
        with logfire.span(
            "user_service.validate_users_exist", count=len(unique_ids)
        ):
            for user_id in unique_ids:
                await self.get_user(user_id)

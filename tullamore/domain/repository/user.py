"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tullamore.domain.model.user import User
from tullamore.domain.value import UserId, Username


class UserRepository(ABC):
    """Storage for user accounts. Usernames are unique."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert the user, or overwrite the stored user with the same id."""
        pass

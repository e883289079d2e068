"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from tullamore.domain.error import UserAlreadyExistsError, UserNotFoundError
from tullamore.domain.model import User
from tullamore.domain.service import UserService
from tullamore.domain.value import UserId, Username
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _user(username: str) -> User:
    return User(id=UserId(uuid4()), username=Username(username))


class TestAddUser:
    """Tests for add_user method."""

    @pytest.mark.asyncio
    async def test_add_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = _user("gavin")

        result = await user_service.add_user(user)

        assert result == user
        assert await user_service.get_user(user.id) == user

    @pytest.mark.asyncio
    async def test_add_taken_username_raises(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.add_user(_user("gavin"))

        with pytest.raises(UserAlreadyExistsError):
            await user_service.add_user(_user("gavin"))


class TestGetUser:
    """Tests for get_user and get_user_by_username methods."""

    @pytest.mark.asyncio
    async def test_get_missing_user_raises(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(UserNotFoundError):
            await user_service.get_user(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_user_by_username(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.add_user(_user("gavin"))

        assert await user_service.get_user_by_username(Username("gavin")) == user
        assert await user_service.get_user_by_username(Username("nobody")) is None


class TestValidateUsersExist:
    """Tests for validate_users_exist method."""

    @pytest.mark.asyncio
    async def test_known_users_pass(self, unit_env):
        user_service = await unit_env.get(UserService)
        first = await user_service.add_user(_user("first"))
        second = await user_service.add_user(_user("second"))

        await user_service.validate_users_exist([first.id, second.id, first.id])

    @pytest.mark.asyncio
    async def test_unknown_user_raises(self, unit_env):
        user_service = await unit_env.get(UserService)
        known = await user_service.add_user(_user("known"))
        missing = UserId(uuid4())

        with pytest.raises(UserNotFoundError) as exc_info:
            await user_service.validate_users_exist([known.id, missing])

        assert exc_info.value.identifier == str(missing)

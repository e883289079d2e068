"""Container fixtures for service and use case tests."""

import pytest_asyncio

from tullamore.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Create a fixture yielding a request-scoped container.

    Each test gets a fresh container, so in-memory data never leaks between
    tests. Pass ``unmock={"persistence"}`` to run against a migrated
    PostgreSQL configured through ``DATABASE__URL``.

    Example:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_add_tag(unit_env):
            tag_service = await unit_env.get(TagService)
            await tag_service.add_tag(Tag(name=TagName("Java")))
    """

    @pytest_asyncio.fixture
    async def _env():
        container = build_test_container(unmock=unmock)
        async with container() as request_container:
            yield request_container
        await container.close()

    return _env

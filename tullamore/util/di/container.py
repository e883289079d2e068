"""Production container and FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from tullamore.util.di import resolve_providers


def create_container() -> AsyncContainer:
    """Build the container used when serving requests.

    Every component uses its production implementation.
    """
    return make_async_container(*resolve_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so DishkaRoute can resolve dependencies."""
    setup_dishka(container, app)

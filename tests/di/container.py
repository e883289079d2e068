"""Container builder for tests."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from tullamore.util.di import Component, mockable_components, resolve_providers


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked.

    Args:
        unmock: Components to serve from their production implementation,
            e.g. ``{"persistence"}`` to run against a migrated PostgreSQL

    Raises:
        ValueError: If ``unmock`` names an unknown component
    """
    unmock = unmock or set()
    components = mockable_components()
    unknown = set(unmock) - components
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    # FastapiProvider lets the same container serve a TestClient
    return make_async_container(
        *resolve_providers(mocked=components - set(unmock)), FastapiProvider()
    )

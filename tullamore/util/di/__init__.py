"""Dependency injection for Tullamore.

Providers are grouped by layer. Persistence is the only component with a
mock implementation; the in-memory version lives under ``tests/di``.
"""

from typing import Collection, Type

from tullamore.util.di.application import ProdApplicationProvider
from tullamore.util.di.base import Component, ProviderBase
from tullamore.util.di.core import ProdConfigProvider
from tullamore.util.di.domain import ProdDomainProvider
from tullamore.util.di.persistence import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def mockable_components() -> set[str]:
    """Names of the components that have a mock implementation."""
    return {str(p.__mock_component__) for p in PROVIDERS if p.is_mockable()}


def resolve_providers(mocked: Collection[str] = ()) -> list[ProviderBase]:
    """Instantiate one provider per entry in PROVIDERS.

    Args:
        mocked: Components to serve from their mock implementation

    Returns:
        Provider instances ready for ``make_async_container``
    """
    return [
        base.implementation(use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "mockable_components",
    "resolve_providers",
]

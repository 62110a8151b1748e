"""Dependency injection wiring."""

from typing import Type

from askabout.util.di.application import ProdApplicationProvider
from askabout.util.di.base import Component, ProviderBase
from askabout.util.di.core import ProdConfigProvider
from askabout.util.di.domain import ProdDomainProvider
from askabout.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Every provider of the app; component bases are resolved by get_provider
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for an entry of PROVIDERS.

    A provider without subclasses is used as is. A component base is
    replaced by whichever subclass has ``__is_mock__ == use_mock``; the mock
    subclasses live under ``tests/di`` and only exist once imported.

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]

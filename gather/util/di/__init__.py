"""Dependency injection wiring."""

from gather.util.di.application import ProdApplicationProvider
from gather.util.di.base import Component, ProviderBase
from gather.util.di.core import ProdConfigProvider
from gather.util.di.domain import ProdDomainProvider
from gather.util.di.infrastructure import (
    GeminiProvider,
    PersistenceProvider,
    ProdGeminiProvider,
    ProdPersistenceProvider,
)

# Order matters only for readability; dishka resolves by type.
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    GeminiProvider,
    PersistenceProvider,
]


def get_provider(
    base: type[ProviderBase], use_mock: bool = False
) -> type[ProviderBase]:
    """Resolve a provider entry from ``PROVIDERS`` to a concrete class.

    Core providers resolve to themselves. Swappable components resolve to
    their mock or production subclass.

    Raises:
        ValueError: If the requested variant was never defined (mock
            providers live under ``tests.di`` and must be imported first)
    """
    return base.variant(mock=use_mock)


def swappable_components() -> set[Component]:
    """Names of the components a test container may switch to production."""
    return {base.__mock_component__ for base in PROVIDERS if base.is_swappable()}


__all__ = [
    "Component",
    "GeminiProvider",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdGeminiProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "swappable_components",
]

"""Dependency injection wiring.

``PROVIDERS`` lists one entry per layer or component. Layer providers are
used directly. Swappable components (persistence, analysis, image, clock)
are abstract bases whose production subclass lives here and whose mock
subclass lives in ``tests.di``; ``get_provider`` picks between them.
"""

from typing import Type

from agora.util.di.application import ProdApplicationProvider
from agora.util.di.base import Component, ProviderBase
from agora.util.di.core import ProdConfigProvider
from agora.util.di.domain import ProdDomainProvider
from agora.util.di.infrastructure import (
    AnalysisProvider,
    ClockProvider,
    ImageProvider,
    PersistenceProvider,
    ProdAnalysisProvider,
    ProdClockProvider,
    ProdImageProvider,
    ProdPersistenceProvider,
)
from agora.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    AnalysisProvider,
    ImageProvider,
    ClockProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve ``base`` to the provider class to instantiate.

    Raises:
        DependencyInjectionError: If a swappable component has no matching
            implementation, e.g. mocks requested without importing ``tests.di``
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "AnalysisProvider",
    "ClockProvider",
    "ImageProvider",
    "PersistenceProvider",
    "ProdAnalysisProvider",
    "ProdClockProvider",
    "ProdImageProvider",
    "ProdPersistenceProvider",
]

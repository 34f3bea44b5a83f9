"""Dependency injection wiring.

``PROVIDERS`` lists one entry per concern. An entry with subclasses is
a mockable component (persistence); the container builders pick the
production or in-memory subclass for it with ``get_provider``.
"""

from typing import Type

from qna.util.di.application import ProdApplicationProvider
from qna.util.di.base import Component, ProviderBase
from qna.util.di.core import ProdConfigProvider
from qna.util.di.domain import ProdDomainProvider
from qna.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from qna.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a ``PROVIDERS`` entry to the class to instantiate.

    Concrete providers resolve to themselves. Mockable components resolve
    to the subclass whose ``__is_mock__`` equals ``use_mock``; the mock
    subclass only exists once the test package has been imported.

    Raises:
        DependencyInjectionError: If no subclass matches
    """
    implementations = {
        getattr(cls, "__is_mock__", False): cls for cls in base.__subclasses__()
    }
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        component = base.__mock_component__ or base.__name__
        kind = "mock" if use_mock else "production"
        raise DependencyInjectionError(
            f"No {kind} implementation for {component}"
        ) from None


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]

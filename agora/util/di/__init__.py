"""Dependency injection wiring.

``PROVIDERS`` lists every provider once, in dependency order. Importing this
package also imports the production implementation of each swappable
component so that ``get_provider`` can find it.
"""

from typing import Type

from agora.util.di.application import ProdApplicationProvider
from agora.util.di.base import (
    Component,
    ProviderBase,
    get_provider,
    swappable_components,
)
from agora.util.di.core import ProdConfigProvider
from agora.util.di.domain import ProdDomainProvider
from agora.util.di.persistence import PersistenceProvider, ProdPersistenceProvider
from agora.util.di.realtime import RealtimeProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    PersistenceProvider,
    RealtimeProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
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
    "RealtimeProvider",
    "get_provider",
    "swappable_components",
]

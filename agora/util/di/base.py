"""Provider base class and implementation selection.

A provider class that other providers subclass is a swappable component:
it names the component in ``__mock_component__`` and each subclass says
through ``__is_mock__`` whether it is the production or the test double.
"""

from typing import ClassVar, Iterable, Literal, Type

from dishka import Provider

Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every agora provider."""

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_swappable(cls) -> bool:
        """Whether implementations of this provider are chosen at build time."""
        return bool(cls.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation of ``base`` to instantiate.

    Concrete providers are returned as they are. For swappable components the
    subclass whose ``__is_mock__`` equals ``use_mock`` is returned.

    Raises:
        ValueError: If the component has no such implementation
    """
    if not base.is_swappable():
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


def swappable_components(providers: Iterable[Type[ProviderBase]]) -> set[Component]:
    """Names of the components among ``providers`` that have test doubles."""
    return {
        p.__mock_component__
        for p in providers
        if p.is_swappable() and p.__mock_component__ is not None
    }

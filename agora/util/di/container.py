"""Container construction and FastAPI wiring."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from agora.util.di import PROVIDERS, Component, get_provider


def create_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Build the application container.

    Production code calls this with no arguments. Tests name the components
    that should use their in-memory doubles instead.

    Args:
        mocked: Swappable components to build from their mock implementation

    Returns:
        Container holding every provider plus dishka's FastAPI provider
    """
    providers = []
    for base in PROVIDERS:
        use_mock = base.is_swappable() and base.__mock_component__ in mocked
        providers.append(get_provider(base, use_mock=use_mock)())
    return make_async_container(*providers, FastapiProvider())


def setup_di(app, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app`` (also exposed as ``app.state.dishka_container``)."""
    setup_dishka(container, app)

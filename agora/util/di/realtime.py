"""Realtime DI providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from agora.adapter.realtime import ConnectionRegistry
from agora.config import ChatroomSettings
from agora.domain.service import EventPublisher
from agora.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Process-wide connection registry.

    There is exactly one registry per container; it is also the domain's
    event publisher.
    """

    scope = Scope.APP

    @provide
    async def get_connection_registry(
        self, chatroom_settings: ChatroomSettings
    ) -> AsyncIterator[ConnectionRegistry]:
        """Provide the registry, closing every connection on shutdown."""
        registry = ConnectionRegistry(
            send_timeout=chatroom_settings.send_timeout_seconds
        )
        yield registry
        await registry.close_all()

    @provide
    def get_event_publisher(self, registry: ConnectionRegistry) -> EventPublisher:
        """Provide the registry as the event publisher."""
        return registry

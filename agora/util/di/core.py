"""Settings providers."""

from dishka import Scope, provide

from agora.config import AuthSettings, ChatroomSettings, Settings
from agora.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Loads ``Settings`` once per container and hands out its groups."""

    scope = Scope.APP

    @provide
    def get_settings(self) -> Settings:
        return Settings()

    @provide
    def get_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def get_chatroom_settings(self, settings: Settings) -> ChatroomSettings:
        return settings.chatroom

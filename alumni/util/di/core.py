"""Settings providers."""

from dishka import Scope, provide

from alumni.config import AuthSettings, DiscussionSettings, Settings
from alumni.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Loads :class:`Settings` once per container and exposes its sections."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_discussion_settings(self, settings: Settings) -> DiscussionSettings:
        return settings.discussion

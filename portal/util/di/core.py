"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from portal.config import ProvisioningSettings, Settings
from portal.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_provisioning_settings(self, settings: Settings) -> ProvisioningSettings:
        """Provide account provisioning settings."""
        return settings.provisioning

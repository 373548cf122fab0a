"""
Service Provider Base Class
Registers a bundle's configuration and hooks with a Sanic application
"""
from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sanic import Sanic


class ServiceProvider(ABC):
    """
    Base Service Provider class

    register() runs first and should only set up configuration.
    boot() runs afterwards and attaches middleware, listeners and routes.
    """

    def __init__(self, app: 'Sanic'):
        self.app = app

    def register(self):
        """Register configuration and services"""
        pass

    def boot(self):
        """Bootstrap the bundle (after register)"""
        pass

    def register_config(self, config_name: str, config_dict: dict):
        """
        Merge bundle defaults into Config without overriding the application

        Args:
            config_name: The config file key (e.g., 'common')
            config_dict: Default values
        """
        from zancommon.support import Config

        for key, value in config_dict.items():
            Config.set_default(f"{config_name}.{key}", value)

    @classmethod
    def install(cls, app: 'Sanic') -> 'ServiceProvider':
        """
        Register and boot the provider in one step

        Example:
            app = Sanic('shop')
            CommonServiceProvider.install(app)
        """
        provider = cls(app)
        provider.register()
        provider.boot()
        return provider

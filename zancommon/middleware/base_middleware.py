"""
Base Middleware Class
Abstract base class for bundle middlewares
"""
from abc import ABC, abstractmethod
from sanic import Request
from typing import Optional, Dict, Any


class Middleware(ABC):
    """
    Base middleware class

    Configuration:
    Subclasses can set these class variables for automatic configuration:
    - ENABLED_CONFIG_KEY: Config key to check if middleware is enabled
    - CONFIG_MAPPING: Dict mapping constructor params to (config key, default)
    - DEFAULT_ENABLED: Default enabled state if config key not found
    """

    ENABLED_CONFIG_KEY: str = None
    CONFIG_MAPPING: Dict[str, tuple] = {}
    DEFAULT_ENABLED: bool = True

    @classmethod
    def _is_enabled(cls) -> bool:
        """
        Check ENABLED_CONFIG_KEY from config

        Returns:
            True if middleware should be enabled
        """
        from zancommon.support import Config

        if cls.ENABLED_CONFIG_KEY:
            return bool(Config.get(cls.ENABLED_CONFIG_KEY, cls.DEFAULT_ENABLED))

        return cls.DEFAULT_ENABLED

    @classmethod
    def _register_middleware(cls) -> Optional['Middleware']:
        """
        Factory method to create middleware instance from configuration

        Returns:
            Middleware instance if enabled, None otherwise
        """
        from zancommon.support import Config

        if not cls._is_enabled():
            return None

        config_params = {
            param_name: Config.get(config_key, default_value)
            for param_name, (config_key, default_value) in cls.CONFIG_MAPPING.items()
        }

        return cls(**config_params)

    @abstractmethod
    async def before_request(self, request: Request):
        """
        Called before the request reaches the route handler

        Returns:
            None: Continue to next middleware/route
            HTTPResponse: Short-circuit and return response immediately
        """
        pass

    async def after_response(self, request: Request, response):
        """
        Called after the route handler, before sending response

        Returns:
            response: Modified or original response
        """
        return response

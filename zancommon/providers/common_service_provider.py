"""
Common Service Provider
Wires the query parameter decoder into a Sanic application
"""
from zancommon.defaults import (
    DEFAULT_QUERY_PARAMETERS_CTX_KEY,
    DEFAULT_QUERY_PARAMETERS_ENABLED,
)
from zancommon.logging import getLogger
from zancommon.middleware import QueryParametersMiddleware
from zancommon.service_provider import ServiceProvider

logger = getLogger(__name__)


class CommonServiceProvider(ServiceProvider):
    """Common bundle service provider"""

    def register(self):
        """Register bundle config defaults"""
        self.register_config('common', {
            'QUERY_PARAMETERS_ENABLED': DEFAULT_QUERY_PARAMETERS_ENABLED,
            'QUERY_PARAMETERS_CTX_KEY': DEFAULT_QUERY_PARAMETERS_CTX_KEY,
        })

    def boot(self):
        """Attach the query parameters middleware"""
        self.register_query_parameters_middleware()

    def register_query_parameters_middleware(self):
        middleware = QueryParametersMiddleware._register_middleware()
        if middleware is None:
            logger.debug("Query parameters middleware disabled")
            return None

        async def decode_query_parameters(request):
            return await middleware.before_request(request)

        self.app.register_middleware(decode_query_parameters, 'request')
        return middleware

"""
Query Parameters Middleware
Decodes the query string once per request, keeping repeated names as lists
"""
from sanic import Request

from zancommon.defaults import (
    DEFAULT_QUERY_PARAMETERS_CTX_KEY,
    DEFAULT_QUERY_PARAMETERS_ENABLED,
)
from zancommon.http import RequestUtils
from zancommon.logging import getLogger
from zancommon.middleware.base_middleware import Middleware

logger = getLogger(__name__)


class QueryParametersMiddleware(Middleware):
    """
    Stores decoded query parameters on request.ctx

    Sanic's request.args keeps every value but hands out the first one from
    .get(). Handlers that accept repeated names read this instead:

        @app.get('/reports')
        async def reports(request):
            fields = request.ctx.query_parameters.get('fields', [])
            # ?fields=one&fields=two  ->  ['one', 'two']
            # ?fields=one             ->  'one'
    """

    ENABLED_CONFIG_KEY = 'common.QUERY_PARAMETERS_ENABLED'
    DEFAULT_ENABLED = DEFAULT_QUERY_PARAMETERS_ENABLED
    CONFIG_MAPPING = {
        'ctx_key': ('common.QUERY_PARAMETERS_CTX_KEY', DEFAULT_QUERY_PARAMETERS_CTX_KEY),
    }

    def __init__(self, ctx_key: str = DEFAULT_QUERY_PARAMETERS_CTX_KEY):
        self.ctx_key = ctx_key

    async def before_request(self, request: Request):
        """
        Decode the raw query string onto request.ctx
        """
        params = RequestUtils.get_parameters(request)
        setattr(request.ctx, self.ctx_key, params)

        if params:
            logger.debug(
                "Decoded query string %s",
                request.query_string,
                extra={'parameter_names': sorted(params)}
            )

        return None

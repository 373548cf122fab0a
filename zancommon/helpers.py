"""
Bundle Helper Functions
Shortcuts for the most used helpers
"""
from typing import Any, Dict, Optional


def query_parameters(query_string: Optional[str]) -> Dict[str, Any]:
    """
    Parse a query string, returning repeated names as lists

    Example:
        query_parameters('tag=a&tag=b&page=2')  # {'tag': ['a', 'b'], 'page': '2'}
    """
    from zancommon.http import RequestUtils
    return RequestUtils.get_parameters_from_query_string(query_string)


def request_parameters(request) -> Dict[str, Any]:
    """
    Query parameters of a Sanic request

    Uses the value decoded by QueryParametersMiddleware when it ran.
    """
    from zancommon.http import RequestUtils
    from zancommon.support import Config
    from zancommon.defaults import DEFAULT_QUERY_PARAMETERS_CTX_KEY

    ctx_key = Config.get('common.QUERY_PARAMETERS_CTX_KEY', DEFAULT_QUERY_PARAMETERS_CTX_KEY)
    params = getattr(request.ctx, ctx_key, None)
    if params is None:
        params = RequestUtils.get_parameters(request)

    return params


def escape_like(value: str) -> str:
    """Escape a value for a 'contains' LIKE query"""
    from zancommon.database import Sql
    return Sql.escape_like_parameter(value)

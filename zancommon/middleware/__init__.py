"""
Middleware Package
"""
from zancommon.middleware.base_middleware import Middleware
from zancommon.middleware.query_parameters_middleware import QueryParametersMiddleware

__all__ = [
    'Middleware',
    'QueryParametersMiddleware',
]

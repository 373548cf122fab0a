"""
Common Bundle
Query string decoding and static helpers for Sanic applications
"""

from zancommon.helpers import (
    query_parameters,
    request_parameters,
    escape_like,
)

__all__ = [
    'query_parameters',
    'request_parameters',
    'escape_like',
]

__version__ = '1.0.0'

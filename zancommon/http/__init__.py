"""
HTTP Module
Request and query string utilities
"""
from zancommon.http.query_decoder import QueryDecoder, QueryValue
from zancommon.http.request_utils import RequestUtils

__all__ = [
    'QueryDecoder',
    'QueryValue',
    'RequestUtils',
]

"""
Request Utilities
Query string parsing that keeps repeated parameter names
"""
from enum import Enum
from typing import Dict, Iterable, Optional, Set

from sanic import Request

from zancommon.defaults import DEFAULT_ARRAY_MARKER
from zancommon.http.query_decoder import QueryDecoder, QueryValue
from zancommon.logging import getLogger

logger = getLogger(__name__)


class _ScanState(Enum):
    READING_NAME = 'reading_name'
    READING_VALUE = 'reading_value'


class RequestUtils:
    """
    Query string helpers

    Form decoders keep only the last value of a repeated name:

        ?fields=one&fields=two&fields=three  ->  {'fields': 'three'}

    RequestUtils finds the repeated names first and rewrites them to array
    syntax before decoding, so the same query string parses as

        ?fields[]=one&fields[]=two&fields[]=three  ->  {'fields': ['one', 'two', 'three']}

    Usage:
        params = RequestUtils.get_parameters(request)
        params = RequestUtils.get_parameters_from_query_string('a=1&a=2')  # {'a': ['1', '2']}
    """

    @staticmethod
    def get_parameters(request: Request) -> Dict[str, QueryValue]:
        """
        Returns the parameters in the query string of a request

        Reads the raw query component so repeated names can still be detected.

        Args:
            request: The Sanic request object

        Returns:
            Dict of name -> value or list of values
        """
        return RequestUtils.get_parameters_from_query_string(request.query_string)

    @staticmethod
    def get_parameters_from_query_string(query_string: Optional[str]) -> Dict[str, QueryValue]:
        """
        Parse a query string, returning repeated names as lists

        Args:
            query_string: Raw query string (without the leading '?')

        Returns:
            Dict of name -> value or list of values

        Example:
            RequestUtils.get_parameters_from_query_string('name1=val1&arrVal=one&arrVal=two')
            # {'name1': 'val1', 'arrVal': ['one', 'two']}
        """
        if not query_string:
            return {}

        duplicates = RequestUtils.find_duplicate_names(query_string)
        if duplicates:
            logger.debug("Rewriting repeated query parameters: %s", sorted(duplicates))
            query_string = RequestUtils.rewrite_duplicate_names(query_string, duplicates)

        return QueryDecoder.decode(query_string)

    @staticmethod
    def find_duplicate_names(query_string: str) -> Set[str]:
        """
        Returns the parameter names that appear in more than one pair

        A name ends at the first '=' of its pair. A pair without any '=' never
        ends its name, so its text (and the following '&') becomes the start
        of the next name.

        Args:
            query_string: Raw query string

        Returns:
            Set of repeated names
        """
        seen: Set[str] = set()
        duplicates: Set[str] = set()

        name_buffer = []
        state = _ScanState.READING_NAME
        for char in query_string:
            if state is _ScanState.READING_NAME:
                if char == '=':
                    name = ''.join(name_buffer)
                    if name in seen:
                        duplicates.add(name)
                    else:
                        seen.add(name)
                    state = _ScanState.READING_VALUE
                else:
                    name_buffer.append(char)
            elif char == '&':
                name_buffer = []
                state = _ScanState.READING_NAME

        return duplicates

    @staticmethod
    def rewrite_duplicate_names(
        query_string: str,
        duplicates: Iterable[str],
        marker: str = DEFAULT_ARRAY_MARKER
    ) -> str:
        """
        Append the array marker to every pair whose name is in duplicates

        Only name portions are inspected. Values are copied byte for byte, so a
        value that happens to equal a repeated name is left alone.

        Args:
            query_string: Raw query string
            duplicates: Names to mark, usually from find_duplicate_names()
            marker: Suffix to append (default: '[]')

        Returns:
            Rewritten query string with the same pairs in the same order
        """
        duplicates = set(duplicates)

        output = []
        buffer = []
        state = _ScanState.READING_NAME
        for char in query_string:
            if state is _ScanState.READING_NAME:
                if char == '=':
                    name = ''.join(buffer)
                    if name in duplicates:
                        name += marker
                    output.append(name + '=')
                    buffer = []
                    state = _ScanState.READING_VALUE
                else:
                    buffer.append(char)
            else:
                buffer.append(char)
                if char == '&':
                    output.append(''.join(buffer))
                    buffer = []
                    state = _ScanState.READING_NAME

        # Last pair has no trailing '&'
        output.append(''.join(buffer))

        return ''.join(output)

"""
Query Decoder
Form-encoded decoding with flat name[] array aggregation
"""
from typing import Dict, List, Union
from urllib.parse import parse_qsl

from zancommon.defaults import DEFAULT_ARRAY_MARKER

QueryValue = Union[str, List[str]]


class QueryDecoder:
    """
    Decodes a form-encoded string into a dict

    Plain names map to a single string. Names carrying the array marker
    (name[]=value) are collected into a list under the name without the marker,
    in the order they appear.

    Example:
        QueryDecoder.decode('a=1&b[]=x&b[]=y')  # {'a': '1', 'b': ['x', 'y']}
        QueryDecoder.decode('q=hello+world')    # {'q': 'hello world'}
        QueryDecoder.decode('flag')             # {'flag': ''}
    """

    @staticmethod
    def decode(query_string: str, marker: str = DEFAULT_ARRAY_MARKER) -> Dict[str, QueryValue]:
        """
        Decode a form-encoded string

        Args:
            query_string: Raw query string (without the leading '?')
            marker: Array marker suffix

        Returns:
            Dict of name -> value or list of values
        """
        params: Dict[str, QueryValue] = {}
        if not query_string:
            return params

        # keep_blank_values turns a bare 'flag' into ('flag', '')
        for name, value in parse_qsl(query_string, keep_blank_values=True):
            if marker and name.endswith(marker):
                name = name[:-len(marker)]
                existing = params.get(name)
                if not isinstance(existing, list):
                    existing = params[name] = []
                existing.append(value)
            else:
                params[name] = value

        return params

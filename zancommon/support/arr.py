"""
Array Helper Functions
"""
from typing import Any, Dict, List, Union

from zancommon.defaults import DEFAULT_LIST_DELIMITER, DEFAULT_VALUE_DELIMITER


class Arr:
    """
    List and dict helpers
    """

    @staticmethod
    def create_from_string(
        value: Any,
        force_delimiter: str = DEFAULT_LIST_DELIMITER,
        force_value_delimiter: str = DEFAULT_VALUE_DELIMITER
    ) -> Union[List, Dict]:
        """
        Split a string by the best available delimiter

        Delimiters are tried in order: force_delimiter, ',' then '&'. If the
        value delimiter appears anywhere in the string, items are read as
        key/value pairs and a dict is returned. Keys and values are stripped
        and empty items are skipped. A '&' delimited string is decoded as a
        query string.

        Args:
            value: The string to split (lists, tuples and dicts are returned as-is)
            force_delimiter: Preferred item delimiter
            force_value_delimiter: Key/value delimiter

        Returns:
            A list or a dict

        Example:
            Arr.create_from_string('one, two, three')  # ['one', 'two', 'three']
            Arr.create_from_string('a=1; b=2')         # {'a': '1', 'b': '2'}
            Arr.create_from_string('a=1&a=2')          # {'a': ['1', '2']}
            Arr.create_from_string(None)               # []
        """
        if isinstance(value, (list, tuple, dict)):
            return value
        if not value:
            return []

        delimiter = force_delimiter
        if delimiter not in value:
            delimiter = ','
        if delimiter not in value:
            delimiter = '&'

        has_value_delimiter = force_value_delimiter in value

        # Still no delimiter: this is a single item
        if delimiter not in value:
            if has_value_delimiter:
                key, item_value = Arr._split_pair(value, force_value_delimiter)
                return {key: item_value}
            return [value]

        if delimiter == '&':
            from zancommon.http import RequestUtils
            return RequestUtils.get_parameters_from_query_string(value)

        items = [item.strip() for item in value.split(delimiter)]
        items = [item for item in items if item]

        if has_value_delimiter:
            return dict(Arr._split_pair(item, force_value_delimiter) for item in items)

        return items

    @staticmethod
    def _split_pair(item: str, value_delimiter: str):
        parts = item.split(value_delimiter)
        item_value = parts[1] if len(parts) > 1 else ''
        return parts[0].strip(), item_value.strip()

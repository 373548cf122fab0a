"""
String Helper Functions
Prefix/postfix trimming and comparison utilities
"""
from typing import Optional


class Str:
    """
    String helper class

    Provides static methods for common string checks:
    - prefix and postfix removal
    - starts/ends with checks (optionally case-insensitive)
    """

    @staticmethod
    def remove_prefix(value: str, prefix: str) -> str:
        """
        Returns value with prefix removed

        Example:
            Str.remove_prefix('setup_app', 'setup_')  # 'app'
            Str.remove_prefix('app', 'setup_')        # 'app'
        """
        if prefix and value.startswith(prefix):
            value = value[len(prefix):]

        return value

    @staticmethod
    def remove_postfix(value: Optional[str], postfix: Optional[str]) -> Optional[str]:
        """
        Returns value with postfix removed

        Args:
            value: String to trim (None is returned as-is)
            postfix: Postfix to remove

        Returns:
            Trimmed string

        Example:
            Str.remove_postfix('SomeProductBundle', 'Bundle')  # 'SomeProduct'
        """
        if not value or not postfix:
            return value

        if Str.ends_with(value, postfix):
            value = value[:-len(postfix)]

        return value

    @staticmethod
    def starts_with(haystack: Optional[str], needle: str | list) -> bool:
        """
        Check if a string starts with a substring

        Args:
            haystack: String to check
            needle: String or list of strings to check

        Returns:
            True if starts with needle
        """
        if not haystack or not needle:
            return False

        if isinstance(needle, list):
            return any(n and haystack.startswith(n) for n in needle)

        return haystack.startswith(needle)

    @staticmethod
    def ends_with(haystack: Optional[str], needle: str | list) -> bool:
        """
        Check if a string ends with a substring

        Example:
            Str.ends_with('SomeProductBundle', 'Bundle')  # True
            Str.ends_with('', 'Bundle')                   # False
        """
        if not haystack or not needle:
            return False

        if isinstance(needle, list):
            return any(n and haystack.endswith(n) for n in needle)

        return haystack.endswith(needle)

    @staticmethod
    def starts_with_i(haystack: Optional[str], needle: Optional[str]) -> bool:
        """
        Case-insensitive starts_with

        Example:
            Str.starts_with_i('MySQL', 'mysql')  # True
        """
        if not haystack or not needle:
            return False

        return haystack.lower().startswith(needle.lower())

"""
Debug Helpers
"""
from pprint import pformat

from zancommon.defaults import DEFAULT_LOGGER_NAME
from zancommon.logging import getLogger

logger = getLogger(f"{DEFAULT_LOGGER_NAME}.debug")


class Debug:
    """Debug output that disappears outside of debug mode"""

    @staticmethod
    def dump(*args) -> None:
        """
        Pretty-print values to the debug logger

        Does nothing unless app.APP_DEBUG is enabled.

        Example:
            Debug.dump(params, request.query_string)
        """
        from zancommon.support.config import Config

        if not Config.get('app.APP_DEBUG', False):
            return

        for value in args:
            logger.debug("%s", pformat(value))

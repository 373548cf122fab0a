"""
Bundle Default Values
Hardcoded values used when nothing is set through Config.get()
"""

# ============================================================================
# QUERY STRING DEFAULTS
# ============================================================================

# Suffix that tells the decoder to aggregate a name into a list
DEFAULT_ARRAY_MARKER = '[]'

# request.ctx attribute holding decoded query parameters
DEFAULT_QUERY_PARAMETERS_CTX_KEY = 'query_parameters'
DEFAULT_QUERY_PARAMETERS_ENABLED = True

# ============================================================================
# ARRAY HELPER DEFAULTS
# ============================================================================

DEFAULT_LIST_DELIMITER = ';'
DEFAULT_VALUE_DELIMITER = '='

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_LOGGER_NAME = 'zancommon'

"""
Blacklist constants.

Field bounds, table names and connection pool defaults shared by the
models, validators and the connection manager.
"""

# Storage
BLACKLIST_TABLE = "blacklist_entries"

# Field length limits
IDENTIFIER_MAX_LENGTH = 255
NAME_MAX_LENGTH = 100
CREATED_BY_MAX_LENGTH = 20

# Connection pool
DEFAULT_POOL_SIZE = 10
DEFAULT_ACQUIRE_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_RECONNECT_ATTEMPTS = 5
DEFAULT_RECONNECT_BASE_DELAY_SECONDS = 1.0

# Logging
SQL_LOG_PREVIEW_LENGTH = 100

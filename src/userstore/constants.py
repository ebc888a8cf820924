"""
This module provides constants used throughout userstore and its CLI. It should be
kept free of memory heavy imports.
"""

APP_NAME = "userstore"

# database file used by the CLI when no path is given
DEFAULT_DB_PATH = "users.db"

# record table
USERS_TABLE = "Users"

# validation bounds, inclusive
MIN_AGE = 0
MAX_AGE = 150
MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 100

# range of SQLite INTEGER values, inclusive
MIN_SQL_INT = -(2**63)
MAX_SQL_INT = 2**63 - 1

# primary result code reported by SQLite when a statement cannot be compiled
SQLITE_ERROR = 1

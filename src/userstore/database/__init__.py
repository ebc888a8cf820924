"""
A thin layer over SQLite: a connection which owns exactly one database handle and an
executor which runs every statement with bound, typed parameters.
"""

from .core import Connection
from .executor import (
    Row,
    RowCallback,
    StatementResult,
    execute,
    execute_ddl,
    iter_rows,
    read_all,
)
from .types import SqlType, SqlString, SqlInt, SqlFloat, SqlNull, bind_parameters

__all__ = [
    "Connection",
    "Row",
    "RowCallback",
    "StatementResult",
    "execute",
    "execute_ddl",
    "iter_rows",
    "read_all",
    "SqlType",
    "SqlString",
    "SqlInt",
    "SqlFloat",
    "SqlNull",
    "bind_parameters",
]

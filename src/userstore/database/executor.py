"""
Statement execution against an open :class:`Connection`. Every call prepares a fresh
statement, binds its parameters by position and type, runs it and finalizes it again on
every exit path. Parameter values are never interpolated into SQL text.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, Sequence

from .core import Connection
from .types import bind_parameters
from ..constants import SQLITE_ERROR
from ..errors import (
    DdlFailedError,
    ExecFailedError,
    PrepareFailedError,
    ReadFailedError,
)


__all__ = [
    "Row",
    "RowCallback",
    "StatementResult",
    "execute",
    "execute_ddl",
    "iter_rows",
    "read_all",
]

logger = logging.getLogger(__name__)

Row = Dict[str, Optional[str]]
RowCallback = Callable[[Row], Any]


@dataclass(frozen=True)
class StatementResult:
    """Outcome of a completed write statement"""

    changes: int
    """Number of rows inserted, updated or deleted"""
    last_row_id: Optional[int]
    """Row ID of the most recently inserted row, if any"""


def _failed_to_prepare(exc: sqlite3.Error) -> bool:
    """
    Returns whether the engine error was raised while compiling or binding a statement
    rather than while stepping it.
    """
    if isinstance(exc, sqlite3.ProgrammingError):
        # wrong number of bindings, unsupported parameter types, ...
        return True

    if isinstance(exc, sqlite3.OperationalError):
        # Syntax errors and unknown tables or columns are all reported as the primary
        # SQLITE_ERROR code. Locks, I/O errors and read-only files have their own.
        return exc.sqlite_errorcode & 0xFF == SQLITE_ERROR

    return False


def _to_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def execute(
    conn: Connection, template: str, params: Sequence[Any] = ()
) -> StatementResult:
    """
    Prepares the given statement template, binds ``params`` by position and steps the
    statement to completion inside its own transaction.

    :param conn: Open connection.
    :param template: SQL template with ``?`` placeholders.
    :param params: Parameters in placeholder order. Supported types are str, int,
        float and None.
    :returns: Number of changed rows and the ID of the last inserted row.
    :raises PrepareFailedError: if the template is malformed, does not match the
        schema or cannot be bound to ``params``.
    :raises ExecFailedError: if the statement does not complete, for instance because
        of a constraint violation.
    :raises DatabaseConnectionError: if the connection has been closed.
    """
    try:
        bound = bind_parameters(params)
    except (TypeError, ValueError) as exc:
        raise PrepareFailedError("Failed to prepare statement", str(exc)) from exc

    with conn.statement() as cursor:
        try:
            with conn.transaction():
                cursor.execute(template, bound)
        except sqlite3.Error as exc:
            if _failed_to_prepare(exc):
                title = "Failed to prepare statement"
                raise PrepareFailedError(title, str(exc)) from exc
            raise ExecFailedError("Failed to execute statement", str(exc)) from exc

        result = StatementResult(cursor.rowcount, cursor.lastrowid)

    logger.debug("Statement completed, %s row(s) changed", result.changes)

    return result


def execute_ddl(conn: Connection, sql: str) -> None:
    """
    Runs a non-parameterized schema statement.

    :param conn: Open connection.
    :param sql: Schema statement.
    :raises DdlFailedError: if the engine rejects the statement.
    :raises DatabaseConnectionError: if the connection has been closed.
    """
    with conn.statement() as cursor:
        try:
            with conn.transaction():
                cursor.execute(sql)
        except sqlite3.Error as exc:
            raise DdlFailedError("Failed to create table", str(exc)) from exc


def iter_rows(conn: Connection, sql: str) -> Iterator[Row]:
    """
    Runs a non-parameterized query and lazily yields one mapping of column name to
    column text per row, in the order the engine produces them. NULL values are
    returned as ``None``. Rows are fetched one at a time, the generator cannot be
    restarted and the statement is finalized once it is exhausted or closed.

    The table must not be modified before the generator is exhausted.

    :param conn: Open connection.
    :param sql: Query to run.
    :raises ReadFailedError: if the engine reports an error. Rows yielded before the
        error are not retracted.
    :raises DatabaseConnectionError: if the connection has been closed.
    """
    with conn.statement() as cursor:
        try:
            cursor.execute(sql)
            columns = [description[0] for description in cursor.description]
        except sqlite3.Error as exc:
            raise ReadFailedError("Failed to read data", str(exc)) from exc

        while True:
            try:
                values = cursor.fetchone()
            except sqlite3.Error as exc:
                raise ReadFailedError("Failed to read data", str(exc)) from exc

            if values is None:
                break

            yield {name: _to_text(value) for name, value in zip(columns, values)}


def read_all(conn: Connection, sql: str, on_row: RowCallback) -> int:
    """
    Runs a non-parameterized query and calls ``on_row`` once per row with a mapping of
    column name to column text. See :func:`iter_rows`.

    :param conn: Open connection.
    :param sql: Query to run.
    :param on_row: Callback which receives each row. It must not modify the table.
    :returns: Number of rows delivered.
    :raises ReadFailedError: if the engine reports an error.
    """
    count = 0

    for row in iter_rows(conn, sql):
        on_row(row)
        count += 1

    return count

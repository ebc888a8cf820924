"""
Operations on the users table. Writes are validated before any statement is prepared
and every value is bound as a statement parameter.
"""

from __future__ import annotations

import logging
from typing import Iterator, cast

from .constants import USERS_TABLE
from .core import User
from .database import Connection, RowCallback, execute, execute_ddl, iter_rows
from .database import read_all as _read_all
from .validation import validate


__all__ = [
    "CREATE_TABLE_SQL",
    "INSERT_SQL",
    "SELECT_ALL_SQL",
    "UPDATE_SQL",
    "ensure_schema",
    "insert",
    "read_all",
    "iter_users",
    "list_users",
    "update",
]

logger = logging.getLogger(__name__)

CREATE_TABLE_SQL = f"""
CREATE TABLE IF NOT EXISTS {USERS_TABLE} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    age INTEGER NOT NULL
)
"""
INSERT_SQL = f"INSERT INTO {USERS_TABLE} (name, age) VALUES (?, ?)"
SELECT_ALL_SQL = f"SELECT * FROM {USERS_TABLE}"
UPDATE_SQL = f"UPDATE {USERS_TABLE} SET name = ?, age = ? WHERE id = ?"


def ensure_schema(conn: Connection) -> None:
    """
    Creates the users table if it does not exist yet. Calling this on a database which
    already has the table does nothing.

    :param conn: Open connection.
    :raises DdlFailedError: if the engine rejects the statement.
    """
    execute_ddl(conn, CREATE_TABLE_SQL)
    logger.debug("Table %s ready", USERS_TABLE)


def insert(conn: Connection, name: str, age: int) -> int:
    """
    Validates and inserts a new user.

    :param conn: Open connection.
    :param name: User name.
    :param age: User age.
    :returns: The ID assigned to the new row.
    :raises ValidationError: if name or age are out of bounds. Nothing is written.
    :raises StorageError: if the engine fails to insert the row.
    """
    validate(name, age)
    result = execute(conn, INSERT_SQL, (name, age))

    logger.debug("Inserted user %s", result.last_row_id)

    return cast(int, result.last_row_id)


def read_all(conn: Connection, on_row: RowCallback) -> int:
    """
    Calls ``on_row`` for every row of the users table with a mapping of column name to
    column text. Rows are delivered in the order the engine returns them, which is not
    guaranteed. ``on_row`` must not modify the table.

    :param conn: Open connection.
    :param on_row: Callback for each row.
    :returns: Number of rows delivered.
    :raises ReadFailedError: if the engine reports an error during the scan. Rows
        which were already delivered are not retracted.
    """
    return _read_all(conn, SELECT_ALL_SQL, on_row)


def iter_users(conn: Connection) -> Iterator[User]:
    """
    Lazily yields all users as typed records, in the order the engine returns them.

    :param conn: Open connection.
    :raises ReadFailedError: if the engine reports an error during the scan.
    """
    for row in iter_rows(conn, SELECT_ALL_SQL):
        yield User.from_row(row)


def list_users(conn: Connection) -> list[User]:
    """
    :param conn: Open connection.
    :returns: All users as typed records.
    :raises ReadFailedError: if the engine reports an error during the scan.
    """
    return list(iter_users(conn))


def update(conn: Connection, user_id: int, name: str, age: int) -> int:
    """
    Validates and writes a new name and age for the user with the given ID. Updating an
    ID which does not exist completes without error and without effect, callers can
    detect this from the return value.

    :param conn: Open connection.
    :param user_id: ID of the user to update.
    :param name: New user name.
    :param age: New user age.
    :returns: Number of updated rows, 0 or 1.
    :raises TypeError: if the user ID is not an integer.
    :raises ValidationError: if name or age are out of bounds. Nothing is written.
    :raises StorageError: if the engine fails to update the row.
    """
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        raise TypeError(f"User ID must be an integer, got {user_id!r}")

    validate(name, age)
    result = execute(conn, UPDATE_SQL, (name, age, user_id))

    if result.changes == 0:
        logger.debug("No user with id %s, nothing updated", user_id)
    else:
        logger.debug("Updated user %s", user_id)

    return result.changes

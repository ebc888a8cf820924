"""
This model defines our core SQLite database interface: a connection which owns exactly
one handle to a database file and releases it exactly once.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager, closing
from typing import Any, Iterator

from ..errors import DatabaseConnectionError


logger = logging.getLogger(__name__)


class Connection:
    """
    Wrapper around :class:`sqlite3.Connection` which owns the handle exclusively.

    Use :meth:`open` to obtain an instance and a ``with`` block to scope it. The
    handle is closed when the block is left, regardless of how it is left. Instances
    cannot be copied, ownership can only be handed over with :meth:`transfer`.

    :param handle: Open sqlite3 connection to take ownership of.
    :param path: Path of the database file.
    """

    def __init__(self, handle: sqlite3.Connection, path: str) -> None:
        self._handle: sqlite3.Connection | None = handle
        self.path = path

    @classmethod
    def open(cls, path: str) -> Connection:
        """
        Opens or creates the database file at the given path.

        :param path: Path of the database file. Use ``":memory:"`` for a transient
            in-memory database.
        :returns: Open connection.
        :raises DatabaseConnectionError: if the file cannot be opened or created or is
            not a database.
        """
        try:
            # Statements are prepared per operation and never cached.
            handle = sqlite3.connect(path, cached_statements=0)
        except sqlite3.Error as exc:
            raise DatabaseConnectionError(
                "Failed to open database", str(exc), path=path
            ) from exc

        try:
            # Reading the header surfaces corrupt or foreign files now rather than at
            # the first statement.
            handle.execute("PRAGMA schema_version").fetchone()
        except sqlite3.Error as exc:
            handle.close()
            raise DatabaseConnectionError(
                "Failed to open database", str(exc), path=path
            ) from exc

        logger.info("Database %s opened", path)

        return cls(handle, path)

    @property
    def closed(self) -> bool:
        """Whether the handle has been released."""
        return self._handle is None

    @property
    def handle(self) -> sqlite3.Connection:
        """
        The underlying sqlite3 connection.

        :raises DatabaseConnectionError: if the connection has been closed.
        """
        if self._handle is None:
            raise DatabaseConnectionError(
                "Database connection closed",
                "The connection has been closed or handed over.",
                path=self.path,
            )
        return self._handle

    def close(self) -> None:
        """Closes the SQL connection. Calling this more than once has no effect."""
        handle, self._handle = self._handle, None

        if handle is not None:
            handle.close()
            logger.info("Database %s closed", self.path)

    def transfer(self) -> Connection:
        """
        Hands the handle over to a new connection. This connection is closed afterwards
        without releasing the handle.

        :returns: New owner of the handle.
        """
        handle = self.handle
        self._handle = None
        return Connection(handle, self.path)

    @contextmanager
    def statement(self) -> Iterator[sqlite3.Cursor]:
        """
        A context manager which provides a fresh cursor for a single statement and
        finalizes it when the block is left.
        """
        with closing(self.handle.cursor()) as cursor:
            yield cursor

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """
        A context manager which commits on success and rolls back on error, giving a
        single statement all-or-nothing semantics.
        """
        handle = self.handle
        with handle:
            yield handle

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __copy__(self) -> Connection:
        raise TypeError("Connections cannot be copied, use transfer() instead")

    def __deepcopy__(self, memo: dict[int, Any]) -> Connection:
        raise TypeError("Connections cannot be copied, use transfer() instead")

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<{self.__class__.__name__}({self.path!r}, {state})>"

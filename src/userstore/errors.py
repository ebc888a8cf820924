# -*- coding: utf-8 -*-
"""
This module defines userstore's error classes. It should be kept free of memory heavy
imports.

All errors inherit from :class:`UserStoreError` which has title and message attributes
to display the error to the user. The message carries the diagnostic text reported by
SQLite whenever one is available. Errors raised while talking to the storage engine
inherit from :class:`StorageError`, errors raised for bad user input inherit from
:class:`ValidationError`.
"""

from typing import Optional


class UserStoreError(Exception):
    """Base class for userstore errors

    :param title: A short description of the error type. This can be used in a CLI to
        give a short error summary.
    :param message: A more verbose description, usually the diagnostic text of the
        storage engine.
    :param path: Path of the database file involved, if any.
    """

    def __init__(
        self,
        title: str,
        message: str = "",
        path: Optional[str] = None,
    ) -> None:
        super().__init__(title, message)
        self.title = title
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return ". ".join([self.title, self.message])


# ==== connection errors ===============================================================


class DatabaseConnectionError(UserStoreError):
    """Raised when a database file cannot be opened or created, or when an operation
    is attempted on a connection which has already been closed."""


# ==== validation errors ===============================================================


class ValidationError(UserStoreError):
    """Base class for rejected user input. Raised before anything is written."""


class AgeOutOfRangeError(ValidationError):
    """Raised when an age is not an integer between 0 and 150."""


class NameInvalidError(ValidationError):
    """Raised when a name is empty or longer than 100 characters."""


# ==== storage errors ==================================================================


class StorageError(UserStoreError):
    """Base class for errors reported by the storage engine."""


class DdlFailedError(StorageError):
    """Raised when the engine rejects a schema statement."""


class PrepareFailedError(StorageError):
    """Raised when a statement template is malformed, incompatible with the schema or
    cannot be bound to the given parameters."""


class ExecFailedError(StorageError):
    """Raised when a prepared statement does not run to completion, for instance
    because of a constraint violation."""


class ReadFailedError(StorageError):
    """Raised when the engine reports an error while scanning rows."""


VALIDATION_ERRORS = {
    ValidationError,
    AgeOutOfRangeError,
    NameInvalidError,
}

STORAGE_ERRORS = {
    StorageError,
    DdlFailedError,
    PrepareFailedError,
    ExecFailedError,
    ReadFailedError,
}

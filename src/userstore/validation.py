"""
Validation of user records. Every write must pass through :func:`validate` before a
statement is prepared; the database schema itself does not enforce these bounds.
"""

from typing import Any

from .constants import MIN_AGE, MAX_AGE, MIN_NAME_LENGTH, MAX_NAME_LENGTH
from .errors import AgeOutOfRangeError, NameInvalidError


def validate(name: Any, age: Any) -> None:
    """
    Checks that a user record is within bounds. The age is checked first.

    :param name: User name, between 1 and 100 characters.
    :param age: User age, an integer between 0 and 150.
    :raises AgeOutOfRangeError: if the age is not an integer or out of range.
    :raises NameInvalidError: if the name is not a string, empty or too long.
    """
    if isinstance(age, bool) or not isinstance(age, int):
        raise AgeOutOfRangeError(
            "Invalid age",
            f"Age must be an integer between {MIN_AGE} and {MAX_AGE}.",
        )

    if age < MIN_AGE or age > MAX_AGE:
        raise AgeOutOfRangeError(
            "Invalid age", f"Age must be between {MIN_AGE} and {MAX_AGE}."
        )

    if not isinstance(name, str):
        raise NameInvalidError("Invalid name", "Name must be a string.")

    if len(name) < MIN_NAME_LENGTH or len(name) > MAX_NAME_LENGTH:
        raise NameInvalidError(
            "Invalid name",
            f"Name must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters.",
        )

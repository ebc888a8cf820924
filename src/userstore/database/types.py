"""
SQL column type definitions, including conversion rules from / to Python types. These
are used to bind every statement parameter with its own type.
"""

from __future__ import annotations

from typing import Any, Sequence, TypeVar, Generic, Union, cast

from ..constants import MAX_SQL_INT, MIN_SQL_INT

SQLSafeType = Union[str, int, float, None]

T = TypeVar("T")
ST = TypeVar("ST")


class SqlType(Generic[T, ST]):
    """Base class to represent Python types in SQLite table"""

    sql_type = "TEXT"
    py_type: type = object

    def sql_to_py(self, value: ST) -> T:
        """Converts the return value from sqlite3 to the target Python type."""
        return cast(T, value)

    def py_to_sql(self, value: T) -> ST:
        """Converts a Python value to a type accepted by sqlite3."""
        return cast(ST, value)


class SqlString(SqlType[str, str]):
    """Class to represent Python strings in SQLite table"""

    sql_type = "TEXT"
    py_type = str

    def sql_to_py(self, value: str) -> str:
        return str(value)

    def py_to_sql(self, value: str) -> str:
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError(f"Cannot bind text which is not UTF-8: {exc}") from exc
        return value


class SqlInt(SqlType[int, int]):
    """
    Class to represent Python integers in SQLite table

    SQLite supports up to 64-bit signed integers (-2**63 <= int <= 2**63 - 1)
    """

    sql_type = "INTEGER"
    py_type = int

    def sql_to_py(self, value: int | str) -> int:
        return int(value)

    def py_to_sql(self, value: int) -> int:
        if not MIN_SQL_INT <= value <= MAX_SQL_INT:
            raise ValueError(f"Cannot bind integer {value}, outside of 64-bit range")
        return value


class SqlFloat(SqlType[float, float]):
    """Class to represent Python floats in SQLite table"""

    sql_type = "REAL"
    py_type = float

    def sql_to_py(self, value: float | str) -> float:
        return float(value)


class SqlNull(SqlType[None, None]):
    """Class to represent an explicit NULL parameter"""

    sql_type = "NULL"
    py_type = type(None)


# Order matters: bool is a subclass of int and is rejected before this is consulted.
_BINDABLE_TYPES: tuple[SqlType[Any, Any], ...] = (
    SqlString(),
    SqlInt(),
    SqlFloat(),
    SqlNull(),
)


def sql_type_for(value: Any) -> SqlType[Any, Any]:
    """
    Returns the column type used to bind the given value.

    :param value: Python value to bind.
    :returns: Matching SQL type.
    :raises TypeError: if the value has no SQLite equivalent.
    """
    if not isinstance(value, bool):
        for sql_type in _BINDABLE_TYPES:
            if isinstance(value, sql_type.py_type):
                return sql_type

    raise TypeError(
        f"Cannot bind parameter of type {value.__class__.__name__}. "
        "Only str, int, float and None are supported."
    )


def bind_parameters(params: Sequence[Any]) -> tuple[SQLSafeType, ...]:
    """
    Converts positional statement parameters to values sqlite3 binds with their own
    type: text as TEXT, integers as INTEGER, floats as REAL and None as NULL.

    :param params: Parameters in placeholder order.
    :returns: Converted parameters.
    :raises TypeError: if any parameter has no SQLite equivalent.
    :raises ValueError: if an integer is outside of SQLite's range or a string cannot
        be encoded as UTF-8.
    """
    return tuple(sql_type_for(value).py_to_sql(value) for value in params)

"""
Dataclasses for our public API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .database.types import SqlInt, SqlString


_int = SqlInt()
_str = SqlString()


@dataclass
class User:
    """A single row of the users table"""

    id: int
    """Unique, engine-assigned and increasing row ID"""
    name: str
    """Display name, between 1 and 100 characters"""
    age: int
    """Age in years, between 0 and 150"""

    @classmethod
    def from_row(cls, row: Mapping[str, Optional[str]]) -> User:
        """
        Converts a row as returned by the executor to a typed record.

        :param row: Mapping of column name to column text.
        :returns: User record.
        :raises ValueError: if a column is NULL or does not convert.
        """
        values = {}

        for column, sql_type in (("id", _int), ("name", _str), ("age", _int)):
            value = row[column]
            if value is None:
                raise ValueError(f"Column '{column}' is NULL")
            values[column] = sql_type.sql_to_py(value)

        return cls(**values)

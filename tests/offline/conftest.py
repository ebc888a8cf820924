# -*- coding: utf-8 -*-

import logging

import pytest

from userstore.database import Connection
from userstore.users import ensure_schema


logging.getLogger("userstore").setLevel(logging.DEBUG)


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "test.db")


@pytest.fixture
def conn(db_path):
    with Connection.open(db_path) as conn:
        ensure_schema(conn)
        yield conn

import logging

from userstore.database import Connection
from userstore.logging import setup_logging, teardown_logging


def test_setup_logging(db_path, capsys):
    handler = setup_logging(logging.INFO)

    try:
        assert handler in logging.getLogger("userstore").handlers

        with Connection.open(db_path):
            pass
    finally:
        teardown_logging(handler)

    err = capsys.readouterr().err

    assert f"userstore.database.core INFO: Database {db_path} opened" in err
    assert f"Database {db_path} closed" in err


def test_teardown_logging(db_path, capsys):
    handler = setup_logging()
    teardown_logging(handler)

    assert handler not in logging.getLogger("userstore").handlers

    with Connection.open(db_path):
        pass

    assert capsys.readouterr().err == ""

import pytest

from userstore.core import User
from userstore.database import Connection, execute
from userstore.errors import (
    AgeOutOfRangeError,
    DdlFailedError,
    NameInvalidError,
    PrepareFailedError,
)
from userstore.users import (
    ensure_schema,
    insert,
    iter_users,
    list_users,
    read_all,
    update,
)


def rows(conn):
    received = []
    read_all(conn, received.append)
    return received


def table_names(conn):
    cursor = conn.handle.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
    return {row[0] for row in cursor.fetchall()}


def test_scenario(conn):
    assert insert(conn, "Alice", 25) == 1
    assert insert(conn, "Bob", 30) == 2

    assert sorted(rows(conn), key=lambda r: r["id"]) == [
        {"id": "1", "name": "Alice", "age": "25"},
        {"id": "2", "name": "Bob", "age": "30"},
    ]

    assert update(conn, 2, "Bob", 35) == 1

    assert sorted(rows(conn), key=lambda r: r["id"]) == [
        {"id": "1", "name": "Alice", "age": "25"},
        {"id": "2", "name": "Bob", "age": "35"},
    ]


def test_insert_assigns_increasing_ids(conn):
    ids = [insert(conn, f"User {i}", i) for i in range(10)]

    assert ids == sorted(set(ids))

    new_id = insert(conn, "Alice", 25)
    matching = [r for r in rows(conn) if r["name"] == "Alice"]

    assert len(matching) == 1
    assert matching[0]["age"] == "25"
    assert int(matching[0]["id"]) == new_id
    assert new_id > max(ids)


def test_ids_are_not_reused(conn):
    insert(conn, "Alice", 25)
    bob_id = insert(conn, "Bob", 30)
    execute(conn, "DELETE FROM Users WHERE id = ?", (bob_id,))

    assert insert(conn, "Carol", 40) > bob_id


def test_update_changes_only_one_row(conn):
    for name, age in [("Alice", 25), ("Bob", 30), ("Carol", 40)]:
        insert(conn, name, age)

    update(conn, 2, "Robert", 31)

    assert sorted(list_users(conn), key=lambda u: u.id) == [
        User(1, "Alice", 25),
        User(2, "Robert", 31),
        User(3, "Carol", 40),
    ]


def test_update_missing_id(conn):
    insert(conn, "Alice", 25)

    assert update(conn, 42, "Bob", 35) == 0
    assert list_users(conn) == [User(1, "Alice", 25)]


def test_update_rejects_non_integer_id(conn):
    insert(conn, "Alice", 25)

    with pytest.raises(TypeError):
        update(conn, "1", "Bob", 35)  # type: ignore

    assert list_users(conn) == [User(1, "Alice", 25)]


def test_ensure_schema_is_idempotent(conn):
    insert(conn, "Alice", 25)

    ensure_schema(conn)
    ensure_schema(conn)

    assert list_users(conn) == [User(1, "Alice", 25)]


def test_ensure_schema_failed(db_path):
    with Connection.open(db_path) as conn:
        conn.handle.execute("PRAGMA query_only = ON")

        with pytest.raises(DdlFailedError) as exc_info:
            ensure_schema(conn)

        assert exc_info.value.message


def test_injection_is_stored_literally(conn):
    insert(conn, "Alice", 25)

    hostile = "Robert'); DROP TABLE Users;--"
    hostile_id = insert(conn, hostile, 30)

    assert "Users" in table_names(conn)
    assert len(list_users(conn)) == 2
    assert User(hostile_id, hostile, 30) in list_users(conn)

    update(conn, 1, "x' WHERE 1=1; DELETE FROM Users;--", 26)

    assert "Users" in table_names(conn)
    assert len(list_users(conn)) == 2


@pytest.mark.parametrize(
    "name,age,error",
    [
        ("Alice", -1, AgeOutOfRangeError),
        ("Alice", 151, AgeOutOfRangeError),
        ("", 25, NameInvalidError),
        ("a" * 101, 25, NameInvalidError),
    ],
)
def test_invalid_input_is_not_written(conn, name, age, error):
    insert(conn, "Alice", 25)

    with pytest.raises(error):
        insert(conn, name, age)

    with pytest.raises(error):
        update(conn, 1, name, age)

    assert list_users(conn) == [User(1, "Alice", 25)]


def test_read_all_empty_table(conn):
    assert read_all(conn, lambda row: None) == 0


def test_iter_users(conn):
    insert(conn, "Alice", 25)
    insert(conn, "Bob", 30)

    users = iter_users(conn)

    assert next(users) == User(1, "Alice", 25)
    assert next(users) == User(2, "Bob", 30)

    with pytest.raises(StopIteration):
        next(users)


def test_user_from_row():
    assert User.from_row({"id": "1", "name": "Alice", "age": "25"}) == User(
        1, "Alice", 25
    )

    with pytest.raises(ValueError):
        User.from_row({"id": "1", "name": None, "age": "25"})


def test_update_id_out_of_range(conn):
    insert(conn, "Bob", 30)

    with pytest.raises(PrepareFailedError) as exc_info:
        update(conn, 2**63, "Bob", 35)

    assert "64-bit" in exc_info.value.message
    assert list_users(conn) == [User(1, "Bob", 30)]


def test_insert_name_with_lone_surrogate(conn):
    with pytest.raises(PrepareFailedError) as exc_info:
        insert(conn, "\ud800", 25)

    assert "UTF-8" in exc_info.value.message
    assert list_users(conn) == []

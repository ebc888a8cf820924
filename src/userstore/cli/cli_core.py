from __future__ import annotations

from typing import TYPE_CHECKING

import click

from .common import convert_api_errors, inject_connection
from .output import RowPrinter, echo, ok, warn

if TYPE_CHECKING:
    from ..database import Connection


@click.command(help="Create the database and its users table if they do not exist.")
@convert_api_errors
@inject_connection
def init(conn: Connection) -> None:
    ok(f"Database ready at {conn.path}")


@click.command(help="Add a new user.")
@click.argument("name")
@click.argument("age", type=int)
@convert_api_errors
@inject_connection
def add(conn: Connection, name: str, age: int) -> None:
    from ..users import insert

    user_id = insert(conn, name, age)
    ok(f"Added {name} with id {user_id}")


@click.command(help="Change the name and age of an existing user.")
@click.argument("user_id", metavar="ID", type=int)
@click.argument("name")
@click.argument("age", type=int)
@convert_api_errors
@inject_connection
def update(conn: Connection, user_id: int, name: str, age: int) -> None:
    from ..users import update as update_user

    if update_user(conn, user_id, name, age) == 0:
        warn(f"No user with id {user_id}, nothing changed")
    else:
        ok(f"Updated user {user_id}")


@click.command(name="list", help="List all users.")
@convert_api_errors
@inject_connection
def list_users(conn: Connection) -> None:
    from ..users import read_all

    printer = RowPrinter()
    read_all(conn, printer)
    printer.print()


@click.command(help="Run a short demonstration against the database.")
@convert_api_errors
@inject_connection
def demo(conn: Connection) -> None:
    from ..users import insert, read_all, update as update_user

    ok("Table ready")

    insert(conn, "Alice", 25)
    bob_id = insert(conn, "Bob", 30)
    ok("Inserted sample users")

    echo("Current records:")
    printer = RowPrinter()
    read_all(conn, printer)
    printer.print()

    echo("Updating Bob's age to 35:")
    update_user(conn, bob_id, "Bob", 35)
    ok("Record updated")

    echo("Records after update:")
    printer = RowPrinter()
    read_all(conn, printer)
    printer.print()

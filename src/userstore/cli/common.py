from __future__ import annotations

import functools
import logging
import sys
from typing import Callable, Any, TypeVar
from typing_extensions import ParamSpec

import click

from .output import warn
from ..constants import DEFAULT_DB_PATH


P = ParamSpec("P")
T = TypeVar("T")


def convert_api_errors(func: Callable[P, T]) -> Callable[P, T]:
    """
    Decorator that catches a UserStoreError and prints a formatted error message to
    stdout before exiting. Calls ``sys.exit(1)`` after printing the error to stdout.
    """

    from ..errors import UserStoreError

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return func(*args, **kwargs)
        except UserStoreError as exc:
            logging.getLogger(__name__).debug("Command failed", exc_info=True)
            warn(f"{exc.title}. {exc.message}")
            sys.exit(1)

    return wrapper


database_option = click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False),
    default=DEFAULT_DB_PATH,
    show_default=True,
    help="Database file to use. Created if it does not exist.",
)
verbose_option = click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Print log messages to stderr.",
)


def inject_connection(f: Callable[P, T]) -> Callable[P, Any]:
    """
    Decorator which opens the database given by ``--db``, makes sure the users table
    exists and passes the connection as the first argument to the command. The
    connection is closed when the command exits, including on errors.
    """

    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
        from ..database import Connection
        from ..logging import setup_logging, teardown_logging
        from ..users import ensure_schema

        ctx = click.get_current_context()

        db_path = kwargs.pop("db_path")
        verbose = kwargs.pop("verbose", False)

        if verbose:
            handler = setup_logging(logging.DEBUG)
            ctx.call_on_close(functools.partial(teardown_logging, handler))

        conn = ctx.with_resource(Connection.open(db_path))
        ensure_schema(conn)

        return ctx.invoke(f, conn, *args, **kwargs)

    f = database_option(verbose_option(f))

    return functools.update_wrapper(wrapper, f)

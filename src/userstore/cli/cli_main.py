# external imports
import click

# local imports
from .. import __version__
from .cli_core import init, add, update, list_users, demo


@click.group(help="Store and edit user records in a SQLite database.")
@click.version_option(version=__version__, message="%(version)s")
def main() -> None:
    pass


main.add_command(init)
main.add_command(add)
main.add_command(update)
main.add_command(list_users)
main.add_command(demo)
